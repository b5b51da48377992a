"""Tests for the command line interface."""

from pathlib import Path

import pytest

from src.cli import main, parse_command_line_arguments


class TestParseArguments:
    """Test cases for argument parsing."""

    def test_defaults(self) -> None:
        """Test arguments are optional."""
        args = parse_command_line_arguments([])

        assert args.organisms_file is None
        assert args.log_level is None

    def test_explicit(self) -> None:
        """Test file and log level arguments."""
        args = parse_command_line_arguments(["organisms.txt", "--log-level", "DEBUG"])

        assert args.organisms_file == Path("organisms.txt")
        assert args.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Test an unknown log level is rejected."""
        with pytest.raises(SystemExit):
            parse_command_line_arguments(["--log-level", "LOUD"])


class TestMain:
    """Test cases for the dendrogram command."""

    def test_prints_tree(self, organisms_file: Path, capsys: pytest.CaptureFixture) -> None:
        """Test the rendered tree is printed on one line."""
        exit_code = main([str(organisms_file)])

        assert exit_code == 0
        assert capsys.readouterr().out == "((Cat,Dog),Fish)\n"

    def test_invalid_lines_skipped(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test invalid records are skipped and the rest still print."""
        path = tmp_path / "organisms.txt"
        path.write_text("Cat 10\nFox xyz\nDog 12\n", encoding="utf-8")

        exit_code = main([str(path)])

        assert exit_code == 0
        assert capsys.readouterr().out == "(Cat,Dog)\n"

    def test_duplicate_score(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test duplicate scores abort with a diagnostic."""
        path = tmp_path / "organisms.txt"
        path.write_text("Cat 10\nDog 10\n", encoding="utf-8")

        exit_code = main([str(path)])

        assert exit_code == 1
        assert capsys.readouterr().out == ""
        assert "Unable to construct tree" in caplog.text

    def test_empty_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test an empty file aborts with a diagnostic."""
        path = tmp_path / "organisms.txt"
        path.write_text("", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "Unable to construct tree" in caplog.text

    def test_missing_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test a missing file aborts with a diagnostic."""
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Invalid file" in caplog.text
