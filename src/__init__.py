"""Organism Dendrogram.

Builds a strictly binary hierarchical clustering tree over scored organisms
by repeatedly merging the two closest clusters, and renders it as a
nested-parenthesis string.
"""

from src.settings import get_settings, settings

__version__ = "0.1.0"
__all__ = ["settings", "get_settings", "__version__"]
