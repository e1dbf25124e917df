"""Presentation helpers: board rendering and the interactive window."""

from .renderer import BoardRenderer, candidate_layout, cell_color
from .viewer import InteractiveViewer

__all__ = ["BoardRenderer", "candidate_layout", "cell_color", "InteractiveViewer"]
