"""Symbol navigation: path probing, click resolution, and the panel graph."""

from .prober import candidate_paths
from .resolver import Fetcher, NavigationTarget, resolve_symbol_click
from .graph import Panel, Edge, NavigationGraph

__all__ = [
    "candidate_paths",
    "Fetcher",
    "NavigationTarget",
    "resolve_symbol_click",
    "Panel",
    "Edge",
    "NavigationGraph",
]
