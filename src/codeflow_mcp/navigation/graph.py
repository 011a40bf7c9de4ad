"""Open code panels and the navigation links between them."""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Optional

from ..parser import extract_symbols, find_symbol, get_language_from_path
from .resolver import NavigationTarget

logger = logging.getLogger(__name__)


# Layout hints consumed by the canvas renderer
ROOT_X = 50
ROOT_Y = 200
ROOT_SPACING = 600
CHILD_GAP = 150
CHILD_SPACING = 200
CHILD_OFFSET = -80


@dataclass
class Panel:
    """One open file view."""
    id: str
    file_path: str
    content: str
    language: str
    source_node_id: Optional[str] = None   # Panel whose click created this one
    symbol_name: Optional[str] = None      # Symbol that was resolved into it
    position: tuple[int, int] = (0, 0)
    focus: Optional[tuple[int, int]] = None  # (line, column)
    focus_token: int = 0                   # Bumped on every recenter request

    @property
    def is_root(self) -> bool:
        return self.source_node_id is None

    def to_dict(self, include_content: bool = False) -> dict:
        result = {
            "id": self.id,
            "file_path": self.file_path,
            "language": self.language,
            "source_node_id": self.source_node_id,
            "symbol_name": self.symbol_name,
            "position": {"x": self.position[0], "y": self.position[1]},
            "focus": {"line": self.focus[0], "column": self.focus[1]} if self.focus else None,
            "focus_token": self.focus_token,
        }
        if include_content:
            result["content"] = self.content
        return result


@dataclass(frozen=True)
class Edge:
    """Link from a source panel to the panel a symbol resolved into."""
    id: str
    source: str
    target: str
    label: str

    def to_dict(self) -> dict:
        return {"id": self.id, "source": self.source, "target": self.target, "label": self.label}


@dataclass
class NavigationGraph:
    """Panels keyed by id, plus parent links, with cascading close."""
    panels: dict[str, Panel] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1), repr=False)
    _tokens: itertools.count = field(default_factory=lambda: itertools.count(1), repr=False)

    def get(self, panel_id: str) -> Optional[Panel]:
        return self.panels.get(panel_id)

    def open_root(self, file_path: str, content: str) -> str:
        """Open a file as a root panel; reopening returns the existing panel."""
        for panel in self.panels.values():
            if panel.is_root and panel.file_path == file_path:
                return panel.id

        roots = [p for p in self.panels.values() if p.is_root]
        y = max(p.position[1] for p in roots) + ROOT_SPACING if roots else ROOT_Y

        focus = None
        react = find_symbol(extract_symbols(content), "React")
        if react:
            focus = (react.line, react.column)

        panel = Panel(
            id=str(next(self._ids)),
            file_path=file_path,
            content=content,
            language=get_language_from_path(file_path),
            position=(ROOT_X, y),
            focus=focus,
        )
        self.panels[panel.id] = panel

        logger.info("Opened root panel %s for %s", panel.id, file_path)
        return panel.id

    def find_child(self, source_node_id: str, symbol_name: str) -> Optional[Panel]:
        return next(
            (
                p for p in self.panels.values()
                if p.source_node_id == source_node_id and p.symbol_name == symbol_name
            ),
            None,
        )

    def open_child(self, source_node_id: str, symbol_name: str, target: NavigationTarget) -> Optional[str]:
        """Open the panel a symbol resolved into, linked from its source.

        Returns:
            The new panel id, the existing child's id if this symbol was already
            resolved from the source, or None if the source panel is gone
        """
        source = self.panels.get(source_node_id)
        if source is None:
            logger.debug("Source panel %s closed; dropping %s", source_node_id, symbol_name)
            return None

        existing = self.find_child(source_node_id, symbol_name)
        if existing is not None:
            return existing.id

        siblings = sum(1 for p in self.panels.values() if p.source_node_id == source_node_id)
        longest = max((len(line) for line in source.content.split("\n")), default=0)
        width = min(1000, max(400, longest * 8 + 80))

        panel = Panel(
            id=str(next(self._ids)),
            file_path=target.file_path,
            content=target.content,
            language=get_language_from_path(target.file_path),
            source_node_id=source_node_id,
            symbol_name=symbol_name,
            position=(
                source.position[0] + width + CHILD_GAP,
                source.position[1] + CHILD_OFFSET + siblings * CHILD_SPACING,
            ),
            focus=(target.symbol.line, target.symbol.column),
        )
        self.panels[panel.id] = panel
        self.edges.append(Edge(
            id=f"edge-{source_node_id}-{panel.id}",
            source=source_node_id,
            target=panel.id,
            label=symbol_name,
        ))

        logger.info("Opened %s for %s from panel %s", target.file_path, symbol_name, source_node_id)
        return panel.id

    def descendants(self, panel_id: str) -> list[str]:
        """Ids of every panel opened, directly or not, from panel_id."""
        found = []
        pending = [panel_id]

        while pending:
            parent = pending.pop()
            children = [p.id for p in self.panels.values() if p.source_node_id == parent]
            found.extend(children)
            pending.extend(children)

        return found

    def close(self, panel_id: str) -> list[str]:
        """Close a panel and everything opened from it.

        Returns:
            Ids of the removed panels (empty if panel_id is unknown)
        """
        if panel_id not in self.panels:
            return []

        removed = [panel_id, *self.descendants(panel_id)]
        gone = set(removed)

        for pid in removed:
            del self.panels[pid]
        self.edges = [e for e in self.edges if e.source not in gone and e.target not in gone]

        return removed

    def recenter(self, panel_id: str, line: int, column: int) -> Optional[int]:
        """Ask the renderer to bring (line, column) into view.

        Returns:
            The new focus token, or None if the panel is gone
        """
        panel = self.panels.get(panel_id)
        if panel is None:
            return None

        panel.focus = (line, column)
        panel.focus_token = next(self._tokens)
        return panel.focus_token

    def apply(self, source_node_id: str, symbol_name: str, target: NavigationTarget) -> Optional[str]:
        """Apply a resolved target: recenter for local hits, open a child otherwise."""
        if target.local:
            if self.recenter(source_node_id, target.symbol.line, target.symbol.column) is None:
                return None
            return source_node_id
        return self.open_child(source_node_id, symbol_name, target)

    def to_dict(self) -> dict:
        return {
            "panels": [p.to_dict() for p in self.panels.values()],
            "edges": [e.to_dict() for e in self.edges],
        }
