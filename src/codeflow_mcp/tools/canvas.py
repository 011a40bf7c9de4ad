"""Panel graph tools: open files, follow symbols, close and recenter panels."""

from ..config import Session
from ..files import ProjectFiles, FileNotFound, AccessDenied
from ..navigation import resolve_symbol_click


def open_file(session: Session, file_path: str) -> dict:
    """Open a file as a root panel (reuses an existing root for the same file)."""
    try:
        data = ProjectFiles(session.root).read_file(file_path)
    except (FileNotFound, AccessDenied) as e:
        return {"error": str(e)}

    panel_id = session.graph.open_root(file_path, data.content)
    return {"panel": session.graph.get(panel_id).to_dict(include_content=True)}


async def navigate_symbol(session: Session, panel_id: str, symbol: str) -> dict:
    """Resolve a symbol clicked in a panel and update the graph.

    A local definition recenters the panel; an imported one opens (or
    reuses) a child panel linked from it. Unresolvable symbols leave the
    graph untouched.
    """
    graph = session.graph
    source = graph.get(panel_id)
    if source is None:
        return {"error": f"Panel not found: {panel_id}"}

    target = await resolve_symbol_click(source.content, source.file_path, symbol, session.fetcher())

    if target is None:
        return {"symbol": symbol, "found": False}

    # The graph may have changed while probing; check-then-insert under the lock
    async with session.lock:
        if session.graph is not graph:
            return {"symbol": symbol, "found": True, "panel": None}
        result_id = graph.apply(panel_id, symbol, target)

    panel = graph.get(result_id) if result_id else None

    return {
        "symbol": symbol,
        "found": True,
        "local": target.local,
        "panel": panel.to_dict(include_content=not target.local) if panel else None,
    }


def close_panel(session: Session, panel_id: str) -> dict:
    """Close a panel and every panel opened from it."""
    removed = session.graph.close(panel_id)
    if not removed:
        return {"error": f"Panel not found: {panel_id}"}
    return {"closed": removed}


def recenter_panel(session: Session, panel_id: str, line: int, column: int = 0) -> dict:
    """Request that a panel scroll to a position."""
    token = session.graph.recenter(panel_id, line, column)
    if token is None:
        return {"error": f"Panel not found: {panel_id}"}
    return {"panel_id": panel_id, "focus": {"line": line, "column": column}, "focus_token": token}


def get_canvas(session: Session) -> dict:
    """Snapshot of open panels and links."""
    return {"root": session.root, **session.graph.to_dict()}
