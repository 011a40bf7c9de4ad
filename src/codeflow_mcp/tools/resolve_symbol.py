"""Resolve a symbol to its definition without touching the panel graph."""

from ..files import ProjectFiles, FileNotFound, AccessDenied
from ..navigation import Fetcher, resolve_symbol_click


async def resolve_symbol(root: str, file_path: str, symbol: str, fetch: Fetcher) -> dict:
    """Find where a symbol used in a file is defined.

    Args:
        root: Project root the source file is read from
        file_path: File the symbol was clicked in
        symbol: Identifier to resolve
        fetch: File-fetch collaborator for imported files

    Returns:
        Dict with found flag and, when found, the definition site
    """
    try:
        source = ProjectFiles(root).read_file(file_path)
    except (FileNotFound, AccessDenied) as e:
        return {"error": str(e)}

    target = await resolve_symbol_click(source.content, file_path, symbol, fetch)

    if target is None:
        return {"symbol": symbol, "found": False}

    return {"symbol": symbol, "found": True, **target.to_dict()}
