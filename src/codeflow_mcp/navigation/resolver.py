"""Resolve a clicked identifier to the file and line that define it."""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from ..parser import (
    Symbol,
    Extractor,
    ImportParser,
    extract_symbols,
    find_symbol,
    parse_imports,
)
from .prober import candidate_paths

logger = logging.getLogger(__name__)

# Async callable returning an object with a .content attribute, raising on miss
Fetcher = Callable[[str], Awaitable[Any]]


@dataclass(frozen=True)
class NavigationTarget:
    """Where a clicked symbol is defined."""
    file_path: str
    content: str
    symbol: Symbol
    local: bool = False             # True: recenter the source panel in place

    def to_dict(self) -> dict:
        return {
            "file_path": self.file_path,
            "symbol": self.symbol.to_dict(),
            "local": self.local,
        }


async def resolve_symbol_click(
    source_text: str,
    source_path: str,
    symbol_name: str,
    fetch: Fetcher,
    extract: Extractor = extract_symbols,
    parse: ImportParser = parse_imports,
) -> Optional[NavigationTarget]:
    """Find the definition of a symbol clicked in a source file.

    An import binding for the name wins over a local declaration. Imported
    symbols are located by probing candidate paths one at a time; the first
    file that loads is authoritative, even if the symbol is not in it.

    Args:
        source_text: Content of the file that was clicked in
        source_path: Project-relative path of that file
        symbol_name: The clicked identifier
        fetch: File-fetch collaborator
        extract: Symbol extraction strategy
        parse: Import parsing strategy

    Returns:
        NavigationTarget, or None when nothing navigable was found
    """
    binding = next((b for b in parse(source_text, source_path) if b.symbol == symbol_name), None)

    if binding is None:
        symbol = find_symbol(extract(source_text), symbol_name)
        if symbol is None:
            return None
        return NavigationTarget(file_path=source_path, content=source_text, symbol=symbol, local=True)

    candidates = candidate_paths(
        binding.resolved_path,
        symbol_name,
        binding.from_specifier.startswith("~"),
    )

    for path in candidates:
        try:
            file_data = await fetch(path)
        except Exception as e:
            logger.debug("Probe %s for %s failed: %s", path, symbol_name, e)
            continue

        symbol = find_symbol(extract(file_data.content), symbol_name)
        if symbol is None:
            logger.debug("%s loaded but does not declare %s", path, symbol_name)
            return None

        return NavigationTarget(file_path=path, content=file_data.content, symbol=symbol)

    logger.debug("No candidate for %s from %s", symbol_name, binding.from_specifier)
    return None
