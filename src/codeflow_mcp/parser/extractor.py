"""Heuristic regex symbol extractor for JavaScript/TypeScript sources."""

from typing import Callable

from .symbols import Symbol, kind_rank
from .languages import SymbolPattern, SYMBOL_PATTERNS


# Any callable with this shape can stand in for extract_symbols
Extractor = Callable[[str], list[Symbol]]


def extract_symbols(content: str) -> list[Symbol]:
    """Extract declared symbols from source text.

    Every pattern is applied to every line independently, so one line can
    yield several raw matches. Matches are then reduced to one symbol per
    name, keeping the highest-priority kind (first occurrence on ties).
    Matches inside comments or strings are not filtered out.

    Args:
        content: Raw source code

    Returns:
        List of Symbol objects in scan order, names unique
    """
    raw = []

    for line_index, line in enumerate(content.split("\n")):
        raw.extend(_scan_line(line, line_index + 1, SYMBOL_PATTERNS))

    return _dedupe(raw)


def _scan_line(line: str, line_number: int, patterns: list[SymbolPattern]) -> list[Symbol]:
    """Collect the first match of each pattern on one line."""
    matches = []

    for pattern in patterns:
        match = pattern.regex.search(line)
        if not match:
            continue

        matches.append(Symbol(
            name=match.group(1),
            kind=pattern.kind,
            line=line_number,
            column=match.start(1),
        ))

    return matches


def _dedupe(symbols: list[Symbol]) -> list[Symbol]:
    """Keep one symbol per name, preferring the best-ranked kind."""
    best: dict[str, int] = {}

    for position, symbol in enumerate(symbols):
        kept = best.get(symbol.name)
        # Strictly better only, so the first of equal kinds stays
        if kept is None or kind_rank(symbol.kind) < kind_rank(symbols[kept].kind):
            best[symbol.name] = position

    return [symbols[position] for position in sorted(best.values())]


def find_symbol(symbols: list[Symbol], name: str):
    """Return the symbol called name, or None."""
    return next((s for s in symbols if s.name == name), None)
