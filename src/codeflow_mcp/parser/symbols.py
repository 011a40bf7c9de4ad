"""Symbol and import binding dataclasses."""

from dataclasses import dataclass


# Preferred kind when one name is declared several ways (lower wins)
KIND_PRIORITY = {
    "component": 0,
    "function": 1,
    "class": 2,
    "interface": 3,
    "type": 4,
    "enum": 5,
    "namespace": 6,
    "module": 7,
    "constant": 8,
    "variable": 9,
}

SYMBOL_KINDS = list(KIND_PRIORITY)


@dataclass(frozen=True)
class Symbol:
    """A declared symbol found by the heuristic extractor."""
    name: str                       # Symbol name (e.g., "greet")
    kind: str                       # One of SYMBOL_KINDS
    line: int                       # Line number (1-indexed)
    column: int                     # Column of the name on its line (0-indexed)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind,
            "line": self.line,
            "column": self.column,
        }


@dataclass(frozen=True)
class ImportBinding:
    """One symbol bound by an import statement."""
    symbol: str                     # Exported name (never the local alias)
    from_specifier: str             # Module string as written (e.g., "./utils")
    resolved_path: str              # Best-effort project-relative path

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "from": self.from_specifier,
            "resolved_path": self.resolved_path,
        }


def kind_rank(kind: str) -> int:
    """Rank of a symbol kind; unknown kinds sort last."""
    return KIND_PRIORITY.get(kind, len(KIND_PRIORITY))
