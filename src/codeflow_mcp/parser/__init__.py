"""Parser package for extracting symbols and imports from source code."""

from .symbols import Symbol, ImportBinding, KIND_PRIORITY, SYMBOL_KINDS
from .languages import (
    SymbolPattern,
    SYMBOL_PATTERNS,
    LANGUAGE_EXTENSIONS,
    PROBE_EXTENSIONS,
    get_language_from_path,
)
from .extractor import Extractor, extract_symbols, find_symbol
from .imports import ImportParser, parse_imports, resolve_specifier, resolve_path

__all__ = [
    "Symbol",
    "ImportBinding",
    "KIND_PRIORITY",
    "SYMBOL_KINDS",
    "SymbolPattern",
    "SYMBOL_PATTERNS",
    "LANGUAGE_EXTENSIONS",
    "PROBE_EXTENSIONS",
    "get_language_from_path",
    "Extractor",
    "extract_symbols",
    "find_symbol",
    "ImportParser",
    "parse_imports",
    "resolve_specifier",
    "resolve_path",
]
