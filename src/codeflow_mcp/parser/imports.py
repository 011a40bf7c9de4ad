"""Import statement parsing and specifier-to-path resolution."""

import logging
import re
from typing import Callable

from .symbols import ImportBinding
from .languages import (
    DEFAULT_IMPORT,
    NAMED_IMPORT,
    NAMESPACE_IMPORT,
    DEFAULT_AND_NAMED_IMPORT,
)

logger = logging.getLogger(__name__)

ImportParser = Callable[[str, str], list[ImportBinding]]

_ALIAS_SUFFIX = re.compile(r"\s+as\s+\w+$")


def parse_imports(content: str, file_path: str) -> list[ImportBinding]:
    """Parse ES module imports and resolve their specifiers.

    Recognizes default, named, namespace and default-plus-named imports.
    Each pattern is scanned over the whole text in turn, so bindings are
    grouped by statement shape, then ordered by position.

    Args:
        content: Raw source code
        file_path: Project-relative path of the importing file

    Returns:
        One ImportBinding per bound symbol
    """
    bindings = []

    for match in DEFAULT_IMPORT.finditer(content):
        bindings.extend(_bind([match.group(1)], match.group(2), file_path))

    for match in NAMED_IMPORT.finditer(content):
        bindings.extend(_bind(_split_named(match.group(1)), match.group(2), file_path))

    for match in NAMESPACE_IMPORT.finditer(content):
        bindings.extend(_bind([match.group(1)], match.group(2), file_path))

    for match in DEFAULT_AND_NAMED_IMPORT.finditer(content):
        names = [match.group(1), *_split_named(match.group(2))]
        bindings.extend(_bind(names, match.group(3), file_path))

    logger.debug("Parsed %d import bindings from %s", len(bindings), file_path)
    return bindings


def _split_named(names: str) -> list[str]:
    """Split a named import list, keying renamed entries by the exported name."""
    return [_ALIAS_SUFFIX.sub("", part.strip()) for part in names.split(",")]


def _bind(names: list[str], specifier: str, file_path: str) -> list[ImportBinding]:
    resolved = resolve_specifier(specifier, file_path)
    return [
        ImportBinding(symbol=name.strip(), from_specifier=specifier, resolved_path=resolved)
        for name in names
        if name.strip()
    ]


def resolve_specifier(specifier: str, file_path: str) -> str:
    """Map a module specifier to a best-effort project-relative path.

    - "./x", "../x": joined against the importing file's directory
    - "~/x": project-root alias, prefix stripped
    - "@/x": src-root alias, rewritten to "src/x"
    - anything else (e.g. "lodash"): returned unchanged
    """
    if specifier.startswith("./") or specifier.startswith("../"):
        current_dir = "/".join(file_path.split("/")[:-1])
        return resolve_path(current_dir, specifier)
    if specifier.startswith("~/"):
        return specifier[2:]
    if specifier.startswith("@/"):
        return "src/" + specifier[2:]
    return specifier


def resolve_path(base_path: str, relative_path: str) -> str:
    """Lexically join a relative path onto a directory.

    ".." pops one trailing segment, "." is skipped, anything else is
    appended. The filesystem is never consulted.
    """
    parts = base_path.split("/") if base_path else []

    for part in relative_path.split("/"):
        if part == "..":
            if parts:
                parts.pop()
        elif part != ".":
            parts.append(part)

    return "/".join(parts)
