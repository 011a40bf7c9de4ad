"""Candidate file paths for an import that omits its extension."""

from ..parser.languages import PROBE_EXTENSIONS, COMPONENT_EXTENSION, SCRIPT_EXTENSION


SOURCE_ROOT = "src/"


def candidate_paths(resolved_path: str, symbol_name: str, had_tilde: bool = False) -> list[str]:
    """Build the ordered list of paths to probe for an imported symbol.

    A path that already carries a probe extension is tried as-is first.
    Otherwise the first guess is ".jsx" for capitalized (component-like)
    names and ".js" for the rest. Every other probe extension follows.
    For "~/" imports the whole sequence is repeated under "src/".

    Args:
        resolved_path: Project-relative path from the import binding
        symbol_name: The imported name being looked up
        had_tilde: Whether the original specifier used the "~" root alias

    Returns:
        Deduplicated paths in probing order
    """
    paths = _extension_variants(resolved_path, symbol_name)

    if had_tilde:
        paths.extend(_extension_variants(SOURCE_ROOT + resolved_path, symbol_name))

    return list(dict.fromkeys(paths))


def _extension_variants(path: str, symbol_name: str) -> list[str]:
    ext = _probe_extension(path)

    if ext:
        base = path[: -len(ext)]
        primary = path
    else:
        base = path
        guess = COMPONENT_EXTENSION if symbol_name[:1].isupper() else SCRIPT_EXTENSION
        primary = base + guess

    return [primary] + [base + e for e in PROBE_EXTENSIONS if base + e != primary]


def _probe_extension(path: str) -> str:
    """The probe extension path ends with, or ""."""
    for ext in PROBE_EXTENSIONS:
        if path.endswith(ext):
            return ext
    return ""
