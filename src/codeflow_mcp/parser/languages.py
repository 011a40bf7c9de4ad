"""Declaration and import pattern tables, plus file extension metadata."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolPattern:
    """A single-line declaration pattern for one symbol kind."""
    # Symbol kind produced by a match
    kind: str

    # Compiled pattern; group 1 captures the declared name
    regex: re.Pattern


def _patterns(kind: str, *sources: str) -> list[SymbolPattern]:
    return [SymbolPattern(kind=kind, regex=re.compile(src)) for src in sources]


# Applied to every line in this order; each pattern contributes at most one
# match per line.
SYMBOL_PATTERNS: list[SymbolPattern] = [
    *_patterns(
        "function",
        r"(?:function\s+|const\s+|let\s+|var\s+)(\w+)\s*[=(]",
        r"(?:export\s+)?function\s+(\w+)",
        r"(?:export\s+)?(?:async\s+)?function\s+(\w+)",
    ),
    *_patterns(
        "class",
        r"(?:export\s+)?(?:abstract\s+)?class\s+(\w+)",
        r"(?:export\s+)?(?:default\s+)?class\s+(\w+)",
    ),
    *_patterns(
        "component",
        r"(?:function|const|let|var)\s+([A-Z]\w+)",
        r"([A-Z]\w+)\s*=\s*(?:styled|React\.forwardRef|forwardRef)",
        r"([A-Z]\w+)\s*=\s*\([^)]*\)\s*=>",
        r"export\s+(?:default\s+)?(?:function\s+)?([A-Z]\w+)",
    ),
    *_patterns(
        "variable",
        r"(?:const|let|var)\s+([A-Z]\w+)\s*=",
    ),
    *_patterns(
        "type",
        r"(?:export\s+)?type\s+(\w+)\s*=",
        r"(?:export\s+)?type\s+(\w+)\s*<[^>]*>\s*=",
    ),
    *_patterns(
        "interface",
        r"(?:export\s+)?interface\s+(\w+)",
        r"(?:export\s+)?interface\s+(\w+)\s*<[^>]*>",
    ),
    *_patterns("enum", r"(?:export\s+)?enum\s+(\w+)"),
    *_patterns("namespace", r"(?:export\s+)?namespace\s+(\w+)"),
    *_patterns("module", r"""(?:export\s+)?(?:declare\s+)?module\s+['"]([^'"]+)['"]"""),
    *_patterns("constant", r"(?:export\s+)?const\s+(\w+)\s*=.*as\s+const"),
]


_FROM = r"""\s+from\s+['"`]([^'"`]+)['"`]"""

# Import statement shapes, scanned over the whole text in this order
DEFAULT_IMPORT = re.compile(r"import\s+(\w+)" + _FROM)
NAMED_IMPORT = re.compile(r"import\s+\{\s*([^}]+)\s*\}" + _FROM)
NAMESPACE_IMPORT = re.compile(r"import\s+\*\s+as\s+(\w+)" + _FROM)
DEFAULT_AND_NAMED_IMPORT = re.compile(r"import\s+(\w+),\s*\{\s*([^}]+)\s*\}" + _FROM)


# Extensions tried when probing for an imported file, in priority order
PROBE_EXTENSIONS = [".jsx", ".js", ".tsx", ".ts", ".json", ".scss", ".css"]

COMPONENT_EXTENSION = ".jsx"
SCRIPT_EXTENSION = ".js"


# File extension to editor language mapping
LANGUAGE_EXTENSIONS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".c": "c",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".php": "php",
    ".rb": "ruby",
    ".swift": "swift",
    ".kt": "kotlin",
    ".dart": "dart",
    ".html": "html",
    ".css": "css",
    ".scss": "scss",
    ".less": "less",
    ".json": "json",
    ".xml": "xml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".md": "markdown",
    ".sh": "bash",
    ".sql": "sql",
}


def get_language_from_path(file_path: str) -> str:
    """Editor language for a file path, "plaintext" when unknown."""
    name = file_path.rsplit("/", 1)[-1]
    if "." not in name:
        return "plaintext"
    ext = "." + name.rsplit(".", 1)[-1].lower()
    return LANGUAGE_EXTENSIONS.get(ext, "plaintext")
