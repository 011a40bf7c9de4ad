"""Local project file access: read, list, and size-tree a source directory."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import pathspec

from .errors import FileNotFound, AccessDenied, RepositoryError, InvalidIgnoreRules

logger = logging.getLogger(__name__)


# Extensions shown in file listings and the directory tree
CODE_EXTENSIONS = {
    ".js", ".jsx", ".ts", ".tsx", ".py", ".java", ".cpp", ".c", ".cs",
    ".go", ".rs", ".php", ".rb", ".swift", ".kt", ".dart", ".html",
    ".css", ".scss", ".less", ".json", ".xml", ".yaml", ".yml", ".sh",
    ".sql",
}
LISTING_EXTENSIONS = CODE_EXTENSIONS | {".md"}
LISTING_ALWAYS = {"package.json", "README.md"}

SKIP_DIRS = {"node_modules", ".git", "dist", "build"}

# Project meta files left out of the size tree (compared lowercased)
TREE_SKIP_FILES = {"license", "changelog", "changelog.md", "contributing.md"}


@dataclass
class FileData:
    """Content and metadata of one project file."""
    path: str                    # Project-relative path as requested
    content: str
    size: int                    # Bytes on disk
    modified: str                # ISO timestamp

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "content": self.content,
            "size": self.size,
            "modified": self.modified,
        }


@dataclass
class FileEntry:
    """One file in a project listing."""
    path: str
    name: str
    size: int
    modified: str

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "modified": self.modified,
        }


def validate_repository(path: str) -> dict:
    """Check that path names an existing directory.

    Returns:
        Dict describing the repository

    Raises:
        RepositoryError: if the path is empty, missing or not a directory
    """
    if not path:
        raise RepositoryError("Directory path is required")

    full_path = Path(path).expanduser().resolve()

    if not full_path.exists():
        raise RepositoryError(f"Directory not found: {path}")

    if not full_path.is_dir():
        raise RepositoryError(f"Path is not a directory: {path}")

    return {
        "path": str(full_path),
        "name": full_path.name,
        "type": "local",
        "valid": True,
    }


class ProjectFiles:
    """Read-only view of a project directory."""

    def __init__(self, root: str):
        """Initialize for a project root.

        Args:
            root: Project directory (absolute or relative, supports ~)
        """
        self.root = Path(root).expanduser().resolve()

    def _full_path(self, rel_path: str) -> Path:
        full_path = (self.root / rel_path).resolve()
        if full_path != self.root and self.root not in full_path.parents:
            raise AccessDenied(f"Access denied: path outside working directory: {rel_path}")
        return full_path

    def read_file(self, rel_path: str) -> FileData:
        """Read one file by project-relative path.

        Raises:
            AccessDenied: if the path escapes the project root
            FileNotFound: if no such file exists
        """
        full_path = self._full_path(rel_path)

        if not full_path.is_file():
            raise FileNotFound(f"File not found: {rel_path}")

        stats = full_path.stat()
        content = full_path.read_text(encoding="utf-8", errors="replace")

        return FileData(
            path=rel_path,
            content=content,
            size=stats.st_size,
            modified=_iso_mtime(stats.st_mtime),
        )

    async def fetch(self, rel_path: str) -> FileData:
        """Fetch collaborator used by the navigation resolver."""
        return self.read_file(rel_path)

    def list_files(self) -> list[FileEntry]:
        """List code and text files under the root, depth first."""
        return self._walk_files(self.root, "")

    def _walk_files(self, dir_path: Path, rel_dir: str) -> list[FileEntry]:
        files = []

        for item in sorted(dir_path.iterdir(), key=lambda p: p.name):
            name = item.name
            if name in SKIP_DIRS or name.startswith("."):
                continue

            rel_path = f"{rel_dir}/{name}" if rel_dir else name

            if item.is_dir():
                files.extend(self._walk_files(item, rel_path))
                continue

            if item.suffix.lower() in LISTING_EXTENSIONS or name in LISTING_ALWAYS:
                stats = item.stat()
                files.append(FileEntry(
                    path=rel_path,
                    name=name,
                    size=stats.st_size,
                    modified=_iso_mtime(stats.st_mtime),
                ))

        return files

    def directory_tree(self, ignore: str = "") -> dict:
        """Build a nested size tree of the project's code files.

        Honors the nearest .gitignore (searched from the root upwards) and
        the semicolon-separated gitignore-style rules in ignore.

        Returns:
            {"name", "path", "children", "size"}; directories sum their children

        Raises:
            InvalidIgnoreRules: if a custom rule cannot be parsed
        """
        lines = []

        gitignore = find_gitignore(self.root)
        if gitignore:
            lines.extend(gitignore.read_text(encoding="utf-8", errors="replace").splitlines())

        lines.extend(split_ignore_rules(ignore))

        try:
            spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)
        except ValueError as e:
            raise InvalidIgnoreRules(f"Invalid ignore rules: {e}") from e

        return self._tree(self.root, "", spec)

    def _tree(self, dir_path: Path, rel_dir: str, spec: pathspec.PathSpec) -> dict:
        node = {
            "name": dir_path.name,
            "path": rel_dir or ".",
            "children": [],
        }

        for item in sorted(dir_path.iterdir(), key=lambda p: p.name):
            name = item.name
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            is_dir = item.is_dir()

            if spec.match_file(rel_path) or (is_dir and spec.match_file(rel_path + "/")):
                continue

            if is_dir:
                node["children"].append(self._tree(item, rel_path, spec))
                continue

            lowered = name.lower()
            if name.startswith(".") or lowered.startswith("readme") or lowered in TREE_SKIP_FILES:
                continue

            if item.suffix.lower() in CODE_EXTENSIONS:
                node["children"].append({
                    "name": name,
                    "path": rel_path,
                    "size": item.stat().st_size,
                })

        node["size"] = sum(child.get("size", 0) for child in node["children"])
        return node


def split_ignore_rules(rules: str) -> list[str]:
    """Split "a;b/;c" into individual gitignore lines."""
    return [rule.strip() for rule in (rules or "").split(";") if rule.strip()]


def find_gitignore(start: Path) -> Optional[Path]:
    """Nearest .gitignore at or above start."""
    for directory in [start, *start.parents]:
        candidate = directory / ".gitignore"
        if candidate.is_file():
            logger.debug("Using %s", candidate)
            return candidate
    return None


def _iso_mtime(mtime: float) -> str:
    return datetime.fromtimestamp(mtime, tz=timezone.utc).isoformat()
