"""Get the size tree of a project."""

from ..files import ProjectFiles, InvalidIgnoreRules


DEFAULT_IGNORE = "package-lock.json;**/*.snap;dist/;.git;.git/;.github/;.github;.vscode/;.vscode;.env"


def get_file_tree(
    root: str,
    ignore: str = DEFAULT_IGNORE,
    path_prefix: str = ""
) -> dict:
    """Get the project's directory tree with file sizes.

    Args:
        root: Project root
        ignore: Semicolon-separated gitignore-style rules
        path_prefix: Optional subdirectory to return (e.g., 'src/utils')

    Returns:
        Dict with nested {name, path, children, size} structure
    """
    try:
        tree = ProjectFiles(root).directory_tree(ignore)
    except InvalidIgnoreRules as e:
        return {"error": str(e)}

    prefix = path_prefix.strip("/")
    if not prefix:
        return tree

    node = _find_node(tree, prefix)
    if node is None:
        return {"error": f"Path not found in tree: {path_prefix}"}
    return node


def _find_node(node: dict, path: str):
    """Locate the directory node whose path equals path."""
    if node.get("path") == path:
        return node

    for child in node.get("children", []):
        child_path = child.get("path", "")
        if "children" in child and (path == child_path or path.startswith(child_path + "/")):
            return _find_node(child, path)

    return None
