"""Get file outline - declared symbols and imports in a specific file."""

from ..files import ProjectFiles, FileNotFound, AccessDenied
from ..parser import extract_symbols, parse_imports, get_language_from_path


def get_file_outline(root: str, file_path: str) -> dict:
    """Get symbols and import bindings found in a file.

    Args:
        root: Project root
        file_path: Path to file within the project

    Returns:
        Dict with symbols and imports
    """
    try:
        data = ProjectFiles(root).read_file(file_path)
    except (FileNotFound, AccessDenied) as e:
        return {"error": str(e)}

    symbols = extract_symbols(data.content)
    imports = parse_imports(data.content, file_path)

    return {
        "file": file_path,
        "language": get_language_from_path(file_path),
        "symbols": [s.to_dict() for s in symbols],
        "imports": [b.to_dict() for b in imports],
    }
