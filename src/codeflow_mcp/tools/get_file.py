"""Get a file's content."""

from ..files import ProjectFiles, FileNotFound, AccessDenied
from ..parser import get_language_from_path


def get_file(root: str, file_path: str) -> dict:
    """Read a project file.

    Args:
        root: Project root
        file_path: Path to the file within the project (e.g., 'src/App.jsx')

    Returns:
        Dict with path, content, size, modified and language
    """
    try:
        data = ProjectFiles(root).read_file(file_path)
    except (FileNotFound, AccessDenied) as e:
        return {"error": str(e)}

    result = data.to_dict()
    result["language"] = get_language_from_path(file_path)
    return result
