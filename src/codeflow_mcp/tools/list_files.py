"""List project files."""

from ..files import ProjectFiles


def list_files(root: str) -> dict:
    """List code and text files in the project.

    Returns:
        Dict with count and list of files
    """
    files = ProjectFiles(root).list_files()

    return {
        "count": len(files),
        "files": [f.to_dict() for f in files]
    }
