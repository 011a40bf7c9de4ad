"""Select the local directory to explore."""

import logging

from ..config import Session
from ..files import RepositoryError, validate_repository

logger = logging.getLogger(__name__)


def set_repository(path: str, session: Session) -> dict:
    """Validate a local directory and make it the session's project root.

    Args:
        path: Path to local folder (absolute or relative, supports ~)
        session: Server session to update

    Returns:
        Dict describing the repository, or an error
    """
    try:
        info = validate_repository(path)
    except RepositoryError as e:
        return {"error": str(e)}

    session.switch_root(info["path"])
    logger.info("Repository set to %s", info["path"])

    return info


def get_repository(session: Session) -> dict:
    """Describe the session's current project root."""
    try:
        info = validate_repository(session.root)
    except RepositoryError as e:
        return {"error": str(e)}

    del info["valid"]
    return info
