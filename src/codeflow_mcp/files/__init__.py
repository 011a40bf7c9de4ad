"""File services: local project access and a remote HTTP fetcher."""

from .errors import (
    FileServiceError,
    FileNotFound,
    AccessDenied,
    RepositoryError,
    InvalidIgnoreRules,
    FetchError,
)
from .project import FileData, FileEntry, ProjectFiles, validate_repository
from .remote import HttpFileFetcher

__all__ = [
    "FileServiceError",
    "FileNotFound",
    "AccessDenied",
    "RepositoryError",
    "InvalidIgnoreRules",
    "FetchError",
    "FileData",
    "FileEntry",
    "ProjectFiles",
    "validate_repository",
    "HttpFileFetcher",
]
