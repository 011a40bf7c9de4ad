"""Errors raised by the file services."""


class FileServiceError(Exception):
    """Base class for file service failures."""


class FileNotFound(FileServiceError):
    """The requested path does not name a file in the project."""


class AccessDenied(FileServiceError):
    """The requested path resolves outside the project root."""


class RepositoryError(FileServiceError):
    """A repository path is missing or not a directory."""


class InvalidIgnoreRules(FileServiceError):
    """A caller-supplied ignore rule could not be parsed."""


class FetchError(FileServiceError):
    """A remote file server could not be reached or answered with an error."""
