"""Fetch project files from a running file server over HTTP."""

from typing import Optional

import httpx

from .errors import FileNotFound, AccessDenied, FetchError
from .project import FileData


class HttpFileFetcher:
    """Client for a file server exposing GET /api/file/{path}."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, rel_path: str) -> FileData:
        """Fetch one file.

        Raises:
            FileNotFound: on 404
            AccessDenied: on 403
            FetchError: on any other HTTP or transport failure
        """
        url = f"{self.base_url}/api/file/{rel_path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch {rel_path}: {e}") from e

        if response.status_code == 404:
            raise FileNotFound(f"File not found: {rel_path}")
        if response.status_code == 403:
            raise AccessDenied(f"Access denied: {rel_path}")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"Failed to fetch {rel_path}: {e}") from e

        data = response.json()

        return FileData(
            path=data.get("path", rel_path),
            content=data["content"],
            size=data.get("size", 0),
            modified=str(data.get("modified", "")),
        )
