"""Environment configuration and the per-server session."""

import asyncio
import os
from dataclasses import dataclass, field
from typing import Optional

from .files import ProjectFiles, HttpFileFetcher
from .navigation import Fetcher, NavigationGraph


@dataclass
class Settings:
    """Server settings read from the environment."""
    root: str
    file_server: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            root=os.environ.get("CODEFLOW_ROOT") or os.getcwd(),
            file_server=os.environ.get("CODEFLOW_FILE_SERVER") or None,
            log_level=os.environ.get("CODEFLOW_LOG_LEVEL", "WARNING").upper(),
        )


@dataclass
class Session:
    """The project being explored and its open panels."""
    root: str
    file_server: Optional[str] = None
    graph: NavigationGraph = field(default_factory=NavigationGraph)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Session":
        return cls(root=settings.root, file_server=settings.file_server)

    def fetcher(self) -> Fetcher:
        """Fetch collaborator for navigation: remote server if configured, else local files."""
        if self.file_server:
            return HttpFileFetcher(self.file_server).fetch
        return ProjectFiles(self.root).fetch

    def switch_root(self, root: str) -> None:
        """Point the session at another project; open panels are dropped."""
        self.root = root
        self.graph = NavigationGraph()
