"""Application-level exception types for vimroute."""

from __future__ import annotations

from pathlib import Path


class VimRouteError(Exception):
    """Base exception for vimroute."""


class BinaryDiscoveryError(VimRouteError):
    """Base exception for editor binary lookup failures."""


class BinaryNotFoundError(BinaryDiscoveryError):
    """Raised when no candidate location yields an editor binary."""

    def __init__(self, searched: list[Path]) -> None:
        self.searched = searched
        locations = ", ".join(str(path) for path in searched) or "(none)"
        super().__init__(f"Sorry, cannot find the editor binary. Searched: {locations}")


class BinaryNotExecutableError(BinaryDiscoveryError):
    """Raised when the located editor binary lacks execute permission."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Sorry, cannot execute {path}")


class ConfigurationError(VimRouteError):
    """Raised when settings from the environment are invalid."""


class MalformedArgumentError(VimRouteError):
    """Raised when a flag that takes a value is the last argument."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Argument missing after: {flag}")
