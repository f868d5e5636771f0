"""Discovered editor servers and target selection."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_SERVER_NAME = "VIM"


class ServerDirectory:
    """Server names currently advertised by the editor, in discovery order."""

    def __init__(self, names: Iterable[str] = (), *, default_name: str = DEFAULT_SERVER_NAME) -> None:
        self._names = tuple(names)
        self._default_name = default_name

    @classmethod
    def parse_serverlist(cls, output: str, *, default_name: str = DEFAULT_SERVER_NAME) -> ServerDirectory:
        """Build a directory from ``--serverlist`` output, one name per line."""

        names = [line.strip() for line in output.splitlines()]
        return cls([name for name in names if name], default_name=default_name)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def is_active(self, name: str) -> bool:
        # Names are compared as the editor reported them.
        return name in self._names

    def resolve_target(self, explicit_name: str | None) -> str:
        if explicit_name:
            return explicit_name.upper()
        if self._names:
            return self._names[0]
        return self._default_name

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ServerDirectory({list(self._names)!r})"
