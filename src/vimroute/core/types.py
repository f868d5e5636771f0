"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from vimroute.core.quoting import escape_single_quotes


class OpenWith(str, Enum):
    """Window placement verb used when opening one file in a running server."""

    EDIT = "edit"
    SPLIT = "split"
    TABEDIT = "tabedit"
    VSPLIT = "vsplit"


class RemoteOpenKind(str, Enum):
    """Silent bulk-open flag spellings understood by the editor."""

    SILENT = "--remote-silent"
    TAB_SILENT = "--remote-tab-silent"

    @classmethod
    def for_mode(cls, open_with: OpenWith) -> RemoteOpenKind:
        return cls.TAB_SILENT if open_with is OpenWith.TABEDIT else cls.SILENT


@dataclass(frozen=True)
class InvocationMode:
    """Editor mode derived from the name the router was invoked as."""

    gui: bool = False
    restricted: bool = False
    diff_mode: bool = False
    view_mode: bool = False
    ex_mode: bool = False
    open_with: OpenWith = OpenWith.EDIT

    def launch_flags(self) -> list[str]:
        flags: list[str] = []
        if self.restricted:
            flags.append("-Z")
        if self.diff_mode:
            flags.append("-dO")
        if self.view_mode:
            flags.append("-R")
        if self.ex_mode:
            flags.append("-e")
        if self.gui:
            flags.append("-g")
        return flags


@dataclass(frozen=True)
class ClassifiedArgs:
    """Arguments filtered for forwarding to a server."""

    server_name: str | None = None
    flags: tuple[str, ...] = ()
    files: tuple[str, ...] = ()

    @property
    def user_managed(self) -> bool:
        return False

    @property
    def escaped_flags(self) -> tuple[str, ...]:
        return tuple(escape_single_quotes(token) for token in self.flags)


@dataclass(frozen=True)
class UserManaged:
    """Caller drives remote/split/tab behaviour itself; replay args verbatim."""

    args: tuple[str, ...] = ()

    @property
    def user_managed(self) -> bool:
        return True


Classification = Union[ClassifiedArgs, UserManaged]


@dataclass(frozen=True)
class RemoteSend:
    """Act on a running server, by key sequence or by a silent bulk open."""

    target: str
    keys: str = ""
    open_kind: RemoteOpenKind | None = None
    files: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if bool(self.keys) == (self.open_kind is not None):
            raise ValueError("RemoteSend needs exactly one of keys or open_kind")
        if self.files and self.open_kind is None:
            raise ValueError("RemoteSend files require open_kind")

    def payload(self) -> list[str]:
        if self.open_kind is not None:
            return [self.open_kind.value, *self.files]
        return ["--remote-send", self.keys]


@dataclass(frozen=True)
class RemoteOpen:
    """Start a server under ``target``, opening ``files`` when there are any."""

    target: str
    open_kind: RemoteOpenKind = RemoteOpenKind.SILENT
    files: tuple[str, ...] = ()

    @property
    def create_only(self) -> bool:
        return not self.files

    def payload(self) -> list[str]:
        if self.create_only:
            return []
        return [self.open_kind.value, *self.files]


@dataclass(frozen=True)
class LocalLaunch:
    """Plain launch without server targeting."""

    files: tuple[str, ...] = field(default_factory=tuple)

    @property
    def target(self) -> None:
        return None

    def payload(self) -> list[str]:
        return list(self.files)


CommandPlan = Union[RemoteSend, RemoteOpen, LocalLaunch]
