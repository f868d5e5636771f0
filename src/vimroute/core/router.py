"""Routing an invocation to a running server or a fresh instance."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from vimroute.core.commands import classify_args
from vimroute.core.flags import DEFAULT_TABLES, FlagTables
from vimroute.core.keys import KeySequence
from vimroute.core.mode import resolve_mode
from vimroute.core.servers import ServerDirectory
from vimroute.core.types import (
    ClassifiedArgs,
    Classification,
    CommandPlan,
    InvocationMode,
    LocalLaunch,
    RemoteOpen,
    RemoteOpenKind,
    RemoteSend,
    UserManaged,
)

ServerProvider = Callable[[], ServerDirectory]


@dataclass(frozen=True)
class RouterContext:
    """Process-wide inputs, passed explicitly."""

    invoked_name: str
    args: tuple[str, ...] = ()
    cwd: Path = field(default_factory=Path.cwd)


@dataclass(frozen=True)
class RouteResult:
    """Routing outcome for one invocation."""

    mode: InvocationMode
    classification: Classification
    plan: CommandPlan


def absolute_path(path: str, cwd: Path) -> str:
    if os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(str(cwd), path))


def build_plan(
    classification: Classification,
    mode: InvocationMode,
    directory: ServerDirectory,
    cwd: Path,
) -> CommandPlan:
    """Pick exactly one plan for a classified invocation."""

    if isinstance(classification, UserManaged):
        return LocalLaunch(files=classification.args)

    target = directory.resolve_target(classification.server_name)
    files = classification.files
    open_kind = RemoteOpenKind.for_mode(mode.open_with)

    if not directory.is_active(target):
        return RemoteOpen(target=target, open_kind=open_kind, files=files)

    if len(files) > 1:
        return RemoteSend(target=target, open_kind=open_kind, files=files)

    keys = KeySequence().foreground()
    if files:
        keys.ex_command(mode.open_with.value, absolute_path(files[0], cwd))
    return RemoteSend(target=target, keys=keys.render())


class InvocationRouter:
    """Resolve mode, classify arguments, look up servers and build the plan."""

    def __init__(self, servers: ServerProvider, tables: FlagTables = DEFAULT_TABLES) -> None:
        self._servers = servers
        self._tables = tables

    def route(self, context: RouterContext) -> RouteResult:
        mode = resolve_mode(context.invoked_name)
        classification = classify_args(context.args, self._tables)

        # User-managed sessions never need the server list.
        directory = ServerDirectory() if isinstance(classification, UserManaged) else self._servers()
        plan = build_plan(classification, mode, directory, context.cwd)
        logger.info(
            "router.plan kind={} target={} files={}",
            type(plan).__name__,
            plan.target,
            len(classification.files) if isinstance(classification, ClassifiedArgs) else "-",
        )
        return RouteResult(mode=mode, classification=classification, plan=plan)
