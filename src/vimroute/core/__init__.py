"""Core routing logic for vimroute."""

from .commands import classify_args
from .mode import resolve_mode
from .quoting import escape_single_quotes, render_command_line
from .router import InvocationRouter, RouteResult, RouterContext, build_plan
from .servers import ServerDirectory

__all__ = [
    "InvocationRouter",
    "RouteResult",
    "RouterContext",
    "ServerDirectory",
    "build_plan",
    "classify_args",
    "escape_single_quotes",
    "render_command_line",
    "resolve_mode",
]
