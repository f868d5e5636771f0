"""vimroute - send editor invocations to running servers."""

from .core import InvocationRouter, RouterContext, ServerDirectory, build_plan, classify_args, resolve_mode

__version__ = "0.1.0"

__all__ = ["InvocationRouter", "RouterContext", "ServerDirectory", "build_plan", "classify_args", "resolve_mode"]
