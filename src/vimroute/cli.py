"""Router entry point and the ``vimroute`` management CLI."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

import typer
from loguru import logger

from vimroute.config import Settings, get_settings
from vimroute.core.quoting import render_command_line
from vimroute.core.router import InvocationRouter, RouterContext
from vimroute.core.servers import ServerDirectory
from vimroute.errors import VimRouteError
from vimroute.launcher import build_argv, exec_argv, locate_binary, query_servers

ROUTER_SCRIPT = "mvim"
ALIASES = (
    "mvim",
    "mvimdiff",
    "mview",
    "mex",
    "mvimt",
    "mvims",
    "mvimv",
    "rmvim",
    "rmview",
    "gvim",
    "gvimdiff",
    "gview",
    "rgvim",
    "rgview",
)

app = typer.Typer(
    name="vimroute",
    help="Route editor invocations to running servers.",
    add_completion=False,
)


def _load_binary() -> tuple[Settings, Path]:
    try:
        settings = get_settings()
        return settings, locate_binary(settings, Path(sys.argv[0]))
    except VimRouteError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def _router_for(binary: Path, settings: Settings) -> InvocationRouter:
    return InvocationRouter(lambda: query_servers(binary, default_name=settings.default_server_name))


def main(argv: Sequence[str] | None = None) -> None:
    """Route one editor invocation and replace this process with the editor."""

    argv = list(sys.argv if argv is None else argv)
    script_path = Path(argv[0])
    try:
        settings = get_settings()
        binary = locate_binary(settings, script_path)
        router = _router_for(binary, settings)
        context = RouterContext(invoked_name=script_path.name, args=tuple(argv[1:]), cwd=Path.cwd())
        result = router.route(context)
        exec_argv(build_argv(binary, result.plan, result.mode, result.classification))
    except VimRouteError as exc:
        logger.debug("router.failed error={}", exc)
        typer.echo(str(exc), err=True)
        raise SystemExit(1) from exc


@app.command(
    "plan",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def plan(
    ctx: typer.Context,
    invoked_as: str = typer.Option(ROUTER_SCRIPT, "--as", help="Program name to route as"),
    cwd: Path | None = typer.Option(None, "--cwd", help="Working directory for relative paths"),  # noqa: B008
    servers: list[str] | None = typer.Option(  # noqa: B008
        None, "--server", help="Pretend these servers are running instead of querying the editor"
    ),
) -> None:
    """Print the editor command an invocation would run."""

    settings, binary = _load_binary()

    if servers:
        router = InvocationRouter(lambda: ServerDirectory(servers, default_name=settings.default_server_name))
    else:
        router = _router_for(binary, settings)
    context = RouterContext(invoked_name=invoked_as, args=tuple(ctx.args), cwd=cwd or Path.cwd())
    try:
        result = router.route(context)
    except VimRouteError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    typer.echo(render_command_line(build_argv(binary, result.plan, result.mode, result.classification)))


@app.command("servers")
def list_servers() -> None:
    """Show running editor servers."""

    settings, binary = _load_binary()
    directory = query_servers(binary, default_name=settings.default_server_name)
    if not len(directory):
        typer.echo("(no servers)")
        return
    for name in directory.names:
        typer.echo(name)


@app.command("which")
def which() -> None:
    """Show the editor binary that would be launched."""

    _, binary = _load_binary()
    typer.echo(str(binary))


@app.command("link")
def link(
    directory: Path = typer.Argument(..., help="Directory to create the alias symlinks in"),  # noqa: B008
    target: Path | None = typer.Option(None, "--target", help="Router script the aliases point at"),  # noqa: B008
    force: bool = typer.Option(False, "--force", "-f", help="Replace existing files"),
) -> None:
    """Create the conventional alias names for the router script."""

    source = target or _find_router_script()
    if source is None:
        typer.echo(f"Cannot find the {ROUTER_SCRIPT} script; pass --target.", err=True)
        raise typer.Exit(1)

    directory.mkdir(parents=True, exist_ok=True)
    for alias in ALIASES:
        path = directory / alias
        if path.exists() or path.is_symlink():
            if path.resolve() == source.resolve():
                continue
            if not force:
                typer.echo(f"skip {path} (exists)")
                continue
            path.unlink()
        path.symlink_to(source)
        typer.echo(f"{path} -> {source}")


def _find_router_script() -> Path | None:
    scripts_dir = Path(sys.executable).parent
    candidate = scripts_dir / ROUTER_SCRIPT
    if candidate.exists():
        return candidate
    path_str = os.getenv("PATH", "")
    for entry in path_str.split(os.pathsep):
        if entry and (Path(entry) / ROUTER_SCRIPT).exists():
            return Path(entry) / ROUTER_SCRIPT
    return None
