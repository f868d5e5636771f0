"""Editor binary discovery and process launch."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

from loguru import logger

from vimroute.config import Settings
from vimroute.core.servers import ServerDirectory
from vimroute.core.types import Classification, ClassifiedArgs, CommandPlan, InvocationMode
from vimroute.errors import BinaryNotExecutableError, BinaryNotFoundError

APP_BUNDLE = "MacVim.app"
BUNDLE_BINARY = Path("Contents", "MacOS", "Vim")


def candidate_dirs(script_path: Path, home: Path | None = None) -> list[Path]:
    """Directories searched for the app bundle, in order."""

    home = home or Path.home()
    script_dir = script_path.parent
    app_dir = script_dir / ".." / "Applications"
    return [
        home / "Applications",
        home / "Applications" / "vim",
        script_dir,
        script_dir / "vim",
        app_dir,
        app_dir / "vim",
        Path("/Applications"),
        Path("/Applications/vim"),
        Path("/Applications/Utilities"),
        Path("/Applications/Utilities/vim"),
    ]


def locate_binary(settings: Settings, script_path: Path) -> Path:
    """Return the editor executable, preferring the GUI bundle."""

    searched = [settings.app_dir] if settings.app_dir is not None else candidate_dirs(script_path)
    for directory in searched:
        bundle = directory / APP_BUNDLE
        binary = bundle / BUNDLE_BINARY
        if binary.is_file():
            logger.debug("launcher.bundle path={}", bundle)
            return _ensure_executable(binary)
        if bundle.is_dir():
            logger.warning("launcher.bundle.incomplete path={}", bundle)

    plain = _which_excluding(settings.fallback_binary, script_path)
    if plain is not None:
        return _ensure_executable(plain)
    raise BinaryNotFoundError(searched)


def _which_excluding(name: str, script_path: Path) -> Path | None:
    path_str = os.getenv("PATH", "")
    for entry in path_str.split(os.pathsep):
        if not entry:
            continue
        found = shutil.which(name, path=entry)
        if found is None:
            continue
        candidate = Path(found)
        if script_path.exists() and candidate.resolve() == script_path.resolve():
            # Our own alias symlink; keep looking.
            continue
        return candidate
    return None


def _ensure_executable(binary: Path) -> Path:
    if not binary.is_file():
        raise BinaryNotFoundError([binary.parent])
    if not os.access(binary, os.X_OK):
        raise BinaryNotExecutableError(binary)
    return binary


def query_servers(binary: Path, *, default_name: str) -> ServerDirectory:
    """Ask the editor for the names of its running servers."""

    try:
        result = subprocess.run(  # noqa: S603
            [str(binary), "--serverlist"],
            capture_output=True,
            text=True,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning("launcher.serverlist.error binary={} error={}", binary, exc)
        return ServerDirectory(default_name=default_name)

    if result.returncode != 0:
        logger.warning("launcher.serverlist.exit binary={} code={}", binary, result.returncode)
        return ServerDirectory(default_name=default_name)
    directory = ServerDirectory.parse_serverlist(result.stdout, default_name=default_name)
    logger.debug("launcher.serverlist names={}", list(directory.names))
    return directory


def build_argv(
    binary: Path,
    plan: CommandPlan,
    mode: InvocationMode,
    classification: Classification,
) -> list[str]:
    """Assemble the final editor argv; the plan payload goes last."""

    argv = [str(binary), *mode.launch_flags()]
    if plan.target is not None:
        argv.extend(("--servername", plan.target))
    if isinstance(classification, ClassifiedArgs):
        argv.extend(classification.flags)
    argv.extend(plan.payload())
    return argv


def exec_argv(argv: list[str]) -> None:
    """Replace the current process with the editor."""

    logger.debug("launcher.exec argv={}", argv)
    try:
        os.execv(argv[0], argv)  # noqa: S606
    except OSError as exc:
        raise BinaryNotExecutableError(Path(argv[0])) from exc
