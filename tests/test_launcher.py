from __future__ import annotations

import importlib
import os
import subprocess
from pathlib import Path
from types import SimpleNamespace

import pytest

from vimroute.config import Settings
from vimroute.core.keys import FOREGROUND
from vimroute.core.mode import resolve_mode
from vimroute.core.types import ClassifiedArgs, LocalLaunch, RemoteOpen, RemoteSend, UserManaged
from vimroute.errors import BinaryNotExecutableError, BinaryNotFoundError

launcher = importlib.import_module("vimroute.launcher")

BINARY = Path("/Applications/MacVim.app/Contents/MacOS/Vim")


def _make_executable(path: Path, mode: int = 0o755) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    path.chmod(mode)
    return path


class TestBuildArgv:
    def test_remote_send_with_flags(self) -> None:
        classified = ClassifiedArgs(flags=("-c", "set nu"), files=())
        plan = RemoteSend(target="VIM", keys=FOREGROUND)
        argv = launcher.build_argv(BINARY, plan, resolve_mode("rmvim"), classified)
        assert argv == [str(BINARY), "-Z", "-g", "--servername", "VIM", "-c", "set nu", "--remote-send", FOREGROUND]

    def test_user_managed_has_no_servername(self) -> None:
        args = ("--remote-silent", "a.txt")
        argv = launcher.build_argv(BINARY, LocalLaunch(files=args), resolve_mode("mvim"), UserManaged(args=args))
        assert argv == [str(BINARY), "-g", "--remote-silent", "a.txt"]

    def test_create_only_server(self) -> None:
        argv = launcher.build_argv(
            BINARY,
            RemoteOpen(target="FOO"),
            resolve_mode("mvimdiff"),
            ClassifiedArgs(server_name="foo"),
        )
        assert argv == [str(BINARY), "-dO", "-g", "--servername", "FOO"]


class TestLocateBinary:
    def test_app_dir_override(self, tmp_path: Path) -> None:
        binary = _make_executable(tmp_path / "apps" / "MacVim.app" / "Contents" / "MacOS" / "Vim")
        settings = Settings(app_dir=tmp_path / "apps")
        assert launcher.locate_binary(settings, tmp_path / "mvim") == binary

    def test_app_dir_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        binary = _make_executable(tmp_path / "MacVim.app" / "Contents" / "MacOS" / "Vim")
        monkeypatch.setenv("VIM_APP_DIR", str(tmp_path))
        assert launcher.locate_binary(Settings(), tmp_path / "mvim") == binary

    def test_bundle_binary_not_executable(self, tmp_path: Path) -> None:
        _make_executable(tmp_path / "MacVim.app" / "Contents" / "MacOS" / "Vim", mode=0o644)
        with pytest.raises(BinaryNotExecutableError):
            launcher.locate_binary(Settings(app_dir=tmp_path), tmp_path / "mvim")

    def test_falls_back_to_plain_binary_on_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "empty").mkdir()
        plain = _make_executable(tmp_path / "bin" / "vim")
        monkeypatch.setenv("PATH", str(tmp_path / "bin"))
        settings = Settings(app_dir=tmp_path / "empty")
        assert launcher.locate_binary(settings, tmp_path / "mvim") == plain

    def test_skips_own_script_on_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "empty").mkdir()
        script = _make_executable(tmp_path / "aliases" / "vim")
        real = _make_executable(tmp_path / "bin" / "vim")
        monkeypatch.setenv("PATH", f"{tmp_path / 'aliases'}{os.pathsep}{tmp_path / 'bin'}")
        settings = Settings(app_dir=tmp_path / "empty")
        assert launcher.locate_binary(settings, script) == real

    def test_incomplete_bundle_does_not_stop_the_search(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "broken" / "MacVim.app" / "Contents").mkdir(parents=True)
        binary = _make_executable(tmp_path / "good" / "MacVim.app" / "Contents" / "MacOS" / "Vim")
        monkeypatch.setattr(launcher, "candidate_dirs", lambda script_path: [tmp_path / "broken", tmp_path / "good"])
        assert launcher.locate_binary(Settings(), tmp_path / "mvim") == binary

    def test_incomplete_bundle_reports_searched_dirs(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "MacVim.app").mkdir()
        monkeypatch.setenv("PATH", str(tmp_path))
        settings = Settings(app_dir=tmp_path, fallback_binary="no-such-editor")
        with pytest.raises(BinaryNotFoundError) as exc_info:
            launcher.locate_binary(settings, tmp_path / "mvim")
        assert exc_info.value.searched == [tmp_path]

    def test_nothing_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATH", str(tmp_path))
        settings = Settings(app_dir=tmp_path, fallback_binary="no-such-editor")
        with pytest.raises(BinaryNotFoundError) as exc_info:
            launcher.locate_binary(settings, tmp_path / "mvim")
        assert exc_info.value.searched == [tmp_path]


def test_candidate_dirs_order() -> None:
    dirs = launcher.candidate_dirs(Path("/opt/bin/mvim"), home=Path("/home/u"))
    assert dirs[:4] == [
        Path("/home/u/Applications"),
        Path("/home/u/Applications/vim"),
        Path("/opt/bin"),
        Path("/opt/bin/vim"),
    ]
    assert dirs[-1] == Path("/Applications/Utilities/vim")
    assert len(dirs) == 10


class TestQueryServers:
    def test_parses_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[list[str]] = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd)
            return SimpleNamespace(returncode=0, stdout="VIM\nVIM1\n")

        monkeypatch.setattr(launcher.subprocess, "run", fake_run)
        directory = launcher.query_servers(BINARY, default_name="VIM")
        assert calls == [[str(BINARY), "--serverlist"]]
        assert directory.names == ("VIM", "VIM1")

    def test_failing_query_yields_no_servers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(cmd, **kwargs):
            raise subprocess.SubprocessError("boom")

        monkeypatch.setattr(launcher.subprocess, "run", fake_run)
        directory = launcher.query_servers(BINARY, default_name="GVIM")
        assert len(directory) == 0
        assert directory.resolve_target(None) == "GVIM"

    def test_non_zero_exit_yields_no_servers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            launcher.subprocess, "run", lambda cmd, **kwargs: SimpleNamespace(returncode=1, stdout="VIM\n")
        )
        assert len(launcher.query_servers(BINARY, default_name="VIM")) == 0


def test_exec_argv_replaces_process(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_execv(path, argv):
        captured["path"] = path
        captured["argv"] = argv

    monkeypatch.setattr(launcher.os, "execv", fake_execv)
    launcher.exec_argv([str(BINARY), "-g"])
    assert captured == {"path": str(BINARY), "argv": [str(BINARY), "-g"]}


def test_exec_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_execv(path, argv):
        raise PermissionError(path)

    monkeypatch.setattr(launcher.os, "execv", fake_execv)
    with pytest.raises(BinaryNotExecutableError) as exc_info:
        launcher.exec_argv([str(BINARY)])
    assert exc_info.value.path == BINARY
