"""Recognised editor flag tables.

Only these flags are forwarded when routing to a server; any other token
starting with ``-`` is dropped. Extend by building a new ``FlagTables``.
"""

from __future__ import annotations

from dataclasses import dataclass

SERVERNAME_FLAG = "--servername"

# Flags that mean the caller is already driving remote/split/tab behaviour.
USER_MANAGED_PREFIXES: tuple[str, ...] = ("--remote", "-p", "-o", "-O")

ZERO_ARG_FLAGS: frozenset[str] = frozenset(
    {
        "-",
        "-A",
        "-b",
        "-C",
        "-d",
        "-D",
        "-e",
        "-E",
        "-f",
        "-F",
        "-g",
        "-h",
        "-H",
        "-l",
        "-L",
        "-m",
        "-M",
        "-n",
        "-N",
        "-r",
        "-R",
        "-v",
        "-V",
        "-x",
        "-X",
        "-y",
        "-Z",
        "-iconic",
        "-reverse",
        "-rv",
        "+reverse",
        "+rv",
        "--clean",
        "--echo-wid",
        "--help",
        "--literal",
        "--nofork",
        "--noplugin",
        "--not-a-term",
        "--serverlist",
        "--ttyfail",
        "--version",
    }
)

ONE_ARG_FLAGS: frozenset[str] = frozenset(
    {
        "--cmd",
        "-c",
        "-i",
        "-q",
        "-s",
        "-S",
        "-t",
        "-T",
        "-u",
        "-U",
        "-w",
        "-W",
        "--startuptime",
        "-background",
        "-bg",
        "-boldfont",
        "-display",
        "-fg",
        "-font",
        "-fn",
        "-foreground",
        "-geom",
        "-geometry",
        "-italicfont",
        "-menufont",
        "-xrm",
        "--role",
        "--socketid",
    }
)


@dataclass(frozen=True)
class FlagTables:
    """Static tables the argument classifier consults."""

    zero_arg: frozenset[str] = ZERO_ARG_FLAGS
    one_arg: frozenset[str] = ONE_ARG_FLAGS
    user_managed_prefixes: tuple[str, ...] = USER_MANAGED_PREFIXES

    def is_user_managed(self, token: str) -> bool:
        return token.startswith(self.user_managed_prefixes)


DEFAULT_TABLES = FlagTables()
