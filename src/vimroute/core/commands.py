"""Argument classification."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from vimroute.core.flags import DEFAULT_TABLES, SERVERNAME_FLAG, FlagTables
from vimroute.core.types import ClassifiedArgs, Classification, UserManaged
from vimroute.errors import MalformedArgumentError


def classify_args(args: Sequence[str], tables: FlagTables = DEFAULT_TABLES) -> Classification:
    """Split raw arguments into forwardable flags, file operands and a server name.

    Returns ``UserManaged`` with the original arguments as soon as a
    remote/split/tab flag is seen. Unknown flags are dropped.
    """

    tokens = tuple(args)
    server_name: str | None = None
    flags: list[str] = []
    files: list[str] = []
    idx = 0
    while idx < len(tokens):
        token = tokens[idx]

        if token.startswith(f"{SERVERNAME_FLAG}="):
            server_name = token.split("=", 1)[1]
            idx += 1
            continue

        if token == SERVERNAME_FLAG:
            server_name = _value_after(tokens, idx)
            idx += 2
            continue

        if tables.is_user_managed(token):
            logger.debug("classify.user_managed token={}", token)
            return UserManaged(args=tokens)

        if token in tables.zero_arg:
            flags.append(token)
            idx += 1
            continue

        if token in tables.one_arg:
            flags.extend((token, _value_after(tokens, idx)))
            idx += 2
            continue

        if token.startswith("-"):
            logger.debug("classify.drop token={}", token)
            idx += 1
            continue

        files.append(token)
        idx += 1

    return ClassifiedArgs(server_name=server_name, flags=tuple(flags), files=tuple(files))


def _value_after(tokens: tuple[str, ...], idx: int) -> str:
    if idx + 1 >= len(tokens):
        raise MalformedArgumentError(tokens[idx])
    return tokens[idx + 1]
