"""Single-quote escaping for shell re-parsing."""

from __future__ import annotations

from collections.abc import Sequence


def escape_single_quotes(token: str) -> str:
    """Escape ``'`` so that ``'<result>'`` re-parses to ``token`` in a POSIX shell."""

    return token.replace("'", "'\\''")


def quote_token(token: str) -> str:
    return f"'{escape_single_quotes(token)}'"


def render_command_line(argv: Sequence[str]) -> str:
    """Render argv as a single-quoted shell line."""

    return " ".join(quote_token(token) for token in argv)
