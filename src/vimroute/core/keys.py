"""Key sequence construction for ``--remote-send``."""

from __future__ import annotations

FOREGROUND = "<C-\\><C-N>:call foreground()<CR>"
CARRIAGE_RETURN = "<CR>"
SPACE_PLACEHOLDER = "<Space>"
LESS_THAN = "<lt>"

# Characters the Ex command line expands or splits on, escaped as fnameescape() does.
EX_SPECIAL_CHARS = frozenset('\\%#|"*?[{`$!<')


def escape_path(path: str) -> str:
    """Make a path safe to embed as an Ex argument inside a key sequence.

    Ex-special characters get a backslash, ``<`` is spelled ``<lt>`` so it is
    not read as key notation, and spaces become ``<Space>``.
    """

    escaped: list[str] = []
    for char in path:
        if char in EX_SPECIAL_CHARS:
            escaped.append("\\")
        if char == "<":
            escaped.append(LESS_THAN)
        elif char == " ":
            escaped.append(SPACE_PLACEHOLDER)
        else:
            escaped.append(char)
    return "".join(escaped)


class KeySequence:
    """Builder over an explicit token list, serialised by ``render``."""

    def __init__(self) -> None:
        self._tokens: list[str] = []

    def foreground(self) -> KeySequence:
        self._tokens.append(FOREGROUND)
        return self

    def ex_command(self, verb: str, path: str) -> KeySequence:
        self._tokens.extend((f":{verb} {escape_path(path)}", CARRIAGE_RETURN))
        return self

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def render(self) -> str:
        return "".join(self._tokens)
