"""Invocation mode resolution from the program name."""

from __future__ import annotations

from vimroute.core.types import InvocationMode, OpenWith

GUI_PREFIXES = ("m", "g", "rm", "rg")
RESTRICTED_PREFIX = "r"
# First match wins; a matching mode suffix disables the open-with suffixes.
MODE_SUFFIXES = ("vimdiff", "view", "ex")
OPEN_WITH_SUFFIXES: dict[str, OpenWith] = {
    "s": OpenWith.SPLIT,
    "t": OpenWith.TABEDIT,
    "v": OpenWith.VSPLIT,
}


def resolve_mode(invoked_name: str) -> InvocationMode:
    """Derive the invocation mode from the base name the router runs as.

    Multiple fields can be set from one name, e.g. ``rgview`` is a restricted
    read-only GUI invocation. Unknown names resolve to the defaults.
    """

    mode_suffix = next((suffix for suffix in MODE_SUFFIXES if invoked_name.endswith(suffix)), None)
    open_with = OpenWith.EDIT
    if mode_suffix is None and invoked_name:
        open_with = OPEN_WITH_SUFFIXES.get(invoked_name[-1], OpenWith.EDIT)

    return InvocationMode(
        gui=invoked_name.startswith(GUI_PREFIXES),
        restricted=invoked_name.startswith(RESTRICTED_PREFIX),
        diff_mode=mode_suffix == "vimdiff",
        view_mode=mode_suffix == "view",
        ex_mode=mode_suffix == "ex",
        open_with=open_with,
    )
