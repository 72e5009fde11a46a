"""Split a command line into arguments using shell-like quoting rules."""

from __future__ import annotations

_SPACE = frozenset(" \t\n\v\f\r")
_QUOTES = frozenset("'\"")


class CmdlineError(ValueError):
    """Raised when a command line cannot be split into arguments."""

    BAD_ENDING = "cmdline ends with \\"
    UNCLOSED_QUOTE = "unclosed quote"


def split_cmdline(cmdline: str) -> list[str]:
    """Split *cmdline* into a list of arguments.

    Unquoted whitespace separates arguments; single and double quotes group
    text, and a backslash outside single quotes escapes the next character.
    Leading whitespace yields an empty first argument, and an empty final
    argument is dropped.
    """
    args: list[str] = []
    current: list[str] = []
    quoted = ""
    chars = iter(enumerate(cmdline))
    length = len(cmdline)
    pending_space_skip = False

    for pos, c in chars:
        if pending_space_skip:
            if c in _SPACE:
                continue
            pending_space_skip = False
        if not quoted and c in _SPACE:
            args.append("".join(current))
            current = []
            pending_space_skip = True
        elif not quoted and c in _QUOTES:
            quoted = c
        elif quoted and c == quoted:
            quoted = ""
        else:
            if c == "\\" and quoted != "'":
                if pos + 1 >= length:
                    raise CmdlineError(CmdlineError.BAD_ENDING)
                _, c = next(chars)
            current.append(c)

    if quoted:
        raise CmdlineError(CmdlineError.UNCLOSED_QUOTE)

    last = "".join(current)
    if last:
        args.append(last)
    return args