"""Default svnserve options and root-directory handling."""

from __future__ import annotations

from collections.abc import Sequence

from svnshell.cmdline import split_cmdline

DEFAULT_OPTIONS_PATH = "/etc/default/svnserve"
ROOT_FLAGS = ("-r", "--root")

_SPACE = " \t\n\v\f\r"


def _lines(text: str):
    line: list[str] = []
    for c in text:
        if c in "\n\0":
            yield "".join(line)
            line = []
        else:
            line.append(c)
    yield "".join(line)


def parse_default_options(text: str) -> list[str]:
    """Return the arguments listed in an options file's *text*.

    Each non-empty line that is not a comment (``#`` after leading
    whitespace) is split into arguments; the results are concatenated.
    Raises :class:`CmdlineError` on a malformed line.
    """
    args: list[str] = []
    for line in _lines(text):
        if not line:
            continue
        line = line.lstrip(_SPACE)
        if line.startswith("#"):
            continue
        args.extend(split_cmdline(line))
    return args


def read_default_options(path: str = DEFAULT_OPTIONS_PATH) -> list[str]:
    """Read extra svnserve arguments from *path*.

    A missing or unreadable file yields no arguments.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as fh:
            text = fh.read()
    except OSError:
        return []
    return parse_default_options(text)


def add_default_root_directory(argv: Sequence[str], home: str | None) -> list[str]:
    """Return *argv* with ``-r home`` appended unless a root flag is present.

    When *home* is ``None`` only the ``-r`` flag is appended.
    """
    result = list(argv)
    if any(arg in ROOT_FLAGS for arg in result):
        return result
    result.append("-r")
    if home is not None:
        result.append(home)
    return result