"""Restricted login shell that only runs svnserve or whitelisted commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from svnshell.cmdline import CmdlineError, split_cmdline
from svnshell.options import (
    DEFAULT_OPTIONS_PATH,
    ROOT_FLAGS,
    add_default_root_directory,
    read_default_options,
)

COMMAND_DIR = "svn-shell-commands"
NOLOGIN_COMMAND = COMMAND_DIR + "/no-interactive-login"

_SPACE = " \t\n\v\f\r"


class ShellError(Exception):
    """A condition that makes the shell refuse to run and exit with status 1."""


def _invalid_format(command: str, err: CmdlineError) -> ShellError:
    return ShellError(f"Invalid command format '{command}': {err}")


def is_valid_cmd_name(cmd: str) -> bool:
    """Return whether *cmd* contains neither ``.`` nor ``/``."""
    return "." not in cmd and "/" not in cmd


def make_cmd(program: str) -> str:
    """Return the path of *program* inside the command directory."""
    return f"{COMMAND_DIR}/{program}"


def cd_to_homedir() -> None:
    """Change to the user's home directory."""
    home = os.environ.get("HOME")
    if home is None:
        raise ShellError("could not determine user's home directory; HOME is unset")
    try:
        os.chdir(home)
    except OSError as exc:
        raise ShellError("could not chdir to user's home directory") from exc


def run_shell() -> int:
    """Run the no-login command if it is executable; return the exit status."""
    if not os.access(NOLOGIN_COMMAND, os.X_OK):
        return 0
    try:
        os.execv("/bin/sh", ["/bin/sh", NOLOGIN_COMMAND])
    except OSError:
        return 127
    return 0


def build_svnserve_argv(
    command: str,
    defaults_path: str = DEFAULT_OPTIONS_PATH,
    home: str | None = None,
) -> list[str] | None:
    """Return the argument list for an ``svnserve -t`` request.

    Returns ``None`` when *command* is not such a request. A root directory
    given by the user is refused; options from *defaults_path* are appended,
    then ``-r home`` unless a root is already set.
    """
    if not (
        command.startswith("svnserve")
        and len(command) > 9
        and command[8] in _SPACE
        and command[9:11] == "-t"
    ):
        return None
    try:
        argv = split_cmdline(command)
    except CmdlineError as err:
        raise _invalid_format(command, err) from err

    for pos, arg in enumerate(argv):
        if arg in ROOT_FLAGS:
            if pos + 1 < len(argv):
                raise ShellError(
                    f"Root directory argument {argv[pos + 1]} with {arg} cmd not allowed"
                )
            raise ShellError(f"Root directory {arg} cmd not allowed")

    try:
        argv.extend(read_default_options(defaults_path))
    except CmdlineError as err:
        raise _invalid_format(command, err) from err
    return add_default_root_directory(argv, home)


def resolve_command(command: str) -> list[str]:
    """Return the argument list for a command in the command directory."""
    try:
        argv = split_cmdline(command)
    except CmdlineError as err:
        raise _invalid_format(command, err) from err
    if not argv or not is_valid_cmd_name(argv[0]):
        raise ShellError(f"Unrecognized command '{command}'")
    return [make_cmd(argv[0]), *argv[1:]]


def _interactive() -> int:
    cd_to_homedir()
    if not os.access(COMMAND_DIR, os.R_OK | os.X_OK):
        raise ShellError(
            "Interactive svn shell is not avaliable.\n"
            f"hint: ~/{COMMAND_DIR} should exist and have read and execute access."
        )
    return run_shell()


def _run(args: Sequence[str]) -> int:
    if not args:
        return _interactive()
    if len(args) != 2 or args[0] != "-c":
        raise ShellError("Run with no arguments or with -c cmd")

    command = args[1]
    svn_argv = build_svnserve_argv(command, DEFAULT_OPTIONS_PATH, os.environ.get("HOME"))
    if svn_argv is not None:
        try:
            os.execvp(svn_argv[0], svn_argv)
        except OSError:
            pass
        return 255

    cd_to_homedir()
    user_argv = resolve_command(command)
    try:
        os.execv(user_argv[0], user_argv)
    except OSError:
        pass
    raise ShellError(f"Unrecognized command '{command}'")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; *argv* excludes the program name. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _run(args)
    except ShellError as err:
        print(err, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())