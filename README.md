# svnshell

A restricted login shell for accounts that should only reach Subversion
over SSH. Set it as the user's login shell and the only things the user
can run are:

* `svnserve -t ...` tunnels, started with the user's home directory as
  the repository root unless `/etc/default/svnserve` sets one;
* programs placed in `~/svn-shell-commands/`.

It needs a POSIX system: it replaces itself with the requested program
through `exec`.

## Installation

```
pip install .
```

This installs the `svn-shell` command. Point the account's login shell
at it, for example with `chsh -s "$(command -v svn-shell)" svnuser`.
It can also be started as `python -m svnshell.shell`.

## How it behaves

`svn-shell` with no arguments refuses an interactive session. It changes
to `$HOME` and requires `~/svn-shell-commands` to be readable and
searchable; otherwise it prints a hint and exits with status 1. If
`~/svn-shell-commands/no-interactive-login` is executable, it is run
under `/bin/sh`, so it can print a message to the user; if that cannot
be started the exit status is 127. Otherwise it exits with status 0.

`svn-shell -c "<command>"` is how SSH hands over the requested command:

* A command that starts with `svnserve`, a whitespace character and
  `-t` is split into arguments and run through the `PATH`. The client
  may not pass `-r` or `--root`; such a request is refused. Lines from
  `/etc/default/svnserve` are appended as extra options: blank lines and
  lines whose first non-blank character is `#` are ignored, the others
  are split like a command line. A missing or unreadable file adds
  nothing. If no `-r` or `--root` appears by then, the tunnel gets
  `-r $HOME` (just `-r` if `HOME` is unset). If `svnserve` cannot be
  started the exit status is 255.
* Any other command is looked up by its first word in
  `~/svn-shell-commands/` and run with the remaining words as arguments.
  Names holding `.` or `/` are rejected with `Unrecognized command`, as
  is a command that cannot be started.

Any other way of calling it exits with status 1 and
`Run with no arguments or with -c cmd`. Every refusal is printed on
standard error.

Command lines are split the way a small shell would: whitespace separates
arguments, single quotes take their contents literally, double quotes
allow backslash escapes, and a backslash outside single quotes escapes
the next character. A trailing backslash (`cmdline ends with \`) or an
unclosed quote (`unclosed quote`) is an error, reported as
`Invalid command format '<command>': <reason>`.

## Using it as a library

```python
from svnshell.cmdline import split_cmdline, CmdlineError
from svnshell.options import parse_default_options, add_default_root_directory

split_cmdline("svnserve -t --log-file '/var/log/svn log'")
# ['svnserve', '-t', '--log-file', '/var/log/svn log']

args = split_cmdline("svnserve -t")
args += parse_default_options("# options\n--read-only\n")
add_default_root_directory(args, "/home/svnuser")
# ['svnserve', '-t', '--read-only', '-r', '/home/svnuser']
```

`svnshell.options.read_default_options(path)` reads and parses an options
file, returning an empty list when it cannot be read.

`svnshell.shell.build_svnserve_argv(command, defaults_path, home)` and
`svnshell.shell.resolve_command(command)` build the argument lists without
running anything; the first returns `None` for a command that is not an
`svnserve -t` request. Both raise `svnshell.shell.ShellError` when a
request is refused. `svnshell.shell.main(argv)` runs the shell with the
given arguments (program name excluded) and returns the exit status.

For troubleshooting, `svnshell.debuglog.DebugLog(path)` appends records to
a log file (`/tmp/svn.log` by default): `log_value(name, value)`,
`log_int(value)` and `log_list(items)` also echo their records to standard
output, while `log_env(environ)` only writes the environment entries to
the file.

## Tests

```
pip install .[test]
pytest
```