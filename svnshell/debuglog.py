"""Append-only diagnostic log used when tracing the shell."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping

DEFAULT_LOG_PATH = "/tmp/svn.log"


class DebugLog:
    """Write diagnostic records to a log file, echoing most of them to stdout."""

    def __init__(self, path: str = DEFAULT_LOG_PATH) -> None:
        self.path = path

    def _append(self, text: str) -> None:
        with open(self.path, "a", encoding="utf-8", errors="surrogateescape") as fh:
            fh.write(text)

    def log_env(self, environ: Mapping[str, str] | Iterable[str]) -> None:
        """Append every ``NAME=value`` entry, unseparated, then a newline."""
        if isinstance(environ, Mapping):
            entries = [f"{key}={value}" for key, value in environ.items()]
        else:
            entries = list(environ)
        self._append("".join(entries) + "\n")

    def log_int(self, value: int) -> None:
        """Print *value* and append it followed by a blank line."""
        record = f"{int(value)}\n"
        sys.stdout.write(record)
        self._append(record + "\n")

    def log_value(self, name: str, value: str) -> None:
        """Print and append ``name: <<value>>`` followed by a blank line."""
        record = f"{name}: <<{value}>>\n"
        sys.stdout.write(record)
        self._append(record + "\n")

    def log_list(self, items: Iterable[str]) -> None:
        """Print and append each item with its index, then a blank line."""
        records = [f"{index}: <<{item}>>\n" for index, item in enumerate(items)]
        for record in records:
            sys.stdout.write(record)
        self._append("".join(records) + "\n")