"""Restricted login shell allowing only svnserve tunnels and whitelisted commands."""

__version__ = "0.1.0"
__all__ = ["cmdline", "options", "debuglog", "shell"]