"""Exception types raised inside systemd-lsp."""

from __future__ import annotations


class UnitParseError(ValueError):
    """A unit file failed the well-formedness check.

    The message carries the underlying parser's detail, including the line
    where parsing stopped.
    """
