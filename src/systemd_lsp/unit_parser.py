"""Well-formedness parser for systemd unit files.

This wraps :mod:`configparser` with the dialect systemd uses: ``=`` is the
only delimiter, ``#`` and ``;`` start comment lines, ``%`` specifiers are left
alone, key case is preserved, and sections or keys may repeat. A bare word
with no ``=`` is accepted as a key without a value, so a half-typed key does
not fail the whole document. A line that opens a header with ``[`` but never
closes it is always an error.
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass

from systemd_lsp.exceptions import UnitParseError

TOP_LEVEL_SECTION = "<top-level>"
_DEFAULTS_SECTION = "<systemd-lsp-defaults>"
_SOURCE_NAME = "<unit>"


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        strict=False,
        interpolation=None,
        allow_no_value=True,
        empty_lines_in_values=False,
        default_section=_DEFAULTS_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def _source_lines(text: str) -> list[str]:
    return [line.rstrip("\r") for line in text.split("\n")]


def _check_headers(lines: list[str]) -> None:
    """Reject ``[`` lines with no closing ``]``.

    configparser would otherwise read ``[Unit=foo`` as a key named ``[Unit``.
    """
    unterminated = [
        f"line {index + 1}: unterminated section header {line!r}"
        for index, line in enumerate(lines)
        if line.strip().startswith("[") and "]" not in line
    ]
    if unterminated:
        raise UnitParseError("; ".join(unterminated))


def _describe_parsing_error(exc: configparser.ParsingError, lines: list[str]) -> str:
    # configparser counts the synthetic top-level header as line 1.
    linenos = [lineno for lineno, _line in getattr(exc, "errors", ())]
    details = [
        f"line {lineno - 1}: {lines[lineno - 2]!r}"
        for lineno in linenos
        if 0 <= lineno - 2 < len(lines)
    ]
    return "; ".join(details) or str(exc)


@dataclass(frozen=True)
class UnitFile:
    """Parsed section -> key -> value lookups."""

    _parser: configparser.ConfigParser

    def sections(self) -> list[str]:
        names = self._parser.sections()
        if not self._parser.options(TOP_LEVEL_SECTION):
            names.remove(TOP_LEVEL_SECTION)
        return names

    def get(self, section: str, key: str) -> str | None:
        """Value of ``key``; None when it is missing or written without ``=``."""
        return self._parser.get(section, key, raw=True, fallback=None)

    def has_key(self, section: str, key: str) -> bool:
        return self._parser.has_option(section, key)


def parse_unit_file(text: str) -> UnitFile:
    """Parse ``text`` or raise :class:`UnitParseError`.

    Entries before the first header land in :data:`TOP_LEVEL_SECTION`.
    """
    lines = _source_lines(text)
    _check_headers(lines)
    # systemd ignores indentation; stripping also keeps configparser from
    # treating indented lines as continuations of the previous value.
    body = "\n".join(line.strip() for line in lines)
    parser = _new_parser()
    try:
        parser.read_string(f"[{TOP_LEVEL_SECTION}]\n{body}", source=_SOURCE_NAME)
    except configparser.ParsingError as exc:
        raise UnitParseError(_describe_parsing_error(exc, lines)) from exc
    except configparser.Error as exc:
        raise UnitParseError(str(exc)) from exc
    return UnitFile(parser)
