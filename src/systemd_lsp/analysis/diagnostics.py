"""Rule-based diagnostics for unit files.

A pass has two independent stages. The document is first run through the
well-formedness parser; a failure becomes a single error pinned to the first
character. Line-local rules then run over every entry line whether or not
the parse succeeded, so a half-typed header elsewhere in the file does not
hide an empty value or a bad ``Type=``.
"""

from __future__ import annotations

import logging

from systemd_lsp.analysis.knowledge import VALID_SERVICE_TYPES
from systemd_lsp.analysis.model import Finding, Severity, Span
from systemd_lsp.analysis.scanner import iter_entry_lines, utf16_length
from systemd_lsp.exceptions import UnitParseError
from systemd_lsp.unit_parser import parse_unit_file

logger = logging.getLogger(__name__)

_DOCUMENT_SPAN = Span.on_line(0, 0, 1)


def syntax_findings(text: str) -> list[Finding]:
    try:
        parse_unit_file(text)
    except UnitParseError as exc:
        return [
            Finding(
                severity=Severity.ERROR,
                span=_DOCUMENT_SPAN,
                message=f"Systemd unit file syntax error: {exc}",
            )
        ]
    return []


def _format_types(types: tuple[str, ...]) -> str:
    return "[" + ", ".join(f'"{name}"' for name in types) + "]"


def _entry_findings(key: str, value: str, span: Span) -> list[Finding]:
    findings: list[Finding] = []
    if not value:
        findings.append(
            Finding(
                severity=Severity.WARNING,
                span=span,
                message=f"Key '{key}' has an empty value",
            )
        )
    if key == "ExecStart":
        if not value.startswith("/") and not value.startswith("-"):
            findings.append(
                Finding(
                    severity=Severity.WARNING,
                    span=span,
                    message="ExecStart should use absolute paths",
                )
            )
    elif key == "Type":
        if value not in VALID_SERVICE_TYPES:
            findings.append(
                Finding(
                    severity=Severity.ERROR,
                    span=span,
                    message=(
                        f"Invalid service type: '{value}'. "
                        f"Valid types: {_format_types(VALID_SERVICE_TYPES)}"
                    ),
                )
            )
    return findings


def rule_findings(text: str) -> list[Finding]:
    findings: list[Finding] = []
    for index, line, key, value in iter_entry_lines(text):
        span = Span.on_line(index, 0, utf16_length(line))
        findings.extend(_entry_findings(key, value, span))
    return findings


def diagnose(text: str) -> list[Finding]:
    findings = syntax_findings(text) + rule_findings(text)
    logger.debug("diagnose: %d finding(s)", len(findings))
    return findings
