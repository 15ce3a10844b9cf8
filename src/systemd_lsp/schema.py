from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, field_validator

from systemd_lsp.analysis.model import Finding


class ServerSettings(BaseModel):
    log_level: str = "INFO"
    log_file: Optional[str] = None
    diagnostics_enabled: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class FindingDTO(BaseModel):
    path: str
    line: int
    col: int
    end_line: int
    end_col: int
    severity: str
    message: str
    source: str

    @classmethod
    def from_finding(cls, path: str, finding: Finding) -> "FindingDTO":
        return cls(
            path=path,
            line=finding.span.start.line + 1,
            col=finding.span.start.character + 1,
            end_line=finding.span.end.line + 1,
            end_col=finding.span.end.character + 1,
            severity=finding.severity.value,
            message=finding.message,
            source=finding.source,
        )


class CheckResponse(BaseModel):
    findings: List[FindingDTO] = []
    errors: List[str] = []
