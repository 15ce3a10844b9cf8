"""Text analysis for systemd unit files."""

from .completion import completions_at
from .diagnostics import diagnose
from .hover import hover_at
from .model import (
    CompletionCandidate,
    Finding,
    HoverContent,
    Position,
    Severity,
    Span,
)
from .scanner import section_at

__all__ = [
    "CompletionCandidate",
    "Finding",
    "HoverContent",
    "Position",
    "Severity",
    "Span",
    "completions_at",
    "diagnose",
    "hover_at",
    "section_at",
]
