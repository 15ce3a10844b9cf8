"""systemd-lsp package root."""

from systemd_lsp.analysis import completions_at, diagnose, hover_at, section_at
from systemd_lsp.exceptions import UnitParseError
from systemd_lsp.unit_parser import UnitFile, parse_unit_file

__all__ = [
    "__version__",
    "UnitFile",
    "UnitParseError",
    "completions_at",
    "diagnose",
    "hover_at",
    "parse_unit_file",
    "section_at",
]

__version__ = "0.1.0"
