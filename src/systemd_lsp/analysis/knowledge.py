"""Static systemd knowledge backing hover and completion."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from systemd_lsp.analysis.model import CompletionCandidate

SECTION_NAMES: tuple[str, ...] = (
    "Unit",
    "Service",
    "Install",
    "Socket",
    "Mount",
    "Timer",
)

VALID_SERVICE_TYPES: tuple[str, ...] = (
    "simple",
    "forking",
    "oneshot",
    "dbus",
    "notify",
    "idle",
)

SECTION_DOCS: Mapping[str, str] = MappingProxyType(
    {
        "Unit": (
            "The Unit section contains basic information about the unit, "
            "such as description and dependencies."
        ),
        "Service": (
            "The Service section contains service configuration, "
            "such as start commands and restart policies."
        ),
        "Install": (
            "The Install section contains installation information, "
            "such as which targets want this unit."
        ),
        "Socket": (
            "The Socket section contains socket configuration, "
            "such as listening addresses and ports."
        ),
        "Mount": "The Mount section contains mount point configuration.",
        "Timer": (
            "The Timer section contains timer configuration, "
            "used for scheduled service activation."
        ),
    }
)

KEY_DOCS: Mapping[str, str] = MappingProxyType(
    {
        "Description": "Describes the unit's function and purpose.",
        "After": "Defines start order, this unit will start after the specified units.",
        "Before": "Defines start order, this unit will start before the specified units.",
        "Requires": (
            "Strong dependency relationship, if the dependency fails, "
            "this unit will also fail."
        ),
        "Wants": "Weak dependency relationship, dependency failure won't affect this unit.",
        "ExecStart": (
            "Defines the command to execute when the service starts. "
            "Should use absolute paths."
        ),
        "ExecStop": "Defines the command to execute when the service stops.",
        "Type": (
            "Defines the service type, can be simple, forking, oneshot, "
            "dbus, notify, or idle."
        ),
        "Restart": "Defines the restart policy when the service exits.",
        "WantedBy": "Specifies which targets want this unit, used for enabling the unit.",
    }
)

_SECTION_DETAILS: Mapping[str, str] = MappingProxyType(
    {name: f"{name} configuration section" for name in SECTION_NAMES}
)

SECTION_CLOSERS: tuple[CompletionCandidate, ...] = tuple(
    CompletionCandidate(f"{name}]", _SECTION_DETAILS[name]) for name in SECTION_NAMES
)

SECTION_HEADERS: tuple[CompletionCandidate, ...] = tuple(
    CompletionCandidate(f"[{name}]", _SECTION_DETAILS[name]) for name in SECTION_NAMES
)


def _keys(*pairs: tuple[str, str]) -> tuple[CompletionCandidate, ...]:
    return tuple(CompletionCandidate(f"{key}=", detail) for key, detail in pairs)


# Mount has hover text but no key list; completion falls back to headers there.
SECTION_KEYS: Mapping[str, tuple[CompletionCandidate, ...]] = MappingProxyType(
    {
        "Unit": _keys(
            ("Description", "Unit description"),
            ("Documentation", "Documentation URL"),
            ("Requires", "Strong dependencies"),
            ("Wants", "Weak dependencies"),
            ("After", "Start order dependency"),
            ("Before", "Start order dependency"),
            ("Conflicts", "Conflicting units"),
        ),
        "Service": _keys(
            ("Type", "Service type"),
            ("ExecStart", "Start command"),
            ("ExecStop", "Stop command"),
            ("Restart", "Restart policy"),
            ("RestartSec", "Restart interval"),
            ("User", "Run as user"),
            ("Group", "Run as group"),
            ("WorkingDirectory", "Working directory"),
        ),
        "Install": _keys(
            ("WantedBy", "Wanted by targets"),
            ("RequiredBy", "Required by targets"),
            ("Alias", "Unit alias"),
        ),
        "Socket": _keys(
            ("ListenStream", "Listen on TCP port"),
            ("ListenDatagram", "Listen on UDP port"),
            ("Accept", "Accept connections"),
        ),
        "Timer": _keys(
            ("OnBootSec", "Delay after boot"),
            ("OnUnitActiveSec", "Delay after unit activation"),
            ("OnCalendar", "Calendar-based trigger"),
        ),
    }
)
