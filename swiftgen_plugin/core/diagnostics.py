"""
Diagnostics: messages the plugin reports back to the host.

A warning does not fail the build. The host decides how to render
each diagnostic; every entry is also mirrored to the process log.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

logger = logging.getLogger(__name__)

Severity = Literal["error", "warning", "remark"]

LOG_LEVELS: dict[str, int] = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "remark": logging.INFO,
}


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str

    def to_dict(self) -> dict:
        return {"severity": self.severity, "message": self.message}


@dataclass
class Diagnostics:
    """Collects diagnostics for one planning call."""

    entries: list[Diagnostic] = field(default_factory=list)

    def emit(self, severity: Severity, message: str) -> None:
        self.entries.append(Diagnostic(severity=severity, message=message))
        logger.log(LOG_LEVELS[severity], message)

    def error(self, message: str) -> None:
        self.emit("error", message)

    def warning(self, message: str) -> None:
        self.emit("warning", message)

    def remark(self, message: str) -> None:
        self.emit("remark", message)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.severity == "warning"]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.severity == "error"]

    def __len__(self) -> int:
        return len(self.entries)
