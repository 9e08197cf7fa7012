from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LEVELS: dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload; sinks decide rendering and filtering.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"LogMessage level must be one of {sorted(LEVELS)}")
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")

    def enabled_for(self, min_level: str) -> bool:
        return LEVELS[self.level] >= LEVELS[min_level]


def log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.astimezone(UTC).isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
