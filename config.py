"""
Due-date policy + global settings.
"""
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

# ---- Due-date policy: single source of truth ----
DUE_IN_DAYS = 30


@dataclass(frozen=True)
class Clock:
    """Current-date provider. Pin ``fixed`` to freeze "today"."""
    fixed: date | None = None

    def today(self) -> date:
        return self.fixed if self.fixed is not None else date.today()


@dataclass
class Settings:
    clock: Clock = field(default_factory=Clock)
    output_root: Path | None = None
