"""
Registration window data models.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class RegistrationWindow:
    """
    One configured registration start date for a term.

    credit_threshold semantics (matches how schedules are stored):
        None -> unconditional window for the standing
        0    -> "below 100 credits" cohort (BELOW_SPLIT_SENTINEL)
        N>0  -> "N+ credits" cohort

    Example Spring schedule for seniors:
        RegistrationWindow("U4", 100, date(2025, 11, 3))   # 100+ credits
        RegistrationWindow("U4", 0, date(2025, 11, 10))    # < 100 credits
    """
    class_standing: str
    credit_threshold: Optional[int]
    registration_start_date: date

    @property
    def is_conditional(self) -> bool:
        return self.credit_threshold is not None

    @property
    def threshold_label(self) -> str:
        if self.credit_threshold is None:
            return "all"
        if self.credit_threshold == 0:
            return "< 100"
        return f"{self.credit_threshold}+"


@dataclass(frozen=True)
class WindowCheck:
    """
    Whether a student may register today.

    window is the resolved window (None when nothing applies, or when the
    term has no schedule configured at all).
    """
    allowed: bool
    reason: str = ""
    window: Optional[RegistrationWindow] = None


@dataclass(frozen=True)
class ScheduleGap:
    """A credit range for which a standing has no applicable window."""
    class_standing: str
    description: str
