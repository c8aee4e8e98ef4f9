"""
Registration Window Resolution Engine.

This module decides which configured registration start date applies to a
student, and whether that window is open on a given day.
"""

import logging
from datetime import date
from typing import Optional

from ..config import (
    BELOW_SPLIT_SENTINEL,
    CLASS_STANDING_CUTOFFS,
    SENIOR_CREDIT_SPLIT,
    STANDING_PRIORITY,
    compute_class_standing,
)
from ..models import RegistrationWindow, WindowCheck, ScheduleGap

logger = logging.getLogger(__name__)


def _priority(standing: str) -> int:
    try:
        return STANDING_PRIORITY.index(standing)
    except ValueError:
        return len(STANDING_PRIORITY)


def order_windows(windows: list) -> list:
    """
    Sort windows the way a term schedule is evaluated.

    Standing priority first (U4, U3, U2, U1), then within a standing the
    thresholded windows from highest threshold down, and the unconditional
    window last.
    """
    def key(w):
        threshold = -1 if w.credit_threshold is None else w.credit_threshold
        return (_priority(w.class_standing), -threshold)
    return sorted(windows, key=key)


class RegistrationWindowResolver:
    """
    Resolves a student's registration window for one term.

    THRESHOLD RULES:
    ----------------
    Within the student's standing, windows are tried most specific first:
    - threshold N > 0  -> applies when earned credits >= N   ("100+")
    - threshold 0      -> applies when earned credits < 100  ("< 100")
    - no threshold     -> always applies; used only if no thresholded
                          window matched

    A standing with no applicable window resolves to None. That is a gap in
    the schedule configuration, not an error - see `gaps()`.
    """

    def __init__(self, credit_split: int = SENIOR_CREDIT_SPLIT):
        self.credit_split = credit_split

    def threshold_holds(self, window: RegistrationWindow, earned_credits) -> bool:
        threshold = window.credit_threshold
        if threshold is None:
            return True
        if threshold == BELOW_SPLIT_SENTINEL:
            return earned_credits < self.credit_split
        return earned_credits >= threshold

    def resolve(self, windows: list, class_standing: str,
                earned_credits) -> Optional[RegistrationWindow]:
        standing = (class_standing or "").strip().upper()
        candidates = [w for w in order_windows(windows) if w.class_standing == standing]
        if not candidates:
            return None

        for window in candidates:
            if window.is_conditional and self.threshold_holds(window, earned_credits):
                return window
        for window in candidates:
            if not window.is_conditional:
                return window
        return None

    def resolve_for_credits(self, windows: list, earned_credits) -> Optional[RegistrationWindow]:
        """Resolve using the standing implied by earned credits."""
        return self.resolve(windows, compute_class_standing(earned_credits), earned_credits)

    def check(self, windows: list, class_standing: str, earned_credits,
              today: date, late_registration_ends: Optional[date] = None) -> WindowCheck:
        """
        Is registration open for this student today?

        A term with no schedule rows at all is open to everyone; the
        registrar has simply not staggered that term.
        """
        if not windows:
            return WindowCheck(allowed=True)

        window = self.resolve(windows, class_standing, earned_credits)
        if window is None:
            logger.debug("No window for standing %s with %s credits", class_standing, earned_credits)
            return WindowCheck(False, "No registration window found for your class standing")

        start = window.registration_start_date
        if today < start:
            return WindowCheck(False, f"Registration opens on {start:%m/%d/%Y}", window)
        if late_registration_ends is not None and today > late_registration_ends:
            return WindowCheck(False, "Registration period has ended", window)
        return WindowCheck(True, "", window)

    def gaps(self, windows: list) -> list:
        """
        Find standings (and credit counts) that would resolve to no window.

        Probes each standing's natural credit range at every boundary the
        schedule defines.
        """
        found = []
        for index, (standing, lower) in enumerate(CLASS_STANDING_CUTOFFS):
            upper = CLASS_STANDING_CUTOFFS[index - 1][1] - 1 if index > 0 else None
            own = [w for w in windows if w.class_standing == standing]
            if not own:
                found.append(ScheduleGap(standing, "no window configured"))
                continue

            samples = {lower, self.credit_split - 1, self.credit_split}
            for w in own:
                if w.credit_threshold:
                    samples.update({w.credit_threshold - 1, w.credit_threshold})
            samples.add(upper if upper is not None else lower + 200)

            for credits in sorted(samples):
                if credits < lower or (upper is not None and credits > upper):
                    continue
                if self.resolve(windows, standing, credits) is None:
                    found.append(ScheduleGap(standing, f"no window for {credits} credits"))
                    break
        return found
