"""
Time-Conflict Waiver Approval Engine.

This module drives the three-party approval workflow for time-conflict
waivers.
"""

import logging
from dataclasses import replace

from ..models import (
    ApprovalEvent,
    ApprovalParty,
    DenialPolicy,
    TimeConflictWaiver,
    WaiverClosedError,
    WaiverState,
)

logger = logging.getLogger(__name__)


def coerce_party(party) -> ApprovalParty:
    """Accept an ApprovalParty or its string value ("instructor_1", ...)."""
    if isinstance(party, ApprovalParty):
        return party
    try:
        return ApprovalParty(str(party).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown approval party: {party!r}") from None


class WaiverApprovalStateMachine:
    """
    Applies approve/deny decisions to a waiver.

    STATES:
    -------
        PENDING --approve x3--> FULLY_APPROVED
           |                         |
           +-------- deny -----------+--> DENIED

    - approve(party): sets that party's flag. Re-approving is a no-op.
    - deny(party): clears that party's flag and records the denial. This
      also pulls a fully approved waiver back out of FULLY_APPROVED.

    What happens AFTER a denial depends on the DenialPolicy:
    - FINAL: the waiver is closed; further decisions are ignored (or raise
      WaiverClosedError when strict=True)
    - RESUBMITTABLE: the denying party may approve later, which reopens
      the waiver

    The state itself is never stored. It is read off the flags and the
    recorded denial every time (TimeConflictWaiver.state), so the two can
    not drift apart. Every decision returns a NEW waiver.

    Persisting the result is the caller's job, and the caller must
    serialize writes per waiver row - two approvals computed from the same
    snapshot would otherwise overwrite each other.
    """

    def __init__(self, policy: DenialPolicy = DenialPolicy.FINAL, strict: bool = False):
        self.policy = policy
        self.strict = strict

    def state(self, waiver: TimeConflictWaiver) -> WaiverState:
        return waiver.state

    def approve(self, waiver: TimeConflictWaiver, party) -> TimeConflictWaiver:
        party = coerce_party(party)

        if waiver.state is WaiverState.DENIED and self.policy is DenialPolicy.FINAL:
            return self._closed(waiver, f"approve by {party.value}")

        if waiver.flag(party) and waiver.denied_by is None:
            return waiver

        denied_by = waiver.denied_by
        if denied_by is party:
            denied_by = None

        updated = replace(waiver, denied_by=denied_by, **{f"{party.value}_approved": True})
        if updated.state is WaiverState.FULLY_APPROVED:
            logger.info("Waiver %s fully approved", waiver.waiver_id)
        else:
            logger.info("Waiver %s approved by %s", waiver.waiver_id, party.value)
        return updated

    def deny(self, waiver: TimeConflictWaiver, party) -> TimeConflictWaiver:
        party = coerce_party(party)

        if waiver.state is WaiverState.DENIED and self.policy is DenialPolicy.FINAL:
            return self._closed(waiver, f"deny by {party.value}")

        logger.info("Waiver %s denied by %s", waiver.waiver_id, party.value)
        return replace(waiver, denied_by=party, **{f"{party.value}_approved": False})

    def apply(self, waiver: TimeConflictWaiver, event: ApprovalEvent) -> TimeConflictWaiver:
        if event.approved:
            return self.approve(waiver, event.party)
        return self.deny(waiver, event.party)

    def apply_all(self, waiver: TimeConflictWaiver, events: list) -> TimeConflictWaiver:
        for event in events:
            waiver = self.apply(waiver, event)
        return waiver

    def _closed(self, waiver: TimeConflictWaiver, action: str) -> TimeConflictWaiver:
        if self.strict:
            raise WaiverClosedError(
                f"Waiver {waiver.waiver_id} was denied by {waiver.denied_by.value}; "
                f"cannot apply {action}"
            )
        logger.info("Ignoring %s on closed waiver %s", action, waiver.waiver_id)
        return waiver
