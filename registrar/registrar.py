"""
Registrar - Main Orchestrator.

This module contains the Registrar class that connects the engine layer
to the presentation layer. It is the only place that calls more than one
engine; the engines themselves never call each other.
"""

import logging
from datetime import date
from typing import Optional

from .config import MINIMUM_GRADUATION_CREDITS, compute_class_standing
from .data import (
    DataLoader,
    TranscriptParser,
    parse_program_row,
    parse_window_row,
    parse_waiver_row,
)
from .engines import (
    GradeScale,
    GradeClassifier,
    TranscriptAggregator,
    RequirementCategoryTracker,
    DegreeRequirementMatcher,
    MatchPolicy,
    RegistrationWindowResolver,
    WaiverApprovalStateMachine,
)
from .models import DenialPolicy, TimeConflictWaiver, WindowCheck
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class Registrar:
    """
    Main interface for the registrar engine.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Receives already-fetched rows (transcript, programs, windows, waivers)
    2. Parses them once and hands them to each engine
    3. Assembles the engine results into one report (pure data)
    4. Optionally passes the report to the presentation layer

    The `*_report` / `*_status` methods never print. The `run_*` methods load
    exported files through DataLoader and display through TerminalDisplay.

    USAGE:
        registrar = Registrar()
        report = registrar.progress_report(enrollment_rows, program_rows)
        report["transcript"].gpa            # Decimal("3.412") or None
        report["programs"][0].completed_count
    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self, loader: Optional[DataLoader] = None,
                 scale: Optional[GradeScale] = None,
                 match_policy: MatchPolicy = MatchPolicy.LAST_PASSING,
                 denial_policy: DenialPolicy = DenialPolicy.FINAL):
        self.loader = loader or DataLoader()
        self.parser = TranscriptParser()

        # One classifier shared by every engine so they agree on every mark
        self.classifier = GradeClassifier(scale)
        self.aggregator = TranscriptAggregator(self.classifier)
        self.sbc_tracker = RequirementCategoryTracker(self.classifier)
        self.degree_matcher = DegreeRequirementMatcher(self.classifier, match_policy)
        self.window_resolver = RegistrationWindowResolver()
        self.waiver_machine = WaiverApprovalStateMachine(denial_policy)

        self.display = TerminalDisplay()

    # =========================================================================
    # PURE REPORTS
    # =========================================================================

    def progress_report(self, enrollment_rows: list, program_rows: Optional[list] = None,
                        category_codes: Optional[list] = None) -> dict:
        """
        Build a full academic progress report.

        Returns:
            {
                "transcript": TranscriptSummary,
                "class_standing": "U3",
                "sbc_categories": [RequirementCategory, ...],
                "missing_sbc": ["LANG", ...],
                "programs": [ProgramRequirementStatus | {"program": ..., "error": ...}],
                "minimum_credits": 120,
                "credits_remaining": Decimal,
            }
        """
        records = self.parser.parse(enrollment_rows)
        transcript = self.aggregator.aggregate(records)
        categories = self.sbc_tracker.summarize(records, category_codes)

        programs = []
        for row in program_rows or []:
            parsed = parse_program_row(row)
            if parsed is None:
                continue
            meta, document = parsed
            status = self.degree_matcher.match(document, records, meta)
            if status is None:
                programs.append({
                    "program": meta.display_name,
                    "error": "Degree requirements not found for this program",
                })
            else:
                programs.append(status)

        completed = transcript.total_credits_completed
        return {
            "transcript": transcript,
            "class_standing": compute_class_standing(completed),
            "sbc_categories": categories,
            "missing_sbc": [c.code for c in categories if not c.completed],
            "programs": programs,
            "minimum_credits": MINIMUM_GRADUATION_CREDITS,
            "credits_remaining": max(MINIMUM_GRADUATION_CREDITS - completed, 0),
        }

    def registration_status(self, window_rows: list, earned_credits, today: date,
                            class_standing: Optional[str] = None,
                            late_registration_ends: Optional[date] = None) -> WindowCheck:
        """
        Check a student's registration window for one term.

        class_standing defaults to the standing implied by earned credits.
        """
        windows = [w for w in (parse_window_row(r) for r in window_rows) if w]
        standing = class_standing or compute_class_standing(earned_credits)
        return self.window_resolver.check(
            windows, standing, earned_credits, today, late_registration_ends
        )

    def schedule_gaps(self, window_rows: list) -> list:
        windows = [w for w in (parse_window_row(r) for r in window_rows) if w]
        return self.window_resolver.gaps(windows)

    def waiver_decision(self, waiver, events: list) -> Optional[TimeConflictWaiver]:
        """Apply approval events to a waiver (row dict or TimeConflictWaiver)."""
        if not isinstance(waiver, TimeConflictWaiver):
            waiver = parse_waiver_row(waiver)
            if waiver is None:
                return None
        return self.waiver_machine.apply_all(waiver, events)

    # =========================================================================
    # FILE-BACKED RUNS (load + display)
    # =========================================================================

    def run_progress(self, student_id) -> dict:
        """Load a student's exported transcript, report and display."""
        data = self.loader.load_transcript(student_id)
        programs = []
        for row in data["programs"]:
            row = dict(row)
            if not row.get("requirementDocument") and not row.get("degree_requirements"):
                parsed = parse_program_row(row)
                if parsed:
                    meta = parsed[0]
                    row["requirementDocument"] = self.loader.load_degree_requirements(
                        meta.subject, meta.degree_type
                    )
            programs.append(row)

        report = self.progress_report(data["enrollments"], programs)
        self.display.print_progress_report(report)
        return report

    def run_window_check(self, term: str, earned_credits, today: date,
                         class_standing: Optional[str] = None) -> WindowCheck:
        rows = self.loader.load_registration_schedule(term)
        result = self.registration_status(rows, earned_credits, today, class_standing)
        self.display.print_window_check(term, result)
        return result

    def run_schedule(self, term: str, verify: bool = False) -> list:
        """Display a term's schedule; with verify, also report its gaps."""
        rows = self.loader.load_registration_schedule(term)
        windows = [w for w in (parse_window_row(r) for r in rows) if w]
        gaps = self.window_resolver.gaps(windows) if verify else None
        self.display.print_schedule(term, windows, gaps)
        return gaps or []

    def run_waiver(self, waiver_id: int, events: list) -> Optional[TimeConflictWaiver]:
        """Apply events to an exported waiver and display the outcome."""
        for row in self.loader.load_waivers():
            waiver = parse_waiver_row(row)
            if waiver is not None and waiver.waiver_id == waiver_id:
                updated = self.waiver_decision(waiver, events)
                self.display.print_waiver(updated)
                return updated
        logger.warning("Waiver %s not found", waiver_id)
        return None
