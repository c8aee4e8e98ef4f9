"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the registrar package.

To create a different UI (web, PDF, JSON API), create a new class with
the same method signatures but different output handling.
"""

from ..engines.registration import order_windows
from ..models import (
    RequiredCourseStatus,
    WindowCheck,
    TimeConflictWaiver,
    WaiverState,
)


class TerminalDisplay:
    """
    Pretty terminal output for registrar reports.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and serialize the report dataclasses.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool, pending: bool = False) -> str:
        """Return a colored status badge."""
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ COMPLETE {cls.RESET}"
        elif pending:
            return f"{cls.BG_YELLOW}{cls.WHITE} ⏳ IN PROGRESS {cls.RESET}"
        else:
            return f"{cls.BG_RED}{cls.WHITE} ✗ MISSING {cls.RESET}"

    # =========================================================================
    # ACADEMIC PROGRESS
    # =========================================================================

    @classmethod
    def print_progress_report(cls, report: dict):
        """Print a full progress report built by Registrar.progress_report()."""
        transcript = report["transcript"]
        cls.print_header("ACADEMIC PROGRESS")
        gpa = f"{transcript.gpa:.3f}" if transcript.gpa is not None else "n/a"
        print(f"\n  {cls.BOLD}Cumulative GPA:{cls.RESET} {gpa}")
        print(f"  {cls.BOLD}Credits Completed:{cls.RESET} {transcript.total_credits_completed}")
        print(f"  {cls.BOLD}GPA Credits:{cls.RESET} {transcript.attempted_credits}")
        print(f"  {cls.BOLD}Class Standing:{cls.RESET} {report['class_standing']}")
        print(f"  {cls.BOLD}Credits to {report['minimum_credits']}:{cls.RESET} "
              f"{report['credits_remaining']}")

        cls.print_sbc_categories(report["sbc_categories"])
        for program in report["programs"]:
            cls.print_program_status(program)

    @classmethod
    def print_sbc_categories(cls, categories: list):
        cls.print_subheader("SBC Requirements")
        print(f"\n  {cls.BOLD}{'SBC':<8} {'STATUS':<24} {'COURSES'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 60}{cls.RESET}")
        for cat in categories:
            if cat.completed:
                color = cls.GREEN
            elif cat.in_progress:
                color = cls.YELLOW
            else:
                color = cls.RED
            done = [c.code for c in cat.completed_courses[:2]]
            pending = [c.code for c in cat.in_progress_courses[:2]]
            parts = []
            if done:
                parts.append(f"{cls.GREEN}{', '.join(done)}{cls.RESET}")
            if pending:
                parts.append(f"{cls.YELLOW}[{', '.join(pending)}]{cls.RESET}")
            courses = " ".join(parts) if parts else f"{cls.DIM}(none){cls.RESET}"
            status = cls.status_badge(cat.completed, cat.in_progress)
            print(f"  {color}{cat.code:<8}{cls.RESET} {status:<24} {courses}")

    @classmethod
    def print_program_status(cls, program):
        if isinstance(program, dict):
            cls.print_header(f"{program['program'].upper()}: ERROR")
            print(f"\n  {cls.RED}Error: {program['error']}{cls.RESET}")
            return

        cls.print_header(f"{program.name.upper()} REQUIREMENTS")
        total = len(program.required_courses)
        print(f"\n  {cls.BOLD}Required Courses:{cls.RESET} {program.completed_count}/{total} completed")
        if program.in_progress_count:
            print(f"  {cls.BOLD}In Progress:{cls.RESET} {program.in_progress_count}")
        for course in program.required_courses:
            cls._print_required_course(course)

        for seq in program.sequences:
            nxt = f" (next: {seq.next_course})" if seq.next_course else ""
            print(f"  {cls.BOLD}Sequence {seq.name}:{cls.RESET} {cls.status_badge(seq.is_satisfied)}{nxt}")

        for threshold in program.credit_thresholds:
            label = threshold.description or f"{threshold.subject or 'All'} credits"
            print(f"  {cls.BOLD}{label}:{cls.RESET} "
                  f"{threshold.completed_credits}/{threshold.required_credits}")

        for elective in program.electives:
            print(f"  {cls.DIM}Electives: {elective}{cls.RESET}")

    @classmethod
    def _print_required_course(cls, course: RequiredCourseStatus):
        if course.completed:
            icon = f"{cls.GREEN}✓{cls.RESET}"
            detail = course.grade or ""
        elif course.in_progress:
            icon = f"{cls.YELLOW}⏳{cls.RESET}"
            detail = "in progress"
        else:
            icon = f"{cls.RED}○{cls.RESET}"
            detail = f"min {course.min_grade}" if course.min_grade else ""
        print(f"    {icon} {course.code:<12} {cls.DIM}{detail}{cls.RESET}")

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    @classmethod
    def print_window_check(cls, term: str, result: WindowCheck):
        cls.print_header(f"REGISTRATION: {term.upper()}")
        if result.window is not None:
            w = result.window
            print(f"\n  {cls.BOLD}Window:{cls.RESET} {w.class_standing} ({w.threshold_label}) "
                  f"opens {w.registration_start_date:%m/%d/%Y}")
        if result.allowed:
            print(f"  {cls.GREEN}✓ Registration is open{cls.RESET}")
        else:
            print(f"  {cls.RED}✗ {result.reason}{cls.RESET}")

    @classmethod
    def print_schedule(cls, term: str, windows: list, gaps=None):
        """Print a term's windows in evaluation order. gaps=None skips the check."""
        cls.print_header(f"REGISTRATION SCHEDULE: {term.upper()}")
        if not windows:
            print(f"\n  {cls.DIM}No windows configured - registration is open to all{cls.RESET}")
        for w in order_windows(windows):
            print(f"  {w.class_standing:<4} {w.threshold_label:<8} {w.registration_start_date:%Y-%m-%d}")
        if gaps is None:
            return
        if not gaps:
            print(f"\n  {cls.GREEN}✓ Every class standing has a window{cls.RESET}")
        for gap in gaps:
            print(f"  {cls.RED}✗ {gap.class_standing}: {gap.description}{cls.RESET}")

    @classmethod
    def print_waiver(cls, waiver: TimeConflictWaiver):
        cls.print_header(f"TIME CONFLICT WAIVER #{waiver.waiver_id}")
        for label, flag in (("Instructor 1", waiver.instructor_1_approved),
                            ("Instructor 2", waiver.instructor_2_approved),
                            ("Advisor", waiver.advisor_approved)):
            mark = f"{cls.GREEN}✓{cls.RESET}" if flag else f"{cls.DIM}○{cls.RESET}"
            print(f"  {mark} {label}")
        state = waiver.state
        if state is WaiverState.FULLY_APPROVED:
            print(f"\n  {cls.status_badge(True)}")
        elif state is WaiverState.DENIED:
            print(f"\n  {cls.RED}✗ Denied by {waiver.denied_by.value}{cls.RESET}")
        else:
            print(f"\n  {cls.status_badge(False, pending=True)}")
