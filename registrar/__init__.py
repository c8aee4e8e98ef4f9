"""
Registrar Progress & Eligibility Package
========================================

Academic progress and registration eligibility for a university registrar:
GPA, SBC (general education) categories, degree requirements, registration
windows and time-conflict waiver approvals.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ENGINE LAYER                                     │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────────┐  ┌──────────────────────┐  ┌────────────────────┐  │
│  │ GradeClassifier │  │ TranscriptAggregator │  │ RequirementCategory│  │
│  │ (mark rules)    │  │ (GPA, credits)       │  │ Tracker (SBC)      │  │
│  └─────────────────┘  └──────────────────────┘  └────────────────────┘  │
│                                                                         │
│  ┌──────────────────────┐  ┌──────────────────────┐  ┌──────────────┐  │
│  │ DegreeRequirement    │  │ RegistrationWindow   │  │ WaiverApproval│ │
│  │ Matcher              │  │ Resolver             │  │ StateMachine  │ │
│  └──────────────────────┘  └──────────────────────┘  └──────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  TerminalDisplay - formats and prints to console                        │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          Registrar                                       │
│          (Orchestrator - connects engines to presentation)              │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

registrar/
├── __init__.py          # This file - main exports
├── config.py            # Grade tables, SBC codes, standing cutoffs
├── registrar.py         # Registrar orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
├── data/                # Row parsing and exported-file loading
├── engines/             # Grades, transcript, SBC, degree, windows, waivers,
│                        # prerequisites
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from registrar import Registrar

    registrar = Registrar()
    report = registrar.progress_report(enrollment_rows, program_rows)
    report["transcript"].gpa          # Decimal("3.412")

    check = registrar.registration_status(window_rows, 110, date(2025, 11, 5))
    check.allowed, check.reason

Running from command line:

    python -m registrar progress 1042

"""

# Version
__version__ = "1.0.0"

# Main exports
from .registrar import Registrar
from .cli import main

# Model exports (for programmatic use)
from .models import (
    EnrollmentRecord,
    TranscriptSummary,
    RequirementCategory,
    RequiredCourseStatus,
    ProgramRequirementStatus,
    RequirementDocument,
    RegistrationWindow,
    WindowCheck,
    ApprovalParty,
    ApprovalEvent,
    WaiverState,
    DenialPolicy,
    WaiverClosedError,
    TimeConflictWaiver,
)

# Engine exports (for advanced use)
from .engines import (
    GradeScale,
    GradeClassifier,
    TranscriptAggregator,
    RequirementCategoryTracker,
    DegreeRequirementMatcher,
    MatchPolicy,
    RegistrationWindowResolver,
    WaiverApprovalStateMachine,
    PrerequisiteChecker,
)

# Data exports
from .data import DataLoader, TranscriptParser, RequirementDocumentParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    MINIMUM_GRADUATION_CREDITS,
    UNIVERSITY_SBC_CODES,
    compute_class_standing,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "Registrar",
    "main",
    # Models
    "EnrollmentRecord",
    "TranscriptSummary",
    "RequirementCategory",
    "RequiredCourseStatus",
    "ProgramRequirementStatus",
    "RequirementDocument",
    "RegistrationWindow",
    "WindowCheck",
    "ApprovalParty",
    "ApprovalEvent",
    "WaiverState",
    "DenialPolicy",
    "WaiverClosedError",
    "TimeConflictWaiver",
    # Engines
    "GradeScale",
    "GradeClassifier",
    "TranscriptAggregator",
    "RequirementCategoryTracker",
    "DegreeRequirementMatcher",
    "MatchPolicy",
    "RegistrationWindowResolver",
    "WaiverApprovalStateMachine",
    "PrerequisiteChecker",
    # Data
    "DataLoader",
    "TranscriptParser",
    "RequirementDocumentParser",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "MINIMUM_GRADUATION_CREDITS",
    "UNIVERSITY_SBC_CODES",
    "compute_class_standing",
]
