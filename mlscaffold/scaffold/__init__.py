"""Manifest 기반 프로젝트 스캐폴딩 엔진"""

from .applier import FilesystemApplier
from .exceptions import (
    ConfigError,
    EntryCreationError,
    InvalidNameError,
    InvalidPathError,
    RootAlreadyExistsError,
    ScaffoldError,
)
from .external import (
    ExternalCommandRunner,
    NoOpCommandRunner,
    SelectiveCommandRunner,
    SubprocessCommandRunner,
)
from .manifest import PHASES, ManifestBuilder, build_manifest
from .models import (
    ApplyResult,
    CommandOutcome,
    EntryKind,
    Manifest,
    Outcome,
    PathEntry,
    PhaseResult,
    RunState,
    RunSummary,
)
from .orchestrator import PhaseOrchestrator, run
from .resolver import resolve, resolve_project_root, validate_project_name

__all__ = [
    "ApplyResult",
    "CommandOutcome",
    "ConfigError",
    "EntryCreationError",
    "EntryKind",
    "ExternalCommandRunner",
    "FilesystemApplier",
    "InvalidNameError",
    "InvalidPathError",
    "Manifest",
    "ManifestBuilder",
    "NoOpCommandRunner",
    "Outcome",
    "PHASES",
    "PathEntry",
    "PhaseOrchestrator",
    "PhaseResult",
    "RootAlreadyExistsError",
    "RunState",
    "RunSummary",
    "ScaffoldError",
    "SelectiveCommandRunner",
    "SubprocessCommandRunner",
    "build_manifest",
    "resolve",
    "resolve_project_root",
    "run",
    "validate_project_name",
]
