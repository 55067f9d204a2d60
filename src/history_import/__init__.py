"""Safari → Chrome browser history import."""

from .dedup import remove_duplicates
from .exceptions import ConfigurationError, HistoryImportError, URLCreationError
from .extractor import iter_url_entities, step_count
from .importer import HistoryImporter
from .models import VISIT_TRANSITION, EntityResult, ImportSummary, URLEntity, VisitRecord
from .reporting import (
    LoggingLogSink,
    LogSink,
    NullLogSink,
    NullStepReporter,
    StepReporter,
    TqdmStepReporter,
)
from .service import import_history
from .timeconv import from_safari, to_chrome

__all__ = [
    "ConfigurationError",
    "EntityResult",
    "HistoryImportError",
    "HistoryImporter",
    "ImportSummary",
    "LogSink",
    "LoggingLogSink",
    "NullLogSink",
    "NullStepReporter",
    "StepReporter",
    "TqdmStepReporter",
    "URLCreationError",
    "URLEntity",
    "VISIT_TRANSITION",
    "VisitRecord",
    "from_safari",
    "import_history",
    "iter_url_entities",
    "remove_duplicates",
    "step_count",
    "to_chrome",
]
