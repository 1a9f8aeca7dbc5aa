"""EVT information - A Python library for legacy Windows Event Log metadata.

This library provides functionality to:
- Summarize the structure of legacy Windows Event Log (.evt) files
- Classify event logs by their file name
- Map Windows language identifiers to language tags and back

The library offers:
- Cross-platform EVT header and record boundary reading
- Detection of corrupted files and recovery of records outside the live range
- An all-or-nothing text report of version, flags and record counts
- Zero external dependencies (Python standard library only)

Basic Usage:
    File summary report:
        >>> from evt_info import print_file_info
        >>> summary = print_file_info("SysEvent.Evt")
        Windows Event Log (EVT) information:
        ...

    Rendering to a string:
        >>> from evt_info import open_evt_file, gather_file_summary, format_file_summary
        >>> with open_evt_file("Security.evt") as evt_file:
        ...     summary = gather_file_summary(evt_file)
        >>> text = format_file_summary(summary)

    Language identifiers:
        >>> from evt_info import language_identifier_from_string, language_identifier_to_string
        >>> language_identifier_from_string("fr-CA")
        12
        >>> language_identifier_to_string(12)
        'fr'

For more information, see the documentation for individual functions and classes.
"""

from .exceptions import (
    EvtInfoError,
    InvalidArgumentError,
    FileValidationError,
    EvtFileError,
    FileNotOpenError,
)

from .language import (
    LANGUAGE_IDENTIFIER_UNDEFINED,
    LANGUAGE_TABLE,
    STRING_LOOKUP_TAGS,
    LocaleEntry,
    language_identifier_from_string,
    language_identifier_to_string,
    get_language_entry,
    get_language_name,
)

from .evt_file import (
    FileFlag,
    EventLogFile,
    EvtHeader,
    EvtFile,
    open_evt_file,
)

from .report import (
    FileSummary,
    ReportConfig,
    gather_file_summary,
    format_file_summary,
    write_file_summary,
    print_file_info,
)

from .utils import (
    EventLogType,
    determine_event_log_type_from_filename,
    validate_evt_file,
)

__version__ = "1.0.0"
__author__ = "moex01"
__license__ = "MIT"

__all__ = [
    # Reporting
    "FileSummary",
    "ReportConfig",
    "gather_file_summary",
    "format_file_summary",
    "write_file_summary",
    "print_file_info",
    # Event log file handle
    "FileFlag",
    "EventLogFile",
    "EvtHeader",
    "EvtFile",
    "open_evt_file",
    # Language identifiers
    "LANGUAGE_IDENTIFIER_UNDEFINED",
    "LANGUAGE_TABLE",
    "STRING_LOOKUP_TAGS",
    "LocaleEntry",
    "language_identifier_from_string",
    "language_identifier_to_string",
    "get_language_entry",
    "get_language_name",
    # Exceptions
    "EvtInfoError",
    "InvalidArgumentError",
    "FileValidationError",
    "EvtFileError",
    "FileNotOpenError",
    # Utility functions
    "EventLogType",
    "determine_event_log_type_from_filename",
    "validate_evt_file",
    # Metadata
    "__version__",
    "__author__",
    "__license__",
]
