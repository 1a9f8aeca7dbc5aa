"""Utility functions for input validation and event log classification.

This module provides helper functions used throughout the library to
check input paths before they are opened and to classify an event
log by its file name.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Union

from .exceptions import FileValidationError

EVT_SIGNATURE = b"LfLe"


class EventLogType(Enum):
    """Kind of event log, as inferred from the file name.

    Attributes:
        UNKNOWN: The file name does not match a well-known event log.
        APPLICATION: The Application event log (AppEvent.Evt).
        INTERNET_EXPLORER: The Internet Explorer event log (Internet.evt).
        SECURITY: The Security event log (SecEvent.Evt).
        SYSTEM: The System event log (SysEvent.Evt).
    """

    UNKNOWN = "unknown"
    APPLICATION = "application"
    INTERNET_EXPLORER = "internet_explorer"
    SECURITY = "security"
    SYSTEM = "system"


# Lowercased file names of the default and the exported event logs
EVENT_LOG_TYPE_FILENAMES: Dict[str, EventLogType] = {
    "appevent.evt": EventLogType.APPLICATION,
    "internet.evt": EventLogType.INTERNET_EXPLORER,
    "secevent.evt": EventLogType.SECURITY,
    "sysevent.evt": EventLogType.SYSTEM,
    "application.evt": EventLogType.APPLICATION,
    "security.evt": EventLogType.SECURITY,
    "system.evt": EventLogType.SYSTEM,
}


def determine_event_log_type_from_filename(filename: Union[str, Path]) -> EventLogType:
    """Determine the event log type from the file name.

    Only the final path component is considered and the comparison is
    case-insensitive.

    Args:
        filename: Path or file name of the event log.

    Returns:
        The matching EventLogType, or EventLogType.UNKNOWN.

    Example:
        >>> determine_event_log_type_from_filename("C:/WINDOWS/system32/config/SysEvent.Evt")
        <EventLogType.SYSTEM: 'system'>
        >>> determine_event_log_type_from_filename("export.evt")
        <EventLogType.UNKNOWN: 'unknown'>
    """
    # Accept both separators regardless of the host platform
    name = str(filename).replace("\\", "/").rsplit("/", 1)[-1]
    return EVENT_LOG_TYPE_FILENAMES.get(name.lower(), EventLogType.UNKNOWN)


def validate_evt_file(input_file: Path) -> None:
    """Validate an input file before it is opened.

    Performs the following checks:
    - Input file exists
    - Input path is a file (not a directory)

    The EVT signature is checked when the header is parsed. The file extension is not checked; default event logs use ".Evt" and
    exported copies are often renamed.

    Args:
        input_file: Path to the input file.

    Raises:
        FileValidationError: If any validation check fails.

    Example:
        >>> validate_evt_file(Path("SysEvent.Evt"))  # Existing file
        >>> validate_evt_file(Path("missing.evt"))  # Raises FileValidationError
    """
    if not input_file.exists():
        raise FileValidationError(f"Input file does not exist: {input_file}")

    if not input_file.is_file():
        raise FileValidationError(f"Input path is not a file: {input_file}")

