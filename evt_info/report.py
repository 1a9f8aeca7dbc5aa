"""File summary reporting for legacy Windows Event Log files.

The report is produced in two steps: all metadata is first gathered from
the event log file handle into a FileSummary, then the summary is rendered
and written in a single write. A failure while gathering therefore never
produces a partial report.
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO, Tuple, Union

from .evt_file import EventLogFile, EvtFile, FileFlag
from .utils import EventLogType, determine_event_log_type_from_filename


logger = logging.getLogger(__name__)

REPORT_HEADER = "Windows Event Log (EVT) information:"

EVENT_LOG_TYPE_LABELS: Dict[EventLogType, str] = {
    EventLogType.APPLICATION: "Application",
    EventLogType.INTERNET_EXPLORER: "Internet Explorer",
    EventLogType.SECURITY: "Security",
    EventLogType.SYSTEM: "System",
}

# Reported in this order regardless of the bit values
FLAG_DESCRIPTIONS: Tuple[Tuple[FileFlag, str], ...] = (
    (FileFlag.IS_DIRTY, "Is dirty"),
    (FileFlag.HAS_WRAPPED, "Has wrapped"),
    (FileFlag.IS_FULL, "Is full"),
    (FileFlag.ARCHIVE, "Should be archived"),
)


@dataclass(frozen=True)
class FileSummary:
    """Structural metadata of an event log file.

    Attributes:
        major_version: Format major version.
        minor_version: Format minor version.
        flags: Header flags bitmask (see FileFlag).
        is_corrupted: Whether the file handle detected corruption.
        number_of_records: Number of live records.
        number_of_recovered_records: Number of records recovered outside the live range.
        log_type: Kind of event log, derived from the file name.
    """

    major_version: int
    minor_version: int
    flags: int
    is_corrupted: bool
    number_of_records: int
    number_of_recovered_records: int
    log_type: EventLogType = EventLogType.UNKNOWN


@dataclass
class ReportConfig:
    """Settings for producing a file summary report.

    Attributes:
        output_stream: Stream the report is written to.
        file_factory: Creates the (unopened) event log file handle.
    """

    output_stream: TextIO = field(default_factory=lambda: sys.stdout)
    file_factory: Callable[[], EventLogFile] = EvtFile


def gather_file_summary(
    file_handle: EventLogFile, log_type: EventLogType = EventLogType.UNKNOWN
) -> FileSummary:
    """Retrieve the metadata of an open event log file.

    Exceptions raised by the file handle are not caught.

    Args:
        file_handle: An open event log file handle.
        log_type: Kind of event log, usually from determine_event_log_type_from_filename.

    Returns:
        FileSummary with all values retrieved.
    """
    major_version, minor_version = file_handle.get_version()
    flags = file_handle.get_flags()
    is_corrupted = file_handle.is_corrupted()
    number_of_records = file_handle.get_number_of_records()
    number_of_recovered_records = file_handle.get_number_of_recovered_records()

    return FileSummary(
        major_version=major_version,
        minor_version=minor_version,
        flags=flags,
        is_corrupted=bool(is_corrupted),
        number_of_records=number_of_records,
        number_of_recovered_records=number_of_recovered_records,
        log_type=log_type,
    )


def format_file_summary(summary: FileSummary) -> str:
    """Render a file summary as a tab-indented text report.

    The report always contains the header, version and record counts. The
    log type line is only present for well-known event logs, the corruption
    marker only for corrupted files and the flags block only when a flag is
    set. The report ends with a blank line.
    """
    lines: List[str] = [
        REPORT_HEADER,
        f"\tVersion\t\t\t\t: {summary.major_version}.{summary.minor_version}",
        f"\tNumber of records\t\t: {summary.number_of_records}",
        f"\tNumber of recovered records\t: {summary.number_of_recovered_records}",
    ]

    log_type_label = EVENT_LOG_TYPE_LABELS.get(summary.log_type)
    if log_type_label is not None:
        lines.append(f"\tLog type\t\t\t: {log_type_label}")

    if summary.is_corrupted:
        lines.append("\tIs corrupted")

    if summary.flags != 0:
        lines.append("\tFlags:")
        for flag, description in FLAG_DESCRIPTIONS:
            if summary.flags & flag:
                lines.append(f"\t\t{description}")

    lines.append("")
    return "\n".join(lines) + "\n"


def write_file_summary(
    summary: FileSummary, config: Optional[ReportConfig] = None
) -> None:
    """Write the rendered report to the configured output stream."""
    config = config or ReportConfig()
    config.output_stream.write(format_file_summary(summary))


def print_file_info(
    path: Union[str, Path], config: Optional[ReportConfig] = None
) -> FileSummary:
    """Open an event log file and write its summary report.

    Nothing is written when the file cannot be opened or a value cannot be
    retrieved. The file handle is closed before the report is written. When
    a value cannot be retrieved, that error is raised even if closing the
    handle fails as well.

    Args:
        path: Path to the event log file.
        config: Report settings (default: standard output, EvtFile handle).

    Returns:
        The FileSummary that was reported.

    Raises:
        EvtInfoError: If the file cannot be opened or its metadata retrieved.
    """
    config = config or ReportConfig()
    log_type = determine_event_log_type_from_filename(path)

    file_handle = config.file_factory()
    logger.debug(f"Opening {path} (log type: {log_type.value})")
    file_handle.open(path)
    try:
        summary = gather_file_summary(file_handle, log_type)
    except Exception:
        try:
            file_handle.close()
        except Exception as close_error:
            logger.warning(f"Unable to close {path}: {close_error}")
        raise
    file_handle.close()

    write_file_summary(summary, config)
    return summary
