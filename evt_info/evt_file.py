"""Event log file handle providing the structural metadata of EVT files.

This module defines the interface the reporter uses to query an event log
file (EventLogFile) and a cross-platform implementation for legacy Windows
EVT files (EvtFile).

The EVT format consists of:
- Header (48 bytes) with file metadata
- Event records stored in a circular buffer (each starts with size + "LfLe"
  signature and ends with a copy of the size)
- EOF record (40 bytes with 0x11111111... signature)

EvtFile reads the header and walks the record boundaries to count records.
It does not decode record contents.

Based on the EVT format specification from libevt:
https://github.com/libyal/libevt/blob/main/documentation/Windows%20Event%20Log%20(EVT)%20format.asciidoc
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from enum import IntFlag
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple, Union

from .exceptions import EvtFileError, FileNotOpenError, FileValidationError
from .utils import EVT_SIGNATURE, validate_evt_file


logger = logging.getLogger(__name__)

# EVT Header constants
EVT_HEADER_SIZE = 48
EVENTLOGRECORD_HEADER_SIZE = 56
EVENTLOGRECORD_MINIMUM_SIZE = EVENTLOGRECORD_HEADER_SIZE + 4
EVT_EOF_SIGNATURE = bytes.fromhex("11111111222222223333333344444444")
EVT_PADDING = b"\x27\x00\x00\x00"


class FileFlag(IntFlag):
    """Flags stored in the EVT file header."""

    IS_DIRTY = 0x01
    HAS_WRAPPED = 0x02
    IS_FULL = 0x04
    ARCHIVE = 0x08


class EventLogFile(Protocol):
    """Interface of an event log file handle.

    Every accessor raises an EvtInfoError subclass when the value cannot be
    retrieved.
    """

    def open(self, path: Union[str, Path]) -> None: ...

    def close(self) -> None: ...

    def get_version(self) -> Tuple[int, int]: ...

    def get_flags(self) -> int: ...

    def is_corrupted(self) -> bool: ...

    def get_number_of_records(self) -> int: ...

    def get_number_of_recovered_records(self) -> int: ...


@dataclass
class EvtHeader:
    """Parsed EVT file header."""

    header_size: int
    signature: bytes
    major_version: int
    minor_version: int
    start_offset: int
    end_offset: int
    current_record_number: int
    oldest_record_number: int
    max_size: int
    flags: int
    retention: int
    header_size_copy: int

    @property
    def is_dirty(self) -> bool:
        return bool(self.flags & FileFlag.IS_DIRTY)

    @property
    def is_wrapped(self) -> bool:
        return bool(self.flags & FileFlag.HAS_WRAPPED)


@dataclass
class RecordScan:
    """Outcome of walking the records of an EVT file."""

    number_of_records: int = 0
    number_of_recovered_records: int = 0
    is_corrupted: bool = False
    errors: List[str] = field(default_factory=list)


def _parse_header(data: bytes) -> EvtHeader:
    """Parse and validate the EVT file header (48 bytes).

    Raises:
        FileValidationError: If the data is too small, lacks the "LfLe"
            signature at offset 0x04 or declares an unsupported header size.
    """
    if len(data) < EVT_HEADER_SIZE:
        raise FileValidationError(
            f"File is too small to be a valid legacy .evt: {len(data)} bytes"
        )

    (
        header_size,
        signature,
        major_version,
        minor_version,
        start_offset,
        end_offset,
        current_record_number,
        oldest_record_number,
        max_size,
        flags,
        retention,
        header_size_copy,
    ) = struct.unpack("<I4s10I", data[:EVT_HEADER_SIZE])

    if signature != EVT_SIGNATURE:
        raise FileValidationError(
            "File does not appear to be a legacy Windows Event Log (.evt) "
            f"(missing {EVT_SIGNATURE!r} signature at offset 0x04, found {signature!r})"
        )

    if header_size != EVT_HEADER_SIZE or header_size_copy != EVT_HEADER_SIZE:
        raise FileValidationError(
            f"Unsupported EVT header size: {header_size} (copy: {header_size_copy})"
        )

    return EvtHeader(
        header_size=header_size,
        signature=signature,
        major_version=major_version,
        minor_version=minor_version,
        start_offset=start_offset,
        end_offset=end_offset,
        current_record_number=current_record_number,
        oldest_record_number=oldest_record_number,
        max_size=max_size,
        flags=flags,
        retention=retention,
        header_size_copy=header_size_copy,
    )


def _read_circular(data: bytes, offset: int, size: int) -> bytes:
    """Read from the record buffer, continuing after the header at end of file."""
    file_size = len(data)
    if offset >= file_size:
        offset = EVT_HEADER_SIZE + (offset - file_size)

    end = offset + size
    if end <= file_size:
        return data[offset:end]
    return data[offset:] + data[EVT_HEADER_SIZE : EVT_HEADER_SIZE + (end - file_size)]


def _check_record(
    data: bytes, offset: int, circular: bool = True
) -> Tuple[int, Optional[str]]:
    """Validate the boundaries of the record at offset.

    Returns: (record_size, error_message)
    """
    file_size = len(data)
    buffer_size = file_size - EVT_HEADER_SIZE

    if circular:
        prefix = _read_circular(data, offset, 8)
    else:
        prefix = data[offset : offset + 8]

    if len(prefix) < 8:
        return 0, f"Insufficient data for record header at offset {offset}"

    if prefix[4:8] != EVT_SIGNATURE:
        return 0, f"Invalid record signature at offset {offset}: {prefix[4:8].hex()}"

    record_size = struct.unpack("<I", prefix[0:4])[0]
    if record_size < EVENTLOGRECORD_MINIMUM_SIZE or record_size > buffer_size:
        return 0, f"Invalid record size at offset {offset}: {record_size}"

    trailer_offset = offset + record_size - 4
    if circular:
        trailer = _read_circular(data, trailer_offset, 4)
    elif offset + record_size > file_size:
        return 0, f"Record extends past end of file at offset {offset}"
    else:
        trailer = data[trailer_offset : trailer_offset + 4]

    if struct.unpack("<I", trailer)[0] != record_size:
        return 0, f"Record size copy mismatch at offset {offset}"

    return record_size, None


def _walk_records(data: bytes, header: EvtHeader, scan: RecordScan) -> Dict[int, int]:
    """Walk the live records from the start offset.

    The walk ends at the EOF record or at the end offset. The end offset is
    not trusted for dirty files, which were not closed properly.

    Returns: mapping of record offset to record size
    """
    file_size = len(data)
    buffer_size = file_size - EVT_HEADER_SIZE
    stop_offset = None if header.is_dirty else header.end_offset
    live_records: Dict[int, int] = {}

    offset = header.start_offset
    if offset < EVT_HEADER_SIZE or offset >= file_size:
        scan.is_corrupted = True
        scan.errors.append(f"Start offset out of bounds: {offset}")
        return live_records

    walked = 0
    while walked < buffer_size:
        if offset == stop_offset:
            break

        prefix = _read_circular(data, offset, 8)
        if prefix[4:8] == EVT_EOF_SIGNATURE[:4]:
            break

        # Padding up to the end of the buffer, records continue after the header
        if prefix[0:4] == EVT_PADDING and prefix[4:8] != EVT_SIGNATURE:
            walked += file_size - offset
            offset = EVT_HEADER_SIZE
            continue

        record_size, error = _check_record(data, offset)
        if error:
            scan.is_corrupted = True
            scan.errors.append(error)
            break

        live_records[offset] = record_size
        scan.number_of_records += 1

        walked += record_size
        offset += record_size
        if offset >= file_size:
            offset = EVT_HEADER_SIZE + (offset - file_size)

    return live_records


def _count_recovered_records(data: bytes, live_records: Dict[int, int]) -> int:
    """Count intact records outside the live records, e.g. left behind after a wrap."""
    number_of_recovered_records = 0
    position = data.find(EVT_SIGNATURE, EVT_HEADER_SIZE + 4)

    while position != -1:
        offset = position - 4

        if offset in live_records:
            next_offset = offset + live_records[offset]
            if next_offset >= len(data):
                break
        else:
            record_size, error = _check_record(data, offset, circular=False)
            if error:
                next_offset = offset + 4
            else:
                number_of_recovered_records += 1
                next_offset = offset + record_size

        position = data.find(EVT_SIGNATURE, next_offset + 4)

    return number_of_recovered_records


def scan_records(data: bytes, header: EvtHeader) -> RecordScan:
    """Count live and recovered records of an EVT file held in memory."""
    scan = RecordScan()
    live_records = _walk_records(data, header, scan)
    scan.number_of_recovered_records = _count_recovered_records(data, live_records)
    return scan


class EvtFile:
    """Handle on a legacy Windows EVT file.

    The header is parsed and the records are counted when the file is
    opened, so the accessors do not perform any I/O.

    Example:
        >>> with open_evt_file("SysEvent.Evt") as evt_file:
        ...     print(evt_file.get_number_of_records())
    """

    def __init__(self) -> None:
        self._path: Optional[Path] = None
        self._header: Optional[EvtHeader] = None
        self._scan: Optional[RecordScan] = None

    @property
    def is_open(self) -> bool:
        return self._header is not None

    @property
    def errors(self) -> List[str]:
        """Structural errors found while walking the records."""
        return list(self._scan.errors) if self._scan else []

    def open(self, path: Union[str, Path]) -> None:
        """Open an EVT file and read its structural metadata.

        Args:
            path: Path to the EVT file.

        Raises:
            EvtFileError: If the handle is already open.
            FileValidationError: If the file cannot be read or is not an EVT file.
        """
        input_path = Path(path)

        if self.is_open:
            raise EvtFileError("Unable to open file, handle already open", str(self._path))

        validate_evt_file(input_path)

        try:
            data = input_path.read_bytes()
        except OSError as e:
            raise FileValidationError(f"Cannot read input file: {input_path} ({e})")

        header = _parse_header(data)
        scan = scan_records(data, header)

        if scan.is_corrupted:
            for error in scan.errors:
                logger.warning(f"{input_path}: {error}")

        logger.debug(
            f"Opened {input_path}: version {header.major_version}.{header.minor_version}, "
            f"{scan.number_of_records} records, "
            f"{scan.number_of_recovered_records} recovered records"
        )

        self._path = input_path
        self._header = header
        self._scan = scan

    def close(self) -> None:
        """Close the handle.

        Raises:
            FileNotOpenError: If the handle is not open.
        """
        if not self.is_open:
            raise FileNotOpenError("close file")

        logger.debug(f"Closed {self._path}")
        self._path = None
        self._header = None
        self._scan = None

    def __enter__(self) -> "EvtFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.is_open:
            self.close()

    def _require_header(self, accessor: str) -> EvtHeader:
        if self._header is None:
            raise FileNotOpenError(accessor)
        return self._header

    def _require_scan(self, accessor: str) -> RecordScan:
        if self._scan is None:
            raise FileNotOpenError(accessor)
        return self._scan

    def get_version(self) -> Tuple[int, int]:
        header = self._require_header("retrieve version")
        return header.major_version, header.minor_version

    def get_flags(self) -> int:
        return self._require_header("retrieve flags").flags

    def is_corrupted(self) -> bool:
        return self._require_scan("determine if file is corrupted").is_corrupted

    def get_number_of_records(self) -> int:
        return self._require_scan("retrieve number of records").number_of_records

    def get_number_of_recovered_records(self) -> int:
        scan = self._require_scan("retrieve number of recovered records")
        return scan.number_of_recovered_records


def open_evt_file(path: Union[str, Path]) -> EvtFile:
    """Open an EVT file and return the handle.

    Raises:
        FileValidationError: If the file cannot be read or is not an EVT file.
    """
    evt_file = EvtFile()
    evt_file.open(path)
    return evt_file
