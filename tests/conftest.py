import struct
from pathlib import Path
from typing import List, Optional

import pytest

EVT_HEADER_SIZE = 48
EOF_SIGNATURE = bytes.fromhex("11111111222222223333333344444444")


class EvtBuilder:
    """Builds synthetic EVT files for tests."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    @staticmethod
    def record(record_number: int, size: int = 64) -> bytes:
        return (
            struct.pack("<I4sI", size, b"LfLe", record_number)
            + bytes(size - 16)
            + struct.pack("<I", size)
        )

    @staticmethod
    def eof_record(start_offset: int, end_offset: int, current: int, oldest: int) -> bytes:
        return (
            struct.pack("<I", 0x28)
            + EOF_SIGNATURE
            + struct.pack("<5I", start_offset, end_offset, current, oldest, 0x28)
        )

    @staticmethod
    def header(
        start_offset: int,
        end_offset: int,
        current: int,
        oldest: int,
        max_size: int,
        flags: int = 0,
        major_version: int = 1,
        minor_version: int = 1,
    ) -> bytes:
        return struct.pack(
            "<I4s10I",
            EVT_HEADER_SIZE,
            b"LfLe",
            major_version,
            minor_version,
            start_offset,
            end_offset,
            current,
            oldest,
            max_size,
            flags,
            0,
            EVT_HEADER_SIZE,
        )

    def linear(
        self,
        number_of_records: int = 3,
        flags: int = 0,
        trailing: bytes = b"",
        records: Optional[List[bytes]] = None,
    ) -> bytes:
        """Records stored from the start of the buffer, followed by the EOF record."""
        if records is None:
            records = [self.record(i + 1) for i in range(number_of_records)]
        body = b"".join(records)
        start_offset = EVT_HEADER_SIZE
        end_offset = EVT_HEADER_SIZE + len(body)
        eof = self.eof_record(start_offset, end_offset, len(records) + 1, 1)
        max_size = EVT_HEADER_SIZE + len(body) + len(eof) + len(trailing)
        return (
            self.header(start_offset, end_offset, len(records) + 1, 1, max_size, flags)
            + body
            + eof
            + trailing
        )

    def circular(
        self, stream: bytes, buffer_size: int, start_position: int, flags: int = 0
    ) -> bytes:
        """Records and EOF record stored in the buffer from start_position, wrapping."""
        buffer = bytearray(buffer_size)
        for index, value in enumerate(stream):
            buffer[(start_position + index) % buffer_size] = value
        start_offset = EVT_HEADER_SIZE + start_position
        end_offset = EVT_HEADER_SIZE + (start_position + len(stream) - 0x28) % buffer_size
        header = self.header(
            start_offset, end_offset, 0, 0, EVT_HEADER_SIZE + buffer_size, flags
        )
        return header + bytes(buffer)

    def write(self, data: bytes, name: str = "SysEvent.Evt") -> Path:
        path = self.directory / name
        path.write_bytes(data)
        return path


@pytest.fixture
def evt_builder(tmp_path: Path) -> EvtBuilder:
    return EvtBuilder(tmp_path)
