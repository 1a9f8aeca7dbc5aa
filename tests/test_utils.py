from pathlib import Path

import pytest

from evt_info.exceptions import FileValidationError
from evt_info.utils import (
    EventLogType,
    determine_event_log_type_from_filename,
    validate_evt_file,
)


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("AppEvent.Evt", EventLogType.APPLICATION),
        ("Internet.evt", EventLogType.INTERNET_EXPLORER),
        ("SECEVENT.EVT", EventLogType.SECURITY),
        ("sysevent.evt", EventLogType.SYSTEM),
        ("Application.evt", EventLogType.APPLICATION),
        ("Security.evt", EventLogType.SECURITY),
        ("System.evt", EventLogType.SYSTEM),
        ("export.evt", EventLogType.UNKNOWN),
        ("SysEvent.Evt.bak", EventLogType.UNKNOWN),
        ("", EventLogType.UNKNOWN),
    ],
)
def test_determine_event_log_type_from_filename(
    filename: str, expected: EventLogType
) -> None:
    assert determine_event_log_type_from_filename(filename) == expected


def test_determine_event_log_type_uses_final_path_component(tmp_path: Path) -> None:
    assert (
        determine_event_log_type_from_filename(tmp_path / "SecEvent.Evt")
        == EventLogType.SECURITY
    )
    assert (
        determine_event_log_type_from_filename("C:\\WINDOWS\\system32\\config\\SysEvent.Evt")
        == EventLogType.SYSTEM
    )
    assert (
        determine_event_log_type_from_filename("/logs/SysEvent.Evt/export.evt")
        == EventLogType.UNKNOWN
    )


def test_validate_evt_file_rejects_missing_input(tmp_path: Path) -> None:
    with pytest.raises(FileValidationError):
        validate_evt_file(tmp_path / "missing.evt")


def test_validate_evt_file_rejects_directory(tmp_path: Path) -> None:
    directory = tmp_path / "SysEvent.Evt"
    directory.mkdir()
    with pytest.raises(FileValidationError):
        validate_evt_file(directory)


def test_validate_evt_file_accepts_any_extension(tmp_path: Path) -> None:
    p = tmp_path / "renamed.log"
    p.write_bytes(b"\x30\x00\x00\x00LfLe")
    validate_evt_file(p)
