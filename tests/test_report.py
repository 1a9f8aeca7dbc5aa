import io
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pytest

from evt_info.evt_file import FileFlag
from evt_info.exceptions import EvtFileError, FileValidationError
from evt_info.report import (
    FileSummary,
    ReportConfig,
    format_file_summary,
    gather_file_summary,
    print_file_info,
    write_file_summary,
)
from evt_info.utils import EventLogType


class FakeEventLogFile:
    """Event log file handle returning fixed values, optionally failing one accessor."""

    def __init__(
        self, fail_on: Optional[str] = None, flags: int = 0, fail_on_close: bool = False
    ) -> None:
        self.fail_on = fail_on
        self.fail_on_close = fail_on_close
        self.flags = flags
        self.calls: List[str] = []
        self.opened_path: Optional[str] = None
        self.closed = False

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if name == self.fail_on:
            raise EvtFileError(f"Unable to {name}")

    def open(self, path: Union[str, Path]) -> None:
        self._call("open")
        self.opened_path = str(path)

    def close(self) -> None:
        self._call("close")
        if self.fail_on_close:
            raise EvtFileError("Unable to close file")
        self.closed = True

    def get_version(self) -> Tuple[int, int]:
        self._call("get_version")
        return 1, 1

    def get_flags(self) -> int:
        self._call("get_flags")
        return self.flags

    def is_corrupted(self) -> bool:
        self._call("is_corrupted")
        return False

    def get_number_of_records(self) -> int:
        self._call("get_number_of_records")
        return 42

    def get_number_of_recovered_records(self) -> int:
        self._call("get_number_of_recovered_records")
        return 3


def make_summary(**overrides) -> FileSummary:
    values = dict(
        major_version=1,
        minor_version=1,
        flags=0,
        is_corrupted=False,
        number_of_records=42,
        number_of_recovered_records=0,
        log_type=EventLogType.SYSTEM,
    )
    values.update(overrides)
    return FileSummary(**values)


def test_format_minimal_report() -> None:
    report = format_file_summary(make_summary())

    assert report == (
        "Windows Event Log (EVT) information:\n"
        "\tVersion\t\t\t\t: 1.1\n"
        "\tNumber of records\t\t: 42\n"
        "\tNumber of recovered records\t: 0\n"
        "\tLog type\t\t\t: System\n"
        "\n"
    )


def test_format_unknown_log_type_has_no_log_type_line() -> None:
    report = format_file_summary(make_summary(log_type=EventLogType.UNKNOWN))
    assert "Log type" not in report
    assert report.endswith("\tNumber of recovered records\t: 0\n\n")


@pytest.mark.parametrize(
    "log_type, label",
    [
        (EventLogType.APPLICATION, "Application"),
        (EventLogType.INTERNET_EXPLORER, "Internet Explorer"),
        (EventLogType.SECURITY, "Security"),
        (EventLogType.SYSTEM, "System"),
    ],
)
def test_format_known_log_types(log_type: EventLogType, label: str) -> None:
    report = format_file_summary(make_summary(log_type=log_type))
    assert f"\tLog type\t\t\t: {label}\n" in report


def test_format_flags_in_fixed_order() -> None:
    report = format_file_summary(
        make_summary(flags=FileFlag.IS_FULL | FileFlag.HAS_WRAPPED)
    )
    lines = report.splitlines()
    flags_index = lines.index("\tFlags:")
    assert lines[flags_index + 1 :] == ["\t\tHas wrapped", "\t\tIs full", ""]


def test_format_all_flags() -> None:
    report = format_file_summary(make_summary(flags=0x0F))
    assert report.endswith(
        "\tFlags:\n"
        "\t\tIs dirty\n"
        "\t\tHas wrapped\n"
        "\t\tIs full\n"
        "\t\tShould be archived\n"
        "\n"
    )


def test_format_unknown_flag_bits_only_emit_flags_header() -> None:
    report = format_file_summary(make_summary(flags=0x100))
    assert report.endswith("\tFlags:\n\n")


def test_format_corruption_marker_between_log_type_and_flags() -> None:
    report = format_file_summary(
        make_summary(is_corrupted=True, flags=FileFlag.IS_DIRTY)
    )
    lines = report.splitlines()

    assert lines.count("\tIs corrupted") == 1
    marker = lines.index("\tIs corrupted")
    assert lines[marker - 1] == "\tLog type\t\t\t: System"
    assert lines[marker + 1] == "\tFlags:"


def test_gather_reads_all_accessors() -> None:
    handle = FakeEventLogFile(flags=FileFlag.ARCHIVE)
    summary = gather_file_summary(handle, EventLogType.SECURITY)

    assert summary == FileSummary(
        major_version=1,
        minor_version=1,
        flags=FileFlag.ARCHIVE,
        is_corrupted=False,
        number_of_records=42,
        number_of_recovered_records=3,
        log_type=EventLogType.SECURITY,
    )
    assert handle.calls == [
        "get_version",
        "get_flags",
        "is_corrupted",
        "get_number_of_records",
        "get_number_of_recovered_records",
    ]


def test_write_file_summary_uses_configured_stream() -> None:
    output = io.StringIO()
    write_file_summary(make_summary(), ReportConfig(output_stream=output))
    assert output.getvalue() == format_file_summary(make_summary())


@pytest.mark.parametrize(
    "accessor",
    [
        "open",
        "get_version",
        "get_flags",
        "is_corrupted",
        "get_number_of_records",
        "get_number_of_recovered_records",
    ],
)
def test_print_file_info_writes_nothing_on_failure(accessor: str) -> None:
    output = io.StringIO()
    handle = FakeEventLogFile(fail_on=accessor)
    config = ReportConfig(output_stream=output, file_factory=lambda: handle)

    with pytest.raises(EvtFileError):
        print_file_info("SecEvent.Evt", config)

    assert output.getvalue() == ""
    if accessor != "open":
        assert handle.closed


def test_print_file_info_keeps_accessor_error_when_close_fails() -> None:
    output = io.StringIO()
    handle = FakeEventLogFile(fail_on="get_version", fail_on_close=True)
    config = ReportConfig(output_stream=output, file_factory=lambda: handle)

    with pytest.raises(EvtFileError, match="Unable to get_version"):
        print_file_info("SysEvent.Evt", config)

    assert handle.calls == ["open", "get_version", "close"]
    assert output.getvalue() == ""


def test_print_file_info_close_failure_writes_nothing() -> None:
    output = io.StringIO()
    handle = FakeEventLogFile(fail_on_close=True)
    config = ReportConfig(output_stream=output, file_factory=lambda: handle)

    with pytest.raises(EvtFileError, match="Unable to close file"):
        print_file_info("SysEvent.Evt", config)

    assert output.getvalue() == ""


def test_print_file_info_classifies_by_filename() -> None:
    output = io.StringIO()
    handle = FakeEventLogFile()
    config = ReportConfig(output_stream=output, file_factory=lambda: handle)

    summary = print_file_info("C:\\WINDOWS\\system32\\config\\AppEvent.Evt", config)

    assert summary.log_type == EventLogType.APPLICATION
    assert handle.opened_path == "C:\\WINDOWS\\system32\\config\\AppEvent.Evt"
    assert handle.closed
    assert "\tLog type\t\t\t: Application\n" in output.getvalue()


def test_print_file_info_reads_evt_file(evt_builder) -> None:
    data = evt_builder.linear(
        number_of_records=2, flags=FileFlag.IS_DIRTY | FileFlag.HAS_WRAPPED
    )
    path = evt_builder.write(data, name="SecEvent.Evt")
    output = io.StringIO()

    print_file_info(path, ReportConfig(output_stream=output))

    assert output.getvalue() == (
        "Windows Event Log (EVT) information:\n"
        "\tVersion\t\t\t\t: 1.1\n"
        "\tNumber of records\t\t: 2\n"
        "\tNumber of recovered records\t: 0\n"
        "\tLog type\t\t\t: Security\n"
        "\tFlags:\n"
        "\t\tIs dirty\n"
        "\t\tHas wrapped\n"
        "\n"
    )


def test_print_file_info_invalid_file_writes_nothing(tmp_path: Path) -> None:
    path = tmp_path / "SysEvent.Evt"
    path.write_bytes(b"not an event log")
    output = io.StringIO()

    with pytest.raises(FileValidationError):
        print_file_info(path, ReportConfig(output_stream=output))

    assert output.getvalue() == ""
