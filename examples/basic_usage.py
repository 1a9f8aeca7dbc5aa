#!/usr/bin/env python3
"""
Basic Usage Examples for EVT information

This file demonstrates simple, common usage patterns for summarizing
legacy Windows Event Log (.evt) files and resolving language identifiers.

Requirements:
    - Python 3.8+
    - evt_info package installed
"""

import io
import sys

from evt_info import (
    EventLogType,
    ReportConfig,
    format_file_summary,
    gather_file_summary,
    get_language_name,
    language_identifier_from_string,
    language_identifier_to_string,
    open_evt_file,
    print_file_info,
    LANGUAGE_IDENTIFIER_UNDEFINED,
)
from evt_info.exceptions import EvtInfoError, FileValidationError


def example_1_print_file_info() -> None:
    """
    Example 1: Print the summary report of an event log to standard output.

    The log type line is derived from the file name (SysEvent.Evt -> System).
    """
    print("=" * 70)
    print("Example 1: File Summary Report")
    print("=" * 70)

    try:
        print_file_info("SysEvent.Evt")
    except FileValidationError as e:
        print(f"Error: {e}")

    print()


def example_2_report_to_buffer() -> None:
    """
    Example 2: Write the report to a custom stream.

    Nothing is written to the stream if the file cannot be summarized.
    """
    print("=" * 70)
    print("Example 2: Report to Custom Stream")
    print("=" * 70)

    buffer = io.StringIO()
    try:
        summary = print_file_info("SecEvent.Evt", ReportConfig(output_stream=buffer))
        print(f"Records: {summary.number_of_records}")
        print(buffer.getvalue())
    except EvtInfoError as e:
        print(f"Error: {e}")
        print(f"Buffered output: {buffer.getvalue()!r}")

    print()


def example_3_manual_handle() -> None:
    """
    Example 3: Open the file yourself and render the summary as a string.
    """
    print("=" * 70)
    print("Example 3: Manual File Handle")
    print("=" * 70)

    try:
        with open_evt_file("export.evt") as evt_file:
            summary = gather_file_summary(evt_file, EventLogType.APPLICATION)
            for error in evt_file.errors:
                print(f"Structural error: {error}")
        sys.stdout.write(format_file_summary(summary))
    except EvtInfoError as e:
        print(f"Error: {e}")

    print()


def example_4_language_identifiers() -> None:
    """
    Example 4: Resolve language tags and identifiers.
    """
    print("=" * 70)
    print("Example 4: Language Identifiers")
    print("=" * 70)

    for tag in ("en-US", "FR", "pt_BR", "x", "zz"):
        identifier = language_identifier_from_string(tag)
        if identifier == LANGUAGE_IDENTIFIER_UNDEFINED:
            print(f"{tag!r:10} -> undefined")
        else:
            print(
                f"{tag!r:10} -> 0x{identifier:04x} "
                f"({language_identifier_to_string(identifier)}, {get_language_name(identifier)})"
            )

    print()


def main() -> None:
    """Run all examples."""
    print("\n")
    print("*" * 70)
    print("EVT information - Basic Usage Examples")
    print("*" * 70)
    print()

    # Note: Examples 1-3 assume you have .evt files available
    # Uncomment the examples you want to run

    # example_1_print_file_info()
    # example_2_report_to_buffer()
    # example_3_manual_handle()
    example_4_language_identifiers()

    print("\nTo run the file examples:")
    print("1. Ensure you have .evt files available")
    print("2. Uncomment the example functions you want to run")
    print("3. Adjust file paths to match your system")
    print("4. Run this script: python3 basic_usage.py")
    print()


if __name__ == "__main__":
    main()
