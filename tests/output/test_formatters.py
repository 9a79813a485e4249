"""Tests for the plain-text and JSON formatters."""

import json

from arrayprint.domain.containers import GRID, SEQUENCE
from arrayprint.output.formatters import (
    format_grid,
    format_result,
    format_row,
    format_sequence,
)
from arrayprint.services.result import ServiceResult


class TestFormatRow:
    def test_trailing_space_then_newline(self) -> None:
        assert format_row([7, 8]) == "7 8 \n"

    def test_empty_row_is_bare_newline(self) -> None:
        assert format_row([]) == "\n"


class TestFormatContainers:
    def test_sequence(self) -> None:
        assert format_sequence(SEQUENCE) == "1 2 3 4 5 \n"

    def test_grid(self) -> None:
        assert format_grid(GRID) == "1 2 3 \n4 5 6 \n7 8 9 \n"


class TestFormatResult:
    def test_json_roundtrip(self) -> None:
        result = ServiceResult(ok=True, op="print_arrays", data={"array": [1, 2]})
        parsed = json.loads(format_result(result))
        assert parsed["ok"] is True
        assert parsed["data"]["array"] == [1, 2]

    def test_indent(self) -> None:
        result = ServiceResult(ok=True, op="print_arrays")
        assert '\n    "ok"' in format_result(result, indent=4)
