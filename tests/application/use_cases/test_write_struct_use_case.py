"""Tests for WriteStructUseCase."""

from unittest.mock import Mock

import pytest

from ads_bridge.application.use_cases.write_struct_use_case import (
    WriteStructResult,
    WriteStructUseCase,
)
from ads_bridge.domain.exceptions import RequestValidationError
from ads_bridge.domain.value_objects.bridge_event import LogCategory


class TestWriteStructUseCase:
    """Test suite for WriteStructUseCase."""

    @pytest.fixture
    def struct_use_case(self, gateway, event_sink, type_codec):
        """Create use case wired to the fakes."""
        return WriteStructUseCase(gateway, event_sink, type_codec)

    def test_execute_successful_write(self, struct_use_case, gateway, event_sink):
        """Test struct is written with one handle."""
        # Act
        result = struct_use_case.execute(
            "MAIN.recipe", ["int", "string"], [[1, 2], ["mix"]]
        )

        # Assert
        assert result == WriteStructResult(
            success=True, struct_name="MAIN.recipe", size=89
        )
        data = gateway.get_variable("MAIN.recipe")
        assert data[:8] == b"\x01\x00\x00\x00\x02\x00\x00\x00"
        assert data[8:12] == b"mix\x00"
        assert gateway.get_calls("write") == [("write", "MAIN.recipe")]
        assert gateway.open_handles == 0
        assert event_sink.events == []

    @pytest.mark.parametrize(
        "types,values",
        [([], []), (["int"], []), (["int", "real"], [[1]])],
    )
    def test_unpaired_fields_raise(self, struct_use_case, gateway, types, values):
        """Test types and values must pair up."""
        with pytest.raises(RequestValidationError):
            struct_use_case.execute("S", types, values)
        assert gateway.get_calls() == []

    def test_encode_error_returns_failure(self, struct_use_case, gateway, event_sink):
        """Test a bad field value fails without any gateway call."""
        result = struct_use_case.execute("S", ["int", "usint"], [[1], [-5]])

        assert result.success is False
        assert result.error_kind == "type"
        assert result.size == 0
        assert "out of range" in result.error
        assert gateway.get_calls() == []
        assert event_sink.categories() == [LogCategory.ERROR]

    def test_oversized_string_field(self, struct_use_case, gateway):
        """Test strings wider than the slot are rejected."""
        result = struct_use_case.execute("S", ["string<120>"], [["x"]])

        assert result.success is False
        assert result.error_kind == "type"
        assert gateway.get_calls() == []

    def test_transport_failure(self, struct_use_case, gateway):
        """Test gateway failure is reported and the handle released."""
        gateway.fail_next("write")

        result = struct_use_case.execute("S", ["bool"], [[True]])

        assert result.success is False
        assert result.error_kind == "transport"
        assert "Write variable failed" in result.error
        assert gateway.open_handles == 0

    def test_huge_int_real_field(self, struct_use_case, gateway):
        """Test an int beyond float range is a type error, not a crash."""
        result = struct_use_case.execute("S", ["real"], [[10**400]])

        assert result.success is False
        assert result.error_kind == "type"
        assert "out of range for real" in result.error
        assert gateway.get_calls() == []

    def test_sink_failure_does_not_escape(self, gateway, type_codec):
        """Test a broken event sink does not affect the result."""
        sink = Mock()
        sink.emit.side_effect = RuntimeError("sink down")
        use_case = WriteStructUseCase(gateway, sink, type_codec)

        result = use_case.execute("S", ["usint"], [[-1]])

        assert result.success is False
        assert result.error_kind == "type"
        sink.emit.assert_called_once()
