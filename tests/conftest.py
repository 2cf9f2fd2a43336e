"""Pytest configuration and fixtures for ads_bridge tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import ads_bridge
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from ads_bridge.domain.strategies.value_codec_strategy import TypeCodec
from ads_bridge.application.use_cases.process_batch_use_case import (
    ProcessBatchUseCase,
)
from tests.doubles import FakeConnectionGateway, RecordingEventSink


@pytest.fixture
def type_codec() -> TypeCodec:
    """Return a codec registry with the default code page."""
    return TypeCodec()


@pytest.fixture
def gateway() -> FakeConnectionGateway:
    """Return an empty fake gateway."""
    return FakeConnectionGateway()


@pytest.fixture
def event_sink() -> RecordingEventSink:
    """Return an event sink that records everything."""
    return RecordingEventSink()


@pytest.fixture
def use_case(gateway, event_sink, type_codec) -> ProcessBatchUseCase:
    """Create batch processor wired to the fakes."""
    return ProcessBatchUseCase(gateway, event_sink, type_codec)
