"""
Pytest configuration and shared fixtures for all tests.
"""

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.coastal_monitor.core import constants  # noqa: E402
from src.coastal_monitor.models import (  # noqa: E402
    BoundingBox,
    DataQuality,
    Observation,
    OceanographicSummary,
    ParameterKind,
    ParameterSummary,
    ProviderResponse,
    Quality,
    QueryMetadata,
    RiskLevel,
    TrendDirection,
)


FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    """A fixed, timezone-aware reference time."""
    return FIXED_NOW


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def make_observation():
    """Factory for observations spaced one hour apart."""
    def _make(value, index=0, **extras):
        return Observation(
            timestamp=FIXED_NOW + timedelta(hours=index),
            latitude=18.0,
            longitude=72.0,
            value=value,
            unit="",
            quality=Quality.GOOD,
            source="TEST",
            **extras
        )
    return _make


@pytest.fixture
def make_response(make_observation):
    """Factory for provider responses holding the given values."""
    def _make(values, error=None, **extras):
        data = tuple(make_observation(v, i, **extras) for i, v in enumerate(values))
        return ProviderResponse(
            data=data,
            metadata=QueryMetadata(
                total_count=len(data),
                time_range=(FIXED_NOW - timedelta(hours=24), FIXED_NOW),
                bounding_box=BoundingBox(*constants.DEFAULT_BOUNDING_BOX),
                resolution="test",
                data_quality=DataQuality(completeness=0.9, accuracy=0.9),
            ),
            error=error,
        )
    return _make


@pytest.fixture
def make_summary():
    """Factory for summaries with the given per-parameter risk tiers."""
    def _make(risks=None):
        risks = risks or {}
        bbox = BoundingBox(*constants.DEFAULT_BOUNDING_BOX)
        parameters = {
            kind: ParameterSummary(
                kind=kind,
                value=1.0,
                unit=constants.UNITS[kind.value],
                risk=risks.get(kind, RiskLevel.LOW),
                trend=TrendDirection.STABLE,
            )
            for kind in ParameterKind
        }
        return OceanographicSummary(
            timestamp=FIXED_NOW,
            bounding_box=bbox,
            center=bbox.center,
            parameters=parameters,
            overall_risk=RiskLevel.LOW,
        )
    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test spanning several components"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
