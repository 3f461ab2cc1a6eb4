"""
Pytest configuration and shared fixtures.
"""
import pytest
from dataclasses import dataclass
from datetime import date
from typing import List

from src.models.cycle import CycleConfiguration
from src.models.phase import PhaseRange
from src.services.ranges import get_phase_ranges

@pytest.fixture
def regular_config() -> CycleConfiguration:
    """A 28-day cycle with a 5-day period that started on 1 March 2024."""
    return CycleConfiguration(
        last_period_start=date(2024, 3, 1),
        cycle_length=28,
        period_length=5
    )

@pytest.fixture
def long_config() -> CycleConfiguration:
    """A 30-day cycle with a 4-day period."""
    return CycleConfiguration(
        last_period_start=date(2024, 3, 1),
        cycle_length=30,
        period_length=4
    )

@pytest.fixture
def first_run_config() -> CycleConfiguration:
    """Default settings before any period has been entered."""
    return CycleConfiguration()

@pytest.fixture
def regular_ranges() -> List[PhaseRange]:
    """Top-level phase ranges for a 28/5 cycle."""
    return get_phase_ranges(28, 5)

@pytest.fixture
def lambda_context():
    """Minimal Lambda context accepted by powertools."""
    @dataclass
    class LambdaContext:
        function_name: str = "daily-plan"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:eu-central-1:123456789012:function:daily-plan"
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()
