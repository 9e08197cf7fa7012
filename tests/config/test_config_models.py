from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

# Typed config sections and their defaults.
from commission_fees.config.models import (
    DEFAULT_PIPELINE,
    CashOutRule,
    CurrencyConfig,
    LoggingConfig,
    OutputConfig,
    PipelineConfig,
)


def test_pipeline_defaults_to_fee_steps() -> None:
    # Omitting pipeline.steps yields the standard fee pipeline.
    assert tuple(step.name for step in PipelineConfig().steps) == DEFAULT_PIPELINE


def test_cash_out_rule_defaults_to_no_allowance() -> None:
    # Without an allowance every cash-out is priced.
    rule = CashOutRule(percent=Decimal("0.3"))
    assert rule.min_fee == Decimal(0)
    assert rule.weekly_free_amount == Decimal(0)
    assert rule.weekly_free_operations == 0


def test_currency_config_accepts_string_rates() -> None:
    # Rates given as strings stay exact decimals.
    entry = CurrencyConfig.model_validate({"rate": "1.1497", "decimal_places": 2, "smallest_unit": 100})
    assert entry.rate == Decimal("1.1497")


def test_currency_config_rejects_three_decimals() -> None:
    # Only whole units and hundredths are supported.
    with pytest.raises(ValidationError):
        CurrencyConfig.model_validate({"rate": "1", "decimal_places": 3, "smallest_unit": 1000})


def test_output_config_accepts_file_alias() -> None:
    # "file" is accepted as a shorter spelling of file_path.
    assert OutputConfig.model_validate({"file": "out.txt"}).file_path == "out.txt"
    assert OutputConfig().file_path is None


def test_logging_level_is_restricted() -> None:
    # Only the known levels are accepted.
    assert LoggingConfig().level == "INFO"
    with pytest.raises(ValidationError):
        LoggingConfig.model_validate({"level": "TRACE"})
