from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from commission_fees.domain.messages import Currency, UserType

# Config models map YAML sections to typed structures; every enum member must be configured.

DEFAULT_PIPELINE = ("compute_week_key", "calculate_fee", "update_ledger", "format_output")


class StepDecl(BaseModel):
    # Step declaration mirrors pipeline.steps entries.
    model_config = ConfigDict(extra="forbid")
    name: str
    config: dict[str, Any] = Field(default_factory=dict)


class PipelineConfig(BaseModel):
    # Ordered step list for the fee scenario.
    model_config = ConfigDict(extra="forbid")
    steps: list[StepDecl] = Field(
        default_factory=lambda: [StepDecl(name=name) for name in DEFAULT_PIPELINE]
    )


class ScenarioConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "commission_fees"
    description: str | None = None


class CurrencyConfig(BaseModel):
    # One row of the currency table: rate to base, output precision, smallest unit.
    model_config = ConfigDict(extra="forbid", frozen=True)
    rate: Decimal = Field(gt=0)
    decimal_places: Literal[0, 2]
    smallest_unit: Literal[1, 100]

    @model_validator(mode="after")
    def _unit_matches_places(self) -> CurrencyConfig:
        if self.smallest_unit != 10**self.decimal_places:
            raise ValueError("smallest_unit must equal 10 ** decimal_places")
        return self


class CurrenciesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    base: Currency = Currency.EUR
    rates: dict[Currency, CurrencyConfig]

    @model_validator(mode="after")
    def _complete_table(self) -> CurrenciesConfig:
        missing = [c.value for c in Currency if c not in self.rates]
        if missing:
            raise ValueError(f"currencies.rates is missing {missing}")
        if self.rates[self.base].rate != Decimal(1):
            raise ValueError("base currency rate must be exactly 1")
        return self


class CashInRule(BaseModel):
    # Percent is in percent units; max_fee is expressed in base currency.
    model_config = ConfigDict(extra="forbid", frozen=True)
    percent: Decimal = Field(ge=0)
    max_fee: Decimal = Field(ge=0)


class CashOutRule(BaseModel):
    # min_fee and weekly_free_amount are expressed in base currency.
    model_config = ConfigDict(extra="forbid", frozen=True)
    percent: Decimal = Field(ge=0)
    min_fee: Decimal = Field(default=Decimal(0), ge=0)
    weekly_free_amount: Decimal = Field(default=Decimal(0), ge=0)
    weekly_free_operations: int = Field(default=0, ge=0)


class UserTypeFees(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    cash_in: CashInRule
    cash_out: CashOutRule


class LoggingConfig(BaseModel):
    # Structured log output; path=None means JSON lines on stderr.
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    path: str | None = None


class OutputConfig(BaseModel):
    # file_path=None writes fees to stdout.
    model_config = ConfigDict(extra="forbid")
    file_path: str | None = Field(default=None, validation_alias=AliasChoices("file_path", "file"))
    atomic_replace: bool = False


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    scenario: ScenarioConfig = Field(default_factory=ScenarioConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    currencies: CurrenciesConfig
    fees: dict[UserType, UserTypeFees]
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @model_validator(mode="after")
    def _all_user_types(self) -> AppConfig:
        missing = [u.value for u in UserType if u not in self.fees]
        if missing:
            raise ValueError(f"fees is missing user types {missing}")
        return self
