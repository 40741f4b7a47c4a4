"""BotConfig — the trading bot's JSON configuration file."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from saturnbot.errors import ConfigurationError
from saturnbot.models.chains import Chain


class BotConfig(BaseModel):
    """Process-wide trading configuration, loaded once at startup.

    Keys are spelled in camelCase in the file (`fundMinimum`, `dustCutoff`,
    ...). Unknown keys are kept so the strategy can read its own settings.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="allow",
    )

    blockchain: Chain
    token: str = Field(min_length=1)
    fund_minimum: Decimal = Field(ge=0)
    token_limit: Decimal = Field(ge=0)
    spread: Decimal = Field(ge=0)
    dust_cutoff: Decimal = Field(ge=0)
    band_size: Decimal = Field(ge=0)
    provider: str | None = None  # RPC URL override
    exchange: str | None = None  # exchange contract used for new orders
    strategy: str | None = None  # "module:attr"

    @field_validator("blockchain", mode="before")
    @classmethod
    def _parse_chain(cls, v: Any) -> Chain:
        return Chain.parse(v)

    @property
    def rpc_url(self) -> str:
        return self.provider or self.blockchain.default_rpc_url

    @property
    def extras(self) -> dict[str, Any]:
        """Keys from the file that BotConfig itself does not use."""
        return dict(self.model_extra or {})


def load_config(path: str | Path) -> BotConfig:
    """Read and validate a bot config file.

    Numbers are parsed straight to Decimal; any problem is reported as a
    ConfigurationError.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read bot config {path}: {e.strerror}") from e

    try:
        data = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Bot config {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Bot config {path} must be a JSON object")

    try:
        return BotConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid bot config {path}: {problems}") from e
