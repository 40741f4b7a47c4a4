"""Order and trade records as indexed by the exchange's query API."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from saturnbot.errors import UnknownChainError
from saturnbot.models.actions import OrderType
from saturnbot.models.chains import Chain


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    @field_validator("blockchain", mode="before", check_fields=False)
    @classmethod
    def _parse_chain(cls, v: Any) -> Chain:
        # a bad value from the API is a validation failure, not a config error
        try:
            return Chain.parse(v)
        except UnknownChainError as e:
            raise ValueError(str(e)) from None


class ExchangeOrder(_ApiModel):
    """An order resting on one of the exchange contracts."""

    order_id: int
    contract: str
    type: OrderType
    price: Decimal
    balance: Decimal = Decimal(0)
    transaction: str
    blockchain: Chain
    token: str

    @field_validator("type", mode="before")
    @classmethod
    def _lower_type(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v


class ExchangeTrade(_ApiModel):
    """A trade that filled (part of) an order."""

    transaction: str
    order_id: int
    amount: Decimal
    blockchain: Chain
