"""Action models — the instructions a strategy emits each poll cycle.

Each variant carries only the fields it needs. Quantities are Decimal so
nothing a strategy computes is rounded through float on its way on-chain.
"""

from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from saturnbot.errors import InvalidActionError, UnknownActionTypeError


class ActionType(StrEnum):
    """Type tags a strategy can put on an action."""

    NEW_ORDER = "NewOrder"
    TRADE = "Trade"
    CANCEL_ORDER = "CancelOrder"


class OrderType(StrEnum):
    BUY = "buy"
    SELL = "sell"


class _BaseAction(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    blockchain: str

    @field_validator("blockchain")
    @classmethod
    def _upper_blockchain(cls, v: str) -> str:
        return v.strip().upper()


class NewOrder(_BaseAction):
    """Place a new order on the exchange."""

    type: Literal["NewOrder"] = "NewOrder"
    order_type: OrderType
    amount: Decimal = Field(gt=0)
    price: Decimal = Field(gt=0)

    @field_validator("order_type", mode="before")
    @classmethod
    def _lower_order_type(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v


class Trade(_BaseAction):
    """Fill (part of) an existing order identified by its transaction."""

    type: Literal["Trade"] = "Trade"
    amount: Decimal = Field(gt=0)
    order_tx: str


class CancelOrder(_BaseAction):
    """Cancel an existing order identified by its transaction."""

    type: Literal["CancelOrder"] = "CancelOrder"
    order_tx: str


Action = Annotated[NewOrder | Trade | CancelOrder, Field(discriminator="type")]

ACTION_MODELS: dict[ActionType, type[_BaseAction]] = {
    ActionType.NEW_ORDER: NewOrder,
    ActionType.TRADE: Trade,
    ActionType.CANCEL_ORDER: CancelOrder,
}


def parse_action(raw: Any) -> NewOrder | Trade | CancelOrder:
    """Build a typed Action from a strategy payload.

    Raises UnknownActionTypeError for a missing or unrecognised `type` and
    InvalidActionError when a known type has bad fields.
    """
    if isinstance(raw, (NewOrder, Trade, CancelOrder)):
        return raw
    if not isinstance(raw, Mapping):
        raise UnknownActionTypeError(type(raw).__name__)

    tag = raw.get("type")
    try:
        model = ACTION_MODELS[ActionType(tag)]
    except ValueError:
        raise UnknownActionTypeError(tag) from None

    try:
        return model.model_validate(dict(raw))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidActionError(f"Invalid {tag} action: {problems}") from e
