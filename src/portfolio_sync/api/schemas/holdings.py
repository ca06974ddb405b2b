"""Pydantic schemas for the holdings envelope returned by the remote endpoint."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from portfolio_sync.domain.models import Holding


class HoldingSchema(BaseModel):
    """A single holding as it appears on the wire (camelCase `avgPrice`)."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str = Field(min_length=1)
    quantity: int = Field(strict=True)
    ltp: float
    avg_price: float = Field(alias="avgPrice")
    close: float

    def to_domain(self) -> Holding:
        return Holding(
            symbol=self.symbol,
            quantity=self.quantity,
            ltp=self.ltp,
            avg_price=self.avg_price,
            close=self.close,
        )

    @classmethod
    def from_domain(cls, holding: Holding) -> "HoldingSchema":
        return cls(
            symbol=holding.symbol,
            quantity=holding.quantity,
            ltp=holding.ltp,
            avg_price=holding.avg_price,
            close=holding.close,
        )


class PortfolioDataSchema(BaseModel):
    """The `data` object of the envelope."""

    model_config = ConfigDict(populate_by_name=True)

    user_holding: list[HoldingSchema] = Field(alias="userHolding")


class HoldingsEnvelope(BaseModel):
    """Top-level response: {"data": {"userHolding": [...]}}."""

    data: PortfolioDataSchema

    def holdings(self) -> list[Holding]:
        """Return the envelope's holdings as domain objects, in wire order."""
        return [item.to_domain() for item in self.data.user_holding]


# Serialized form of a bare holdings list (used by the snapshot store)
HoldingListAdapter = TypeAdapter(list[HoldingSchema])
