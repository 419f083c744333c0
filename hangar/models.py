from sqlmodel import SQLModel, Field, Column, DateTime
from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from enum import Enum

from hangar.utils import to_epoch_millis


class ShipType(str, Enum):
    """Ship type constants"""
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort keys accepted by the ship listing"""
    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"

    @property
    def field_name(self) -> str:
        return {
            ShipOrder.ID: "id",
            ShipOrder.SPEED: "speed",
            ShipOrder.DATE: "prod_date",
            ShipOrder.RATING: "rating",
        }[self]


# Database Models
class ShipBase(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, description="Ship name")
    planet: str = Field(max_length=50, description="Home planet")
    ship_type: ShipType = Field(description="TRANSPORT, MILITARY or MERCHANT")
    prod_date: datetime = Field(
        description="Production date",
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    is_used: bool = Field(default=False, description="Whether the ship is second-hand")
    speed: float = Field(description="Speed in fractions of light speed")
    crew_size: int = Field(description="Crew size")
    rating: float = Field(description="Derived from speed, used flag and production year")


class Ship(ShipBase, table=True):
    __tablename__ = "ships"  # type: ignore


# API Request/Response Models
class ShipPayload(BaseModel):
    """Candidate ship fields as sent by the client.

    Every field is optional here: creation checks that the required ones are
    present, partial update applies only those that are. ``prodDate`` is epoch
    milliseconds. Client-sent ``id`` and ``rating`` are dropped.
    """

    model_config = ConfigDict(
        extra="ignore", alias_generator=to_camel, populate_by_name=True
    )

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    prod_date: Optional[int] = None
    is_used: Optional[bool] = None
    speed: Optional[float] = None
    crew_size: Optional[int] = None


class CreateShipRequest(ShipPayload):
    pass


class UpdateShipRequest(ShipPayload):
    pass


class ShipResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float

    @field_serializer("prod_date")
    def serialize_prod_date(self, value: datetime) -> int:
        return to_epoch_millis(value)


class ErrorResponse(BaseModel):
    detail: str


class ShipFilter(BaseModel):
    """Optional listing criteria; a criterion left as None does not constrain the result"""

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None
