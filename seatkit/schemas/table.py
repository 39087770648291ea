"""Table schemas"""

import enum
from typing import Annotated, List, Optional

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from seatkit.core.validation import partial_model
from seatkit.schemas.common import (
    BaseEntity,
    CamelModel,
    DateTime,
    NonEmptyString,
    NonNegativeInt,
    PositiveInt,
    UUIDString,
)


class TableStatus(str, enum.Enum):
    """Table availability"""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    UNAVAILABLE = "unavailable"  # cleaning, maintenance, etc.


class TableShape(str, enum.Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    RECTANGLE = "rectangle"


class TablePosition(CamelModel):
    """Layout coordinates, origin at the top-left corner"""
    x: NonNegativeInt
    y: NonNegativeInt
    rotation: Optional[Annotated[float, Field(ge=0, le=360)]] = None  # degrees


class TableDimensions(CamelModel):
    width: PositiveInt
    height: PositiveInt


class Table(BaseEntity):
    """A physical table in the restaurant"""
    name: NonEmptyString  # "Table 1", "Bar 3"
    display_name: Optional[NonEmptyString] = None

    min_capacity: PositiveInt
    max_capacity: PositiveInt
    optimal_capacity: PositiveInt

    position: Optional[TablePosition] = None
    dimensions: Optional[TableDimensions] = None
    shape: Optional[TableShape] = None

    status: TableStatus
    is_active: bool

    current_reservation_id: Optional[str] = None
    current_party_size: Optional[PositiveInt] = None

    room_id: Optional[str] = None
    features: Optional[List[str]] = None  # window, corner, booth, high-top
    tags: Optional[List[str]] = None

    notes: Optional[str] = None
    order: Optional[NonNegativeInt] = None


class ValidatedTable(Table):
    """Table with the capacity ordering enforced"""

    @model_validator(mode="after")
    def check_capacity_order(self):
        if not self.min_capacity <= self.optimal_capacity <= self.max_capacity:
            raise PydanticCustomError(
                "capacity_order",
                "Capacity constraints: minCapacity <= optimalCapacity <= maxCapacity",
                {"field": "capacity"},
            )
        return self


class TableCreate(CamelModel):
    """Create table request"""
    name: NonEmptyString
    display_name: Optional[NonEmptyString] = None
    min_capacity: PositiveInt
    max_capacity: PositiveInt
    optimal_capacity: PositiveInt
    position: Optional[TablePosition] = None
    dimensions: Optional[TableDimensions] = None
    shape: Optional[TableShape] = None
    status: TableStatus = TableStatus.AVAILABLE
    is_active: bool = True
    current_reservation_id: Optional[str] = None
    current_party_size: Optional[PositiveInt] = None
    room_id: Optional[str] = None
    features: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None
    order: Optional[NonNegativeInt] = None


class TableUpdate(partial_model(Table)):
    """Update table request; id and updatedAt are always required"""
    id: UUIDString
    updated_at: DateTime


class TableFilters(CamelModel):
    status: Optional[List[TableStatus]] = None
    is_active: Optional[bool] = None
    room_id: Optional[str] = None
    min_capacity: Optional[PositiveInt] = None
    max_capacity: Optional[PositiveInt] = None
    features: Optional[List[str]] = None
    tags: Optional[List[str]] = None


class TableAvailability(CamelModel):
    """Availability of one table for a time slot"""
    table_id: str
    is_available: bool
    reason: Optional[str] = None
    next_available_at: Optional[DateTime] = None
