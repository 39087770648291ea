"""Pydantic schemas for request/response validation"""

from seatkit.schemas.common import (
    BaseEntity,
    CamelModel,
    ErrorResponse,
    SuccessResponse,
)
from seatkit.schemas.reservation import (
    CustomerInfo,
    Reservation,
    ReservationCategory,
    ReservationCreate,
    ReservationFilters,
    ReservationSource,
    ReservationStatus,
    ReservationUpdate,
    can_transition,
)
from seatkit.schemas.table import (
    Table,
    TableCreate,
    TableStatus,
    TableUpdate,
    ValidatedTable,
)
from seatkit.schemas.room import Room, RoomCreate, RoomUpdate
from seatkit.schemas.restaurant import (
    Restaurant,
    RestaurantCreate,
    RestaurantUpdate,
    PublicRestaurant,
)
from seatkit.schemas.profile import (
    DEFAULT_PERMISSIONS,
    Permissions,
    Profile,
    UserRole,
)
from seatkit.schemas.sales import (
    DailySales,
    DailySalesCreate,
    MonthlySales,
    ValidatedDailySales,
    YearlySales,
)

__all__ = [
    # Common
    "BaseEntity",
    "CamelModel",
    "ErrorResponse",
    "SuccessResponse",
    # Reservation
    "CustomerInfo",
    "Reservation",
    "ReservationCategory",
    "ReservationCreate",
    "ReservationFilters",
    "ReservationSource",
    "ReservationStatus",
    "ReservationUpdate",
    "can_transition",
    # Table
    "Table",
    "TableCreate",
    "TableStatus",
    "TableUpdate",
    "ValidatedTable",
    # Room
    "Room",
    "RoomCreate",
    "RoomUpdate",
    # Restaurant
    "Restaurant",
    "RestaurantCreate",
    "RestaurantUpdate",
    "PublicRestaurant",
    # Profile
    "DEFAULT_PERMISSIONS",
    "Permissions",
    "Profile",
    "UserRole",
    # Sales
    "DailySales",
    "DailySalesCreate",
    "MonthlySales",
    "ValidatedDailySales",
    "YearlySales",
]
