"""Restaurant configuration schemas"""

import enum
from typing import Annotated, List, Optional

from pydantic import AnyUrl, Field

from seatkit.core.validation import partial_model
from seatkit.schemas.common import (
    BaseEntity,
    CamelModel,
    CurrencyCode,
    DateTime,
    Email,
    NonEmptyString,
    Phone,
    PositiveInt,
    TimeString,
    UUIDString,
)


class DayOfWeek(str, enum.Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class PriceRange(str, enum.Enum):
    BUDGET = "$"
    MODERATE = "$$"
    UPSCALE = "$$$"
    FINE_DINING = "$$$$"


class ServiceBreak(CamelModel):
    start_time: TimeString
    end_time: TimeString


class OperatingHours(CamelModel):
    """Opening hours for one day"""
    day: DayOfWeek
    is_open: bool
    open_time: Optional[TimeString] = None
    close_time: Optional[TimeString] = None
    breaks: Optional[List[ServiceBreak]] = None  # lunch breaks, afternoon closures


class ServicePeriod(CamelModel):
    """A bookable service such as lunch or dinner"""
    name: NonEmptyString
    start_time: TimeString
    end_time: TimeString
    default_duration: PositiveInt  # minutes
    slot_interval: PositiveInt  # minutes
    category: str  # maps to ReservationCategory


class ReservationSettings(CamelModel):
    """Booking rules for a restaurant"""
    advance_booking_days: PositiveInt
    min_advance_hours: PositiveInt

    min_party_size: PositiveInt
    max_party_size: PositiveInt

    default_duration: PositiveInt
    slot_interval: PositiveInt
    turnover_buffer: PositiveInt

    service_periods: List[ServicePeriod]

    send_confirmation_email: bool
    send_confirmation_sms: bool
    send_reminder_email: bool
    send_reminder_sms: bool
    reminder_hours_before: PositiveInt


class Coordinates(CamelModel):
    latitude: Annotated[float, Field(ge=-90, le=90)]
    longitude: Annotated[float, Field(ge=-180, le=180)]


class Address(CamelModel):
    street: NonEmptyString
    city: NonEmptyString
    state: Optional[NonEmptyString] = None
    postal_code: NonEmptyString
    country: NonEmptyString
    coordinates: Optional[Coordinates] = None


class RestaurantFields(CamelModel):
    """Restaurant configuration and settings"""
    name: NonEmptyString
    slug: NonEmptyString
    description: Optional[str] = None

    email: Email
    phone: Phone
    website: Optional[AnyUrl] = None
    address: Address

    logo: Optional[AnyUrl] = None
    cover_image: Optional[AnyUrl] = None
    primary_color: Optional[str] = None

    timezone: NonEmptyString
    currency: CurrencyCode
    locale: NonEmptyString  # "en-US", "it-IT"

    operating_hours: List[OperatingHours]
    reservation_settings: ReservationSettings

    total_seats: PositiveInt
    dining_room_seats: Optional[PositiveInt] = None
    bar_seats: Optional[PositiveInt] = None
    patio_seats: Optional[PositiveInt] = None

    is_active: bool
    is_accepting_reservations: bool

    features: Optional[List[str]] = None
    cuisine_types: Optional[List[str]] = None
    price_range: Optional[PriceRange] = None
    notes: Optional[str] = None


class Restaurant(BaseEntity, RestaurantFields):
    pass


class RestaurantCreate(RestaurantFields):
    """Create restaurant request"""
    is_active: bool = True
    is_accepting_reservations: bool = True


class RestaurantUpdate(partial_model(Restaurant)):
    id: UUIDString
    updated_at: DateTime


class PublicRestaurant(CamelModel):
    """What customers see when booking"""
    id: UUIDString
    name: NonEmptyString
    slug: NonEmptyString
    description: Optional[str] = None
    phone: Phone
    website: Optional[AnyUrl] = None
    address: Address
    logo: Optional[AnyUrl] = None
    cover_image: Optional[AnyUrl] = None
    operating_hours: List[OperatingHours]
    cuisine_types: Optional[List[str]] = None
    price_range: Optional[PriceRange] = None
    is_accepting_reservations: bool
