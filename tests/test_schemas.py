"""Tests for the domain schemas"""

from datetime import datetime, timezone

import pytest

from seatkit.core.result import Err, Ok
from seatkit.core.validation import validate
from seatkit.schemas.common import CurrencyCode, DateString, DateTime, Money, Phone, TimeString, UUIDString
from seatkit.schemas.profile import DEFAULT_PERMISSIONS, ProfileCreate, UserRole
from seatkit.schemas.reservation import ReservationStatus, can_transition
from seatkit.schemas.restaurant import Coordinates
from seatkit.schemas.room import RoomUpdate
from seatkit.schemas.sales import DailySalesCreate, ValidatedDailySales
from seatkit.schemas.table import TablePosition, TableUpdate, ValidatedTable


@pytest.mark.parametrize("phone", ["+1-555-123-4567", "(555) 123-4567", "555.123.4567", "+44 20 7946 0958"])
def test_phone_accepts_common_formats(phone):
    assert validate(Phone, phone) == Ok(phone)


@pytest.mark.parametrize(
    "phone, message",
    [
        ("123", "Phone number too short"),
        ("1" * 21, "Phone number too long"),
        ("555-123-ABCD", "Phone number can only contain digits, spaces, hyphens, parentheses, dots, and plus sign"),
        ("(((555)))--", "Phone number must contain between 10 and 15 digits"),
    ],
)
def test_phone_rejections(phone, message):
    result = validate(Phone, phone)

    assert isinstance(result, Err)
    assert result.error.details == [f"_general: {message}"]


def test_datetime_is_coerced_to_utc():
    assert validate(DateTime, "2025-01-15T14:30:00+02:00").value == datetime(2025, 1, 15, 12, 30, tzinfo=timezone.utc)
    # Naive values are taken as UTC
    assert validate(DateTime, "2025-01-15T14:30:00").value == datetime(2025, 1, 15, 14, 30, tzinfo=timezone.utc)
    assert validate(DateTime, 0).value == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_date_and_time_strings():
    assert isinstance(validate(DateString, "2025-01-15"), Ok)
    assert isinstance(validate(DateString, "15/01/2025"), Err)
    assert isinstance(validate(TimeString, "14:30"), Ok)
    assert isinstance(validate(TimeString, "14:30:00"), Ok)
    assert isinstance(validate(TimeString, "2pm"), Err)


def test_uuid_string_requires_canonical_form():
    assert isinstance(validate(UUIDString, "6f1c1b0e-8d1a-4a8e-9d53-2b7f3f1f0c11"), Ok)

    result = validate(UUIDString, "6f1c1b0e8d1a4a8e9d532b7f3f1f0c11")
    assert result.error.details == ["_general: Invalid UUID format"]


def test_money_is_a_non_negative_integer():
    assert validate(Money, 1050) == Ok(1050)
    assert isinstance(validate(Money, -1), Err)
    assert isinstance(validate(Money, 10.5), Err)
    assert isinstance(validate(Money, "1050"), Err)


def test_currency_code_is_upper_cased():
    assert validate(CurrencyCode, "usd") == Ok("USD")
    assert isinstance(validate(CurrencyCode, "US"), Err)


def test_status_transitions():
    assert can_transition(ReservationStatus.PENDING, ReservationStatus.CONFIRMED)
    assert can_transition(ReservationStatus.CONFIRMED, ReservationStatus.SEATED)
    assert can_transition(ReservationStatus.SEATED, ReservationStatus.COMPLETED)
    assert can_transition(ReservationStatus.SEATED, ReservationStatus.SEATED)
    assert not can_transition(ReservationStatus.PENDING, ReservationStatus.COMPLETED)
    assert not can_transition(ReservationStatus.CANCELLED, ReservationStatus.CONFIRMED)


def test_table_capacity_order(table_data):
    assert isinstance(validate(ValidatedTable, table_data), Ok)

    table_data["maxCapacity"] = 3
    result = validate(ValidatedTable, table_data)
    assert list(result.error.fields) == ["capacity"]


def test_table_position_bounds():
    assert isinstance(validate(TablePosition, {"x": 0, "y": 10, "rotation": 360}), Ok)

    result = validate(TablePosition, {"x": -1, "y": 0, "rotation": 400})
    assert set(result.error.fields) == {"x", "rotation"}


def test_table_update_requires_id_and_updated_at(table_data):
    result = validate(TableUpdate, {"name": "Bar 3"})
    assert set(result.error.fields) == {"id", "updatedAt"}

    update = validate(
        TableUpdate,
        {"id": table_data["id"], "updatedAt": table_data["updatedAt"], "maxCapacity": 8},
    ).value
    assert update.model_dump(exclude_unset=True, by_alias=True) == {
        "id": update.id,
        "updatedAt": update.updated_at,
        "maxCapacity": 8,
    }


def test_room_update_checks_present_fields(table_data):
    result = validate(
        RoomUpdate,
        {"id": table_data["id"], "updatedAt": table_data["updatedAt"], "name": ""},
    )

    assert list(result.error.fields) == ["name"]


def test_coordinates_bounds():
    assert isinstance(validate(Coordinates, {"latitude": 45.4, "longitude": 9.19}), Ok)

    result = validate(Coordinates, {"latitude": 91, "longitude": -181})
    assert set(result.error.fields) == {"latitude", "longitude"}


@pytest.fixture
def daily_sales():
    return {
        "id": "6f1c1b0e-8d1a-4a8e-9d53-2b7f3f1f0c11",
        "createdAt": "2025-01-15T23:00:00Z",
        "updatedAt": "2025-01-15T23:00:00Z",
        "date": "2025-01-15",
        "restaurantId": "r-1",
        "totalSales": 150000,
        "currency": "usd",
        "salesByCategory": {"lunch": 50000, "dinner": 90000, "special": 0, "walkIn": 10000, "other": 0},
        "totalCovers": 40,
        "coversByCategory": {"lunch": 15, "dinner": 20, "special": 0, "walkIn": 5, "other": 0},
        "isEditable": True,
        "createdBy": "manager-1",
    }


def test_daily_sales_totals(daily_sales):
    result = validate(ValidatedDailySales, daily_sales)
    assert isinstance(result, Ok)
    assert result.value.currency == "USD"

    daily_sales["totalSales"] = 1
    assert validate(ValidatedDailySales, daily_sales).error.fields == {
        "totalSales": ["Total sales must equal sum of category sales"],
    }


def test_daily_sales_covers_total(daily_sales):
    daily_sales["totalCovers"] = 41

    assert validate(ValidatedDailySales, daily_sales).error.fields == {
        "totalCovers": ["Total covers must equal sum of category covers"],
    }


def test_average_check_size(daily_sales):
    for key in ("id", "createdAt", "updatedAt"):
        daily_sales.pop(key)
    create = DailySalesCreate.model_validate(daily_sales)

    assert create.average_check_size() == 3750

    create.total_sales = 1001
    create.total_covers = 2
    assert create.average_check_size() == 501  # 500.5 rounds up

    create.total_covers = 0
    assert create.average_check_size() is None


def test_profile_defaults_to_role_permissions():
    profile = ProfileCreate.model_validate(
        {"email": "sam@example.com", "firstName": "Sam", "lastName": "Lee", "role": "staff"}
    )

    permissions = profile.resolved_permissions()
    assert permissions == DEFAULT_PERMISSIONS[UserRole.STAFF]
    assert permissions.can_create_reservations
    assert not permissions.can_delete_reservations
    assert all(DEFAULT_PERMISSIONS[UserRole.OWNER].model_dump().values())
