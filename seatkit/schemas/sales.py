"""Sales reporting schemas"""

from typing import Annotated, List, Optional

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from seatkit.schemas.common import (
    BaseEntity,
    CamelModel,
    CurrencyCode,
    DateString,
    Money,
    NonNegativeInt,
)

Year = Annotated[int, Field(strict=True, ge=2000, le=2100)]
Month = Annotated[int, Field(strict=True, ge=1, le=12)]


class SalesByCategory(CamelModel):
    """Sales per reservation category, in minor units"""
    lunch: Money
    dinner: Money
    special: Money
    walk_in: Money
    other: Money

    def total(self) -> int:
        return self.lunch + self.dinner + self.special + self.walk_in + self.other


class CoverCount(CamelModel):
    """Guests served per reservation category"""
    lunch: NonNegativeInt
    dinner: NonNegativeInt
    special: NonNegativeInt
    walk_in: NonNegativeInt
    other: NonNegativeInt

    def total(self) -> int:
        return self.lunch + self.dinner + self.special + self.walk_in + self.other


class DailySales(BaseEntity):
    """Sales for one day"""
    date: DateString
    restaurant_id: str

    total_sales: Money
    currency: CurrencyCode
    sales_by_category: SalesByCategory

    total_covers: NonNegativeInt
    covers_by_category: CoverCount

    average_check_size: Optional[Money] = None

    notes: Optional[str] = None
    is_editable: bool  # managers only
    created_by: str


class ValidatedDailySales(DailySales):
    """Daily sales whose totals agree with the category breakdowns"""

    @model_validator(mode="after")
    def check_totals(self):
        if self.total_sales != self.sales_by_category.total():
            raise PydanticCustomError(
                "sales_total",
                "Total sales must equal sum of category sales",
                {"field": "totalSales"},
            )
        if self.total_covers != self.covers_by_category.total():
            raise PydanticCustomError(
                "covers_total",
                "Total covers must equal sum of category covers",
                {"field": "totalCovers"},
            )
        return self


class DailySalesCreate(CamelModel):
    """Create daily sales request; the average check is computed"""
    date: DateString
    restaurant_id: str
    total_sales: Money
    currency: CurrencyCode
    sales_by_category: SalesByCategory
    total_covers: NonNegativeInt
    covers_by_category: CoverCount
    notes: Optional[str] = None
    is_editable: bool = True
    created_by: str

    def average_check_size(self) -> Optional[int]:
        if not self.total_covers:
            return None
        # half-up integer division
        return (self.total_sales * 2 + self.total_covers) // (self.total_covers * 2)


class MonthlySales(CamelModel):
    year: Year
    month: Month
    restaurant_id: str
    total_sales: Money
    currency: CurrencyCode
    sales_by_category: SalesByCategory
    total_covers: NonNegativeInt
    covers_by_category: CoverCount
    average_check_size: Money
    average_daily_sales: Money
    days_open: NonNegativeInt


class YearlySales(CamelModel):
    year: Year
    restaurant_id: str
    total_sales: Money
    currency: CurrencyCode
    sales_by_category: SalesByCategory
    total_covers: NonNegativeInt
    covers_by_category: CoverCount
    average_check_size: Money
    average_monthly_sales: Money
    months_data: List[MonthlySales]


class SalesFilters(CamelModel):
    restaurant_id: str
    date_from: Optional[DateString] = None
    date_to: Optional[DateString] = None
    min_sales: Optional[Money] = None
    max_sales: Optional[Money] = None
    min_covers: Optional[NonNegativeInt] = None
    max_covers: Optional[NonNegativeInt] = None
