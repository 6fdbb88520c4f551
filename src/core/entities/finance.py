"""
Financial record entities consumed by the insight pipeline.

All records are immutable inputs owned by the caller.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

UNCATEGORIZED = "Uncategorized"


def _coerce_date(value: Any) -> Any:
    """Accept dates, datetimes and ISO strings with an optional time part."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10 and value[10] in "T ":
        return value[:10]
    return value


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class InvoiceStatus(str, Enum):
    """Lifecycle state of an issued invoice."""

    UNPAID = "unpaid"
    PAID = "paid"
    VOID = "void"


class TaxPaymentType(str, Enum):
    """Kind of tax payment."""

    ESTIMATED = "Estimated"
    ANNUAL = "Annual"
    OTHER = "Other"


class FilingStatus(str, Enum):
    """Tax filing status from the user profile."""

    SINGLE = "single"
    JOINT = "joint"
    HEAD = "head"


class Transaction(BaseModel):
    """
    A single income or expense record.

    Expense amounts may arrive signed or unsigned; analysis always
    works with the magnitude for expenses.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    date: date
    name: str = ""
    category: str = UNCATEGORIZED
    amount: float
    type: TransactionType
    notes: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _coerce_date(v)

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return UNCATEGORIZED
        return v

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def magnitude(self) -> float:
        return abs(self.amount)


class Invoice(BaseModel):
    """An issued invoice. `due` falls back to the issue date."""

    model_config = ConfigDict(frozen=True)

    id: str
    amount: float
    status: InvoiceStatus
    date: date
    due: date | None = None
    client: str = ""

    @field_validator("date", "due", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        if v == "":
            return None
        return _coerce_date(v)

    @property
    def due_date(self) -> date:
        return self.due or self.date

    @property
    def is_unpaid(self) -> bool:
        return self.status == InvoiceStatus.UNPAID


class TaxPayment(BaseModel):
    """A tax payment already made."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: date
    amount: float
    type: TaxPaymentType = TaxPaymentType.ESTIMATED
    note: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _coerce_date(v)


class UserSettings(BaseModel):
    """
    User profile and preferences, consumed read-only.

    Only currency_symbol affects output. The tax fields are carried
    for completeness; the tax rule uses a flat estimate instead.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    business_name: str = ""
    owner_name: str = ""
    tax_rate: float = 0.0
    state_tax_rate: float = 0.0
    filing_status: FilingStatus = FilingStatus.SINGLE
    currency_symbol: str = "$"
