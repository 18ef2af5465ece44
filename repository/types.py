"""
Module Types (Repository)
=========================

Record types and constants shared by the accounting repository, the services
and the pages.

Constants
---------
- `BookingStatus`, `LessonType`, `PaymentMethod`, `ExpenseCategory`: Literals
  for the allowed values of each enumerated field.
- `METHOD_LABELS`, `CATEGORY_LABELS`: display labels used by the forms.
- `DEPOSIT_RATIO`, `DEPOSIT_MIN`: suggested deposit rule (30 %, min. 120 €).
- `DEFAULT_RENT`, `DEFAULT_REVERSAL_PERCENT`: Palmeiras form defaults.

Records
-------
Flat dataclasses, one per entity. Dates are ISO strings (`YYYY-MM-DD`) and
months are `YYYY-MM`, exactly as they come from the fixtures. References
between records are plain string ids resolved at read time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

# ------------------ Types and constants ------------------

BookingStatus = Literal["confirmed", "provisional", "cancelled"]
LessonType = Literal["private", "group", "supervision"]
PaymentMethod = Literal["cash_eur", "cash_mzn", "transfer", "card_palmeiras"]
ExpenseCategory = Literal["equipment", "maintenance", "accommodation", "transport", "other"]
RentalSlot = Literal["morning", "afternoon", "full_day"]
ExternalProvider = Literal["palmeiras", "other"]

BOOKING_STATUSES = ("confirmed", "provisional", "cancelled")
LESSON_TYPES = ("private", "group", "supervision")

METHOD_LABELS = {
    "cash_eur": "Cash EUR",
    "cash_mzn": "Cash MZN",
    "transfer": "Transfer",
    "card_palmeiras": "Card (Palmeiras)",
}

CATEGORY_LABELS = {
    "equipment": "Equipment",
    "maintenance": "Maintenance",
    "accommodation": "Accommodation",
    "transport": "Transport",
    "other": "Other",
}

ALLOWED_METHODS = set(METHOD_LABELS)
ALLOWED_CATEGORIES = set(CATEGORY_LABELS)

DEPOSIT_RATIO = 0.30
DEPOSIT_MIN = 120
DEFAULT_RENT = 850.0
DEFAULT_REVERSAL_PERCENT = 15.0


# ------------------ Reference data ------------------

@dataclass
class Client:
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Room:
    id: str
    accommodation_id: str
    name: str
    capacity: int = 2


@dataclass
class Booking:
    """A stay at the center. `booking_number` is displayed as `#001`."""
    id: str
    booking_number: int
    client_id: str
    check_in: str
    check_out: str
    status: BookingStatus = "confirmed"
    notes: Optional[str] = None


@dataclass
class BookingRoom:
    booking_id: str
    room_id: str


@dataclass
class BookingRoomPrice:
    """Nightly price snapshot taken when the booking was made (allows promos)."""
    booking_id: str
    room_id: str
    price_per_night: float
    override_note: Optional[str] = None


@dataclass
class ExternalAccommodation:
    id: str
    name: str
    provider: ExternalProvider = "other"
    cost_per_night: float = 0.0
    sell_price_per_night: float = 0.0


@dataclass
class ExternalAccommodationBooking:
    """Nights sold in an external accommodation (prices are snapshots)."""
    id: str
    booking_id: str
    external_accommodation_id: str
    check_in: str
    check_out: str
    cost_per_night: float
    sell_price_per_night: float
    notes: Optional[str] = None


@dataclass
class Instructor:
    """Hourly rates per lesson type."""
    id: str
    first_name: str
    last_name: str
    rate_private: float
    rate_group: float
    rate_supervision: float

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Lesson:
    id: str
    booking_id: str
    instructor_id: str
    date: str
    duration_hours: float
    type: LessonType


@dataclass
class EquipmentRental:
    id: str
    booking_id: Optional[str]
    date: str
    slot: RentalSlot
    price: float


@dataclass
class TaxiTrip:
    """`center_margin` = client price − driver cost − taxi manager margin."""
    id: str
    booking_id: Optional[str]
    date: str
    type: str
    nb_persons: int
    price_paid_by_client: float
    center_margin: float


@dataclass
class Season:
    """Mid-September to mid-March, one per year."""
    id: str
    label: str
    start_date: str
    end_date: str


# ------------------ Mutable ledgers ------------------

@dataclass
class Payment:
    """Client payment, always in EUR."""
    id: str
    booking_id: str
    date: str
    amount: float
    method: PaymentMethod = "transfer"
    is_deposit: bool = False
    notes: Optional[str] = None


@dataclass
class InstructorDebt:
    """Advance given to an instructor (dinner, outing...), owed back to the center."""
    id: str
    instructor_id: str
    date: str
    amount: float
    description: str


@dataclass
class InstructorPayment:
    id: str
    instructor_id: str
    date: str
    amount: float
    method: PaymentMethod = "cash_eur"
    notes: Optional[str] = None


@dataclass
class LessonRateOverride:
    """Accounting override of one lesson rate. `note` justifies it."""
    id: str
    lesson_id: str
    rate: float
    note: str


@dataclass
class Expense:
    id: str
    date: str
    category: ExpenseCategory
    amount: float
    description: str
    palmeiras_related: bool = False


@dataclass
class PalmeirasRent:
    """Monthly rent paid to Palmeiras for the house."""
    id: str
    month: str
    amount: float
    notes: Optional[str] = None


@dataclass
class PalmeirasReversal:
    """Monthly % of Palmeiras' own bookings owed to the center.

    `net_amount` = gross_amount × percent / 100 (rounded to cents).
    """
    id: str
    month: str
    gross_amount: float
    percent: float
    net_amount: float
    notes: Optional[str] = None


# ------------------ Shared data object ------------------

@dataclass
class AccountingData:
    """Arrays handed from the accounting page to every tab."""
    bookings: List[Booking] = field(default_factory=list)
    clients: List[Client] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)
    booking_rooms: List[BookingRoom] = field(default_factory=list)
    booking_room_prices: List[BookingRoomPrice] = field(default_factory=list)
    external_accommodation_bookings: List[ExternalAccommodationBooking] = field(default_factory=list)
    external_accommodations: List[ExternalAccommodation] = field(default_factory=list)
    lessons: List[Lesson] = field(default_factory=list)
    instructors: List[Instructor] = field(default_factory=list)
    equipment_rentals: List[EquipmentRental] = field(default_factory=list)
    taxi_trips: List[TaxiTrip] = field(default_factory=list)
    seasons: List[Season] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)
    instructor_debts: List[InstructorDebt] = field(default_factory=list)
    instructor_payments: List[InstructorPayment] = field(default_factory=list)
    lesson_rate_overrides: List[LessonRateOverride] = field(default_factory=list)
    expenses: List[Expense] = field(default_factory=list)
    palmeiras_rents: List[PalmeirasRent] = field(default_factory=list)
    palmeiras_reversals: List[PalmeirasReversal] = field(default_factory=list)


# Explicit public API
__all__ = [
    "BookingStatus", "LessonType", "PaymentMethod", "ExpenseCategory", "RentalSlot",
    "BOOKING_STATUSES", "LESSON_TYPES", "METHOD_LABELS", "CATEGORY_LABELS",
    "ALLOWED_METHODS", "ALLOWED_CATEGORIES",
    "DEPOSIT_RATIO", "DEPOSIT_MIN", "DEFAULT_RENT", "DEFAULT_REVERSAL_PERCENT",
    "Client", "Room", "Booking", "BookingRoom", "BookingRoomPrice",
    "ExternalAccommodation", "ExternalAccommodationBooking",
    "Instructor", "Lesson", "EquipmentRental", "TaxiTrip", "Season",
    "Payment", "InstructorDebt", "InstructorPayment", "LessonRateOverride",
    "Expense", "PalmeirasRent", "PalmeirasReversal", "AccountingData",
]
