# models.py
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional


class RoomCategory(Enum):
    LUXURY = "Luxury"
    MATRIMONIAL = "Matrimonial"
    STANDARD = "Standard"


CATEGORY_FEATURES: Dict[RoomCategory, str] = {
    RoomCategory.LUXURY: "Luxury room. Features: butler service, panoramic view, minibar and exclusive decor.",
    RoomCategory.MATRIMONIAL: "Matrimonial room. Features: double bed, romantic decor and amenities for couples.",
    RoomCategory.STANDARD: "Standard room. Features: comfortable bed, private bathroom and WiFi.",
}


class RoomState(Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"


class ErrorKind(Enum):
    GUEST_NOT_FOUND = "guest_not_found"
    ROOM_NOT_FOUND = "room_not_found"
    ALREADY_RESERVED = "already_reserved"
    ROOM_NOT_RESERVED = "room_not_reserved"
    INVALID_AMOUNT = "invalid_amount"


@dataclass
class Result:
    """Outcome of a front desk operation.

    Failures carry an ErrorKind instead of raising, so callers branch on
    ``ok`` / ``error``.
    """
    ok: bool
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @staticmethod
    def success(value: Any = None, message: str = "") -> "Result":
        return Result(ok=True, value=value, message=message)

    @staticmethod
    def failure(error: ErrorKind, message: str) -> "Result":
        return Result(ok=False, error=error, message=message)


@dataclass(frozen=True)
class Guest:
    guest_id: int
    name: str = ""
    phone: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"guest_id": self.guest_id, "name": self.name, "phone": self.phone}

    def __str__(self) -> str:
        return f"ID: {self.guest_id}, Name: {self.name}, Phone: {self.phone}"


@dataclass
class Room:
    room_number: int
    category: RoomCategory
    base_price: float = 0.0
    status: RoomState = RoomState.AVAILABLE
    guest: Optional[Guest] = None       # set only while reserved
    room_service: float = 0.0           # 0 whenever available

    def is_available(self) -> bool:
        return self.status == RoomState.AVAILABLE

    def reserve(self, guest: Guest) -> Result:
        if not self.is_available():
            return Result.failure(ErrorKind.ALREADY_RESERVED, "The room is already reserved.")
        self.guest = guest
        self.status = RoomState.RESERVED
        return Result.success(self)

    def cancel(self) -> bool:
        """Free the room. Returns False when there was nothing to cancel."""
        if self.is_available():
            return False
        self.guest = None
        self.status = RoomState.AVAILABLE
        self.room_service = 0.0
        return True

    def add_charge(self, amount: float) -> float:
        if self.is_available():
            raise ValueError(f"room {self.room_number} is not reserved")
        if amount < 0 or not math.isfinite(amount):
            raise ValueError(f"charge must be finite and non-negative, got {amount}")
        self.room_service += amount
        return self.room_service

    def total_due(self) -> float:
        return self.base_price + self.room_service

    def describe(self) -> str:
        return CATEGORY_FEATURES[self.category]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "room_number": self.room_number,
            "category": self.category.value,
            "base_price": self.base_price,
            "status": self.status.value,
            "guest": self.guest.to_dict() if self.guest else None,
            "room_service": self.room_service,
            "total_due": self.total_due(),
        }

    def __str__(self) -> str:
        state = "Available" if self.is_available() else "Reserved"
        guest = str(self.guest) if self.guest else "No guest"
        return (f"Room {self.room_number} - Type: {self.category.value}, Price: {self.base_price}, "
                f"Status: {state}, Guest: {guest}")


@dataclass
class GuestRegistry:
    guests: List[Guest] = field(default_factory=list)
    next_id: int = 1

    def register(self, name: str, phone: str) -> Guest:
        guest = Guest(guest_id=self.next_id, name=name, phone=phone)
        self.next_id += 1
        self.guests.append(guest)
        return guest

    def find(self, guest_id: int) -> Optional[Guest]:
        for g in self.guests:
            if g.guest_id == guest_id:
                return g
        return None

    def __iter__(self) -> Iterator[Guest]:
        return iter(self.guests)

    def __len__(self) -> int:
        return len(self.guests)


@dataclass
class RoomCatalog:
    rooms: List[Room] = field(default_factory=list)

    @classmethod
    def from_inventory(cls, entries: Iterable) -> "RoomCatalog":
        """Build a catalog from ``(room_number, category, base_price)`` entries."""
        rooms = []
        for rno, category, price in entries:
            if not isinstance(category, RoomCategory):
                category = RoomCategory(category)
            rooms.append(Room(room_number=int(rno), category=category, base_price=float(price)))
        return cls(rooms=rooms)

    def find(self, room_number: int) -> Optional[Room]:
        for r in self.rooms:
            if r.room_number == room_number:
                return r
        return None

    def list_available(self) -> List[Room]:
        return [r for r in self.rooms if r.is_available()]

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    def __len__(self) -> int:
        return len(self.rooms)
