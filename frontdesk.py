# frontdesk.py
import logging
import math
from typing import Iterable, List, Optional, Tuple

from models import ErrorKind, Guest, GuestRegistry, Result, Room, RoomCatalog

logger = logging.getLogger(__name__)


class FrontDesk:
    """Front desk operations over one guest registry and one room catalog.

    Every operation returns a Result; lookups are validated here before the
    room or registry is touched.
    """

    def __init__(self, catalog: RoomCatalog, registry: Optional[GuestRegistry] = None):
        self.catalog = catalog
        self.registry = registry if registry is not None else GuestRegistry()

    @classmethod
    def from_inventory(cls, entries: Iterable) -> "FrontDesk":
        return cls(RoomCatalog.from_inventory(entries))

    # Lookups

    def find_guest(self, guest_id: int) -> Result:
        guest = self.registry.find(guest_id)
        if guest is None:
            return Result.failure(ErrorKind.GUEST_NOT_FOUND,
                                  "Guest not found. Please register the guest first.")
        return Result.success(guest)

    def find_room(self, room_id: int) -> Result:
        room = self.catalog.find(room_id)
        if room is None:
            return Result.failure(ErrorKind.ROOM_NOT_FOUND, "Room not found.")
        return Result.success(room)

    def guests(self) -> List[Guest]:
        return list(self.registry)

    def rooms(self) -> List[Room]:
        return list(self.catalog)

    # Operations

    def register_guest(self, name: str, phone: str) -> Result:
        guest = self.registry.register(name, phone)
        logger.info("registered guest %s (%s)", guest.guest_id, guest.name)
        return Result.success(guest, f"Guest registered: {guest}")

    def reserve_room(self, guest_id: int, room_id: int) -> Result:
        found = self.find_guest(guest_id)
        if not found.ok:
            logger.warning("reserve rejected: guest %s not found", guest_id)
            return found
        guest = found.value

        found = self.find_room(room_id)
        if not found.ok:
            logger.warning("reserve rejected: room %s not found", room_id)
            return found
        room = found.value

        result = room.reserve(guest)
        if not result.ok:
            logger.warning("reserve rejected: room %s already reserved", room_id)
            return result
        logger.info("room %s reserved for guest %s", room_id, guest_id)
        return Result.success(room, f"Room reserved successfully for {guest.name}")

    def cancel_reservation(self, room_id: int) -> Result:
        found = self.find_room(room_id)
        if not found.ok:
            logger.warning("cancel rejected: room %s not found", room_id)
            return found

        if not found.value.cancel():
            logger.info("cancel on room %s: nothing to cancel", room_id)
            return Result.success(False, "The room is already available.")
        logger.info("reservation on room %s cancelled", room_id)
        return Result.success(True, "Reservation cancelled successfully.")

    def add_room_service(self, room_id: int, amount: float) -> Result:
        found = self.find_room(room_id)
        if not found.ok:
            logger.warning("room service rejected: room %s not found", room_id)
            return found
        room = found.value

        if room.is_available():
            logger.warning("room service rejected: room %s not reserved", room_id)
            return Result.failure(ErrorKind.ROOM_NOT_RESERVED,
                                  "The room is not reserved. Room service cannot be added.")
        if amount < 0 or not math.isfinite(amount):
            logger.warning("room service rejected: invalid amount %s", amount)
            return Result.failure(ErrorKind.INVALID_AMOUNT,
                                  "The room service amount must be a finite, non-negative number.")

        charge = room.add_charge(amount)
        logger.info("room service %.2f added to room %s (now %.2f)", amount, room_id, charge)
        return Result.success(charge, f"Room service added. Current charge: {charge}")

    def view_bill(self, room_id: int) -> Result:
        found = self.find_room(room_id)
        if not found.ok:
            logger.warning("bill rejected: room %s not found", room_id)
            return found
        room = found.value

        if room.is_available():
            logger.warning("bill rejected: room %s not reserved", room_id)
            return Result.failure(ErrorKind.ROOM_NOT_RESERVED, "The room is not reserved.")
        total = room.total_due()
        logger.info("bill for room %s: %.2f", room_id, total)
        return Result.success(total, f"Total bill for room {room_id}: {total}")

    def list_available_rooms(self) -> Result:
        rooms: List[Tuple[Room, str]] = [(r, r.describe()) for r in self.catalog.list_available()]
        logger.info("%d rooms available", len(rooms))
        return Result.success(rooms)
