# config.py
from models import RoomCategory


# Reference deployment: two rooms of each category
DEFAULT_ROOM_INVENTORY = [
    (1, RoomCategory.LUXURY.value, 150.0),
    (2, RoomCategory.LUXURY.value, 150.0),
    (3, RoomCategory.MATRIMONIAL.value, 120.0),
    (4, RoomCategory.MATRIMONIAL.value, 120.0),
    (5, RoomCategory.STANDARD.value, 80.0),
    (6, RoomCategory.STANDARD.value, 80.0),
]


class DefaultConfig:
    SECRET_KEY = "dev-secret"
    ROOM_INVENTORY = DEFAULT_ROOM_INVENTORY
    LOG_LEVEL = "INFO"
