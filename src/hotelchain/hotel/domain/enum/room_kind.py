from enum import Enum


class RoomKind(str, Enum):
    """客室の種類"""

    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    FAMILY = "FAMILY"
    SUITE = "SUITE"
