from enum import Enum


class RoomState(str, Enum):
    """客室の利用状態

    FREE -> RESERVED -> OCCUPIED -> FREE の順に遷移する。
    """

    FREE = "FREE"
    RESERVED = "RESERVED"
    OCCUPIED = "OCCUPIED"
