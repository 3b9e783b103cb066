from hotelchain.customer.domain.value_object import Guest
from hotelchain.hotel.domain.enum import RoomState
from hotelchain.hotel.domain.value_object import RoomNumber, RoomType
from hotelchain.shared.domain import Entity
from hotelchain.shared.domain.exception import InvalidStateTransitionException


class Room(Entity[RoomNumber]):
    """客室エンティティ

    状態遷移: FREE -> RESERVED -> OCCUPIED -> FREE
    宿泊者が設定されているのは OCCUPIED のときのみ。
    """

    def __init__(self, number: RoomNumber, room_type: RoomType) -> None:
        if number is None:
            raise ValueError("Room number cannot be null")
        if room_type is None:
            raise ValueError("RoomType cannot be null")
        super().__init__(number)
        self._room_type = room_type
        self._state = RoomState.FREE
        self._occupant: Guest | None = None

    def __repr__(self) -> str:
        return f"Room(number={self.number}, state={self._state.value})"

    @property
    def number(self) -> RoomNumber:
        return self._id

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def state(self) -> RoomState:
        return self._state

    @property
    def occupant(self) -> Guest | None:
        return self._occupant

    def is_free(self) -> bool:
        return self._state == RoomState.FREE

    def is_booked(self) -> bool:
        return self._state == RoomState.RESERVED

    def is_occupied(self) -> bool:
        return self._state == RoomState.OCCUPIED

    def book(self) -> None:
        """予約済みにする"""
        self._ensure_state(RoomState.FREE, "book")
        self._state = RoomState.RESERVED

    def cancel_booking(self) -> None:
        """予約を取り消して空室に戻す"""
        self._ensure_state(RoomState.RESERVED, "cancel booking for")
        self._state = RoomState.FREE

    def check_in(self, guest: Guest) -> None:
        """宿泊者をチェックインさせる"""
        self._ensure_state(RoomState.RESERVED, "check in to")
        if guest is None:
            raise ValueError("Guest cannot be null")
        self._state = RoomState.OCCUPIED
        self._occupant = guest

    def check_out(self) -> None:
        """宿泊者をチェックアウトさせる"""
        self._ensure_state(RoomState.OCCUPIED, "check out from")
        self._state = RoomState.FREE
        self._occupant = None

    def _ensure_state(self, expected: RoomState, action: str) -> None:
        if self._state != expected:
            raise InvalidStateTransitionException(
                f"Cannot {action} room {self.number} in {self._state.value} state "
                f"(expected {expected.value})"
            )
