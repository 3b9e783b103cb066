import threading
from datetime import date

from hotelchain.customer.domain.value_object import ReserverPayer
from hotelchain.hotel.domain.event import ReservationCancelled, ReservationCreated
from hotelchain.hotel.domain.value_object import (
    HotelName,
    ReservationNumber,
    RoomNumber,
    RoomType,
    StayPeriod,
)
from hotelchain.shared.domain import AggregateRoot
from hotelchain.shared.domain.exception import (
    NoAvailabilityException,
    ReservationNotFoundException,
    RoomNotFoundException,
)

from .reservation import Reservation
from .room import Room


class Hotel(AggregateRoot[HotelName]):
    """ホテル集約

    客室在庫と予約台帳を所有し、空室検索・予約作成・予約キャンセルを行う。
    予約作成とキャンセルはホテル単位のロック内で実行する。

    空室判定は客室の状態を日付より優先する。RESERVED / OCCUPIED の客室は
    予約期間に関係なく検索対象外となる。
    """

    def __init__(self, name: HotelName) -> None:
        if name is None:
            raise ValueError("Hotel name cannot be null")
        super().__init__(name)
        self._rooms: list[Room] = []
        self._reservations: list[Reservation] = []
        self._next_reservation_number = 1
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Hotel(name={self.name!s}, rooms={len(self._rooms)})"

    @property
    def name(self) -> HotelName:
        return self._id

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms)

    @property
    def reservations(self) -> tuple[Reservation, ...]:
        return tuple(self._reservations)

    @property
    def lock(self) -> threading.RLock:
        """ホテル単位の排他制御スコープ（再入可能）"""
        return self._lock

    def add_room(self, room: Room) -> None:
        """客室を在庫に追加する（部屋番号の重複は検査しない）"""
        if room is None:
            raise ValueError("Room cannot be null")
        with self._lock:
            self._rooms.append(room)

    def find_room(self, number: RoomNumber) -> Room:
        """部屋番号で客室を検索する（最初に一致したもの）"""
        for room in self._rooms:
            if room.number == number:
                return room
        raise RoomNotFoundException(f"Room {number} not found in {self.name}")

    def find_reservation(self, number: ReservationNumber) -> Reservation:
        """予約番号で予約を検索する"""
        for reservation in self._reservations:
            if reservation.number == number:
                return reservation
        raise ReservationNotFoundException(f"Reservation not found: {number}")

    def reservations_for(self, room: Room) -> tuple[Reservation, ...]:
        return tuple(r for r in self._reservations if r.room == room)

    def available(self, start: date, end: date, room_type: RoomType) -> bool:
        return self.find_available_room(start, end, room_type) is not None

    def find_available_room(
        self, start: date, end: date, room_type: RoomType
    ) -> Room | None:
        """指定タイプ・期間で予約可能な最初の客室を返す（挿入順）"""
        requested = StayPeriod(start=start, end=end)
        for room in self._rooms:
            if room.room_type != room_type:
                continue
            if not room.is_free():
                continue
            if self._has_conflict(room, requested):
                continue
            return room
        return None

    def create_reservation(
        self,
        start: date,
        end: date,
        room_type: RoomType,
        payer: ReserverPayer,
    ) -> Reservation:
        """空室を確保して予約を作成する"""
        if room_type is None:
            raise ValueError("RoomType cannot be null")
        if payer is None:
            raise ValueError("Payer information is required")

        with self._lock:
            room = self.find_available_room(start, end, room_type)
            if room is None:
                raise NoAvailabilityException(
                    f"No available room of type {room_type.kind.value} in {self.name}"
                )

            reservation = Reservation(
                number=ReservationNumber(self._next_reservation_number),
                stay_period=StayPeriod(start=start, end=end),
                payer=payer,
                room=room,
            )
            room.book()
            self._reservations.append(reservation)
            self._next_reservation_number += 1

            self.add_domain_event(
                ReservationCreated(
                    hotel_name=str(self.name),
                    reservation_number=reservation.number.value,
                    room_number=room.number.value,
                    start_date=reservation.start_date,
                    end_date=reservation.end_date,
                )
            )
            return reservation

    def cancel_reservation(self, number: ReservationNumber) -> Reservation:
        """予約をキャンセルし、客室を空室に戻す"""
        with self._lock:
            reservation = self.find_reservation(number)
            # 客室の状態遷移に失敗した場合は台帳を変更しない
            reservation.room.cancel_booking()
            self._reservations.remove(reservation)

            self.add_domain_event(
                ReservationCancelled(
                    hotel_name=str(self.name),
                    reservation_number=reservation.number.value,
                    room_number=reservation.room.number.value,
                )
            )
            return reservation

    def _has_conflict(self, room: Room, requested: StayPeriod) -> bool:
        return any(
            requested.overlaps(reservation.stay_period)
            for reservation in self._reservations
            if reservation.room == room
        )
