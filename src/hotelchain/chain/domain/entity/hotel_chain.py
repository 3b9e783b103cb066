from datetime import date

from hotelchain.chain.domain.value_object import ChainName
from hotelchain.customer.domain.value_object import (
    CreditCard,
    Guest,
    Identity,
    ReserverPayer,
)
from hotelchain.hotel.domain.entity import Hotel, Reservation, Room
from hotelchain.hotel.domain.event import GuestCheckedIn, GuestCheckedOut
from hotelchain.hotel.domain.value_object import (
    ReservationNumber,
    RoomNumber,
    RoomType,
)
from hotelchain.shared.domain import AggregateRoot
from hotelchain.shared.domain.exception import (
    HotelNotFoundException,
    NoAvailabilityException,
    ReserverPayerNotFoundException,
)


class HotelChain(AggregateRoot[ChainName]):
    """ホテルチェーン集約

    ホテルと顧客（予約者兼支払者）を管理し、ホテル名・部屋番号で指定された
    操作を該当するホテル・客室に振り分ける。
    """

    def __init__(self, name: ChainName) -> None:
        if name is None:
            raise ValueError("Hotel chain name is required")
        super().__init__(name)
        self._hotels: list[Hotel] = []
        self._customers: list[ReserverPayer] = []

    def __repr__(self) -> str:
        return f"HotelChain(name={self.name!s}, hotels={len(self._hotels)})"

    @property
    def name(self) -> ChainName:
        return self._id

    @property
    def hotels(self) -> tuple[Hotel, ...]:
        return tuple(self._hotels)

    @property
    def customers(self) -> tuple[ReserverPayer, ...]:
        return tuple(self._customers)

    def add_hotel(self, hotel: Hotel) -> None:
        """ホテルを追加する（名前の重複は呼び出し側の責務）"""
        if hotel is None:
            raise ValueError("Cannot add a null hotel to the chain")
        self._hotels.append(hotel)

    def create_reserver_payer(
        self, identity: Identity, credit_card: CreditCard
    ) -> ReserverPayer:
        """顧客を登録する"""
        payer = ReserverPayer(identity=identity, credit_card=credit_card)
        self._customers.append(payer)
        return payer

    def find_reserver_payer(self, identity: Identity) -> ReserverPayer:
        for payer in self._customers:
            if payer.identity == identity:
                return payer
        raise ReserverPayerNotFoundException(f"Customer not registered: {identity}")

    def find_hotel(self, name: str) -> Hotel:
        """ホテル名で検索する（大文字小文字を区別しない、最初に一致したもの）"""
        for hotel in self._hotels:
            if hotel.name.matches(name):
                return hotel
        raise HotelNotFoundException(f"Hotel '{name}' does not belong to this chain")

    def make_reservation(
        self,
        hotel_name: str,
        start: date,
        end: date,
        room_type: RoomType,
        payer: ReserverPayer,
    ) -> Reservation:
        """指定ホテルで客室を予約する"""
        hotel = self.find_hotel(hotel_name)
        if room_type is None:
            raise ValueError("RoomType cannot be null")

        with hotel.lock:
            if not hotel.available(start, end, room_type):
                raise NoAvailabilityException(
                    f"Sorry, no {room_type.kind.value} rooms available in {hotel.name}"
                )
            return hotel.create_reservation(start, end, room_type, payer)

    def cancel_reservation(
        self, hotel_name: str, reservation_number: ReservationNumber
    ) -> Reservation:
        return self.find_hotel(hotel_name).cancel_reservation(reservation_number)

    def check_in_guest(
        self, hotel_name: str, room_number: RoomNumber, guest: Guest
    ) -> Room:
        """チェックイン（予約台帳は参照せず、客室の状態のみで判定する）"""
        hotel = self.find_hotel(hotel_name)
        room = hotel.find_room(room_number)

        with hotel.lock:
            room.check_in(guest)

        self.add_domain_event(
            GuestCheckedIn(
                hotel_name=str(hotel.name),
                room_number=room.number.value,
                guest_name=guest.name,
            )
        )
        return room

    def check_out_guest(self, hotel_name: str, room_number: RoomNumber) -> Room:
        """チェックアウト"""
        hotel = self.find_hotel(hotel_name)
        room = hotel.find_room(room_number)

        with hotel.lock:
            room.check_out()

        self.add_domain_event(
            GuestCheckedOut(hotel_name=str(hotel.name), room_number=room.number.value)
        )
        return room

    def flush_all_domain_events(self) -> list:
        """チェーン自身と配下ホテルのドメインイベントをまとめて取り出す"""
        events = self.flush_domain_events()
        for hotel in self._hotels:
            events.extend(hotel.flush_domain_events())
        return events
