from decimal import Decimal
from typing import TypedDict

from hotelchain.hotel.domain.entity import Hotel, Room
from hotelchain.hotel.domain.enum import RoomKind
from hotelchain.hotel.domain.value_object import HotelName, RoomNumber, RoomType
from hotelchain.shared.domain import Currency, Money


class RoomDetails(TypedDict):
    """客室の入力データ"""

    number: int
    kind: str
    rate_amount: Decimal
    rate_currency: str


class HotelDetails(TypedDict):
    """ホテルの入力データ"""

    hotel_name: str
    rooms: list[RoomDetails]


class HotelFactory:
    """ホテルと客室在庫を生成するFactory"""

    def create(self, hotel_details: HotelDetails) -> Hotel:
        """客室を登録済みのホテルを生成する"""
        hotel = Hotel(name=HotelName(hotel_details["hotel_name"]))
        for room_details in hotel_details["rooms"]:
            hotel.add_room(self.create_room(room_details))
        return hotel

    def create_room(self, room_details: RoomDetails) -> Room:
        room_type = RoomType(
            kind=RoomKind(room_details["kind"]),
            rate=Money(
                amount=room_details["rate_amount"],
                currency=Currency(room_details["rate_currency"]),
            ),
        )
        return Room(number=RoomNumber(room_details["number"]), room_type=room_type)
