from decimal import Decimal

import pytest

from hotelchain.chain.domain.factory import (
    GuestDetails,
    GuestFactory,
    HotelDetails,
    HotelFactory,
)
from hotelchain.hotel.domain.entity import Hotel
from hotelchain.hotel.domain.enum import RoomKind
from hotelchain.hotel.domain.value_object import HotelName, RoomNumber


class TestHotelFactory:
    def test_create_hotel_with_rooms(self, double_type):
        hotel_details: HotelDetails = {
            "hotel_name": "The Grand Budapest",
            "rooms": [
                {
                    "number": 101,
                    "kind": "DOUBLE",
                    "rate_amount": Decimal("150.00"),
                    "rate_currency": "USD",
                },
                {
                    "number": 201,
                    "kind": "FAMILY",
                    "rate_amount": Decimal("250.00"),
                    "rate_currency": "USD",
                },
            ],
        }

        hotel = HotelFactory().create(hotel_details)

        assert isinstance(hotel, Hotel)
        assert hotel.name == HotelName("The Grand Budapest")
        assert [room.number for room in hotel.rooms] == [
            RoomNumber(101),
            RoomNumber(201),
        ]
        assert hotel.rooms[0].room_type == double_type
        assert hotel.rooms[1].room_type.kind == RoomKind.FAMILY
        assert all(room.is_free() for room in hotel.rooms)

    def test_unknown_room_kind_raises_error(self):
        hotel_details: HotelDetails = {
            "hotel_name": "The Grand Budapest",
            "rooms": [
                {
                    "number": 101,
                    "kind": "PENTHOUSE",
                    "rate_amount": Decimal("1000"),
                    "rate_currency": "USD",
                }
            ],
        }
        with pytest.raises(ValueError):
            HotelFactory().create(hotel_details)

    def test_negative_rate_raises_error(self):
        hotel_details: HotelDetails = {
            "hotel_name": "The Grand Budapest",
            "rooms": [
                {
                    "number": 101,
                    "kind": "SINGLE",
                    "rate_amount": Decimal("-1"),
                    "rate_currency": "USD",
                }
            ],
        }
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            HotelFactory().create(hotel_details)


class TestGuestFactory:
    def test_create_guest_with_identity(self):
        guest_details: GuestDetails = {
            "name": "John Doe",
            "street": "123 Baker St",
            "city": "London",
            "zip_code": "NW1 6XE",
            "identity": {"type": "Passport", "id_number": "UK-1"},
        }

        guest = GuestFactory().create(guest_details)

        assert guest.name == "John Doe"
        assert guest.address.city == "London"
        assert guest.has_identification()

    def test_create_guest_without_identity(self):
        guest_details: GuestDetails = {
            "name": "Jane Doe",
            "street": "1 Main St",
            "city": "Paris",
            "zip_code": "75001",
        }

        guest = GuestFactory().create(guest_details)

        assert not guest.has_identification()
