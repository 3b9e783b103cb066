from decimal import Decimal

import pytest

from hotelchain.hotel.domain.enum import RoomKind
from hotelchain.hotel.domain.value_object import (
    ReservationNumber,
    RoomNumber,
    RoomType,
)
from hotelchain.shared.domain import Money


class TestRoomType:
    def test_equal_when_kind_and_rate_match(self):
        assert RoomType(RoomKind.DOUBLE, Money.usd(Decimal("150"))) == RoomType(
            RoomKind.DOUBLE, Money.usd(Decimal("150.00"))
        )

    def test_different_rate_is_different_type(self):
        assert RoomType(RoomKind.DOUBLE, Money.usd(Decimal("150"))) != RoomType(
            RoomKind.DOUBLE, Money.usd(Decimal("200"))
        )

    def test_different_kind_is_different_type(self):
        assert RoomType(RoomKind.DOUBLE, Money.usd(Decimal("150"))) != RoomType(
            RoomKind.FAMILY, Money.usd(Decimal("150"))
        )

    def test_kind_string_is_normalized(self):
        room_type = RoomType("SUITE", Money.usd(Decimal("500")))
        assert room_type.kind is RoomKind.SUITE

    def test_null_rate_raises_error(self):
        with pytest.raises(ValueError, match="Room rate cannot be null"):
            RoomType(RoomKind.SINGLE, None)


class TestNumbers:
    def test_room_number_accepts_any_integer(self):
        assert RoomNumber(-1).value == -1
        assert str(RoomNumber(101)) == "101"

    def test_room_number_rejects_non_integer(self):
        with pytest.raises(ValueError, match="Room number must be an integer"):
            RoomNumber("101")

    def test_reservation_number_must_be_positive(self):
        with pytest.raises(ValueError, match="must be positive"):
            ReservationNumber(0)
