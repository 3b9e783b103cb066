from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotelchain.customer.domain.value_object import (
    Address,
    CreditCard,
    Guest,
    Identity,
    ReserverPayer,
)
from hotelchain.hotel.domain.entity import Hotel, Room
from hotelchain.hotel.domain.enum import RoomKind
from hotelchain.hotel.domain.value_object import HotelName, RoomNumber, RoomType
from hotelchain.shared.domain import Money


@pytest.fixture
def base_date():
    """テスト共通の基準日"""
    return date(2024, 1, 1)


@pytest.fixture
def double_type():
    return RoomType(kind=RoomKind.DOUBLE, rate=Money.usd(Decimal("150.00")))


@pytest.fixture
def family_type():
    return RoomType(kind=RoomKind.FAMILY, rate=Money.usd(Decimal("250.00")))


@pytest.fixture
def single_type():
    return RoomType(kind=RoomKind.SINGLE, rate=Money.usd(Decimal("75.00")))


@pytest.fixture
def identity():
    return Identity(type="Passport", id_number="UK-123456789")


@pytest.fixture
def payer(identity):
    return ReserverPayer(
        identity=identity,
        credit_card=CreditCard(
            number="4444555566667777", expiry_date="12/28", cvv="123"
        ),
    )


@pytest.fixture
def guest(identity):
    return Guest(
        name="John Doe",
        address=Address(street="123 Baker St", city="London", zip_code="NW1 6XE"),
        identity=identity,
    )


@pytest.fixture
def create_room(single_type):
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(number: int = 101, room_type: RoomType | None = None) -> Room:
        return Room(number=RoomNumber(number), room_type=room_type or single_type)

    return _factory


@pytest.fixture
def create_hotel():
    """客室付きの Hotel を生成する Factory fixture"""

    def _factory(
        name: str = "The Grand Budapest",
        rooms: list[tuple[int, RoomType]] | None = None,
    ) -> Hotel:
        hotel = Hotel(name=HotelName(name))
        for number, room_type in rooms or []:
            hotel.add_room(Room(number=RoomNumber(number), room_type=room_type))
        return hotel

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
