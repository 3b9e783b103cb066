from __future__ import annotations

from pydantic import BaseModel

from hotelchain.customer.domain.value_object import ReserverPayer
from hotelchain.hotel.domain.entity import Hotel, Reservation, Room


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    room_number: int
    room_kind: str
    rate_amount: str
    rate_currency: str
    state: str
    occupant_name: str | None = None


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_number: int
    hotel_name: str
    room_number: int
    room_state: str
    start_date: str
    end_date: str
    nights: int


class HotelData(BaseModel):
    """ホテルデータのレスポンスモデル"""

    hotel_name: str
    rooms: list[RoomData]


class PayerData(BaseModel):
    """顧客データのレスポンスモデル（カード番号はマスク済み）"""

    identity_type: str
    id_number: str
    masked_card_number: str


class RoomResponse(BaseModel):
    status: str = "success"
    data: RoomData


class ReservationResponse(BaseModel):
    status: str = "success"
    data: ReservationData


class HotelResponse(BaseModel):
    status: str = "success"
    data: HotelData


class PayerResponse(BaseModel):
    status: str = "success"
    data: PayerData


def to_room_data(room: Room) -> RoomData:
    return RoomData(
        room_number=room.number.value,
        room_kind=room.room_type.kind.value,
        rate_amount=str(room.room_type.rate.amount),
        rate_currency=str(room.room_type.rate.currency),
        state=room.state.value,
        occupant_name=room.occupant.name if room.occupant else None,
    )


def to_room_response(room: Room) -> dict:
    """Room エンティティをレスポンス辞書に変換する"""
    return RoomResponse(data=to_room_data(room)).model_dump()


def to_reservation_response(hotel_name: str, reservation: Reservation) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する"""
    return ReservationResponse(
        data=ReservationData(
            reservation_number=reservation.number.value,
            hotel_name=hotel_name,
            room_number=reservation.room.number.value,
            room_state=reservation.room.state.value,
            start_date=reservation.start_date.isoformat(),
            end_date=reservation.end_date.isoformat(),
            nights=reservation.duration_in_nights(),
        )
    ).model_dump()


def to_hotel_response(hotel: Hotel) -> dict:
    return HotelResponse(
        data=HotelData(
            hotel_name=str(hotel.name),
            rooms=[to_room_data(room) for room in hotel.rooms],
        )
    ).model_dump()


def to_payer_response(payer: ReserverPayer) -> dict:
    return PayerResponse(
        data=PayerData(
            identity_type=payer.identity.type,
            id_number=payer.identity.id_number,
            masked_card_number=payer.credit_card.masked_number,
        )
    ).model_dump()
