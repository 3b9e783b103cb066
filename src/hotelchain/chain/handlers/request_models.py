from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from hotelchain.hotel.domain.enum import RoomKind
from hotelchain.shared.utils import to_decimal

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class RoomTypeRequest(BaseModel):
    """客室タイプのリクエストモデル"""

    kind: RoomKind
    rate_amount: Decimal = Field(
        ...,
        ge=0,
        description="1泊料金",
    )
    rate_currency: str = Field(
        default="USD",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
    )

    @field_validator("rate_amount", mode="before")
    @classmethod
    def convert_rate_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class RoomRequest(RoomTypeRequest):
    """客室登録のリクエストモデル"""

    number: int


class RegisterHotelRequest(BaseModel):
    """ホテル登録リクエストモデル"""

    hotel_name: str = Field(..., min_length=1)
    rooms: list[RoomRequest] = Field(default_factory=list)


class IdentityRequest(BaseModel):
    """身分証明書のリクエストモデル"""

    type: str = Field(..., min_length=1, examples=["Passport"])
    id_number: str = Field(..., min_length=1)


class RegisterPayerRequest(BaseModel):
    """顧客登録リクエストモデル"""

    identity: IdentityRequest
    card_number: str = Field(..., min_length=13)
    expiry_date: str = Field(..., min_length=1, examples=["12/28"])
    cvv: str = Field(..., min_length=3)


class MakeReservationRequest(BaseModel):
    """予約作成リクエストモデル"""

    hotel_name: str = Field(..., min_length=1)
    start_date: str = Field(
        ...,
        pattern=DATE_PATTERN,
        description="開始日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    end_date: str = Field(
        ...,
        pattern=DATE_PATTERN,
        description="終了日（YYYY-MM-DD形式）",
        examples=["2024-01-03"],
    )
    room_type: RoomTypeRequest
    payer: IdentityRequest


class CancelReservationRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    hotel_name: str = Field(..., min_length=1)
    reservation_number: int = Field(..., gt=0)


class GuestRequest(BaseModel):
    """宿泊者のリクエストモデル"""

    name: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    identity: IdentityRequest | None = None


class CheckInRequest(BaseModel):
    """チェックインリクエストモデル"""

    hotel_name: str = Field(..., min_length=1)
    room_number: int
    guest: GuestRequest


class CheckOutRequest(BaseModel):
    """チェックアウトリクエストモデル"""

    hotel_name: str = Field(..., min_length=1)
    room_number: int
