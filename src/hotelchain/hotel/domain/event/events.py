from dataclasses import asdict, dataclass
from datetime import date


@dataclass(frozen=True)
class ReservationCreated:
    """予約作成イベント"""

    hotel_name: str
    reservation_number: int
    room_number: int
    start_date: date
    end_date: date

    def to_dict(self) -> dict:
        return {"event": type(self).__name__, **asdict(self)}


@dataclass(frozen=True)
class ReservationCancelled:
    """予約キャンセルイベント"""

    hotel_name: str
    reservation_number: int
    room_number: int

    def to_dict(self) -> dict:
        return {"event": type(self).__name__, **asdict(self)}


@dataclass(frozen=True)
class GuestCheckedIn:
    """チェックインイベント"""

    hotel_name: str
    room_number: int
    guest_name: str

    def to_dict(self) -> dict:
        return {"event": type(self).__name__, **asdict(self)}


@dataclass(frozen=True)
class GuestCheckedOut:
    """チェックアウトイベント"""

    hotel_name: str
    room_number: int

    def to_dict(self) -> dict:
        return {"event": type(self).__name__, **asdict(self)}
