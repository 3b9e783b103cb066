from datetime import date

from hotelchain.customer.domain.value_object import ReserverPayer
from hotelchain.hotel.domain.value_object import ReservationNumber, StayPeriod
from hotelchain.shared.domain import Entity

from .room import Room


class Reservation(Entity[ReservationNumber]):
    """予約エンティティ

    生成後は変更できない。同一性は予約番号のみで判定する。
    """

    def __init__(
        self,
        number: ReservationNumber,
        stay_period: StayPeriod,
        payer: ReserverPayer,
        room: Room,
    ) -> None:
        if number is None:
            raise ValueError("Reservation number cannot be null")
        if stay_period is None:
            raise ValueError("Reservation dates cannot be null")
        if payer is None:
            raise ValueError("Payer information is required")
        if room is None:
            raise ValueError("Room must be assigned to reservation")
        super().__init__(number)
        self._stay_period = stay_period
        self._payer = payer
        self._room = room

    def __repr__(self) -> str:
        return (
            f"Reservation(number={self.number}, room={self._room.number}, "
            f"start={self.start_date}, end={self.end_date})"
        )

    @property
    def number(self) -> ReservationNumber:
        return self._id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def start_date(self) -> date:
        return self._stay_period.start

    @property
    def end_date(self) -> date:
        return self._stay_period.end

    @property
    def payer(self) -> ReserverPayer:
        return self._payer

    @property
    def room(self) -> Room:
        return self._room

    def duration_in_nights(self) -> int:
        return self._stay_period.nights()

    def is_active_on(self, day: date) -> bool:
        """指定日に有効な予約かどうか（開始日・終了日を含む）"""
        return self._stay_period.contains(day)
