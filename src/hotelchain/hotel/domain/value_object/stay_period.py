from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間（開始日 + 終了日）

    終了日が開始日と同じ日帰り滞在も許可する。
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start is None or self.end is None:
            raise ValueError("Reservation dates cannot be null")
        if self.end < self.start:
            raise ValueError("End date must be after or equal to start date")

    @classmethod
    def from_strings(cls, start: str, end: str) -> StayPeriod:
        """ISO 8601 形式(YYYY-MM-DD)の文字列から生成"""
        try:
            start_date = date.fromisoformat(start)
            end_date = date.fromisoformat(end)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid date format: {e}") from e
        return cls(start=start_date, end=end_date)

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        """指定日が期間内（両端を含む）かどうか"""
        return self.start <= day <= self.end

    def overlaps(self, other: StayPeriod) -> bool:
        """他の期間と重なるかどうか

        境界は厳密な不等号で比較するため、終了日と開始日が同じ日なら重ならない。
        """
        return self.start < other.end and self.end > other.start
