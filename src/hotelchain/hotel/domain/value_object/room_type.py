from dataclasses import dataclass

from hotelchain.hotel.domain.enum import RoomKind
from hotelchain.shared.domain import Money


@dataclass(frozen=True)
class RoomType:
    """客室タイプ（種類 + 1泊料金）

    種類と料金が等しい場合のみ同じタイプとみなす。
    """

    kind: RoomKind
    rate: Money

    def __post_init__(self) -> None:
        if self.kind is None:
            raise ValueError("Room kind cannot be null")
        if self.rate is None:
            raise ValueError("Room rate cannot be null")
        object.__setattr__(self, "kind", RoomKind(self.kind))

    def __str__(self) -> str:
        return f"{self.kind.value} ({self.rate})"
