from dataclasses import dataclass


@dataclass(frozen=True)
class RoomNumber:
    """部屋番号（ホテル内で一意であることは呼び出し側が保証する）"""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"Room number must be an integer: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)
