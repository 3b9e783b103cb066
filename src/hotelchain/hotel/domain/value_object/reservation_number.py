from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationNumber:
    """予約番号"""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"Reservation number must be an integer: {self.value!r}")
        if self.value < 1:
            raise ValueError("Reservation number must be positive")

    def __str__(self) -> str:
        return str(self.value)
