from dataclasses import dataclass

from .credit_card import CreditCard
from .identity import Identity


@dataclass(frozen=True)
class ReserverPayer:
    """予約者兼支払者

    予約ドメインからは中身を参照せず、そのまま受け渡すだけ。
    """

    identity: Identity
    credit_card: CreditCard

    def __post_init__(self) -> None:
        if self.identity is None:
            raise ValueError("Identity is required")
        if self.credit_card is None:
            raise ValueError("Credit card is required")

    def __str__(self) -> str:
        return f"{self.identity} ({self.credit_card})"
