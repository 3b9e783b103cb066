from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    客室料金など、解決済みの金額を運ぶだけで計算はしない。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount is None:
            raise ValueError("Amount cannot be null")
        if self.currency is None:
            raise ValueError("Currency cannot be null")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    @classmethod
    def usd(cls, amount: Decimal) -> Money:
        """米ドルで Money を生成"""
        return cls(amount, Currency.usd())
