from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class CreditCard:
    """クレジットカード

    カード番号で同一性を判定する。表示時は下4桁以外をマスクする。
    """

    MIN_NUMBER_LENGTH: ClassVar[int] = 13
    MIN_CVV_LENGTH: ClassVar[int] = 3

    number: str = field(repr=False)
    expiry_date: str = field(compare=False)
    cvv: str = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.number or len(self.number) < self.MIN_NUMBER_LENGTH:
            raise ValueError(
                f"Card number must be at least {self.MIN_NUMBER_LENGTH} digits"
            )
        if not self.expiry_date or len(self.expiry_date.strip()) == 0:
            raise ValueError("Expiry date is required")
        if not self.cvv or len(self.cvv) < self.MIN_CVV_LENGTH:
            raise ValueError(f"CVV must be at least {self.MIN_CVV_LENGTH} digits")

    def __str__(self) -> str:
        return self.masked_number

    @property
    def masked_number(self) -> str:
        """表示用のマスク済みカード番号"""
        return f"XXXX-XXXX-XXXX-{self.number[-4:]}"
