from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217 形式の英字3文字、大文字に正規化）"""

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise ValueError("Currency cannot be null")
        normalized = self.code.upper()
        if not (
            len(normalized) == 3 and normalized.isascii() and normalized.isalpha()
        ):
            raise ValueError(f"Invalid currency code: {self.code}")
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")
