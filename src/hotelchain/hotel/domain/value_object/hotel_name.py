from dataclasses import dataclass


@dataclass(frozen=True)
class HotelName:
    """ホテル名"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Hotel name cannot be empty")

    def __str__(self) -> str:
        return self.value

    def matches(self, name: str) -> bool:
        """大文字小文字を区別せずに名前を比較する"""
        if not isinstance(name, str):
            return False
        return self.value.lower() == name.lower()
