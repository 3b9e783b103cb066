from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """身分証明書（パスポート、運転免許証など）"""

    type: str
    id_number: str

    def __post_init__(self) -> None:
        if not self.type or len(self.type.strip()) == 0:
            raise ValueError("Identity type is required")
        if not self.id_number or len(self.id_number.strip()) == 0:
            raise ValueError("ID number is required")

    def __str__(self) -> str:
        return f"{self.type}: {self.id_number}"
