from dataclasses import dataclass


@dataclass(frozen=True)
class ChainName:
    """ホテルチェーン名"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Hotel chain name is required")

    def __str__(self) -> str:
        return self.value
