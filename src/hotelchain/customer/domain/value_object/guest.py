from dataclasses import dataclass

from .address import Address
from .identity import Identity


@dataclass(frozen=True)
class Guest:
    """宿泊者"""

    name: str
    address: Address
    identity: Identity | None = None

    def __post_init__(self) -> None:
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Guest name is required")
        if self.address is None:
            raise ValueError("Address is required")

    def __str__(self) -> str:
        return self.name

    def has_identification(self) -> bool:
        return self.identity is not None
