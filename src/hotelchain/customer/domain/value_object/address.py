from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """住所"""

    street: str
    city: str
    zip_code: str

    def __post_init__(self) -> None:
        if _is_blank(self.street):
            raise ValueError("Street address is required")
        if _is_blank(self.city):
            raise ValueError("City is required")
        if _is_blank(self.zip_code):
            raise ValueError("Zip code is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.city} {self.zip_code}"


def _is_blank(text: str | None) -> bool:
    return text is None or len(text.strip()) == 0
