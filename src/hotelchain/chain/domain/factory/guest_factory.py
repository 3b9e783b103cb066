from typing import NotRequired, TypedDict

from hotelchain.customer.domain.value_object import Address, Guest, Identity


class IdentityDetails(TypedDict):
    """身分証明書の入力データ"""

    type: str
    id_number: str


class GuestDetails(TypedDict):
    """宿泊者の入力データ"""

    name: str
    street: str
    city: str
    zip_code: str
    identity: NotRequired[IdentityDetails | None]


class GuestFactory:
    """宿泊者を生成するFactory"""

    def create(self, guest_details: GuestDetails) -> Guest:
        identity_details = guest_details.get("identity")
        identity = (
            Identity(
                type=identity_details["type"],
                id_number=identity_details["id_number"],
            )
            if identity_details
            else None
        )
        return Guest(
            name=guest_details["name"],
            address=Address(
                street=guest_details["street"],
                city=guest_details["city"],
                zip_code=guest_details["zip_code"],
            ),
            identity=identity,
        )
