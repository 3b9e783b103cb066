from hotelchain.chain.applications.common import load_chain, publish_domain_events
from hotelchain.chain.domain.factory import GuestDetails, GuestFactory
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.hotel.domain.entity import Room
from hotelchain.hotel.domain.value_object import RoomNumber
from hotelchain.shared.utils import get_logger

logger = get_logger("hotel-chain")


class CheckInGuestService:
    """チェックインのユースケース"""

    def __init__(self, repository: HotelChainRepository, factory: GuestFactory) -> None:
        self._repository = repository
        self._factory = factory

    def check_in(
        self,
        chain_name: ChainName,
        hotel_name: str,
        room_number: RoomNumber,
        guest_details: GuestDetails,
    ) -> Room:
        chain = load_chain(self._repository, chain_name)
        guest = self._factory.create(guest_details)
        room = chain.check_in_guest(hotel_name, room_number, guest)
        self._repository.save(chain)
        publish_domain_events(chain, logger)
        return room
