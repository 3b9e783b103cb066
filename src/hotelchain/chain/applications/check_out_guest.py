from hotelchain.chain.applications.common import load_chain, publish_domain_events
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.hotel.domain.entity import Room
from hotelchain.hotel.domain.value_object import RoomNumber
from hotelchain.shared.utils import get_logger

logger = get_logger("hotel-chain")


class CheckOutGuestService:
    """チェックアウトのユースケース"""

    def __init__(self, repository: HotelChainRepository) -> None:
        self._repository = repository

    def check_out(
        self, chain_name: ChainName, hotel_name: str, room_number: RoomNumber
    ) -> Room:
        chain = load_chain(self._repository, chain_name)
        room = chain.check_out_guest(hotel_name, room_number)
        self._repository.save(chain)
        publish_domain_events(chain, logger)
        return room
