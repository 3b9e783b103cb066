from hotelchain.chain.applications.common import load_chain, publish_domain_events
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.hotel.domain.entity import Reservation
from hotelchain.hotel.domain.value_object import ReservationNumber
from hotelchain.shared.utils import get_logger

logger = get_logger("hotel-chain")


class CancelReservationService:
    """予約キャンセルのユースケース"""

    def __init__(self, repository: HotelChainRepository) -> None:
        self._repository = repository

    def cancel(
        self,
        chain_name: ChainName,
        hotel_name: str,
        reservation_number: ReservationNumber,
    ) -> Reservation:
        chain = load_chain(self._repository, chain_name)
        reservation = chain.cancel_reservation(hotel_name, reservation_number)
        self._repository.save(chain)
        publish_domain_events(chain, logger)
        return reservation
