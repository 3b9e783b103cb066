from datetime import date

from hotelchain.chain.applications.common import load_chain, publish_domain_events
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.customer.domain.value_object import Identity
from hotelchain.hotel.domain.entity import Reservation
from hotelchain.hotel.domain.value_object import RoomType
from hotelchain.shared.domain.exception import NoAvailabilityException
from hotelchain.shared.utils import get_logger

logger = get_logger("hotel-chain")


class MakeReservationService:
    """予約作成のユースケース"""

    def __init__(self, repository: HotelChainRepository) -> None:
        self._repository = repository

    def make(
        self,
        chain_name: ChainName,
        hotel_name: str,
        start: date,
        end: date,
        room_type: RoomType,
        payer_identity: Identity,
    ) -> Reservation:
        """登録済み顧客の名義で客室を予約する"""
        chain = load_chain(self._repository, chain_name)
        payer = chain.find_reserver_payer(payer_identity)
        try:
            reservation = chain.make_reservation(
                hotel_name, start, end, room_type, payer
            )
        except NoAvailabilityException:
            logger.warning(
                "No room available",
                extra={
                    "hotel_name": hotel_name,
                    "room_kind": room_type.kind.value,
                    "start_date": start.isoformat(),
                    "end_date": end.isoformat(),
                },
            )
            raise
        self._repository.save(chain)
        publish_domain_events(chain, logger)
        return reservation
