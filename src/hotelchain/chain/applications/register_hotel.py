from hotelchain.chain.applications.common import (
    load_or_create_chain,
    publish_domain_events,
)
from hotelchain.chain.domain.factory import HotelDetails, HotelFactory
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.hotel.domain.entity import Hotel
from hotelchain.shared.utils import get_logger

logger = get_logger("hotel-chain")


class RegisterHotelService:
    """ホテル登録のユースケース"""

    def __init__(self, repository: HotelChainRepository, factory: HotelFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, chain_name: ChainName, hotel_details: HotelDetails) -> Hotel:
        """ホテルを客室在庫ごとチェーンに登録する"""
        chain = load_or_create_chain(self._repository, chain_name)
        hotel = self._factory.create(hotel_details)
        chain.add_hotel(hotel)
        self._repository.save(chain)
        publish_domain_events(chain, logger)
        return hotel
