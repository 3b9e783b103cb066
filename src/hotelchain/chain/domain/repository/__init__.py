from .hotel_chain_repository import HotelChainRepository as HotelChainRepository
