from .in_memory_hotel_chain_repository import (
    InMemoryHotelChainRepository as InMemoryHotelChainRepository,
)
