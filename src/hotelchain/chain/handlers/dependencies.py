import os

from hotelchain.chain.domain.value_object import ChainName
from hotelchain.chain.infrastructure import InMemoryHotelChainRepository

DEFAULT_CHAIN_NAME = "Global Hotel Group"

# 同一プロセス内の全ハンドラで共有する
chain_name = ChainName(os.getenv("HOTEL_CHAIN_NAME", DEFAULT_CHAIN_NAME))
repository = InMemoryHotelChainRepository()
