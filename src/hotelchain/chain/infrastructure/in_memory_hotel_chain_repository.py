import threading

from hotelchain.chain.domain.entity import HotelChain
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName


class InMemoryHotelChainRepository(HotelChainRepository):
    """プロセス内メモリに集約を保持する HotelChainRepository の具象実装

    永続化は行わない。同じプロセス内のハンドラ間で集約を共有する。
    """

    def __init__(self) -> None:
        self._chains: dict[ChainName, HotelChain] = {}
        self._lock = threading.Lock()

    def save(self, chain: HotelChain) -> None:
        with self._lock:
            self._chains[chain.name] = chain

    def find_by_id(self, name: ChainName) -> HotelChain | None:
        with self._lock:
            return self._chains.get(name)
