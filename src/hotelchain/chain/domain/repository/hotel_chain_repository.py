from abc import abstractmethod

from hotelchain.chain.domain.entity import HotelChain
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.shared.domain import Repository


class HotelChainRepository(Repository[HotelChain, ChainName]):
    """ホテルチェーンレポジトリのインターフェース"""

    @abstractmethod
    def save(self, chain: HotelChain) -> None:
        """チェーンを保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, name: ChainName) -> HotelChain | None:
        """チェーン名で検索する"""
        raise NotImplementedError
