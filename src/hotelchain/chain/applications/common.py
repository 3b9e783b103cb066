from aws_lambda_powertools import Logger

from hotelchain.chain.domain.entity import HotelChain
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.shared.domain.exception import HotelChainNotFoundException


def load_chain(repository: HotelChainRepository, chain_name: ChainName) -> HotelChain:
    """チェーンを取得する（未登録の場合は例外）"""
    chain = repository.find_by_id(chain_name)
    if chain is None:
        raise HotelChainNotFoundException(f"Hotel chain not found: {chain_name}")
    return chain


def load_or_create_chain(
    repository: HotelChainRepository, chain_name: ChainName
) -> HotelChain:
    chain = repository.find_by_id(chain_name)
    if chain is None:
        chain = HotelChain(name=chain_name)
    return chain


def publish_domain_events(chain: HotelChain, logger: Logger) -> list:
    """集約に溜まったドメインイベントをログに出力する"""
    events = chain.flush_all_domain_events()
    for event in events:
        logger.info("Domain event recorded", extra=event.to_dict())
    return events
