from hotelchain.chain.applications.common import load_or_create_chain
from hotelchain.chain.domain.repository import HotelChainRepository
from hotelchain.chain.domain.value_object import ChainName
from hotelchain.customer.domain.value_object import (
    CreditCard,
    Identity,
    ReserverPayer,
)


class RegisterReserverPayerService:
    """顧客登録のユースケース"""

    def __init__(self, repository: HotelChainRepository) -> None:
        self._repository = repository

    def register(
        self, chain_name: ChainName, identity: Identity, credit_card: CreditCard
    ) -> ReserverPayer:
        chain = load_or_create_chain(self._repository, chain_name)
        payer = chain.create_reserver_payer(identity, credit_card)
        self._repository.save(chain)
        return payer
