from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotelchain.chain.applications.register_reserver_payer import (
    RegisterReserverPayerService,
)
from hotelchain.chain.handlers.dependencies import chain_name, repository
from hotelchain.chain.handlers.request_models import RegisterPayerRequest
from hotelchain.chain.handlers.response_models import to_payer_response
from hotelchain.customer.domain.value_object import CreditCard, Identity

logger = Logger()

service = RegisterReserverPayerService(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """顧客登録ハンドラ"""
    logger.info("Received register payer request")

    payload = event.get("Payload", event)
    request = RegisterPayerRequest.model_validate(payload)

    payer = service.register(
        chain_name,
        identity=Identity(
            type=request.identity.type, id_number=request.identity.id_number
        ),
        credit_card=CreditCard(
            number=request.card_number,
            expiry_date=request.expiry_date,
            cvv=request.cvv,
        ),
    )
    return to_payer_response(payer)
