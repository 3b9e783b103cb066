from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotelchain.chain.applications.cancel_reservation import CancelReservationService
from hotelchain.chain.handlers.dependencies import chain_name, repository
from hotelchain.chain.handlers.request_models import CancelReservationRequest
from hotelchain.chain.handlers.response_models import to_reservation_response
from hotelchain.hotel.domain.value_object import ReservationNumber

logger = Logger()

service = CancelReservationService(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約キャンセルハンドラ"""
    logger.info("Received cancel reservation request")

    payload = event.get("Payload", event)
    request = CancelReservationRequest.model_validate(payload)

    reservation = service.cancel(
        chain_name,
        hotel_name=request.hotel_name,
        reservation_number=ReservationNumber(request.reservation_number),
    )
    return to_reservation_response(request.hotel_name, reservation)
