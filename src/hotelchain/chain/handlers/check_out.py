from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotelchain.chain.applications.check_out_guest import CheckOutGuestService
from hotelchain.chain.handlers.dependencies import chain_name, repository
from hotelchain.chain.handlers.request_models import CheckOutRequest
from hotelchain.chain.handlers.response_models import to_room_response
from hotelchain.hotel.domain.value_object import RoomNumber

logger = Logger()

service = CheckOutGuestService(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """チェックアウトハンドラ"""
    logger.info("Received check-out request")

    payload = event.get("Payload", event)
    request = CheckOutRequest.model_validate(payload)

    room = service.check_out(
        chain_name,
        hotel_name=request.hotel_name,
        room_number=RoomNumber(request.room_number),
    )
    return to_room_response(room)
