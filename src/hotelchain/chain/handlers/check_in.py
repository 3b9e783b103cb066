from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotelchain.chain.applications.check_in_guest import CheckInGuestService
from hotelchain.chain.domain.factory import GuestDetails, GuestFactory
from hotelchain.chain.handlers.dependencies import chain_name, repository
from hotelchain.chain.handlers.request_models import CheckInRequest
from hotelchain.chain.handlers.response_models import to_room_response
from hotelchain.hotel.domain.value_object import RoomNumber

logger = Logger()

service = CheckInGuestService(repository=repository, factory=GuestFactory())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """チェックインハンドラ"""
    logger.info("Received check-in request")

    payload = event.get("Payload", event)
    request = CheckInRequest.model_validate(payload)

    guest_details: GuestDetails = {
        "name": request.guest.name,
        "street": request.guest.street,
        "city": request.guest.city,
        "zip_code": request.guest.zip_code,
        "identity": (
            request.guest.identity.model_dump() if request.guest.identity else None
        ),
    }
    room = service.check_in(
        chain_name,
        hotel_name=request.hotel_name,
        room_number=RoomNumber(request.room_number),
        guest_details=guest_details,
    )
    return to_room_response(room)
