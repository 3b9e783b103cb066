from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotelchain.chain.applications.register_hotel import RegisterHotelService
from hotelchain.chain.domain.factory import HotelDetails, HotelFactory
from hotelchain.chain.handlers.dependencies import chain_name, repository
from hotelchain.chain.handlers.request_models import RegisterHotelRequest
from hotelchain.chain.handlers.response_models import to_hotel_response

logger = Logger()

service = RegisterHotelService(repository=repository, factory=HotelFactory())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """ホテル登録ハンドラ"""
    logger.info("Received register hotel request")

    payload = event.get("Payload", event)
    request = RegisterHotelRequest.model_validate(payload)

    hotel_details: HotelDetails = {
        "hotel_name": request.hotel_name,
        "rooms": [
            {
                "number": room.number,
                "kind": room.kind.value,
                "rate_amount": room.rate_amount,
                "rate_currency": room.rate_currency,
            }
            for room in request.rooms
        ],
    }
    hotel = service.register(chain_name, hotel_details)
    return to_hotel_response(hotel)
