from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotelchain.chain.applications.make_reservation import MakeReservationService
from hotelchain.chain.handlers.dependencies import chain_name, repository
from hotelchain.chain.handlers.request_models import MakeReservationRequest
from hotelchain.chain.handlers.response_models import to_reservation_response
from hotelchain.customer.domain.value_object import Identity
from hotelchain.hotel.domain.value_object import RoomType, StayPeriod
from hotelchain.shared.domain import Currency, Money

logger = Logger()

service = MakeReservationService(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約作成ハンドラ"""
    logger.info("Received make reservation request")

    payload = event.get("Payload", event)
    request = MakeReservationRequest.model_validate(payload)

    stay_period = StayPeriod.from_strings(request.start_date, request.end_date)
    room_type = RoomType(
        kind=request.room_type.kind,
        rate=Money(
            amount=request.room_type.rate_amount,
            currency=Currency(request.room_type.rate_currency),
        ),
    )
    reservation = service.make(
        chain_name,
        hotel_name=request.hotel_name,
        start=stay_period.start,
        end=stay_period.end,
        room_type=room_type,
        payer_identity=Identity(
            type=request.payer.type, id_number=request.payer.id_number
        ),
    )
    return to_reservation_response(request.hotel_name, reservation)
