import pytest
from pydantic import ValidationError

from hotelchain.chain.handlers import (
    cancel_reservation,
    check_in,
    check_out,
    make_reservation,
    register_hotel,
    register_payer,
)
from hotelchain.shared.domain.exception import (
    HotelNotFoundException,
    NoAvailabilityException,
)

DOUBLE = {"kind": "DOUBLE", "rate_amount": "150.00", "rate_currency": "USD"}


class TestHandlers:
    @pytest.fixture
    def registered(self, lambda_context, hotel_name, payer_payload):
        register_hotel.lambda_handler(
            {
                "hotel_name": hotel_name,
                "rooms": [{"number": 101, **DOUBLE}, {"number": 102, **DOUBLE}],
            },
            lambda_context,
        )
        register_payer.lambda_handler(payer_payload, lambda_context)
        return hotel_name, payer_payload["identity"]

    def _reserve(self, lambda_context, hotel_name, identity) -> dict:
        return make_reservation.lambda_handler(
            {
                "hotel_name": hotel_name,
                "start_date": "2024-01-08",
                "end_date": "2024-01-15",
                "room_type": DOUBLE,
                "payer": identity,
            },
            lambda_context,
        )

    def test_register_hotel(self, lambda_context, hotel_name):
        response = register_hotel.lambda_handler(
            {"Payload": {"hotel_name": hotel_name, "rooms": [{"number": 7, **DOUBLE}]}},
            lambda_context,
        )

        assert response["status"] == "success"
        assert response["data"]["hotel_name"] == hotel_name
        assert response["data"]["rooms"] == [
            {
                "room_number": 7,
                "room_kind": "DOUBLE",
                "rate_amount": "150.00",
                "rate_currency": "USD",
                "state": "FREE",
                "occupant_name": None,
            }
        ]

    def test_register_payer_masks_card(self, lambda_context, payer_payload):
        response = register_payer.lambda_handler(payer_payload, lambda_context)

        assert response["data"]["masked_card_number"] == "XXXX-XXXX-XXXX-7777"
        assert "4444555566667777" not in str(response)

    def test_long_hotel_name_with_gbp_rate(
        self, lambda_context, hotel_name, payer_payload
    ):
        long_name = hotel_name.ljust(101, "H")
        gbp_double = {"kind": "DOUBLE", "rate_amount": "120.00", "rate_currency": "GBP"}
        register_hotel.lambda_handler(
            {"hotel_name": long_name, "rooms": [{"number": 1, **gbp_double}]},
            lambda_context,
        )
        register_payer.lambda_handler(payer_payload, lambda_context)

        response = make_reservation.lambda_handler(
            {
                "hotel_name": long_name.upper(),
                "start_date": "2024-01-08",
                "end_date": "2024-01-10",
                "room_type": gbp_double,
                "payer": payer_payload["identity"],
            },
            lambda_context,
        )

        assert len(long_name) == 101
        assert response["data"]["room_number"] == 1
        assert response["data"]["room_state"] == "RESERVED"

    def test_make_reservation(self, lambda_context, registered):
        hotel_name, identity = registered

        response = self._reserve(lambda_context, hotel_name, identity)

        assert response["status"] == "success"
        data = response["data"]
        assert data["room_number"] == 101
        assert data["room_state"] == "RESERVED"
        assert data["start_date"] == "2024-01-08"
        assert data["end_date"] == "2024-01-15"
        assert data["nights"] == 7
        assert data["reservation_number"] == 1

    def test_third_double_booking_fails(self, lambda_context, registered):
        hotel_name, identity = registered
        self._reserve(lambda_context, hotel_name, identity)
        self._reserve(lambda_context, hotel_name, identity)

        with pytest.raises(NoAvailabilityException):
            self._reserve(lambda_context, hotel_name, identity)

    def test_check_in_and_check_out(self, lambda_context, registered):
        hotel_name, identity = registered
        self._reserve(lambda_context, hotel_name, identity)

        response = check_in.lambda_handler(
            {
                "hotel_name": hotel_name,
                "room_number": 101,
                "guest": {
                    "name": "John Doe",
                    "street": "123 Baker St",
                    "city": "London",
                    "zip_code": "NW1 6XE",
                    "identity": identity,
                },
            },
            lambda_context,
        )
        assert response["data"]["state"] == "OCCUPIED"
        assert response["data"]["occupant_name"] == "John Doe"

        response = check_out.lambda_handler(
            {"hotel_name": hotel_name, "room_number": 101}, lambda_context
        )
        assert response["data"]["state"] == "FREE"
        assert response["data"]["occupant_name"] is None

    def test_cancel_reservation(self, lambda_context, registered):
        hotel_name, identity = registered
        reserved = self._reserve(lambda_context, hotel_name, identity)

        response = cancel_reservation.lambda_handler(
            {
                "hotel_name": hotel_name,
                "reservation_number": reserved["data"]["reservation_number"],
            },
            lambda_context,
        )

        assert response["data"]["room_state"] == "FREE"

    def test_unknown_hotel_raises_error(self, lambda_context, registered):
        _, identity = registered
        with pytest.raises(HotelNotFoundException):
            self._reserve(lambda_context, "Ghost Hotel", identity)

    def test_invalid_payload_raises_validation_error(self, lambda_context, hotel_name):
        with pytest.raises(ValidationError):
            make_reservation.lambda_handler(
                {
                    "hotel_name": hotel_name,
                    "start_date": "08/01/2024",
                    "end_date": "2024-01-15",
                    "room_type": DOUBLE,
                    "payer": {"type": "Passport", "id_number": "x"},
                },
                lambda_context,
            )

    def test_end_before_start_raises_error(self, lambda_context, registered):
        hotel_name, identity = registered
        with pytest.raises(ValueError, match="End date must be after or equal"):
            make_reservation.lambda_handler(
                {
                    "hotel_name": hotel_name,
                    "start_date": "2024-01-15",
                    "end_date": "2024-01-08",
                    "room_type": DOUBLE,
                    "payer": identity,
                },
                lambda_context,
            )
