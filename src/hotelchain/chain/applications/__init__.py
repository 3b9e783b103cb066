from .cancel_reservation import CancelReservationService as CancelReservationService
from .check_in_guest import CheckInGuestService as CheckInGuestService
from .check_out_guest import CheckOutGuestService as CheckOutGuestService
from .make_reservation import MakeReservationService as MakeReservationService
from .register_hotel import RegisterHotelService as RegisterHotelService
from .register_reserver_payer import (
    RegisterReserverPayerService as RegisterReserverPayerService,
)
