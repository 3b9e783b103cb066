from .events import GuestCheckedIn as GuestCheckedIn
from .events import GuestCheckedOut as GuestCheckedOut
from .events import ReservationCancelled as ReservationCancelled
from .events import ReservationCreated as ReservationCreated
