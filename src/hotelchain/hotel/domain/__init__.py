from .entity import Hotel as Hotel
from .entity import Reservation as Reservation
from .entity import Room as Room
from .enum import RoomKind as RoomKind
from .enum import RoomState as RoomState
from .event import GuestCheckedIn as GuestCheckedIn
from .event import GuestCheckedOut as GuestCheckedOut
from .event import ReservationCancelled as ReservationCancelled
from .event import ReservationCreated as ReservationCreated
from .value_object import HotelName as HotelName
from .value_object import ReservationNumber as ReservationNumber
from .value_object import RoomNumber as RoomNumber
from .value_object import RoomType as RoomType
from .value_object import StayPeriod as StayPeriod
