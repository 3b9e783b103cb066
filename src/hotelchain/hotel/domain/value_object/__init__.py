from .hotel_name import HotelName as HotelName
from .reservation_number import ReservationNumber as ReservationNumber
from .room_number import RoomNumber as RoomNumber
from .room_type import RoomType as RoomType
from .stay_period import StayPeriod as StayPeriod
