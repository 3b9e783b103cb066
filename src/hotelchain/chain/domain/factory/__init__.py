from .guest_factory import GuestDetails as GuestDetails
from .guest_factory import GuestFactory as GuestFactory
from .guest_factory import IdentityDetails as IdentityDetails
from .hotel_factory import HotelDetails as HotelDetails
from .hotel_factory import HotelFactory as HotelFactory
from .hotel_factory import RoomDetails as RoomDetails
