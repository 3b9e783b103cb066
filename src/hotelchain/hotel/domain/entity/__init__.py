from .hotel import Hotel as Hotel
from .reservation import Reservation as Reservation
from .room import Room as Room
