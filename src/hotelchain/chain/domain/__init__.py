from .entity import HotelChain as HotelChain
from .factory import GuestFactory as GuestFactory
from .factory import HotelFactory as HotelFactory
from .repository import HotelChainRepository as HotelChainRepository
from .value_object import ChainName as ChainName
