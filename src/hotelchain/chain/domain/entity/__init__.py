from .hotel_chain import HotelChain as HotelChain
