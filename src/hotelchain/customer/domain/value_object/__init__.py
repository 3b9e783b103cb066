from .address import Address as Address
from .credit_card import CreditCard as CreditCard
from .guest import Guest as Guest
from .identity import Identity as Identity
from .reserver_payer import ReserverPayer as ReserverPayer
