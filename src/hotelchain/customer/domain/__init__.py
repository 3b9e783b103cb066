from .value_object import Address as Address
from .value_object import CreditCard as CreditCard
from .value_object import Guest as Guest
from .value_object import Identity as Identity
from .value_object import ReserverPayer as ReserverPayer
