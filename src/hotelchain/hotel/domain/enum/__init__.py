from .room_kind import RoomKind as RoomKind
from .room_state import RoomState as RoomState
