class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class InvalidStateTransitionException(BusinessRuleViolationException):
    """現在の状態から許可されていない状態遷移を要求された場合"""

    pass


class NoAvailabilityException(BusinessRuleViolationException):
    """指定された部屋タイプ・期間で予約可能な部屋がない場合"""

    pass


class HotelChainNotFoundException(ResourceNotFoundException):
    pass


class HotelNotFoundException(ResourceNotFoundException):
    pass


class RoomNotFoundException(ResourceNotFoundException):
    pass


class ReservationNotFoundException(ResourceNotFoundException):
    pass


class ReserverPayerNotFoundException(ResourceNotFoundException):
    pass
