from enum import Enum


class CouponStatus(str, Enum):
    """조회 시점 기준으로 계산되는 쿠폰 상태"""

    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    DELETED = "DELETED"
