from libs.schemas.coupon import Coupon
from libs.schemas.coupon_status import CouponStatus

__all__ = [
    "Coupon",
    "CouponStatus",
]
