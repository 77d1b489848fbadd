from services.coupon.app.schemas.response.CouponCreateResponse import CouponCreateResponse
from services.coupon.app.schemas.response.CouponDetailResponse import CouponDetailResponse
from services.coupon.app.schemas.response.CouponRedeemResponse import CouponRedeemResponse

__all__ = [
    "CouponCreateResponse",
    "CouponDetailResponse",
    "CouponRedeemResponse",
]
