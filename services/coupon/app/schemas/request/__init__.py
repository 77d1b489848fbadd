from services.coupon.app.schemas.request.CouponCreateSchema import CouponCreateSchema

__all__ = [
    "CouponCreateSchema",
]
