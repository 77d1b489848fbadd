from functools import lru_cache

from services.coupon.app.core.CreateCouponService import CreateCouponService
from services.coupon.app.core.DeleteCouponService import DeleteCouponService
from services.coupon.app.core.GetCouponService import GetCouponService
from services.coupon.app.core.RedeemCouponService import RedeemCouponService
from services.coupon.app.db.repositories.coupons import SQLAlchemyCouponRepository


@lru_cache
def get_coupon_repository() -> SQLAlchemyCouponRepository:
    """쿠폰 Repository 의존성"""
    return SQLAlchemyCouponRepository()


@lru_cache
def get_create_coupon_service() -> CreateCouponService:
    return CreateCouponService(coupon_repository=get_coupon_repository())


@lru_cache
def get_redeem_coupon_service() -> RedeemCouponService:
    return RedeemCouponService(coupon_repository=get_coupon_repository())


@lru_cache
def get_delete_coupon_service() -> DeleteCouponService:
    return DeleteCouponService(coupon_repository=get_coupon_repository())


@lru_cache
def get_get_coupon_service() -> GetCouponService:
    return GetCouponService(coupon_repository=get_coupon_repository())
