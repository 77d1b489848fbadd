"""
쿠폰 저장소 포트와 메모리 구현
"""
from typing import Dict, Protocol

from libs.schemas import Coupon


class CouponRepositoryPort(Protocol):
    """쿠폰 Repository 인터페이스"""

    async def save(self, coupon: Coupon) -> Coupon:
        """쿠폰을 저장하고 식별자가 채워진 쿠폰을 반환합니다"""
        ...

    async def find_by_id(self, coupon_id: int) -> Coupon | None:
        """쿠폰 ID로 쿠폰을 조회합니다"""
        ...


class InMemoryCouponRepository(CouponRepositoryPort):
    def __init__(self):
        self._store: Dict[int, Coupon] = {}
        self._next_id = 1

    async def save(self, coupon: Coupon) -> Coupon:
        coupon_id = coupon.id
        if coupon_id is None:
            coupon_id = self._next_id
            self._next_id += 1
        stored = coupon.model_copy(update={"id": coupon_id}, deep=True)
        self._store[coupon_id] = stored
        return stored.model_copy(deep=True)

    async def find_by_id(self, coupon_id: int) -> Coupon | None:
        coupon = self._store.get(coupon_id)
        return coupon.model_copy(deep=True) if coupon else None
