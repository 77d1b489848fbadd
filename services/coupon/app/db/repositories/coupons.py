"""
쿠폰 Repository 구현
"""
import asyncio
from decimal import Decimal
from typing import Callable

from sqlalchemy import insert, select, update

from libs.common import ensure_kst, to_naive_kst
from libs.schemas import Coupon
from services.coupon.app.db.session import session_scope
from services.coupon.app.db.tables import coupons


class _SQLRepositoryBase:
    """SQL Repository 기본 클래스"""
    def __init__(self, session_factory: Callable = session_scope):
        self._session_factory = session_factory

    async def _run_in_thread(self, func: Callable):
        """동기 함수를 비동기로 실행"""
        return await asyncio.to_thread(func)


class SQLAlchemyCouponRepository(_SQLRepositoryBase):
    """SQLAlchemy를 사용한 쿠폰 Repository 구현"""

    async def save(self, coupon: Coupon) -> Coupon:
        """
        쿠폰을 저장합니다.

        id가 없으면 새로 INSERT 하고, 있으면 해당 행을 UPDATE 합니다.

        Returns:
            식별자가 채워진 저장된 쿠폰
        """
        values = _to_row(coupon)

        def _save():
            with self._session_factory() as session:
                if coupon.id is None:
                    result = session.execute(insert(coupons).values(**values))
                    coupon_id = result.inserted_primary_key[0]
                else:
                    coupon_id = coupon.id
                    session.execute(
                        update(coupons)
                        .where(coupons.c.coupon_id == coupon_id)
                        .values(**values)
                    )
                session.commit()
                return coupon_id

        coupon_id = await self._run_in_thread(_save)
        return coupon.model_copy(update={"id": coupon_id})

    async def find_by_id(self, coupon_id: int) -> Coupon | None:
        """쿠폰 ID로 쿠폰을 조회합니다. 없으면 None"""
        def _query():
            with self._session_factory() as session:
                row = (
                    session.execute(select(coupons).where(coupons.c.coupon_id == coupon_id))
                    .mappings()
                    .first()
                )
                return _from_row(row) if row else None

        return await self._run_in_thread(_query)


def _to_row(coupon: Coupon) -> dict:
    return {
        "code": coupon.code,
        "description": coupon.description,
        "discount_value": coupon.discountValue,
        "expiration_date": to_naive_kst(coupon.expirationDate),
        "published": coupon.published,
        "deleted": coupon.deleted,
        "created_at": to_naive_kst(coupon.createdAt),
        "updated_at": to_naive_kst(coupon.updatedAt),
    }


def _from_row(row) -> Coupon:
    return Coupon(
        id=row["coupon_id"],
        code=row["code"],
        description=row["description"],
        discountValue=Decimal(str(row["discount_value"])),
        expirationDate=ensure_kst(row["expiration_date"]),
        published=bool(row["published"]),
        deleted=bool(row["deleted"]),
        createdAt=ensure_kst(row["created_at"]),
        updatedAt=ensure_kst(row["updated_at"]),
    )
