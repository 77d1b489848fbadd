from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from libs.common import NotFoundError, now_kst
from libs.schemas import Coupon, CouponStatus
from services.coupon.app.core.ports import CouponRepositoryPort


@dataclass
class GetCouponCommand:
    id: int


@dataclass
class GetCouponOutput:
    id: int
    code: str
    description: str
    discountValue: Decimal
    expirationDate: datetime
    published: bool
    deleted: bool
    status: CouponStatus
    createdAt: datetime
    updatedAt: datetime


class GetCouponService:
    """
    쿠폰 조회 서비스.
    """

    def __init__(self, coupon_repository: CouponRepositoryPort):
        self.coupon_repository = coupon_repository

    async def execute(self, command: GetCouponCommand) -> GetCouponOutput:
        """
        쿠폰을 조회하고 현재 시각 기준 상태를 함께 반환합니다.

        Raises:
            NotFoundError: 쿠폰이 존재하지 않는 경우
        """
        coupon = await self.coupon_repository.find_by_id(command.id)
        if coupon is None:
            raise NotFoundError(f"ID {command.id} 쿠폰을 찾을 수 없습니다.")

        return GetCouponOutput(
            id=coupon.id,
            code=coupon.code,
            description=coupon.description,
            discountValue=coupon.discountValue,
            expirationDate=coupon.expirationDate,
            published=coupon.published,
            deleted=coupon.deleted,
            status=resolve_status(coupon, now_kst()),
            createdAt=coupon.createdAt,
            updatedAt=coupon.updatedAt,
        )


def resolve_status(coupon: Coupon, reference: datetime) -> CouponStatus:
    # 삭제 > 만료 > 활성 순으로 우선
    if coupon.deleted:
        return CouponStatus.DELETED
    if coupon.is_expired(reference):
        return CouponStatus.EXPIRED
    return CouponStatus.ACTIVE
