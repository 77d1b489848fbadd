import logging
from dataclasses import dataclass

from libs.common import NotFoundError
from services.coupon.app.core.ports import CouponRepositoryPort

logger = logging.getLogger(__name__)


@dataclass
class RedeemCouponCommand:
    id: int


@dataclass
class RedeemCouponOutput:
    id: int
    redeemed: bool


class RedeemCouponService:
    """
    쿠폰 사용 서비스.
    """

    def __init__(self, coupon_repository: CouponRepositoryPort):
        self.coupon_repository = coupon_repository

    async def execute(self, command: RedeemCouponCommand) -> RedeemCouponOutput:
        """
        쿠폰을 사용 처리합니다.

        Raises:
            NotFoundError: 쿠폰이 존재하지 않는 경우
            DomainError: 삭제/미게시/만료된 쿠폰인 경우
        """
        coupon = await self.coupon_repository.find_by_id(command.id)
        if coupon is None:
            raise NotFoundError(f"ID {command.id} 쿠폰을 찾을 수 없습니다.")

        coupon.redeem()

        saved = await self.coupon_repository.save(coupon)
        logger.info("Coupon redeemed: id=%s", saved.id)

        return RedeemCouponOutput(id=saved.id, redeemed=True)
