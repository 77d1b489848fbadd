import logging
from dataclasses import dataclass

from libs.common import NotFoundError
from services.coupon.app.core.ports import CouponRepositoryPort

logger = logging.getLogger(__name__)


@dataclass
class DeleteCouponCommand:
    id: int


@dataclass
class DeleteCouponOutput:
    id: int


class DeleteCouponService:
    """
    쿠폰 삭제 서비스.

    실제 행을 지우지 않고 deleted 플래그만 기록합니다.
    """

    def __init__(self, coupon_repository: CouponRepositoryPort):
        self.coupon_repository = coupon_repository

    async def execute(self, command: DeleteCouponCommand) -> DeleteCouponOutput:
        coupon = await self.coupon_repository.find_by_id(command.id)
        if coupon is None:
            raise NotFoundError(f"ID {command.id} 쿠폰을 찾을 수 없습니다.")

        coupon.delete()

        saved = await self.coupon_repository.save(coupon)
        logger.info("Coupon deleted: id=%s", saved.id)

        return DeleteCouponOutput(id=saved.id)
