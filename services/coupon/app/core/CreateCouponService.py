import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from libs.schemas import Coupon
from services.coupon.app.core.ports import CouponRepositoryPort

logger = logging.getLogger(__name__)


@dataclass
class CreateCouponCommand:
    code: str
    description: str
    discountValue: Decimal
    expirationDate: datetime
    published: bool = False


@dataclass
class CreateCouponOutput:
    id: int
    code: str
    expirationDate: datetime


class CreateCouponService:
    """
    쿠폰 생성 서비스.
    """

    def __init__(self, coupon_repository: CouponRepositoryPort):
        self.coupon_repository = coupon_repository

    async def execute(self, command: CreateCouponCommand) -> CreateCouponOutput:
        """
        쿠폰을 생성하고 저장합니다.

        Raises:
            DomainError: 코드/할인 금액/만료 일시가 규칙에 맞지 않는 경우
        """
        coupon = Coupon.new_coupon(
            command.code,
            command.description,
            command.discountValue,
            command.expirationDate,
            command.published,
        )

        saved = await self.coupon_repository.save(coupon)
        logger.info("Coupon created: id=%s code=%s", saved.id, saved.code)

        return CreateCouponOutput(
            id=saved.id,
            code=saved.code,
            expirationDate=saved.expirationDate,
        )
