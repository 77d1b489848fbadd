from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from libs.schemas import CouponStatus


class CouponDetailResponse(BaseModel):
    """쿠폰 상세 정보 응답"""
    id: int = Field(..., description="쿠폰 고유 식별자")
    code: str = Field(..., description="쿠폰 코드")
    description: str = Field(..., description="쿠폰 설명")
    discountValue: Decimal = Field(..., description="할인 금액")
    expirationDate: datetime = Field(..., description="만료 일시")
    published: bool = Field(..., description="게시 여부")
    deleted: bool = Field(..., description="삭제 여부")
    status: CouponStatus = Field(..., description="현재 상태 (ACTIVE / EXPIRED / DELETED)")
    createdAt: datetime = Field(..., description="생성 일시")
    updatedAt: datetime = Field(..., description="수정 일시")

    class Config:
        from_attributes = True
