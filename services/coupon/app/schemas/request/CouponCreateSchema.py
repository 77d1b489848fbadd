from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CouponCreateSchema(BaseModel):
    """쿠폰 생성 요청 스키마"""
    code: str = Field(..., description="쿠폰 코드 (영문/숫자 외 문자는 제거됨)")
    description: str = Field(..., description="쿠폰 설명")
    discountValue: Decimal = Field(..., description="할인 금액 (최소 0.5)")
    expirationDate: datetime = Field(..., description="만료 일시 (시간대가 없으면 KST로 간주)")
    published: bool = Field(False, description="게시 여부")

    class Config:
        from_attributes = True
