from datetime import datetime

from pydantic import BaseModel, Field


class CouponCreateResponse(BaseModel):
    """쿠폰 생성 응답 스키마"""
    id: int = Field(..., description="쿠폰 고유 식별자")
    code: str = Field(..., description="정제된 쿠폰 코드")
    expirationDate: datetime = Field(..., description="만료 일시")

    class Config:
        from_attributes = True
