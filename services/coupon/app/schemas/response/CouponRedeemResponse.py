from pydantic import BaseModel, Field


class CouponRedeemResponse(BaseModel):
    """쿠폰 사용 응답 스키마"""
    id: int = Field(..., description="쿠폰 고유 식별자")
    redeemed: bool = Field(..., description="사용 처리 여부")

    class Config:
        from_attributes = True
