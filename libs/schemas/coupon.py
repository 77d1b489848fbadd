from datetime import datetime
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, Field, field_validator

from libs.common import DomainError, ensure_kst, now_kst

CODE_LENGTH = 6
MIN_DISCOUNT_VALUE = Decimal("0.5")
# coupons.discount_value 컬럼 스케일 (NUMERIC(19, 2))
DISCOUNT_EXPONENT = -2


class Coupon(BaseModel):
    """
    할인 쿠폰 엔티티.

    생성은 `new_coupon()` 팩토리로만 하고, 이후 상태 변경은 `redeem()`과
    `delete()`를 통해서만 일어납니다. 저장된 쿠폰을 복원할 때는 생성자를
    직접 사용합니다.
    """

    id: int | None = Field(None, description="쿠폰 고유 식별자 (저장 전에는 None)")
    code: str = Field(..., description="쿠폰 코드 (영문 대문자/숫자 6자리)")
    description: str = Field(..., description="쿠폰 설명")
    discountValue: Decimal = Field(..., description="할인 금액")
    expirationDate: datetime = Field(..., description="만료 일시")
    published: bool = Field(False, description="게시 여부")
    deleted: bool = Field(False, description="삭제 여부")
    createdAt: datetime = Field(..., description="생성 일시")
    updatedAt: datetime = Field(..., description="수정 일시")

    class Config:
        from_attributes = True

    @field_validator("expirationDate", "createdAt", "updatedAt")
    @classmethod
    def _attach_kst(cls, value: datetime) -> datetime:
        # 시간대가 없는 값은 KST로 간주
        return ensure_kst(value)

    @classmethod
    def new_coupon(
        cls,
        raw_code: str | None,
        description: str | None,
        discount_value: Decimal | float | str | None,
        expiration_date: datetime | None,
        published: bool = False,
        now: datetime | None = None,
    ) -> "Coupon":
        """
        새 쿠폰을 생성합니다. 코드는 영문/숫자 외 문자를 제거한 뒤 대문자로 바꿉니다.

        Raises:
            DomainError: 필수 값이 없거나 불변식을 위반한 경우
        """
        _require(raw_code, "쿠폰 코드")
        _require(description, "쿠폰 설명")
        _require(discount_value, "할인 금액")
        _require(expiration_date, "만료 일시")

        now = ensure_kst(now) or now_kst()
        sanitized_code = sanitize_code(raw_code)
        _ensure_valid_code_length(sanitized_code)

        discount = _to_decimal(discount_value)
        _ensure_minimum_discount(discount)

        expiration = ensure_kst(expiration_date)
        _ensure_not_expired(
            expiration,
            now,
            "ERR-IVD-EXPIRATION",
            "만료 일시는 현재 시각 이후여야 합니다.",
        )

        return cls(
            id=None,
            code=sanitized_code.upper(),
            description=description,
            discountValue=discount,
            expirationDate=expiration,
            published=bool(published),
            deleted=False,
            createdAt=now,
            updatedAt=now,
        )

    def redeem(self, now: datetime | None = None) -> None:
        """
        쿠폰을 사용 가능한 상태로 다시 확인합니다.
        삭제/미게시/만료 쿠폰이면 실패하고, 통과하면 게시 상태를 유지합니다.
        """
        now = ensure_kst(now) or now_kst()
        self._ensure_not_deleted("ERR-DELETED", "삭제된 쿠폰입니다.")
        if not self.published:
            raise DomainError("게시되지 않은 쿠폰입니다.", code="ERR-NOT-PUBLISHED")
        _ensure_not_expired(
            ensure_kst(self.expirationDate),
            now,
            "ERR-EXPIRED",
            "만료된 쿠폰입니다.",
        )
        self.published = True

    def delete(self, now: datetime | None = None) -> None:
        """쿠폰을 소프트 삭제합니다. 이미 삭제된 쿠폰이면 실패합니다."""
        self._ensure_not_deleted("ERR-ALREADY-DELETED", "이미 삭제된 쿠폰입니다.")
        self.deleted = True
        self.updatedAt = ensure_kst(now) or now_kst()

    def is_expired(self, reference: datetime) -> bool:
        return not ensure_kst(self.expirationDate) > ensure_kst(reference)

    def _ensure_not_deleted(self, code: str, message: str) -> None:
        if self.deleted:
            raise DomainError(message, code=code)


def sanitize_code(raw_code: str) -> str:
    """영문자/숫자가 아닌 문자를 모두 제거합니다."""
    return "".join(ch for ch in raw_code if ch.isalnum())


def _require(value, field_name: str) -> None:
    if value is None:
        raise DomainError(f"{field_name}은(는) 필수입니다.", code="ERR-MISSING-VALUE")


def _to_decimal(value) -> Decimal:
    try:
        # float는 문자열을 거쳐야 0.1 같은 값이 그대로 보존됨
        discount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise DomainError("할인 금액이 올바른 숫자가 아닙니다.", code="ERR-IVD-DISCOUNT") from exc
    if not discount.is_finite():
        raise DomainError("할인 금액이 올바른 숫자가 아닙니다.", code="ERR-IVD-DISCOUNT")
    return discount


def _ensure_valid_code_length(sanitized_code: str) -> None:
    if len(sanitized_code) != CODE_LENGTH:
        raise DomainError(
            f"쿠폰 코드는 영문/숫자 {CODE_LENGTH}자리여야 합니다.",
            code="ERR-IVD-CODE",
        )


def _ensure_minimum_discount(discount: Decimal) -> None:
    if discount < MIN_DISCOUNT_VALUE:
        raise DomainError(
            f"할인 금액은 최소 {MIN_DISCOUNT_VALUE} 이상이어야 합니다.",
            code="ERR-IVD-DISCOUNT",
        )
    if discount.normalize().as_tuple().exponent < DISCOUNT_EXPONENT:
        raise DomainError(
            "할인 금액은 소수점 둘째 자리까지만 허용됩니다.",
            code="ERR-IVD-DISCOUNT",
        )


def _ensure_not_expired(expiration: datetime, now: datetime, code: str, message: str) -> None:
    if not expiration > now:
        raise DomainError(message, code=code)
