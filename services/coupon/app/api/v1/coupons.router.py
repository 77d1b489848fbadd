import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from libs.common import DomainError, NotFoundError

from services.coupon.app.core.CreateCouponService import CreateCouponCommand, CreateCouponService
from services.coupon.app.core.DeleteCouponService import DeleteCouponCommand, DeleteCouponService
from services.coupon.app.core.GetCouponService import GetCouponCommand, GetCouponService
from services.coupon.app.core.RedeemCouponService import RedeemCouponCommand, RedeemCouponService
from services.coupon.app.dependencies import (
    get_create_coupon_service,
    get_delete_coupon_service,
    get_get_coupon_service,
    get_redeem_coupon_service,
)
from services.coupon.app.schemas.request import CouponCreateSchema
from services.coupon.app.schemas.response import (
    CouponCreateResponse,
    CouponDetailResponse,
    CouponRedeemResponse,
)

logger = logging.getLogger(__name__)

# 쿠폰 기본 CRUD 라우터
router = APIRouter(prefix="/coupons", tags=["Coupons"])


def _to_http_exception(exc: DomainError | NotFoundError) -> HTTPException:
    """도메인 에러를 HTTP 응답으로 변환합니다."""
    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    logger.warning("Coupon request rejected: %s %s", exc.code, exc.message)
    return HTTPException(
        status_code=status_code,
        detail={"code": exc.code, "message": exc.message},
    )


@router.post("", response_model=CouponCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_coupon(
    payload: CouponCreateSchema,
    create_service: CreateCouponService = Depends(get_create_coupon_service),
):
    """
    새로운 쿠폰을 생성합니다.

    **Request Body:**
    - `code`: 쿠폰 코드 (영문/숫자 외 문자는 제거, 결과가 6자리여야 함)
    - `description`: 쿠폰 설명
    - `discountValue`: 할인 금액 (최소 0.5)
    - `expirationDate`: 만료 일시 (현재 이후)
    - `published`: 게시 여부 (기본값: false)

    **Response:**
    - HTTP 201 Created: 쿠폰 생성 성공
    - HTTP 400 Bad Request: 규칙 위반 (ERR-IVD-CODE, ERR-IVD-DISCOUNT, ERR-IVD-EXPIRATION)
    - HTTP 422 Unprocessable Entity: 요청 형식 오류
    """
    command = CreateCouponCommand(
        code=payload.code,
        description=payload.description,
        discountValue=payload.discountValue,
        expirationDate=payload.expirationDate,
        published=payload.published,
    )
    try:
        output = await create_service.execute(command)
    except DomainError as exc:
        raise _to_http_exception(exc) from exc

    return CouponCreateResponse(
        id=output.id,
        code=output.code,
        expirationDate=output.expirationDate,
    )


@router.get("/{coupon_id}", response_model=CouponDetailResponse)
async def get_coupon(
    coupon_id: int,
    get_service: GetCouponService = Depends(get_get_coupon_service),
):
    """
    쿠폰 상세 정보와 현재 상태를 조회합니다.

    **Response:**
    - HTTP 200 OK: 쿠폰 상세 정보 반환
    - HTTP 404 Not Found: 존재하지 않는 쿠폰 (ERR-NOT-FOUND)
    """
    try:
        output = await get_service.execute(GetCouponCommand(id=coupon_id))
    except NotFoundError as exc:
        raise _to_http_exception(exc) from exc

    return CouponDetailResponse.model_validate(output)


@router.post("/{coupon_id}/redeem", response_model=CouponRedeemResponse)
async def redeem_coupon(
    coupon_id: int,
    redeem_service: RedeemCouponService = Depends(get_redeem_coupon_service),
):
    """
    쿠폰을 사용 처리합니다.

    **Response:**
    - HTTP 200 OK: 사용 처리 완료
    - HTTP 400 Bad Request: 삭제/미게시/만료된 쿠폰 (ERR-DELETED, ERR-NOT-PUBLISHED, ERR-EXPIRED)
    - HTTP 404 Not Found: 존재하지 않는 쿠폰 (ERR-NOT-FOUND)
    """
    try:
        output = await redeem_service.execute(RedeemCouponCommand(id=coupon_id))
    except (DomainError, NotFoundError) as exc:
        raise _to_http_exception(exc) from exc

    return CouponRedeemResponse(id=output.id, redeemed=output.redeemed)


@router.delete(
    "/{coupon_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_coupon(
    coupon_id: int,
    delete_service: DeleteCouponService = Depends(get_delete_coupon_service),
):
    """
    쿠폰을 삭제합니다.

    **Response:**
    - HTTP 204 No Content: 삭제 완료
    - HTTP 400 Bad Request: 이미 삭제된 쿠폰 (ERR-ALREADY-DELETED)
    - HTTP 404 Not Found: 존재하지 않는 쿠폰 (ERR-NOT-FOUND)

    **참고:**
    - 실제로 행이 삭제되지 않고 deleted 플래그만 기록됩니다.
    """
    try:
        await delete_service.execute(DeleteCouponCommand(id=coupon_id))
    except (DomainError, NotFoundError) as exc:
        raise _to_http_exception(exc) from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)
