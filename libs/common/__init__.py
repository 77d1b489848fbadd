"""
Coupon 공통 라이브러리
서비스 전반에서 사용하는 시간/에러 유틸리티를 제공합니다.
"""

from libs.common.errors import DomainError, NotFoundError
from libs.common.timezone import KST_TIMEZONE, ensure_kst, now_kst, to_naive_kst

__all__ = [
    "DomainError",
    "NotFoundError",
    "KST_TIMEZONE",
    "ensure_kst",
    "now_kst",
    "to_naive_kst",
]
