"""
한국표준시(KST) 관련 유틸리티
쿠폰 만료/생성 시각을 일관된 시간대로 다루기 위해 사용합니다.
"""
from datetime import datetime, timedelta, timezone

# 한국표준시 (KST = UTC+9)
KST_TIMEZONE = timezone(timedelta(hours=9))


def now_kst() -> datetime:
    """현재 시간을 KST 시간대로 반환합니다."""
    return datetime.now(KST_TIMEZONE)


def ensure_kst(dt: datetime | None) -> datetime | None:
    """
    datetime 객체가 KST 시간대를 가지도록 보장합니다.
    시간대가 없으면 KST로 간주하고, 다른 시간대면 KST로 변환합니다.

    Args:
        dt: datetime 객체 또는 None

    Returns:
        KST 시간대의 datetime 객체 또는 None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=KST_TIMEZONE)
    return dt.astimezone(KST_TIMEZONE)


def to_naive_kst(dt: datetime | None) -> datetime | None:
    """DB 저장용: KST 벽시계 시각으로 변환한 뒤 시간대 정보를 제거합니다."""
    dt = ensure_kst(dt)
    if dt is None:
        return None
    return dt.replace(tzinfo=None)
