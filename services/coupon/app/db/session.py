from contextlib import contextmanager
from typing import Callable, ContextManager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from services.coupon.app.db.connection import settings
from services.coupon.app.db.tables import metadata


def build_engine(database_url: str) -> Engine:
    kwargs = {"pool_pre_ping": True, "future": True}
    if database_url.startswith("sqlite"):
        # 저장소 호출이 asyncio.to_thread 워커 스레드에서 실행됨
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_recycle"] = 3600
    return create_engine(database_url, **kwargs)


def build_session_scope(bind: Engine) -> Callable[[], ContextManager[Session]]:
    """주어진 엔진에 묶인 session_scope 팩토리를 만듭니다."""
    factory = sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)

    @contextmanager
    def _scope():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    return _scope


def init_schema(bind: Engine) -> None:
    """coupons 테이블이 없으면 생성합니다."""
    metadata.create_all(bind)


engine = build_engine(settings.COUPON_DATABASE_URL)

session_scope = build_session_scope(engine)
