import os
from collections.abc import Generator

import pytest

# 테스트에서는 MySQL 대신 SQLite를 사용
os.environ["COUPON_DATABASE_URL"] = "sqlite://"
os.environ["COUPON_AUTO_CREATE_SCHEMA"] = "false"

from services.coupon.app.db.repositories.coupons import SQLAlchemyCouponRepository
from services.coupon.app.db.session import build_engine, build_session_scope, init_schema


@pytest.fixture(scope="module")
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def sql_repository(tmp_path) -> Generator[SQLAlchemyCouponRepository, None, None]:
    engine = build_engine(f"sqlite:///{tmp_path / 'coupons.db'}")
    init_schema(engine)
    yield SQLAlchemyCouponRepository(session_factory=build_session_scope(engine))
    engine.dispose()
