import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from services.coupon.app.api.v1.router import router
from services.coupon.app.db.connection import settings
from services.coupon.app.db.session import engine, init_schema

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.COUPON_AUTO_CREATE_SCHEMA:
        init_schema(engine)
        logger.info("Coupon schema ready")
    yield


app = FastAPI(
    title="Coupon Service (쿠폰 서비스)",
    description="Coupon lifecycle Micro-Service Server",
    lifespan=lifespan,
)

# CORS 설정
# 환경 변수 ALLOWED_ORIGINS가 설정되어 있으면 우선 사용
# 없으면 개발 환경일 때 기본 localhost 리스트 사용
if settings.allowed_origins:
    allowed_origins = settings.allowed_origins
elif settings.is_development:
    allowed_origins = [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite 기본 포트
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ]
else:
    # 프로덕션 환경: 환경 변수가 없으면 모든 오리진 차단
    allowed_origins = []

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


# 서비스가 살아있는지 확인하는 헬스 체크 엔드포인트
@app.get("/")
def read_root():
    return {"service": "Coupon Service", "status": "running"}
