import logging
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType
from typing import Optional

from fastapi import APIRouter

logger = logging.getLogger(__name__)

# 메인 라우터 생성 (prefix 없음)
router = APIRouter(tags=["Coupon"])


def _load_module(module_path: Path) -> Optional[ModuleType]:
    """*.router.py 파일을 모듈로 로드합니다. (파일명에 '.'이 있어 일반 import 불가)"""
    module_name = f"services.coupon.app.api.v1.{module_path.stem.replace('.', '_')}"
    spec = spec_from_file_location(module_name, module_path)
    if spec is None or spec.loader is None:
        return None
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


v1_dir = Path(__file__).resolve().parent

# 등록 순서가 실행 환경에 따라 달라지지 않도록 정렬
for router_file in sorted(v1_dir.glob("*.router.py")):
    module = _load_module(router_file)
    if module is None:
        continue

    sub_router = getattr(module, "router", None)
    if isinstance(sub_router, APIRouter):
        router.include_router(sub_router)
        logger.debug("Router loaded: %s", router_file.name)
