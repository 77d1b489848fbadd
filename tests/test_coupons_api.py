from datetime import datetime, timedelta, timezone
from decimal import Decimal

import anyio
import pytest
from fastapi.testclient import TestClient

from libs.common import now_kst
from libs.schemas import Coupon
from services.coupon.app import dependencies
from services.coupon.app.core.CreateCouponService import CreateCouponService
from services.coupon.app.core.DeleteCouponService import DeleteCouponService
from services.coupon.app.core.GetCouponService import GetCouponService
from services.coupon.app.core.RedeemCouponService import RedeemCouponService
from services.coupon.app.main import app


@pytest.fixture
def client(sql_repository):
    app.dependency_overrides[dependencies.get_create_coupon_service] = (
        lambda: CreateCouponService(coupon_repository=sql_repository)
    )
    app.dependency_overrides[dependencies.get_redeem_coupon_service] = (
        lambda: RedeemCouponService(coupon_repository=sql_repository)
    )
    app.dependency_overrides[dependencies.get_delete_coupon_service] = (
        lambda: DeleteCouponService(coupon_repository=sql_repository)
    )
    app.dependency_overrides[dependencies.get_get_coupon_service] = (
        lambda: GetCouponService(coupon_repository=sql_repository)
    )
    test_client = TestClient(app)
    yield test_client
    test_client.close()
    app.dependency_overrides.clear()


def coupon_payload(**overrides) -> dict:
    payload = {
        "code": "ab-cd-12",
        "description": "API 테스트 쿠폰",
        "discountValue": 1.5,
        "expirationDate": (now_kst() + timedelta(days=1)).isoformat(),
        "published": True,
    }
    payload.update(overrides)
    return payload


def create_coupon(client: TestClient, **overrides) -> dict:
    response = client.post("/coupons", json=coupon_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


def test_health_check(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"service": "Coupon Service", "status": "running"}


def test_create_coupon_returns_201_with_sanitized_code(client: TestClient) -> None:
    payload = coupon_payload()
    response = client.post("/coupons", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "code", "expirationDate"}
    assert isinstance(body["id"], int)
    assert body["code"] == "ABCD12"
    assert datetime.fromisoformat(body["expirationDate"]) == datetime.fromisoformat(
        payload["expirationDate"]
    )


def test_create_coupon_rejects_invalid_code(client: TestClient) -> None:
    response = client.post("/coupons", json=coupon_payload(code="AB#C1"))

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-IVD-CODE"


def test_create_coupon_rejects_small_discount(client: TestClient) -> None:
    response = client.post("/coupons", json=coupon_payload(discountValue=0.25))

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-IVD-DISCOUNT"


def test_create_coupon_rejects_past_expiration(client: TestClient) -> None:
    past = (now_kst() - timedelta(days=1)).isoformat()

    response = client.post("/coupons", json=coupon_payload(expirationDate=past))

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-IVD-EXPIRATION"


def test_create_coupon_requires_body_fields(client: TestClient) -> None:
    payload = coupon_payload()
    del payload["description"]

    response = client.post("/coupons", json=payload)

    assert response.status_code == 422


def test_get_coupon_returns_active_status(client: TestClient) -> None:
    created = create_coupon(client)

    response = client.get(f"/coupons/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["code"] == "ABCD12"
    assert body["description"] == "API 테스트 쿠폰"
    assert Decimal(str(body["discountValue"])) == Decimal("1.5")
    assert body["published"] is True
    assert body["deleted"] is False
    assert body["status"] == "ACTIVE"


def test_get_coupon_returns_expired_status(client: TestClient, sql_repository) -> None:
    now = now_kst()
    expired = Coupon(
        code="EXP123",
        description="만료 쿠폰",
        discountValue=Decimal("0.8"),
        expirationDate=now - timedelta(hours=1),
        published=True,
        deleted=False,
        createdAt=now - timedelta(days=1),
        updatedAt=now - timedelta(hours=2),
    )
    saved = anyio.run(sql_repository.save, expired)

    response = client.get(f"/coupons/{saved.id}")

    assert response.status_code == 200
    assert response.json()["status"] == "EXPIRED"


def test_get_coupon_returns_404_for_unknown_id(client: TestClient) -> None:
    response = client.get("/coupons/999")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "ERR-NOT-FOUND"


def test_delete_coupon_soft_deletes(client: TestClient) -> None:
    created = create_coupon(client)

    response = client.delete(f"/coupons/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""

    detail = client.get(f"/coupons/{created['id']}").json()
    assert detail["deleted"] is True
    assert detail["status"] == "DELETED"


def test_delete_coupon_twice_returns_400(client: TestClient) -> None:
    created = create_coupon(client)
    client.delete(f"/coupons/{created['id']}")

    response = client.delete(f"/coupons/{created['id']}")

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-ALREADY-DELETED"


def test_delete_coupon_returns_404_for_unknown_id(client: TestClient) -> None:
    response = client.delete("/coupons/999")

    assert response.status_code == 404


def test_redeem_coupon_returns_redeemed(client: TestClient) -> None:
    created = create_coupon(client)

    response = client.post(f"/coupons/{created['id']}/redeem")

    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "redeemed": True}


def test_redeem_unpublished_coupon_returns_400(client: TestClient) -> None:
    created = create_coupon(client, published=False)

    response = client.post(f"/coupons/{created['id']}/redeem")

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-NOT-PUBLISHED"


def test_redeem_deleted_coupon_returns_400(client: TestClient) -> None:
    created = create_coupon(client)
    client.delete(f"/coupons/{created['id']}")

    response = client.post(f"/coupons/{created['id']}/redeem")

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-DELETED"


def test_redeem_expired_coupon_returns_400(client: TestClient, sql_repository) -> None:
    now = now_kst()
    expired = Coupon(
        code="EXP456",
        description="만료 쿠폰",
        discountValue=Decimal("1"),
        expirationDate=now - timedelta(minutes=5),
        published=True,
        deleted=False,
        createdAt=now - timedelta(days=1),
        updatedAt=now - timedelta(days=1),
    )
    saved = anyio.run(sql_repository.save, expired)

    response = client.post(f"/coupons/{saved.id}/redeem")

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-EXPIRED"


def test_create_coupon_converts_aware_expiration_to_kst(client: TestClient) -> None:
    utc_expiration = (now_kst() + timedelta(days=1)).astimezone(timezone.utc)

    body = create_coupon(client, expirationDate=utc_expiration.isoformat())

    returned = datetime.fromisoformat(body["expirationDate"])
    assert returned == utc_expiration
    assert returned.utcoffset() == timedelta(hours=9)

    detail = client.get(f"/coupons/{body['id']}").json()
    stored = datetime.fromisoformat(detail["expirationDate"])
    assert stored == utc_expiration
    assert stored.utcoffset() == timedelta(hours=9)


def test_create_coupon_rejects_discount_with_three_decimals(client: TestClient) -> None:
    response = client.post("/coupons", json=coupon_payload(discountValue="0.505"))

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "ERR-IVD-DISCOUNT"
