"""HTTPサーバー（Callableプロトコル）のテスト"""
import pytest
from fastapi.testclient import TestClient

from shrine_log import server
from shrine_log.features.invocation import handlers
from shrine_log.features.invocation.container import ServiceContainer
from shrine_log.infrastructure.config.settings import Settings
from shrine_log.shared.exceptions.errors import StorageError

from fakes import FakeShrineSource


@pytest.fixture
def client(container: ServiceContainer, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setattr(handlers, "get_container", lambda: container)
    return TestClient(server.app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root_lists_functions(client: TestClient) -> None:
    body = client.get("/").json()

    assert body["status"] == "running"
    assert body["functions"] == ["detectShrine", "generateCaptions", "postToSNS"]


def test_detect_shrine(client: TestClient) -> None:
    response = client.post("/detectShrine", json={"data": {"lat": 35.6760, "lng": 139.6990}})

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["shrineId"] == "meiji"
    assert result["name"] == "明治神宮"


def test_detect_shrine_invalid_argument(client: TestClient) -> None:
    response = client.post("/detectShrine", json={"data": {"lat": "north", "lng": 139.0}})

    assert response.status_code == 400
    assert response.json() == {
        "error": {"status": "INVALID_ARGUMENT", "message": "lat must be a finite number"}
    }


def test_detect_shrine_huge_integer_is_invalid_argument(client: TestClient) -> None:
    body = '{"data": {"lat": 1' + "0" * 400 + ', "lng": 139.0}}'

    response = client.post(
        "/detectShrine", content=body, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "lat must be a finite number"


@pytest.mark.parametrize("body", [{}, {"data": None}, None])
def test_missing_data(client: TestClient, body: object) -> None:
    response = client.post("/generateCaptions", json=body)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "data is required"


def test_generate_captions(client: TestClient) -> None:
    response = client.post(
        "/generateCaptions",
        json={"data": {"shrineName": "明治神宮", "text": "", "metadata": {"goshuin": True}}},
    )

    assert response.status_code == 200
    assert "御朱印もいただきました。" in response.json()["result"]["instagramCaption"]


def test_post_to_sns(client: TestClient) -> None:
    response = client.post("/postToSNS", json={"data": {}})

    assert response.status_code == 200
    assert response.json()["result"]["errors"][0]["code"] == "not-implemented"


def test_unknown_function(client: TestClient) -> None:
    response = client.post("/deleteShrine", json={"data": {}})

    assert response.status_code == 404
    assert response.json() == {
        "error": {"status": "NOT_FOUND", "message": "Function not found: deleteShrine"}
    }


def test_storage_error_is_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Firestoreの取得失敗は503"""
    failing = ServiceContainer(
        Settings(_env_file=None), shrine_source=FakeShrineSource(error=StorageError("down"))
    )
    monkeypatch.setattr(handlers, "get_container", lambda: failing)

    response = TestClient(server.app).post("/detectShrine", json={"data": {"lat": 35.0, "lng": 139.0}})

    assert response.status_code == 503
    assert response.json()["error"]["status"] == "UNAVAILABLE"


def test_unexpected_error_is_internal(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(data: object, container: object = None) -> dict:
        raise RuntimeError("boom")

    monkeypatch.setitem(handlers.OPERATIONS, "postToSNS", broken)

    response = TestClient(server.app, raise_server_exceptions=False).post(
        "/postToSNS", json={"data": {}}
    )

    assert response.status_code == 500
    assert response.json() == {"error": {"status": "INTERNAL", "message": "INTERNAL"}}
