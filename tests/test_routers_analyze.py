import pytest

from heritagelens.exceptions import IntegrationError
from heritagelens.routers.analyze import get_provider
from heritagelens.services.analysis import MockAnalysisProvider
from conftest import JPEG_DATA_URL, TEXT_DATA_URL


@pytest.fixture
def client(api_client):
    from heritagelens.main import api
    api.dependency_overrides[get_provider] = lambda: MockAnalysisProvider(seed=7)
    yield api_client
    api.dependency_overrides.clear()


class TestAnalyze:
    def test_heritage_result(self, client):
        resp = client.post("/api/analyze", json={"image": JPEG_DATA_URL, "text": ""})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["is_heritage"] is True
        assert len(data["ranked_interpretations"]) == 5
        assert set(data["agent_analyses"]) == {"architectural", "cultural", "verification"}
        assert "nearby_heritage_sites" not in data
        assert "error" not in data

    def test_invalid_image_is_400(self, client):
        resp = client.post("/api/analyze", json={"image": TEXT_DATA_URL, "text": ""})
        assert resp.status_code == 400
        data = resp.json()
        assert data == {"is_valid": False, "is_heritage": False, "error": "Invalid image format"}

    def test_missing_image_is_400(self, client):
        resp = client.post("/api/analyze", json={"text": "temple"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "No image provided"

    def test_not_heritage_is_200(self, client):
        resp = client.post("/api/analyze", json={"image": JPEG_DATA_URL, "text": "my cartoon drawing"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_heritage"] is False
        assert "cartoon" in data["error"]
        assert "hypotheses" not in data

    def test_provider_failure_is_500(self, client, mocker):
        mocker.patch.object(MockAnalysisProvider, "analyze", side_effect=IntegrationError("down"))
        resp = client.post("/api/analyze", json={"image": JPEG_DATA_URL, "text": ""})
        assert resp.status_code == 500
        assert resp.json()["is_valid"] is False

    def test_null_image_is_400(self, client):
        resp = client.post("/api/analyze", json={"image": None, "text": ""})
        assert resp.status_code == 400
        assert resp.json() == {"is_valid": False, "is_heritage": False, "error": "No image provided"}

    def test_null_text_is_treated_as_empty(self, client):
        resp = client.post("/api/analyze", json={"image": JPEG_DATA_URL, "text": None})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_heritage"] is True
        assert "No additional context provided" in data["visual_analysis"]


class TestStatus:
    def test_reports_provider(self, client):
        resp = client.get("/api/status")
        assert resp.status_code == 200
        assert resp.json()["provider"] == "mock"
        assert resp.json()["ready"] is True


class TestPing:
    def test_ping(self, api_client, mocker):
        from heritagelens.config import Settings
        mocker.patch("heritagelens.routers.analyze.get_settings", return_value=Settings(ping_message="pong"))
        resp = api_client.get("/api/ping")
        assert resp.status_code == 200
        assert resp.json() == {"message": "pong"}
