"""
HTTP routes, exercised with FastAPI's TestClient against fake collaborators.

Run with: pytest backend/tests/test_api_routes.py -v
"""

from medilingo.domain.value_objects.image_data import ImageData
from medilingo.infrastructure.drug_records import sample_label

from fakes import make_image_bytes


def png_data_url():
    return ImageData.from_bytes(make_image_bytes("PNG"), mime_type="image/png").to_data_url()


class TestImageAnalyzeRoute:

    def test_returns_analysis(self, client):
        response = client.post("/api/img-analyze", json={"imageUrl": png_data_url()})

        assert response.status_code == 200
        body = response.json()
        assert body["medicineName"] == "Tylenol"
        assert body["alternativeNames"] == ["Extra Strength"]
        assert set(body) == {"medicineName", "alternativeNames", "fullText", "objects", "logos", "labels"}

    def test_missing_image_url(self, client):
        response = client.post("/api/img-analyze", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Image URL is required"}

    def test_invalid_payload(self, client):
        response = client.post("/api/img-analyze", json={"imageUrl": "data:image/png;base64,@@@"})

        assert response.status_code == 400

    def test_collaborator_failure(self, client, vision):
        vision.fail = True

        response = client.post("/api/img-analyze", json={"imageUrl": png_data_url()})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to analyze image"
        assert "quota exceeded" in body["details"]


class TestDrugRecordRoutes:

    def test_confirm(self, client):
        response = client.post("/api/confirmMed", json={"medicine": "tylenol"})

        assert response.status_code == 200
        assert response.json()["brand_name"] == "Tylenol"

    def test_confirm_not_found(self, client):
        response = client.post("/api/confirmMed", json={"medicine": "Unknownium"})

        assert response.status_code == 404

    def test_confirm_missing_name(self, client):
        assert client.post("/api/confirmMed", json={"medicine": " "}).status_code == 400

    def test_label_passthrough(self, client):
        response = client.post("/api/fda", json={"brand_name": "Tylenol"})

        assert response.status_code == 200
        assert response.json() == sample_label("Tylenol", "ACETAMINOPHEN")

    def test_label_failure(self, client, drug_records):
        drug_records.fail_label = True

        response = client.post("/api/fda", json={"brand_name": "Tylenol"})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch drug label"


class TestGenerationRoute:

    def test_string_prompt(self, client, generator):
        response = client.post("/api/watsonx", json={"prompt": "Explain Tylenol"})

        assert response.status_code == 200
        assert response.json() == {"generatedText": generator.text}
        assert generator.prompts == ["Explain Tylenol"]

    def test_object_prompt_on_alias_route(self, client, generator):
        response = client.post("/api/watson", json={"prompt": {"medicine": "Tylenol"}})

        assert response.status_code == 200
        assert '"medicine": "Tylenol"' in generator.prompts[0]

    def test_missing_prompt(self, client):
        response = client.post("/api/watsonx", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "Error: Prompt is required in request body"}

    def test_generation_failure(self, client, generator):
        generator.fail = True

        response = client.post("/api/watsonx", json={"prompt": "x"})

        assert response.status_code == 500


class TestSessionRoutes:

    def test_search_then_tabs(self, client):
        response = client.post("/api/session/search", json={"query": "Tylenol", "wait_for_explanation": True})

        assert response.status_code == 200
        body = response.json()
        assert body["found"] is True
        assert body["session"]["selectedMedicine"] == "Tylenol"
        assert body["session"]["fdaData"]["results"][0]["openfda"]["brand_name"] == ["Tylenol"]
        assert body["session"]["generatedExplanation"] == "Tylenol relieves pain."

        tabs = client.get("/api/session/tabs").json()
        assert tabs[2]["lines"] == ["Rarely, allergic skin reactions may occur."]

    def test_empty_search(self, client, drug_records):
        body = client.post("/api/session/search", json={"query": ""}).json()

        assert body["found"] is False
        assert drug_records.confirm_calls == []
        notifications = client.get("/api/session/notifications").json()
        assert notifications[0]["level"] == "error"
        assert client.get("/api/session/notifications").json() == []

    def test_image_upload(self, client):
        files = {"files": ("pack.png", make_image_bytes("PNG"), "image/png")}

        body = client.post("/api/session/image", files=files).json()

        assert body["found"] is True
        assert body["session"]["imageAnalysis"]["medicineName"] == "Tylenol"
        messages = [n["message"] for n in client.get("/api/session/notifications").json()]
        assert "Image successfully uploaded" in messages

    def test_image_upload_wrong_type(self, client, vision):
        files = {"files": ("anim.gif", make_image_bytes("GIF"), "image/gif")}

        body = client.post("/api/session/image", files=files).json()

        assert body["found"] is False
        assert vision.calls == 0

    def test_clear(self, client):
        client.post("/api/session/search", json={"query": "Tylenol", "wait_for_explanation": True})

        body = client.post("/api/session/clear").json()

        assert body["session"]["selectedMedicine"] == ""
        assert body["session"]["searchQuery"] == ""


class TestSettingsRoutes:

    def test_defaults(self, client):
        body = client.get("/api/settings").json()

        assert body["sex"] == "female"
        assert body["conditions"] == []
        assert body["language"] == {"code": "en", "name": "English"}

    def test_put_and_read_back(self, client):
        settings = client.get("/api/settings").json()
        settings.pop("available_conditions")
        settings["conditions"] = ["asthma"]

        assert client.put("/api/settings", json=settings).status_code == 200
        assert client.get("/api/settings").json()["conditions"] == ["asthma"]

    def test_sex_change_filters_conditions(self, client):
        client.post("/api/settings/conditions/pregnancy/toggle")
        client.post("/api/settings/conditions/diabetes/toggle")

        body = client.post("/api/settings/sex", json={"sex": "male"}).json()

        assert body["sex"] == "male"
        assert body["conditions"] == ["diabetes"]

    def test_toggle_unknown_condition(self, client):
        assert client.post("/api/settings/conditions/prostate/toggle").status_code == 400

    def test_options(self, client):
        body = client.get("/api/settings/options").json()

        assert set(body["medical_conditions"]) == {"shared", "female", "male"}
        assert body["age_ranges"][0]["id"] == "18-30"


def test_health(client):
    body = client.get("/api/health").json()

    assert body["status"] == "healthy"
    assert body["vision"] == "FakeVision"
    assert "api_key" not in body["config"]["llm"]
