import pytest
from httpx import AsyncClient

from bloodwise.services.history import history_store
from bloodwise.services.knowledge_base import DEFAULT_TIPS

# This marker tells pytest this is an async test
@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "version" in response.json()

@pytest.mark.asyncio
async def test_classify_returns_camel_case_risk(client: AsyncClient):
    response = await client.post("/v1/classify", json={"hemoglobin": 9.0})

    assert response.status_code == 200
    data = response.json()
    assert data == [{
        "disease": "Anemia",
        "confidence": 78,
        "riskLevel": "high",
        "description": "Low hemoglobin levels detected, indicating possible anemia.",
        "markers": {"hemoglobin": 9.0},
    }]

@pytest.mark.asyncio
async def test_classify_empty_panel_is_inconclusive(client: AsyncClient):
    response = await client.post("/v1/classify", json={})
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["disease"] == "Inconclusive"
    assert data[0]["confidence"] == 30

@pytest.mark.asyncio
async def test_classify_order_by_risk(client: AsyncClient):
    payload = {"hemoglobin": 11.0, "glucose": 200, "creatinine": 1.0}

    engine_order = await client.post("/v1/classify", json=payload)
    risk_order = await client.post("/v1/classify", params={"order": "risk"}, json=payload)

    assert [p["disease"] for p in engine_order.json()] == ["Anemia", "Type 2 Diabetes"]
    assert [p["disease"] for p in risk_order.json()] == ["Type 2 Diabetes", "Anemia"]

@pytest.mark.asyncio
async def test_classify_require_core_reports_missing(client: AsyncClient):
    response = await client.post(
        "/v1/classify",
        params={"require_core": "true"},
        json={"hemoglobin": 13.0}
    )
    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["status"] == "MISSING_VALUES"
    assert detail["missing_fields"] == ["glucose", "creatinine"]
    assert len(history_store) == 0

@pytest.mark.asyncio
async def test_classify_rejects_bad_input(client: AsyncClient):
    bad_number = await client.post("/v1/classify", json={"glucose": "lots"})
    assert bad_number.status_code == 422

    bad_gender = await client.post("/v1/classify", json={"gender": "other"})
    assert bad_gender.status_code == 422

    unknown_field = await client.post("/v1/classify", json={"ferritin": 20})
    assert unknown_field.status_code == 422

@pytest.mark.asyncio
async def test_classify_records_history(client: AsyncClient):
    await client.post("/v1/classify", params={"lab_name": "HealthFirst Labs"}, json={"glucose": 200})

    response = await client.get("/v1/history")
    assert response.status_code == 200
    entries = response.json()
    assert len(entries) == 1
    assert entries[0]["lab_name"] == "HealthFirst Labs"
    assert entries[0]["predictions"][0]["riskLevel"] == "high"

@pytest.mark.asyncio
async def test_history_filter_and_delete(client: AsyncClient):
    await client.post("/v1/classify", json={"glucose": 200})
    await client.post("/v1/classify", json={"hemoglobin": 9.0})

    filtered = await client.get("/v1/history", params={"disease": "anemia"})
    assert len(filtered.json()) == 1
    entry_id = filtered.json()[0]["id"]

    deleted = await client.delete(f"/v1/history/{entry_id}")
    assert deleted.status_code == 204

    missing = await client.delete(f"/v1/history/{entry_id}")
    assert missing.status_code == 404

    remaining = await client.get("/v1/history")
    assert [e["predictions"][0]["disease"] for e in remaining.json()] == ["Type 2 Diabetes"]

@pytest.mark.asyncio
async def test_knowledge_lookup(client: AsyncClient):
    response = await client.get("/v1/knowledge/thrombocytopenia")
    assert response.status_code == 200
    assert response.json()["name"] == "Thrombocytopenia"

    missing = await client.get("/v1/knowledge/scurvy")
    assert missing.status_code == 404

@pytest.mark.asyncio
async def test_tips_lookup(client: AsyncClient):
    response = await client.get("/v1/knowledge/Type 2 Diabetes/tips")
    assert response.status_code == 200
    data = response.json()
    assert data["tips"][0] == "Monitor blood sugar regularly"
    assert "lifestyleImpact" in data

    fallback = await client.get("/v1/knowledge/scurvy/tips")
    assert fallback.status_code == 200
    assert fallback.json()["tips"] == DEFAULT_TIPS
    assert fallback.json()["treatments"] == []

@pytest.mark.asyncio
async def test_chat_greeting(client: AsyncClient):
    response = await client.get("/v1/chat/greeting")
    assert response.status_code == 200
    assert response.json()["role"] == "assistant"

@pytest.mark.asyncio
async def test_chat_reply(client: AsyncClient, simulator):
    predictions = (await client.post("/v1/classify", json={"glucose": 200})).json()

    response = await client.post(
        "/v1/chat",
        json={"message": "What treatment is there?", "predictions": predictions}
    )
    assert response.status_code == 200
    assert response.json()["content"].startswith("For Type 2 Diabetes")
    assert simulator.pauses  # typing delay went through the simulator

@pytest.mark.asyncio
async def test_chat_rejects_blank_message(client: AsyncClient):
    response = await client.post("/v1/chat", json={"message": "   "})
    assert response.status_code == 422

@pytest.mark.asyncio
async def test_verify_requires_predictions(client: AsyncClient):
    response = await client.post("/v1/reports/verify", json={"predictions": []})
    assert response.status_code == 400

@pytest.mark.asyncio
async def test_verify_failure_outcome(client: AsyncClient, simulator):
    simulator.outcome = False
    predictions = (await client.post("/v1/classify", json={"glucose": 200})).json()

    response = await client.post("/v1/reports/verify", json={"predictions": predictions})
    assert response.status_code == 200
    assert response.json()["status"] == "failed"

@pytest.mark.asyncio
async def test_upload_report(client: AsyncClient):
    files = {"file": ("cbc.pdf", b"%PDF-1.4 fake", "application/pdf")}
    response = await client.post("/v1/reports/upload", files=files)

    assert response.status_code == 200
    data = response.json()
    assert data["filename"] == "cbc.pdf"
    assert data["extracted_count"] == 14
    assert data["values"]["hemoglobin"] == 11.2

@pytest.mark.asyncio
async def test_upload_rejects_wrong_type(client: AsyncClient):
    files = {"file": ("notes.txt", b"hello", "text/plain")}
    response = await client.post("/v1/reports/upload", files=files)
    assert response.status_code == 415

@pytest.mark.asyncio
async def test_upload_rejects_large_file(client: AsyncClient, monkeypatch):
    from bloodwise.core.config import settings
    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 8)

    files = {"file": ("big.png", b"0123456789", "image/png")}
    response = await client.post("/v1/reports/upload", files=files)
    assert response.status_code == 413

@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient):
    await client.post("/v1/classify", json={"glucose": 200})
    response = await client.get("/metrics/")
    assert response.status_code == 200
    assert "bloodwise_predictions_total" in response.text
