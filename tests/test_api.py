import pandas as pd
from fastapi.testclient import TestClient
from ptp_calc.api.main import app, settings

client = TestClient(app)


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["table_loaded"] is True


def test_config_endpoint():
    response = client.get("/config")
    assert response.status_code == 200
    assert response.json()["advisory_age_ceiling"] == 100


def test_table_endpoint():
    rows = client.get("/table").json()
    assert len(rows) == 20
    assert {"symptom": "dyspnea", "sex": "women", "age_band": "70+", "percent": 12} in rows


def test_ptp_success():
    response = client.post("/ptp", json={"age": 45, "sex": "men", "symptom": "chestPain"})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["percent"] == 22
    assert data["category"] == "intermediateHigh"
    assert data["age_band"] == "40-49"


def test_ptp_missing_sex_is_a_flag_not_an_error():
    response = client.post("/ptp", json={"age": 50, "symptom": "dyspnea"})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is False
    assert data["percent"] is None
    assert data["flags"] == [{"level": "bad", "message": "Sex is required."}]


def test_cac_endpoint():
    assert client.post("/cac", json={"cac": 99}).json()["category"] == "low"
    assert client.post("/cac", json={"cac": "abc"}).json()["ok"] is False
    assert client.post("/cac", json={}).json() is None


def test_assess_endpoint():
    response = client.post("/assess", json={"age": 45, "sex": "men", "symptom": "chestPain", "cac": -1})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["cac"]["ok"] is False
    assert data["flags"][-1]["message"] == "CAC input invalid (must be ≥0)."


def test_batch_endpoint():
    content = b"age,sex,symptom,cac\n45,men,chestPain,\n,women,dyspnea,1200\n"
    response = client.post("/batch", files={"file": ("patients.csv", content, "text/csv")})
    assert response.status_code == 200
    data = response.json()
    assert data["patient_count"] == 2
    assert data["computed_count"] == 1
    assert data["rows"][0]["ptp_display"] == "≤22%"
    assert data["rows"][1]["cac_category"] == "high"


def test_batch_rejects_non_csv():
    response = client.post("/batch", files={"file": ("patients.txt", b"age\n1\n", "text/plain")})
    assert response.status_code == 400


def test_batch_missing_columns():
    response = client.post("/batch", files={"file": ("patients.csv", b"age,sex\n45,men\n", "text/csv")})
    assert response.status_code == 422
    assert response.json()["error"] == "data_validation_error"


def test_batch_rejects_too_many_rows(monkeypatch):
    monkeypatch.setattr(settings, "max_batch_rows", 1)
    content = b"age,sex,symptom\n45,men,chestPain\n35,women,dyspnea\n"
    response = client.post("/batch", files={"file": ("patients.csv", content, "text/csv")})
    assert response.status_code == 422
    assert "Too many rows" in response.json()["detail"]


def test_batch_accepts_its_own_output():
    content = b"age,sex,symptom\n45,men,chestPain\n25,men,chestPain\n"
    first = client.post("/batch", files={"file": ("patients.csv", content, "text/csv")}).json()
    assert first["rows"][0]["ptp_percent"] == 22
    assert first["rows"][1]["ptp_percent"] is None

    resubmitted = pd.DataFrame(first["rows"]).to_csv(index=False).encode("utf-8")
    response = client.post("/batch", files={"file": ("results.csv", resubmitted, "text/csv")})
    assert response.status_code == 200
    assert response.json()["computed_count"] == 1


def test_cac_boolean_is_rejected():
    data = client.post("/cac", json={"cac": True}).json()
    assert data["ok"] is False
    assert data["label"] == "Invalid CAC"
