import json

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

PROFILE = {
    "jurisdiction": "ON",
    "years_of_service": 10,
    "months_of_service": 0,
    "age_bracket": "41-50",
    "job_position": "professional",
    "annual_salary": 104000,
    "is_union_member": False,
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["jurisdictions"] == 14


def test_list_jurisdictions():
    response = client.get("/jurisdictions")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 14
    assert data[0] == {"code": "ON", "tax_rate": 0.13, "tax_label": "HST"}


def test_pricing_unknown_jurisdiction():
    response = client.get("/jurisdictions/XX/pricing")
    assert response.status_code == 200
    data = response.json()
    assert data["recognized"] is False
    assert data["tax_rate"] == 0.05
    assert data["pricing"]["consultation_fee"]["average"] == 350


def test_estimate():
    response = client.post("/estimate", json=PROFILE)
    assert response.status_code == 200
    data = response.json()
    assert data["statutory_minimum"] == {"weeks": 8, "amount": 16000}
    assert data["statutory_severance"] is None
    assert data["common_law_range"]["min_weeks"] == 26
    assert data["common_law_range"]["max_weeks"] == 104
    assert data["recommended"] == {"weeks": 65, "amount": 130000}


def test_estimate_rejects_non_positive_salary():
    response = client.post("/estimate", json={**PROFILE, "annual_salary": 0})
    assert response.status_code == 422


def test_estimate_rejects_bad_months():
    response = client.post("/estimate", json={**PROFILE, "months_of_service": 12})
    assert response.status_code == 422


def test_estimate_rejects_infinite_salary():
    body = json.dumps(PROFILE).replace('"annual_salary": 104000', '"annual_salary": Infinity')
    response = client.post(
        "/estimate", content=body, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422


def test_legal_costs_rejects_infinite_gap():
    body = json.dumps({"jurisdiction": "ON", "recommended_amount": 1, "potential_gap": 0})
    body = body.replace('"potential_gap": 0', '"potential_gap": Infinity')
    response = client.post(
        "/legal-costs", content=body, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422


def test_legal_costs():
    response = client.post(
        "/legal-costs",
        json={
            "jurisdiction": "ON",
            "recommended_amount": 130000,
            "potential_gap": 114000,
            "statutory_minimum": 16000,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert [o["type"] for o in data["options"]] == ["consultation", "hourly", "flat", "contingency"]
    assert data["recommended"]["type"] == "flat"


def test_guidance_round_trip():
    costs = client.post(
        "/legal-costs",
        json={"jurisdiction": "ON", "recommended_amount": 130000, "potential_gap": 114000},
    ).json()
    response = client.post(
        "/guidance",
        json={"potential_gap": 114000, "options": costs["options"]},
    )
    assert response.status_code == 200
    titles = [entry["title"] for entry in response.json()]
    assert titles == ["Consultation Only", "Hourly Rate", "Flat Fee Package", "Contingency Fee"]


def test_analyze():
    response = client.post(
        "/analyze",
        json={"profile": {**PROFILE, "current_offer": 100000}, "include_tax": False},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["cost_analysis"]["potential_gap"] == 30000
    assert data["context"]["offer_weeks"] == 50
    assert data["context"]["tax_included"] is False
    assert all(o["tax"] == 0 for o in data["cost_analysis"]["options"])
    assert len(data["guidance"]) == 4


def test_analyze_net_take_home():
    response = client.post("/analyze", json={"profile": PROFILE})
    assert response.status_code == 200
    data = response.json()
    assert data["context"]["income_tax_rate"] == 0.3366
    flat = [p for p in data["net_take_home"] if p["option_type"] == "flat"][0]
    assert flat["income_tax"] == 43758
    assert flat["net_take_home"] == 83982
