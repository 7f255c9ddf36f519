from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient

from compound_calc.app.api import routes


def calculation_payload() -> dict:
    return {
        "principal": 10000,
        "interestRate": 5,
        "rateType": "annual",
        "compoundingFrequency": 1,
        "contributionAmount": 0,
        "contributionFrequency": 0,
        "years": 10,
        "startDate": "2025-01-01",
    }


def test_calculate_returns_summary_chart_and_breakdown(client: FlaskClient):
    resp = client.post("/api/calculate", json=calculation_payload())

    assert resp.status_code == 200
    body = resp.get_json()

    summary = body["summary"]
    assert isclose(summary["final_balance"], 16288.95, abs_tol=0.01)
    assert summary["display"]["final_balance"] == "$16,288.95"
    assert "total_contributions" not in summary["display"]
    assert summary["has_contributions"] is False
    assert summary["period_text"] == "10 years"
    assert summary["end_date"] == "2035-01-01"
    assert summary["end_date_label"] == "1 Jan 2035"

    assert body["chart"]["show_baseline"] is False
    assert body["chart"]["points"][0]["label"] == "Start"
    assert isclose(body["chart"]["points"][-1]["balance"], summary["final_balance"])

    assert body["resolutions"] == {"available": ["annually"], "default": "annually"}

    breakdown = body["breakdown"]
    assert breakdown["resolution"] == "annually"
    assert breakdown["columns"] == ["Year", "Balance", "Interest Earned", "Total Interest"]
    assert len(breakdown["rows"]) == 10
    assert breakdown["rows"][-1]["date"] == "2035-01-01"


def test_calculate_with_contributions_shows_baseline(client: FlaskClient):
    payload = calculation_payload()
    payload.update(
        {
            "principal": 0,
            "interestRate": 6,
            "compoundingFrequency": 12,
            "contributionAmount": 100,
            "contributionFrequency": 12,
            "years": 1,
        }
    )

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["summary"]["has_contributions"] is True
    assert body["summary"]["display"]["total_contributions"] == "$1,200.00"
    assert body["summary"]["final_balance"] > 1200
    assert body["chart"]["show_baseline"] is True
    assert body["resolutions"]["default"] == "monthly"
    assert "Contribution" in body["breakdown"]["columns"]
    assert len(body["breakdown"]["rows"]) == 12


def test_date_range_mode(client: FlaskClient):
    payload = calculation_payload()
    payload.update({"years": 0, "startDate": "2025-01-01", "endDate": "2025-01-21", "compoundingFrequency": 365})

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["summary"]["period_text"] == "20 days"
    assert body["breakdown"]["resolution"] == "daily"
    assert body["breakdown"]["rows"][0]["date_label"] == "02/01/25"
    assert isclose(body["breakdown"]["rows"][-1]["balance"], body["summary"]["final_balance"])


def test_rejections_return_400(client: FlaskClient):
    cases = [
        ({"principal": 0, "contributionAmount": 0}, "invalid_amount"),
        ({"interestRate": -1}, "invalid_rate"),
        ({"years": 0}, "invalid_duration"),
        ({"startDate": "2025-06-01", "endDate": "2025-01-01"}, "invalid_date_range"),
    ]
    for override, code in cases:
        payload = calculation_payload()
        payload.update(override)

        resp = client.post("/api/calculate", json=payload)

        assert resp.status_code == 400, code
        body = resp.get_json()
        assert body["code"] == code
        assert body["error"]


def test_invalid_payload_returns_422(client: FlaskClient):
    payload = calculation_payload()
    payload["compoundingFrequency"] = 0

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_breakdown_endpoint_switches_resolution(client: FlaskClient):
    payload = calculation_payload()
    payload.update({"compoundingFrequency": 12, "resolution": "quarterly"})

    resp = client.post("/api/breakdown", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["resolution"] == "quarterly"
    assert body["columns"][0] == "Quarter"
    assert len(body["rows"]) == 40


def test_breakdown_endpoint_rejects_finer_than_compounding(client: FlaskClient):
    payload = calculation_payload()
    payload["resolution"] = "monthly"

    resp = client.post("/api/breakdown", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "invalid_resolution"


def test_resolutions_endpoint(client: FlaskClient):
    resp = client.get("/api/resolutions?compoundingFrequency=4&elapsedYears=0.1")

    assert resp.status_code == 200
    assert resp.get_json() == {"available": ["quarterly", "annually"], "default": "quarterly"}


def test_unexpected_error_is_reported_generically(client: FlaskClient, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(routes, "calculate", boom)

    resp = client.post("/api/calculate", json=calculation_payload())

    assert resp.status_code == 500
    assert resp.get_json() == {"error": [routes.GENERIC_FAILURE]}


def test_balance_too_large_is_rejected_not_a_server_error(client: FlaskClient):
    payload = calculation_payload()
    payload.update({"principal": 1000, "interestRate": 100, "compoundingFrequency": 365, "years": 1000})

    for path in ("/api/calculate", "/api/breakdown"):
        resp = client.post(path, json=payload)

        assert resp.status_code == 400
        assert resp.get_json()["code"] == "result_out_of_range"


def test_non_finite_rate_names_the_request_field(client: FlaskClient):
    payload = calculation_payload()
    payload["interestRate"] = float("nan")

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 422
    detail = resp.get_json()["detail"]
    assert [error["loc"] for error in detail] == [["interestRate"]]
    assert "NaN" not in resp.get_data(as_text=True)
