"""Tests for the ``requests`` based API client and its command line."""

import json

import pytest
import requests

import car_orders_client
from car_orders_client import CarOrdersAPI, build_parser, run_command


def make_response(status_code, body=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = (text or "").encode("utf-8")
    return resp


class FakeSession:
    """Records requests and answers them from a queue of responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


ORDER = {
    "id": "3f2b8c1e-5d6a-4b7c-9e8f-0a1b2c3d4e5f",
    "make": "Toyota",
    "model": "Camry",
    "color": "Black",
    "orderDate": "2026-01-15T12:00:00Z",
    "expectedDeliveryDate": "2026-07-25T12:00:00Z",
    "status": "Pending",
}


def api_with(*responses):
    session = FakeSession(*responses)
    return CarOrdersAPI(base_url="http://cars.test/", session=session), session


def test_list_orders():
    api, session = api_with(make_response(200, [ORDER]))
    orders, error = api.list_orders()
    assert error is None
    assert orders == [ORDER]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://cars.test/api/cars"
    assert session.calls[0]["timeout"] == 15


def test_create_order_sends_payload():
    api, session = api_with(make_response(201, ORDER))
    order, error = api.create_order("Toyota", "Camry", "Black")
    assert error is None
    assert order == ORDER
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["json"] == {"make": "Toyota", "model": "Camry", "color": "Black"}


def test_create_order_rejected():
    api, _ = api_with(make_response(400, {"detail": "Car 'Toyota Camry Green' is not available"}))
    order, error = api.create_order("Toyota", "Camry", "Green")
    assert order is None
    assert error == {"status_code": 400, "message": "Car 'Toyota Camry Green' is not available"}


def test_update_order_sends_only_given_fields():
    api, session = api_with(make_response(200, dict(ORDER, status="Shipped")))
    order, error = api.update_order(ORDER["id"], status="Shipped")
    assert error is None
    assert order["status"] == "Shipped"
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == f"http://cars.test/api/cars/{ORDER['id']}"
    assert session.calls[0]["json"] == {"status": "Shipped"}


def test_get_order_not_found():
    api, _ = api_with(make_response(404, {"detail": "Car order with ID x not found"}))
    order, error = api.get_order("x")
    assert order is None
    assert error["status_code"] == 404
    assert error["message"] == "Car order with ID x not found"


def test_delete_order():
    api, session = api_with(make_response(204), make_response(404, {"detail": "gone"}))
    assert api.delete_order(ORDER["id"]) == (True, None)
    ok, error = api.delete_order(ORDER["id"])
    assert ok is False
    assert error["status_code"] == 404
    assert session.calls[0]["method"] == "DELETE"


def test_non_json_error_body():
    api, _ = api_with(make_response(500, text="Internal Server Error"))
    _, error = api.list_colors()
    assert error == {"status_code": 500, "message": "Internal Server Error"}


def test_validation_error_detail_is_serialized():
    detail = [{"loc": ["body", "color"], "msg": "Field required", "type": "missing"}]
    api, _ = api_with(make_response(400, {"detail": detail}))
    _, error = api.create_order("Toyota", "Camry", "")
    assert error["status_code"] == 400
    assert json.loads(error["message"]) == {"detail": detail}


def test_network_error():
    api, _ = api_with(requests.ConnectionError("connection refused"))
    orders, error = api.list_orders()
    assert orders == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_catalog_lookups():
    api, session = api_with(
        make_response(200, ["Toyota", "BMW"]),
        make_response(200, ["3 Series", "X3"]),
        make_response(200, ["Black"]),
    )
    assert api.list_makes() == (["Toyota", "BMW"], None)
    assert api.list_models("BMW") == (["3 Series", "X3"], None)
    assert api.list_colors() == (["Black"], None)
    assert [c["url"] for c in session.calls] == [
        "http://cars.test/api/cars/makes",
        "http://cars.test/api/cars/models/BMW",
        "http://cars.test/api/cars/colors",
    ]


def test_models_path_is_quoted():
    api, session = api_with(make_response(404, {"detail": "No models found for make 'Land Rover'"}))
    models, error = api.list_models("Land Rover")
    assert models == []
    assert error["status_code"] == 404
    assert session.calls[0]["url"] == "http://cars.test/api/cars/models/Land%20Rover"


# --- command line ---

@pytest.mark.parametrize(
    "argv, method, path, payload",
    [
        (["list"], "GET", "/api/cars", None),
        (["create", "BMW", "X3", "Red"], "POST", "/api/cars", {"make": "BMW", "model": "X3", "color": "Red"}),
        (["update", "abc", "--color", "Black"], "PUT", "/api/cars/abc", {"color": "Black"}),
        (["delete", "abc"], "DELETE", "/api/cars/abc", None),
        (["models", "Toyota"], "GET", "/api/cars/models/Toyota", None),
    ],
)
def test_run_command(argv, method, path, payload):
    api, session = api_with(make_response(200, []))
    run_command(api, build_parser().parse_args(argv))
    call = session.calls[0]
    assert call["method"] == method
    assert call["url"] == f"http://cars.test{path}"
    assert call["json"] == payload


def test_main_prints_result(monkeypatch, capsys):
    session = FakeSession(make_response(200, ["Black", "Red"]))
    monkeypatch.setattr(car_orders_client.requests, "Session", lambda: session)
    assert car_orders_client.main(["--base-url", "http://cars.test", "colors"]) == 0
    assert json.loads(capsys.readouterr().out) == ["Black", "Red"]


def test_main_reports_error(monkeypatch, capsys):
    session = FakeSession(make_response(404, {"detail": "Car order with ID abc not found"}))
    monkeypatch.setattr(car_orders_client.requests, "Session", lambda: session)
    assert car_orders_client.main(["get", "abc"]) == 1
    assert "Car order with ID abc not found" in capsys.readouterr().err
