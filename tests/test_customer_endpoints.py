from typing import List
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.exceptions import InvalidInputError
from customer_api.app.models.customer import Customer
from customer_api.app.services import customer_service


def _add(api_client: TestClient, name: str = "James Bond", table: str = "10") -> dict:
    response = api_client.post("/api/customer/add", json={"customerName": name, "tableNumber": table})
    assert response.status_code == 201
    return response.json()


def test_adding_new_customer_responds_201_with_id(api_client: TestClient) -> None:
    response = api_client.post(
        "/api/customer/add", json={"customerName": "James Bond", "tableNumber": "10"}
    )

    assert response.status_code == 201
    assert response.headers["content-type"].startswith("application/json")
    payload = response.json()
    assert payload["id"]
    assert payload["customerName"] == "James Bond"
    assert payload["tableNumber"] == "10"
    assert payload["version"] == 0
    assert payload["createdDate"] and payload["lastModifiedDate"]


def test_adding_empty_customer_responds_400(api_client: TestClient) -> None:
    response = api_client.post("/api/customer/add", json={})

    assert response.status_code == 400
    assert response.json()["detail"]


@pytest.mark.parametrize(
    "body",
    [
        {"customerName": "Anna", "tableNumber": "5"},
        {"customerName": "Anna Smith", "tableNumber": "123"},
        {"customerName": "          ", "tableNumber": "5"},
        {"id": "6d3c2a80-55a4-4b7c-9bd5-1f0c1d0c8a11", "customerName": "Anna Smith", "tableNumber": "5"},
        {"version": 1, "customerName": "Anna Smith", "tableNumber": "5"},
    ],
)
def test_adding_invalid_customer_responds_400(api_client: TestClient, body: dict) -> None:
    assert api_client.post("/api/customer/add", json=body).status_code == 400
    assert api_client.get("/api/customer/all").json() == []


def test_service_failure_on_add_responds_400(api_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing_add(data):
        raise InvalidInputError("The customer informations were not provided.")

    monkeypatch.setattr(customer_service.CustomerService, "add_customer", failing_add)

    response = api_client.post(
        "/api/customer/add", json={"customerName": "James Bond", "tableNumber": "10"}
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "The customer informations were not provided."}


def test_finding_customer_by_id_responds_200(api_client: TestClient) -> None:
    added = _add(api_client)

    response = api_client.get(f"/api/customer/get/{added['id']}")

    assert response.status_code == 200
    assert response.json() == added


def test_finding_unknown_customer_responds_400(api_client: TestClient) -> None:
    response = api_client.get(f"/api/customer/get/{uuid4()}")

    assert response.status_code == 400
    assert response.json() == {"detail": "This UUID is unknown."}


def test_finding_customer_by_malformed_id_responds_400(api_client: TestClient) -> None:
    assert api_client.get("/api/customer/get/not-a-uuid").status_code == 400


def test_updating_known_customer_responds_200(api_client: TestClient) -> None:
    added = _add(api_client)

    response = api_client.put(
        "/api/customer/update",
        json={"id": added["id"], "customerName": "James Bond", "tableNumber": "8"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == added["id"]
    assert payload["tableNumber"] == "8"
    assert payload["version"] == 1
    assert payload["createdDate"] == added["createdDate"]


def test_updating_unknown_customer_responds_400(api_client: TestClient) -> None:
    response = api_client.put(
        "/api/customer/update",
        json={"id": str(uuid4()), "customerName": "James Bond", "tableNumber": "10"},
    )

    assert response.status_code == 400
    assert api_client.get("/api/customer/all").json() == []


def test_updating_without_id_responds_400(api_client: TestClient) -> None:
    response = api_client.put(
        "/api/customer/update", json={"customerName": "James Bond", "tableNumber": "10"}
    )

    assert response.status_code == 400


def test_deleting_known_customer_responds_204(api_client: TestClient) -> None:
    added = _add(api_client)

    response = api_client.delete(f"/api/customer/delete/{added['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert api_client.get(f"/api/customer/get/{added['id']}").status_code == 400


def test_deleting_unknown_customer_responds_400(api_client: TestClient) -> None:
    response = api_client.delete(f"/api/customer/delete/{uuid4()}")

    assert response.status_code == 400
    assert response.json() == {"detail": "This UUID is unknown."}


def test_listing_all_customers_responds_200(api_client: TestClient, sample_customers: List[Customer]) -> None:
    response = api_client.get("/api/customer/all")

    assert response.status_code == 200
    assert len(response.json()) == 4


def test_listing_customers_by_name_pattern_returns_two_records(
    api_client: TestClient, sample_customers: List[Customer]
) -> None:
    response = api_client.get("/api/customer/all/James")

    assert response.status_code == 200
    assert [c["customerName"] for c in response.json()] == ["James Bond", "James-Lee Dog"]


def test_listing_customers_by_unknown_name_returns_empty_list(
    api_client: TestClient, sample_customers: List[Customer]
) -> None:
    response = api_client.get("/api/customer/all/Lucy")

    assert response.status_code == 200
    assert response.json() == []


def test_listing_customer_page(api_client: TestClient, sample_customers: List[Customer]) -> None:
    response = api_client.get("/api/customer/page", params={"page": 0, "size": 3})

    assert response.status_code == 200
    payload = response.json()
    assert payload["page"] == 0
    assert payload["size"] == 3
    assert payload["totalElements"] == 4
    assert payload["totalPages"] == 2
    assert len(payload["content"]) == 3


def test_listing_customer_page_uses_default_size(api_client: TestClient, sample_customers: List[Customer]) -> None:
    payload = api_client.get("/api/customer/page").json()

    assert payload["size"] == 20
    assert len(payload["content"]) == 4


def test_listing_customer_page_with_negative_index_responds_400(api_client: TestClient) -> None:
    assert api_client.get("/api/customer/page", params={"page": -1}).status_code == 400


def test_listing_customer_page_far_beyond_the_end_responds_400(api_client: TestClient) -> None:
    response = api_client.get("/api/customer/page", params={"page": 10**19, "size": 10})

    assert response.status_code == 400
    assert response.json() == {"detail": "The page index is out of range."}


def test_listing_customers_by_wildcard_pattern(api_client: TestClient, sample_customers: List[Customer]) -> None:
    response = api_client.get("/api/customer/all/J%25s")

    assert response.status_code == 200
    assert [c["customerName"] for c in response.json()] == ["James Bond", "James-Lee Dog"]
