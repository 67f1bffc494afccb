from pathlib import Path
from typing import Iterator, List

import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.config import settings
from customer_api.app.core.db import init_db
from customer_api.app.main import create_app
from customer_api.app.models.customer import Customer
from customer_api.app.repositories.customer_repository import CustomerRepository


SAMPLE_CUSTOMERS = [
    ("James Bond", "10"),
    ("Marc Lee", "2"),
    ("Anna Smith", "5"),
    ("James-Lee Dog", "8"),
]


@pytest.fixture(autouse=True)
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    db_path = tmp_path / "customer.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def api_client() -> Iterator[TestClient]:
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def sample_customers() -> List[Customer]:
    # Saved straight through the repository: "Marc Lee" is shorter than
    # the API accepts.
    return [
        CustomerRepository.save(Customer(customer_name=name, table_number=table))
        for name, table in SAMPLE_CUSTOMERS
    ]
