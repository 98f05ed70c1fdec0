import os

import pytest

# Keep tests off the network regardless of a developer's .env.
os.environ["ESTIMATOR_PROVIDER"] = "offline"

from fastapi.testclient import TestClient  # noqa: E402

from carbon_backend.main import app  # noqa: E402
from carbon_backend.schemas import ActivityRecord  # noqa: E402
from carbon_backend.services.estimator import Estimator, get_estimator  # noqa: E402


@pytest.fixture
def offline_estimator():
    return Estimator(provider=None)


@pytest.fixture
def client(offline_estimator):
    app.dependency_overrides[get_estimator] = lambda: offline_estimator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_record():
    counter = iter(range(1, 10_000))

    def _make(category="commute", date="2025-01-27", co2e=1.0, **fields):
        return ActivityRecord(
            id=str(next(counter)),
            category=category,
            date=date,
            co2e=co2e,
            category_fields=fields,
        )

    return _make
