from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.crud.contact_submission import SubmissionStore
from app.main import create_app


@pytest.fixture
def store() -> SubmissionStore:
    return SubmissionStore()


@pytest.fixture
def app(store: SubmissionStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
