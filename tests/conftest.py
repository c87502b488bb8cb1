"""
Shared test fixtures.

Provides fresh in-memory fakes for every port, a session factory wired to
them, and an app/client pair whose dependencies are overridden with the same
fakes.

Usage:
    def test_something(result_repo, make_session):
        result_repo.seed([...])
        session = make_session()
        session.load()
"""

from datetime import date
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from api import deps
from application.use_cases import ResultEditingSession
from backend.main import create_app
from backend.settings import Settings
from domain.models import Athlete
from tests.fakes import (
    FakeBenchmarkDirectory,
    FakeResultRepository,
    FakeWorkoutCatalog,
    create_benchmark_directory,
)

TODAY = date(2024, 3, 1)
ATHLETE = Athlete(id="athlete-1", name="Sam Doe", email="sam@example.com", group="womens")


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def athlete() -> Athlete:
    return ATHLETE


@pytest.fixture
def result_repo() -> FakeResultRepository:
    return FakeResultRepository()


@pytest.fixture
def catalog() -> FakeWorkoutCatalog:
    return FakeWorkoutCatalog()


@pytest.fixture
def benchmarks() -> FakeBenchmarkDirectory:
    return create_benchmark_directory()


@pytest.fixture
def make_session(
    athlete, result_repo, catalog, benchmarks, today
) -> Callable[..., ResultEditingSession]:
    """Factory for sessions over the fakes; keyword arguments override defaults."""

    def _make(**overrides: Any) -> ResultEditingSession:
        kwargs = dict(
            athlete=athlete,
            result_repo=result_repo,
            catalog=catalog,
            benchmarks=benchmarks,
            today=today,
        )
        kwargs.update(overrides)
        session_athlete = kwargs.pop("athlete")
        return ResultEditingSession(session_athlete, **kwargs)

    return _make


@pytest.fixture
def test_app(result_repo, catalog, benchmarks, today):
    """App with every storage dependency overridden by the fakes."""
    settings = Settings(environment="test", _env_file=None)
    app = create_app(settings=settings)
    app.dependency_overrides[deps.get_result_repo] = lambda: result_repo
    app.dependency_overrides[deps.get_workout_catalog] = lambda: catalog
    app.dependency_overrides[deps.get_benchmark_directory] = lambda: benchmarks
    app.dependency_overrides[deps.get_today] = lambda: today
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app) -> TestClient:
    return TestClient(test_app)
