"""
Pytest fixtures and configuration for the Product Catalog Service tests

Every fixture builds its own seeded store, so tests never share state.
"""
import pytest
from fastapi.testclient import TestClient

from catalog.api import create_app
from catalog.data.seed import seed
from catalog.repos.product_repo import ProductRepo
from catalog.services.catalog_service import CatalogService


@pytest.fixture
def store():
    """Freshly seeded in-memory product store"""
    return seed()


@pytest.fixture
def repo(store):
    return ProductRepo(store)


@pytest.fixture
def service(repo):
    return CatalogService(repo)


@pytest.fixture
def app():
    """Application in development mode (docs exposed)"""
    return create_app(environment="development")


@pytest.fixture
def client(app):
    """
    Provides a TestClient bound to the development app

    Scope: function (new app per test)
    """
    with TestClient(app) as c:
        yield c
