import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from storefront.api import routers
from storefront.api.errors import register_exception_handlers


@pytest.fixture()
def app():
    app = FastAPI()
    for router in routers:
        app.include_router(router, prefix="/api")
    register_exception_handlers(app)
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)
