"""
Pytest configuration and fixtures for modelgen tests.
"""
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from modelgen import create_app
from modelgen.schemas import FieldSpec, ModelDescription, ModuleStyle


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application."""
    return create_app()


# Test client fixture
@pytest.fixture(scope="function")
def client(app) -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def user_description() -> ModelDescription:
    """A User model with a single required number field."""
    return ModelDescription(
        model_name="User",
        table_name="users",
        use_timestamps=True,
        module_style=ModuleStyle.ES_MODULE,
        fields=[FieldSpec(name="age", type="number", required=True)],
    )


@pytest.fixture
def empty_description() -> ModelDescription:
    """A description with no fields and no timestamps."""
    return ModelDescription(model_name="User", table_name="users", use_timestamps=False)


@pytest.fixture
def description_payload() -> Dict[str, Any]:
    """JSON body as posted by the browser form."""
    return {
        "modelName": "User",
        "tableName": "users",
        "useTimestamps": True,
        "moduleStyle": "esm",
        "fields": [
            {"name": "age", "type": "number", "required": True, "unique": False, "defaultValue": ""},
            {"name": "status", "type": "string", "required": False, "unique": False, "defaultValue": "active"},
        ],
    }
