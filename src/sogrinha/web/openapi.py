from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field


def set_custom_openapi(app: FastAPI, version: str) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Sogrinha API",
            version=version,
            summary="Owners, lessees, properties and contracts of a real-estate agency",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "ShellToken": {
                "type": "http",
                "scheme": "bearer",
                "description": "Per-launch token handed by the desktop shell to its content view (when configured)",
            },
        }
        openapi_schema["security"] = [{"ShellToken": []}]

        # Remove security from public endpoints
        public_endpoints = {
            ("GET", "/health"),
        }

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in public_endpoints:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Authentication failed", "type": "authentication_error"},
                {"message": "Contract not found: 5b0c3b9e-0d52-4b4e-9d1c-2f1f7f4c8a10", "type": "not_found"},
                {"message": "Missing required data", "type": "missing_required_data"},
            ]
        }
    }
