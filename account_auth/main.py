"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from account_auth.presentation.api.v1 import accounts, auth
from account_auth.presentation.dependencies import (
    build_credential_hasher,
    dispose_database_engine,
    get_database_engine,
)
from account_auth.presentation.exception_handlers import (
    application_error_handler,
    domain_exception_handler,
    validation_error_handler,
    database_error_handler,
    generic_exception_handler,
)
from account_auth.presentation.error_schemas import ValidationErrorResponse
from account_auth.application.exceptions import ApplicationError
from account_auth.domain.exceptions import DomainException
from account_auth.infrastructure.config.settings import get_settings
from account_auth.infrastructure.persistence.database import create_tables


_settings = get_settings()

logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate the KDF configuration, optionally create tables, dispose the engine on exit."""
    # Fails startup with HasherConfigurationError on unusable KDF settings
    build_credential_hasher(_settings)

    if _settings.db_create_tables:
        await create_tables(get_database_engine(_settings))
        logger.info("Database tables ensured")

    yield

    await dispose_database_engine()


app = FastAPI(
    title=_settings.app_name,
    description="Account credential storage and verification with salted PBKDF2 hashes",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ApplicationError and DomainException cover every coded exception;
# the status comes from error_codes.ERROR_CODE_TO_HTTP_STATUS
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(accounts.router, prefix="/api/v1")
app.include_router(auth.router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }


def custom_openapi():
    """
    Customize OpenAPI schema to use our custom validation error format.

    Replaces the default HTTPValidationError schema with ValidationErrorResponse
    so the documented 422 body matches validation_error_handler.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema()

    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                operation["responses"]["422"] = {
                    "description": "Validation Error",
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                        }
                    },
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
