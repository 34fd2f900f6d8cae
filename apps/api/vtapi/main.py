"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from vtapi.adapters.conductor import ConductorClient, InMemoryConductorClient
from vtapi.errors import ApiError
from vtapi.routes import jobs_router, providers_router


def create_app(conductor_client: ConductorClient | None = None) -> FastAPI:
    app = FastAPI(title="Video Transcoding API", version="1.0.0")
    app.state.conductor_client = conductor_client or InMemoryConductorClient()

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.payload.model_dump(mode="json", exclude_none=True),
        )

    api_prefix = "/api/v1"
    app.include_router(jobs_router, prefix=api_prefix)
    app.include_router(providers_router, prefix=api_prefix)

    return app


app = create_app()
