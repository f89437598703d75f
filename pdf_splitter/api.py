"""HTTP API for PDF Splitter."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.errors import SplitError
from pdf_splitter.core.jobs import Job, JobRepository
from pdf_splitter.core.service import SplitService

logger = logging.getLogger(__name__)


class JobResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    original_filename: str
    instructions: str
    status: str
    result_files: Optional[List[str]]
    error_message: Optional[str]
    created_at: datetime


class SplitBase64Request(BaseModel):
    base64_file: Optional[str] = None
    instructions: Optional[str] = None
    filename: Optional[str] = None


class SplitResultItem(BaseModel):
    filename: str
    base64_data: str
    pages: List[int]
    size: int


class SplitBase64Response(BaseModel):
    success: bool
    results: List[SplitResultItem]
    zip_base64: str
    zip_filename: str


def _serialize_job(job: Job) -> JobResponse:
    return JobResponse(
        id=job.id,
        original_filename=job.original_filename,
        instructions=job.instructions,
        status=job.status.value,
        result_files=job.result_files,
        error_message=job.error_message,
        created_at=job.created_at,
    )


def create_app(
    config: SplitterConfig | None = None,
    jobs: JobRepository | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Splitter settings. If None, read from the environment.
        jobs: Job store. If None, an in-memory store is used.
    """
    config = config or SplitterConfig.from_environment()
    app = FastAPI(title="PDF Splitter API")
    app.state.service = SplitService(config, jobs)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    @app.exception_handler(SplitError)
    async def handle_split_error(request: Request, exc: SplitError) -> JSONResponse:
        body: dict = {"message": exc.message}
        if exc.errors:
            body["errors"] = exc.errors
        if exc.status_code >= 500:
            logger.error("PDF split error: %s", exc.message)
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def handle_request_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.post("/api/split-pdf")
    def split_pdf(
        request: Request,
        pdf: Optional[UploadFile] = File(None),
        instructions: Optional[str] = Form(None),
    ) -> Response:
        service: SplitService = request.app.state.service

        data = pdf.file.read() if pdf is not None else None
        result = service.split_upload(
            data,
            pdf.filename if pdf is not None else None,
            pdf.content_type if pdf is not None else None,
            instructions,
        )

        return Response(
            content=result.archive_data,
            media_type="application/zip",
            headers={
                "Content-Disposition": f'attachment; filename="{result.archive_filename}"'
            },
        )

    @app.post("/api/split-pdf/json", response_model=SplitBase64Response)
    def split_pdf_json(request: Request, payload: SplitBase64Request) -> dict:
        service: SplitService = request.app.state.service
        return service.split_base64(
            payload.base64_file, payload.instructions, payload.filename
        )

    @app.get("/api/job/{job_id}", response_model=JobResponse)
    def get_job(request: Request, job_id: str) -> JobResponse:
        service: SplitService = request.app.state.service
        job = service.get_job(job_id)
        if job is None:
            raise HTTPException(status_code=404, detail="Job not found")
        return _serialize_job(job)

    return app


def __getattr__(name: str) -> FastAPI:
    """Build the module-level ``app`` on first access, for ``uvicorn pdf_splitter.api:app``."""
    global app
    if name == "app":
        app = create_app()
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    config = SplitterConfig.from_environment()
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
