"""Exception handler middleware for structured error responses."""

import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from ..exceptions import DocstoreException

logger = logging.getLogger(__name__)


async def docstore_exception_handler(request: Request, exc: DocstoreException) -> JSONResponse:
    """
    Handle Docstore exceptions and return structured JSON responses.

    Client errors (4xx) are logged at WARNING, store failures at ERROR.
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"DocstoreException: {exc.error_code.value}",
        extra={
            "error_code": exc.error_code.value,
            "path": request.url.path,
            "method": request.method,
            "details": exc.details,
            "status_code": exc.status_code
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
