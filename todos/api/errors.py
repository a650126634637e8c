"""
Translation of core error kinds to HTTP responses.

`ERROR_STATUS_CODES` is the single place an error kind is paired with a
transport status code.
"""
import logging
from typing import Dict, Type

from fastapi import FastAPI, status
from starlette.requests import Request
from starlette.responses import JSONResponse

from todos.errors import InternalError, InvalidArgument, NotFoundError, TodosError

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: Dict[Type[TodosError], int] = {
    InvalidArgument: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(err: TodosError) -> int:
    for kind, code in ERROR_STATUS_CODES.items():
        if isinstance(err, kind):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def todos_error_handler(request: Request, exc: TodosError) -> JSONResponse:
    code = status_code_for(exc)
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": exc.message}, status_code=code)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodosError, todos_error_handler)
