import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Бизнес-ошибка с понятным клиенту сообщением.
    Это НЕ 500: статус задаёт сама ошибка.
    """

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ApiError):
    status_code = 404


class CorruptRecordError(Exception):
    """Сохранённый JSON-текст не читается. Пишем только мы сами, так что это 500."""


def _envelope(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
    )


def _field_name(loc) -> str:
    # ("body", "items", 0, "name") -> "items[0].name"
    parts = [p for p in loc if p not in ("body", "query", "path")]
    out = ""
    for p in parts:
        if isinstance(p, int):
            out += f"[{p}]"
        else:
            out += f".{p}" if out else str(p)
    return out or "body"


def validation_message(exc: RequestValidationError) -> str:
    fields: list[str] = []
    for err in exc.errors():
        name = _field_name(err.get("loc", ()))
        if name not in fields:
            fields.append(name)
    return "Missing or invalid fields: " + ", ".join(fields)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError):
        return _envelope(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        return _envelope(400, validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _envelope(404, "Endpoint not found")
        return _envelope(exc.status_code, str(exc.detail))

    async def _internal_error(request: Request, exc: Exception):
        logger.exception("%s %s failed", request.method, request.url.path)
        return _envelope(500, "Internal server error", error=str(exc))

    # известные сбои ловим внутри CORS, чтобы у 500 были CORS-заголовки;
    # Exception остаётся последним рубежом
    app.add_exception_handler(SQLAlchemyError, _internal_error)
    app.add_exception_handler(CorruptRecordError, _internal_error)
    app.add_exception_handler(Exception, _internal_error)
