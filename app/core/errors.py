"""
Gestao de Template API - Errors
Taxonomia de erros da API e mapeamento unico para respostas HTTP
"""
import logging
from contextlib import contextmanager
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.validation import format_validation_errors

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Erro base: cada subclasse define o status HTTP"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Erro interno do servidor"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def body(self) -> dict:
        return {"error": self.message}


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Não autorizado."


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Usuário não possui loja associada"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Registro não encontrado"


class ValidationFailed(AppError):
    status_code = 422
    default_message = "Erro de validação."

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__()
        self.errors = errors

    def body(self) -> dict:
        return {"error": self.errors}


class InternalError(AppError):
    pass


@contextmanager
def internal_error_on_failure(message: str):
    """Converte qualquer erro inesperado em InternalError com a mensagem da operacao"""
    try:
        yield
    except AppError:
        raise
    except Exception as exc:
        logger.exception(message)
        raise InternalError(message) from exc


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Erro nao tratado em {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": InternalError.default_message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": format_validation_errors(exc.errors())}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
