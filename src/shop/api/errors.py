"""Map shop exceptions onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers

from shop.exceptions import ConflictError, StorageError


def register_error_handlers(app: FastAPI) -> None:
    """Install protean's handlers, then the status codes the shop adds on top.

    ``NotFoundError`` subclasses ``ObjectNotFoundError`` and so lands on 404.
    Lookups that fail inside a repository raise a plain ``ObjectNotFoundError``
    carrying only a message string.
    """
    register_exception_handlers(app)

    @app.exception_handler(ObjectNotFoundError)
    async def not_found_handler(request: Request, exc: ObjectNotFoundError):
        messages = getattr(exc, "messages", None) or {"_entity": [str(exc)]}
        return JSONResponse(status_code=404, content={"error": messages})

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return JSONResponse(status_code=409, content={"error": exc.messages})

    @app.exception_handler(StorageError)
    async def storage_handler(request: Request, exc: StorageError):
        return JSONResponse(status_code=500, content={"error": exc.messages})
