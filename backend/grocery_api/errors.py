from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

INVALID_ID = "Invalid ID format"
NOT_FOUND = "Item not found"
MISSING_FIELDS = "Missing required fields: name and price are required"
INVALID_PRICE = "Price must be a non-negative number"
INVALID_NAME = "Name must be a string"
INVALID_DESCRIPTION = "Description must be a string"
INVALID_JSON = "Invalid JSON body"
BODY_NOT_OBJECT = "Request body must be a JSON object"


class ItemError(Exception):
    """A rejected item request, rendered as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @classmethod
    def bad_request(cls, message: str) -> "ItemError":
        return cls(400, message)

    @classmethod
    def not_found(cls) -> "ItemError":
        return cls(404, NOT_FOUND)


async def _item_error_handler(request: Request, exc: ItemError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ItemError, _item_error_handler)
