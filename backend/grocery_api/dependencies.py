from fastapi import Request

from grocery_api.storage import ItemStore


def get_store(request: Request) -> ItemStore:
    """The store built by ``create_app`` for this application."""
    return request.app.state.store
