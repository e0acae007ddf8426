from grocery_api.config import APP_VERSION as __version__

__all__ = ["__version__"]
