"""Food-delivery ordering client: sign-in, address geocoding, menus, carts and payments, with geohash, storage, translation and directory-browsing helpers."""

__version__ = "0.1.0"

__all__ = [
    "auth_models",
    "browser",
    "cart_models",
    "catalog",
    "client",
    "delivery",
    "geohash",
    "session",
    "storage",
    "translations",
]