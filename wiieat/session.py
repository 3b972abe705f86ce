"""Session state for the ordering service and its persistence on disk."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from . import storage
from .geohash import encode

log = logging.getLogger(__name__)

ADDRESS_LEN = 50
CITY_LEN = 50
STATE_LEN = 3
ZIP_LEN = 50

DEFAULT_DATA_DIR = "WiiEat"

_PARSE_ERRORS = (ValueError, KeyError, TypeError, IndexError, AttributeError)

# Field names inside the session handle of a login reply.
_HANDLE_ACCESS = "access_token"
_HANDLE_REFRESH = "refresh_token"


class ApiError(Exception):
    """A request to the service failed for an unknown reason."""


class BadJsonError(ApiError):
    """The service replied with a body that could not be understood."""


class UnauthorizedError(ApiError):
    """The service refused the credentials or the session."""


class EmailTwoFactorRequired(ApiError):
    """The login must be completed with a code sent by e-mail."""


@dataclass
class Coordinates:
    latitude: float = 0.0
    longitude: float = 0.0


def _member(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        raise TypeError(f"expected an object holding {key!r}")
    return obj[key]


def _string(obj: Any, key: str) -> str:
    value = _member(obj, key)
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


def _integer(obj: Any, key: str) -> int:
    value = _member(obj, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {key!r} must be a number")
    return int(value)


def _fit(text: str, size: int) -> str:
    """Trim text to what a fixed buffer of the given size holds."""
    return text[: size - 1]


@dataclass
class Session:
    """Everything known about the signed-in user, their address and cart."""

    data_dir: str = DEFAULT_DATA_DIR
    email: str = ""
    access_token: str = ""
    ud_id: str = ""
    csrf_token: str = ""
    geohash: str = ""
    coords: Coordinates = field(default_factory=Coordinates)
    operation_id: str = ""
    tz_offset: int = 0
    device_id: int = 0
    cart_id: str = ""
    locked_store_id: str = ""
    locked_store_name: str = ""
    active_card_last_4: str = ""
    active_card_id: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    def _path(self, name: str) -> str:
        return f"{self.data_dir}/{name}"

    def save_token(self, text: str) -> None:
        """Take the credentials from a login reply and persist the long-lived ones."""
        try:
            root = json.loads(text)
            self.email = _string(_member(root, "credential"), "email")

            if "session_handle" not in root:
                raise BadJsonError("login reply has no session handle")
            handle = root["session_handle"]
            self.access_token = _string(handle, _HANDLE_ACCESS)
            if isinstance(handle, dict) and _HANDLE_REFRESH in handle:
                storage.write_file(
                    self._path(_HANDLE_REFRESH), _string(handle, _HANDLE_REFRESH)
                )

            claims = root.get("claims")
            if isinstance(claims, list) and claims:
                self.ud_id = _string(claims[0], "ud_id")
                if self.ud_id:
                    storage.write_file(self._path("ud_id"), self.ud_id)
        except BadJsonError:
            raise
        except _PARSE_ERRORS as exc:
            log.error("%s", exc)
            raise BadJsonError(str(exc)) from exc

    def save_address(self, full_address: str, text: str) -> None:
        """Store an address and the location a geocode reply gives for it."""
        storage.write_file(self._path("address"), full_address)
        try:
            root = json.loads(text)
            if not root:
                raise BadJsonError("unable to parse geocode json")
            if not isinstance(root, list):
                raise TypeError("geocode reply is not an array")
            first = root[0]
            if not first:
                raise BadJsonError("unable to find first element in root array")

            lat_text = _string(first, "latitude")
            lng_text = _string(first, "longitude")
            try:
                latitude, longitude = float(lat_text), float(lng_text)
            except ValueError as exc:
                raise BadJsonError("failed to parse coordinates") from exc
            self.coords = Coordinates(latitude, longitude)

            storage.write_file(
                self._path("coordinates"), f"{latitude:f} {longitude:f}"
            )
            self.geohash = encode(latitude, longitude, 12)
            storage.write_file(self._path("geohash"), self.geohash)

            self.tz_offset = _integer(_member(first, "time_zone"), "raw_offset")
            storage.write_file(self._path("tz_offset"), str(self.tz_offset))
        except BadJsonError as exc:
            log.error("%s", exc)
            raise
        except _PARSE_ERRORS as exc:
            log.error("%s", exc)
            raise BadJsonError(str(exc)) from exc

    def is_address_complete(self) -> bool:
        return all((self.address, self.city, self.state, self.zip, self.geohash))

    def full_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state} {self.zip}"

    def load_address(self) -> bool:
        """Restore the saved address and location; False if something is missing."""
        address_path = self._path("address")
        if not storage.file_exists(address_path):
            log.warning("could not find %s", address_path)
            return False

        parts = storage.read_text(address_path).split(",")
        if len(parts) != 3:
            log.warning("saved address does not have three parts")
            storage.delete_file(address_path)
            return False

        state_zip = parts[2].split(" ")[1:]
        if len(state_zip) != 2:
            log.warning("saved address has no state and zip")
            storage.delete_file(address_path)
            return False

        self.address = _fit(parts[0], ADDRESS_LEN)
        self.city = _fit(parts[1][1:], CITY_LEN)
        self.state = _fit(state_zip[0], STATE_LEN)
        self.zip = _fit(state_zip[1], ZIP_LEN)

        geohash_path = self._path("geohash")
        if not storage.file_exists(geohash_path):
            log.warning("could not find %s", geohash_path)
            return False
        self.geohash = storage.read_text(geohash_path)

        coords_path = self._path("coordinates")
        if not storage.file_exists(coords_path):
            log.warning("could not find %s", coords_path)
            return False

        coords = storage.read_text(coords_path).split(" ")
        if len(coords) != 2:
            log.warning("saved coordinates do not have two parts")
            storage.delete_file(coords_path)
            return False
        try:
            self.coords = Coordinates(float(coords[0]), float(coords[1]))
        except ValueError:
            log.warning("saved coordinates are not numbers")
            storage.delete_file(coords_path)
            return False

        tz_path = self._path("tz_offset")
        if not storage.file_exists(tz_path):
            log.warning("tz_offset not found")
            return False
        self.tz_offset = int(storage.read_text(tz_path).strip())
        return True

    def load_card_info(self) -> bool:
        """Restore the saved payment card; False if none is usable."""
        path = self._path("card_info")
        if not storage.file_exists(path):
            log.warning("card_info not found")
            return False

        parts = storage.read_text(path).split(", ")
        if len(parts) != 2:
            log.warning("saved card info does not have two parts")
            return False

        if len(parts[0]) != 4:
            storage.delete_file(path)
            log.warning("saved card number is not four digits")
            return False

        self.active_card_last_4, self.active_card_id = parts
        return True

    def set_active_card(self, last_4: str, card_id: str) -> None:
        self.active_card_last_4 = last_4
        self.active_card_id = card_id
        storage.write_file(self._path("card_info"), f"{last_4}, {card_id}")