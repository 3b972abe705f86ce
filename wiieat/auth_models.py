"""Request and response bodies for the authentication endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

BRAND = "GRUBHUB"
CLIENT_ID = "beta_UmWlpstzQSFmocLy3h1UieYcVST"
DEFAULT_DEVICE_ID = 887744498


def _field(root: Mapping[str, Any], key: str, kind: type) -> Any:
    """Fetch a required field of the given JSON type."""
    if key not in root:
        raise KeyError(key)
    value = root[key]
    if kind in (int, float):
        valid = isinstance(value, (int, float) if kind is float else int)
        valid = valid and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise TypeError(
            f"field {key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return float(value) if kind is float else value


@dataclass
class AuthLogin:
    """Login with e-mail and password."""

    device_id: int
    email: str
    password: str
    brand: str = BRAND
    client_id: str = CLIENT_ID
    context_id: str = ""

    def serialize(self) -> dict[str, Any]:
        return {
            "brand": self.brand,
            "client_id": self.client_id,
            "context_id": self.context_id,
            "device_id": self.device_id,
            "email": self.email,
            "password": self.password,
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> AuthLogin:
        return cls(
            device_id=_field(root, "device_id", int),
            email=_field(root, "email", str),
            password=_field(root, "password", str),
        )


@dataclass
class AuthCode:
    """Login completed with an e-mailed confirmation code."""

    confirmation_code: str
    csrf_token: str
    email: str
    brand: str = BRAND
    client_id: str = CLIENT_ID
    device_id: int = DEFAULT_DEVICE_ID

    def serialize(self) -> dict[str, Any]:
        return {
            "brand": self.brand,
            "client_id": self.client_id,
            "confirmation_code": self.confirmation_code,
            "csrf_token": self.csrf_token,
            "device_id": self.device_id,
            "email": self.email,
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> AuthCode:
        return cls(
            confirmation_code=_field(root, "confirmation_code", str),
            csrf_token=_field(root, "csrf_token", str),
            email=_field(root, "email", str),
        )


@dataclass
class AuthRefresh:
    """Login renewed with a stored refresh token."""

    refresh_token: str
    brand: str = BRAND
    client_id: str = CLIENT_ID
    context_id: str = ""
    device_id: int = DEFAULT_DEVICE_ID

    def serialize(self) -> dict[str, Any]:
        return {
            "brand": self.brand,
            "client_id": self.client_id,
            "context_id": self.context_id,
            "device_id": self.device_id,
            "refresh_token": self.refresh_token,
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> AuthRefresh:
        return cls(refresh_token=_field(root, "refresh_token", str))


@dataclass
class ConfirmationCode:
    """Request for a confirmation code to be e-mailed."""

    email: str
    brand: str = BRAND
    client_id: str = CLIENT_ID

    def serialize(self) -> dict[str, Any]:
        return {
            "brand": self.brand,
            "client_id": self.client_id,
            "email": self.email,
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> ConfirmationCode:
        return cls(email=_field(root, "email", str))


@dataclass
class ConfirmationCodeResponse:
    """Reply to a confirmation code request."""

    status: str
    csrf_token: str
    code_length: int
    expiration_time: int

    def serialize(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "crsf_token": self.csrf_token,
            "code_length": self.code_length,
            "expiration_time": self.expiration_time,
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> ConfirmationCodeResponse:
        return cls(
            status=_field(root, "status", str),
            csrf_token=_field(root, "crsf_token", str),
            code_length=_field(root, "code_length", int),
            expiration_time=_field(root, "expiration_time", int),
        )