"""HTTP client for the food ordering service."""

from __future__ import annotations

import json
import logging
import random
from typing import Any

import requests

from . import storage
from .auth_models import AuthCode, AuthLogin, AuthRefresh, ConfirmationCode
from .cart_models import Cart, CartLine
from .delivery import DeliveryInfo, IncompleteDelivery, generate_phone
from .session import (
    ApiError,
    BadJsonError,
    EmailTwoFactorRequired,
    Session,
    UnauthorizedError,
)

log = logging.getLogger(__name__)

_API = "https://api-gtm.grubhub.com"

ENDPOINTS: dict[str, str] = {
    "auth": f"{_API}/auth",
    "confirmation_code": f"{_API}/auth/confirmation_code",
    "geocode": f"{_API}/geocode",
    "restaurants": f"{_API}/restaurants/search",
    "info_nonvolatile": f"{_API}/restaurant_gateway/info/nonvolatile",
    "info_volatile": f"{_API}/restaurant_gateway/info/volatile",
    "feed": f"{_API}/restaurant_gateway/feed",
    "menu_item": f"{_API}/restaurants/{{resId}}/menu_items",
    "carts": f"{_API}/carts",
    "delivery_info": f"{_API}/carts/{{cartId}}/delivery_info",
    "incomplete_delivery": f"{_API}/carts/{{cartId}}/incomplete_delivery",
    "lines": f"{_API}/carts/{{cartId}}/lines",
    "client_token": f"{_API}/payments/client_token",
    "credit_card": "https://api-cde-gtm.grubhub.com/tokenizer/{token}/credit_card",
    "credentials": f"{_API}/credentials/",
    "payments": f"{_API}/payments/{{udId}}/payments",
    "image": "https://media-cdn.grubhub.com/image/upload/w_{width},h_{height},f_png",
}

_READ = "authorization,cache-control,if-modified-since"
_WRITE = "authorization,cache-control,content-type,if-modified-since"

ACCESS_CONTROL: dict[str, str] = {
    "auth": "authorization,content-type",
    "confirmation_code": "",
    "geocode": _READ,
    "restaurants": _READ,
    "info_volatile": _READ,
    "feed": _READ,
    "menu_item": _READ,
    "carts": _WRITE,
    "incomplete_delivery": _WRITE,
    "lines": _WRITE,
    "delivery_info": _WRITE,
    "client_token": _WRITE,
    "credit_card": "content-type",
    "credentials": "content-type",
    "payments": _READ,
}


def _dump(body: Any) -> str:
    return json.dumps(body, separators=(",", ":"))


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        log.error("%s", exc)
        raise BadJsonError(str(exc)) from exc


class Client:
    """Talks to the service on behalf of a session."""

    def __init__(
        self,
        session: Session | None = None,
        http: requests.Session | None = None,
        rng: random.Random | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.session = session if session is not None else Session()
        self.http = http if http is not None else requests.Session()
        self.rng = rng if rng is not None else random.Random()
        self.timeout = timeout

    # -- plumbing -------------------------------------------------------

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> requests.Response:
        data = None if body is None else _dump(body)
        try:
            return self.http.request(
                method, url, headers=headers or {}, data=data, timeout=self.timeout
            )
        except requests.RequestException as exc:
            log.error("%s", exc)
            raise ApiError(str(exc)) from exc

    def _bearer_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.session.access_token}",
            "Cache-Control": "max-age=0",
        }

    def _require_access(self, endpoint: str, url: str, method: str) -> None:
        if not self.request_access(endpoint, url, method):
            raise ApiError(f"access to {endpoint} was refused")

    def _get_json(self, endpoint: str, url: str, forbid_is_unauthorized: bool) -> Any:
        self._require_access(endpoint, url, "GET")
        resp = self._send("GET", url, self._bearer_headers())
        if resp.status_code == 200:
            return _parse(resp.text)
        if forbid_is_unauthorized and resp.status_code == 403:
            raise UnauthorizedError(f"{endpoint} returned 403")
        raise ApiError(f"{endpoint} returned {resp.status_code}")

    def _location(self) -> str:
        coords = self.session.coords
        return f"POINT({coords.longitude:f} {coords.latitude:f})"

    def _authenticate(self, body: dict[str, Any], unauthorized_status: int, two_factor: bool) -> None:
        url = ENDPOINTS["auth"]
        self._require_access("auth", url, "POST")
        resp = self._send("POST", url, {"Accept": "*/*"}, body)
        if two_factor and resp.status_code == 463:
            raise EmailTwoFactorRequired("a confirmation code is required")
        if resp.status_code == 200:
            self.session.save_token(resp.text)
            return
        if resp.status_code == unauthorized_status:
            raise UnauthorizedError(f"auth returned {resp.status_code}")
        raise ApiError(f"auth returned {resp.status_code}")

    # -- access ---------------------------------------------------------

    def request_access(self, endpoint: str, url: str, method: str) -> bool:
        """Send the preflight request; True if the service allows the call."""
        headers = {
            "Accept": "*/*",
            "Access-Control-Request-Headers": ACCESS_CONTROL.get(endpoint, ""),
            "Access-Control-Request-Method": method,
        }
        try:
            resp = self._send("OPTIONS", url, headers)
        except ApiError:
            return False
        return resp.status_code == 200

    # -- auth -----------------------------------------------------------

    def login(self, email: str, password: str) -> None:
        """Log in with e-mail and password."""
        body = AuthLogin(self.session.device_id, email, password).serialize()
        self._authenticate(body, 403, two_factor=True)

    def refresh(self, refresh_token: str) -> None:
        """Renew the login with a stored refresh token."""
        self._authenticate(AuthRefresh(refresh_token).serialize(), 403, two_factor=True)

    def login_with_code(self, email: str, code: str) -> None:
        """Complete a login with the code sent by e-mail."""
        body = AuthCode(code, self.session.csrf_token, email).serialize()
        self._authenticate(body, 401, two_factor=False)

    def request_confirmation_code(self, email: str) -> None:
        """Ask for a confirmation code to be e-mailed and keep the CSRF token."""
        url = ENDPOINTS["confirmation_code"]
        self._require_access("confirmation_code", url, "POST")
        headers = {
            "Accept": "*/*",
            "Access-Control-Request-Headers": "authorization,content-type",
            "Access-Control-Request-Method": "POST",
        }
        resp = self._send("POST", url, headers, ConfirmationCode(email).serialize())
        if resp.status_code != 200:
            raise ApiError(f"confirmation_code returned {resp.status_code}")
        root = _parse(resp.text)
        token = root.get("csrf_token") if isinstance(root, dict) else None
        if not isinstance(token, str):
            raise BadJsonError("reply has no csrf_token string")
        self.session.csrf_token = token

    # -- geocode --------------------------------------------------------

    def geocode(self, address: str, city: str, state: str, zip_code: str) -> None:
        """Look up an address and store its location in the session."""
        full_address = f"{address}, {city}, {state} {zip_code}"
        url = f"{ENDPOINTS['geocode']}?address={full_address}"
        self._require_access("geocode", url, "GET")
        resp = self._send("GET", url, self._bearer_headers())
        if resp.status_code != 200:
            raise ApiError(f"geocode returned {resp.status_code}")
        self.session.save_address(full_address, resp.text)

    # -- restaurants ----------------------------------------------------

    def restaurants(self) -> Any:
        """Search for restaurants delivering to the session's location."""
        url = (
            f"{ENDPOINTS['restaurants']}?orderMethod=delivery&locationMode=DELIVERY"
            "&facetSet=umamiV6&pageSize=36&hideHateos=true&searchMetrics=true"
            f"&location={self._location()}&preciseLocation=true"
            f"&geohash={self.session.geohash}&includeOffers=true&sortSetId=umamiv3"
            "&sponsoredSize=3&countOmittingTimes=true&tab=all"
        )
        return self._get_json("restaurants", url, forbid_is_unauthorized=True)

    def restaurant_info(self, restaurant_id: str) -> Any:
        """Fetch the details and menu layout of one restaurant."""
        url = (
            f"{ENDPOINTS['info_volatile']}/{restaurant_id}?orderType=STANDARD"
            f"&platform=WEB&enhancedFeed=true&location={self._location()}"
        )
        return self._get_json("info_volatile", url, forbid_is_unauthorized=True)

    def category_items(self, restaurant_id: str, category_id: str, operation_id: str) -> Any:
        """Fetch the items of one menu category."""
        now = storage.time_now(self.session.tz_offset)
        url = (
            f"{ENDPOINTS['feed']}/{restaurant_id}/{category_id}?time={now}"
            f"&location={self._location()}&operationId={operation_id}"
            "&isFutureOrder=false&restaurantStatus=ORDERABLE"
            "&isConvenienceMerchant=false&orderType=STANDARD&agent=false"
            "&task=CATEGORY&platform=WEB"
        )
        return self._get_json("feed", url, forbid_is_unauthorized=True)

    def item_info(self, restaurant_id: str, item_id: str) -> Any:
        """Fetch the details and choices of one menu item."""
        base = ENDPOINTS["menu_item"].replace("{resId}", restaurant_id)
        now = storage.time_now(self.session.tz_offset)
        url = (
            f"{base}/{item_id}?time={now}&hideUnavailableMenuItems=true"
            f"&orderType=standard&version=4&location={self._location()}"
        )
        return self._get_json("menu_item", url, forbid_is_unauthorized=False)

    # -- cart -----------------------------------------------------------

    def create_cart(self) -> str:
        """Create a cart, attach the delivery address and return its id."""
        url = ENDPOINTS["carts"]
        self._require_access("carts", url, "POST")
        resp = self._send("POST", url, self._bearer_headers(), Cart().serialize())
        if resp.status_code != 201:
            raise ApiError(f"carts returned {resp.status_code}")
        try:
            cart_id = json.loads(resp.text)["id"]
            if not isinstance(cart_id, str):
                raise TypeError("cart id is not a string")
        except (ValueError, KeyError, TypeError) as exc:
            log.error("%s", exc)
            raise ApiError(str(exc)) from exc
        self.session.cart_id = cart_id
        try:
            self.put_delivery_info()
        except ApiError as exc:
            log.warning("delivery info not accepted: %s", exc)
        return cart_id

    def get_cart(self, cart_id: str) -> Any:
        """Fetch a cart."""
        url = f"{ENDPOINTS['carts']}/{cart_id}"
        return self._get_json("carts", url, forbid_is_unauthorized=False)

    def _put(self, endpoint: str, body: dict[str, Any]) -> None:
        log.debug("%s", _dump(body))
        url = ENDPOINTS[endpoint].replace("{cartId}", self.session.cart_id)
        self._require_access(endpoint, url, "PUT")
        resp = self._send("PUT", url, self._bearer_headers(), body)
        if resp.status_code != 204:
            raise ApiError(f"{endpoint} returned {resp.status_code}")

    def put_incomplete_delivery(self) -> None:
        """Attach the session's coordinates to the current cart."""
        coords = self.session.coords
        body = IncompleteDelivery(coords.latitude, coords.longitude).serialize()
        self._put("incomplete_delivery", body)

    def put_delivery_info(self) -> None:
        """Attach the session's full delivery address to the current cart."""
        s = self.session
        info = DeliveryInfo(
            s.city,
            s.state,
            s.email,
            s.coords.latitude,
            s.coords.longitude,
            s.zip,
            s.address,
            phone=generate_phone(self.rng),
        )
        self._put("delivery_info", info.serialize())

    def add_item(
        self,
        cart_id: str,
        store_id: str,
        menu_item_id: str,
        cost: float,
        option_ids: list[int],
    ) -> None:
        """Add one of a menu item, with the chosen options, to a cart."""
        line = CartLine(store_id, menu_item_id, 1, cost)
        for option_id in option_ids:
            line.add_option(option_id, 1)
        url = ENDPOINTS["lines"].replace("{cartId}", cart_id)
        self._require_access("lines", url, "POST")
        resp = self._send("POST", url, self._bearer_headers(), line.serialize())
        if resp.status_code != 201:
            raise ApiError(f"lines returned {resp.status_code}")

    # -- payments -------------------------------------------------------

    def get_payments(self, ud_id: str) -> Any:
        """Fetch the saved payment methods of a user."""
        url = ENDPOINTS["payments"].replace("{udId}", ud_id)
        return self._get_json("payments", url, forbid_is_unauthorized=False)

    # -- images ---------------------------------------------------------

    def download_image(self, image_id: str, width: int, height: int) -> bytes:
        """Download an image as PNG; empty bytes if it could not be fetched."""
        base = (
            ENDPOINTS["image"]
            .replace("{width}", str(width))
            .replace("{height}", str(height))
        )
        try:
            resp = self._send("GET", f"{base}/{image_id}")
        except ApiError:
            return b""
        return resp.content if resp.status_code == 200 else b""