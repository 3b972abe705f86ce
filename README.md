# wiieat

A library for ordering food from a delivery service, from signing in to
filling a cart, plus a few helpers that go with it.

## Modules

- **`wiieat.client`**: `Client` talks to the service over HTTP with
  `requests`. Each call first sends a preflight `OPTIONS` request
  (`request_access`, which returns `True` or `False`).
  - Signing in: `login(email, password)`, `refresh(refresh_token)`,
    `request_confirmation_code(email)` and `login_with_code(email, code)`.
  - Address: `geocode(address, city, state, zip_code)` looks the address up
    and stores its coordinates, geohash and time-zone offset in the session.
  - Menus: `restaurants()`, `restaurant_info(restaurant_id)`,
    `category_items(restaurant_id, category_id, operation_id)` and
    `item_info(restaurant_id, item_id)` return the parsed JSON reply.
  - Carts: `create_cart()` returns the new cart id and then tries to attach
    the delivery address; `get_cart(cart_id)`, `add_item(...)`,
    `put_delivery_info()` and `put_incomplete_delivery()`.
  - Payments: `get_payments(ud_id)` returns the saved payment methods.
  - Images: `download_image(image_id, width, height)` returns PNG bytes, or
    empty bytes if the image could not be fetched.
- **`wiieat.session`**: `Session` holds the signed-in state: e-mail, tokens,
  user id, delivery address, `Coordinates`, geohash, time-zone offset, cart id
  and active card. `save_token`, `save_address` and `set_active_card` write
  state to files under `data_dir` (default `WiiEat`); `load_address` and
  `load_card_info` read it back and return `False` when something is missing
  or malformed. `is_address_complete()` and `full_address()` report on the
  address.
- **`wiieat.auth_models`, `wiieat.cart_models`, `wiieat.delivery`**: request
  and response bodies (`AuthLogin`, `AuthCode`, `AuthRefresh`,
  `ConfirmationCode`, `ConfirmationCodeResponse`, `Cart`, `CartLine`,
  `LineOption`, `DeliveryInfo`, `IncompleteDelivery`), each with
  `serialize()` and most with a `deserialize()` class method.
  `delivery.generate_phone()` makes up a US phone number for the delivery
  address.
- **`wiieat.catalog`**: plain records: `Restaurant`, `Category`, `MenuItem`,
  `Choice` (with `add_option`), `Option` and `CreditCard`.
- **`wiieat.geohash`**: `encode`, `decode`, `neighbor`, `neighbors` and
  `dimensions_for_precision`.
- **`wiieat.storage`**: small file helpers (`read_text`, `read_bytes`,
  `write_file`, `delete_file`, `file_exists`, `create_directory`) and
  `time_now(offset)`, the time in milliseconds.
- **`wiieat.translations`**: `hash_string` (the PJW hash), `expand_escape`
  and a message `Catalog` with `set`, `gettext` and `clear`.
- **`wiieat.browser`**: `Browser` lists a folder with an "Up One Level"
  entry first, then folders, then files, sorted without regard to case
  (`entry_sort_key`), and moves into the selected entry with
  `change_folder`.

## Signing in

```python
from wiieat.client import Client
from wiieat.session import EmailTwoFactorRequired

client = Client()
password = "password"
try:
    client.login("someone@example.com", password)
except EmailTwoFactorRequired:
    client.request_confirmation_code("someone@example.com")
    client.login_with_code("someone@example.com", input("Code: "))

client.geocode("1 Main St", "Springfield", "IL", "62701")
found = client.restaurants()
```

## Errors

Failures are raised as `ApiError` or one of its subclasses:
`BadJsonError` (a reply could not be understood), `UnauthorizedError`
(credentials or session refused) and `EmailTwoFactorRequired` (the login
needs a code sent by e-mail). `download_image` does not raise; it returns
empty bytes instead. `create_cart` logs, rather than raises, a refused
delivery address.

## Geohashes

```python
from wiieat import geohash

code = geohash.encode(57.64911, 10.40744, 11)
print(code)                       # u4pruydqqvj

cell = geohash.decode(code)
print(cell.latitude, cell.longitude)

# N, NE, E, SE, S, SW, W, NW
for neighbour in geohash.neighbors(code):
    print(neighbour)

size = geohash.dimensions_for_precision(5)
print(size.width, size.height)    # degrees of longitude and latitude
```

A precision outside 1 to 12 falls back to 6; a coordinate out of range
raises `ValueError`.

## Message catalogs

```python
from wiieat.translations import Catalog, expand_escape

messages = Catalog()
messages.set("Checkout", "Zur Kasse\\n")
print(messages.gettext("Checkout"))   # "Zur Kasse" followed by a newline
print(messages.gettext("Unknown"))    # untranslated text comes back as-is

print(expand_escape("tab\\there"))
```

## What it does not do

This is a library only. It has no command to run and no screens: the menus,
the on-screen keyboard and the controller input that an ordering front end
would need are not part of it. It does not add payment cards or place and pay
for an order; it stops at a filled cart and the list of saved payment
methods. Message catalogs are filled with `Catalog.set`; there is no loader
for translation files.