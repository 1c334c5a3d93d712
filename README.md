# autochair

This package holds the client-side logic of a car seat shop: the product catalogue with its seat filters, the basket, purchase orders and user accounts. No GUI toolkit is involved. Models and view models keep the state, and each change is reported through a plain `Signal`, so any front end can connect to it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `autochair.signals`: `Signal`, a synchronous observer.
  - `connect(slot)` raises `TypeError` when the slot is not callable.
  - `disconnect(slot)` raises `ValueError` when the slot is not connected.
  - `emit(*args)` calls the slots in the order they were connected.
- `autochair.entities`: the records exchanged with the server, all as dataclasses with string fields.
  - The records are `User`, `Product`, `BaseSeat`, `ChildSeat`, `SportSeat`, `LuxurySeat`, `PurchaseOrder` and `Photo`.
  - `ProductType` is a string enum. Its members are `BASE` = "1", `CHILD` = "2", `SPORT` = "3" and `LUXURY` = "4".
- `autochair.display`: records shaped for display and the conversions between them and the entities.
  - The records are `DisplayUser`, `DisplayProduct`, `DisplayBaseSeat`, `DisplayChildSeat`, `DisplaySportSeat`, `DisplayLuxurySeat` and `DisplayPurchaseOrder`.
  - The conversions are `user_to_display`, `user_from_display`, `product_to_display`, `base_seat_to_display`, `child_seat_to_display`, `sport_seat_to_display`, `luxury_seat_to_display`, `order_to_display` and `order_from_display`.
- `autochair.network`: the wire format and a TCP client.
  - `encode_request(data, request, request_key)` stores the request code as a string under `request_key`. It writes the data as compact JSON with sorted keys and ends it with `"\nEND_REQUEST\n"`.
  - `decode_response(raw)` parses the JSON that comes before `"\nEND_RESPONCE\n"`.
  - `NetworkManager(request_key, host="127.0.0.1", port=8080, timeout=None)` opens one connection per request.
    - `send_request` raises `ConnectionError` when the request cannot be sent.
    - `read_response` reads until the terminator or the end of the stream, then closes the connection. It raises `RuntimeError` if no request was sent first.
    - It can be used as a context manager.
- `autochair.countdown`: `CodeCountdown`, the resend delay of a "send code" button.
  - `press()` disables the button for 60 seconds.
  - The caller drives the countdown by calling `tick()` once a second. When no time is left, the countdown stops and the button is enabled again.
- `autochair.account_models`:
  - `UsersModel` holds the signed-in user and forwards account requests.
  - `PurchaseOrdersModel` caches the user's orders.
  - `cancel_order` removes an order from the cache only. It raises `LookupError` when the id is unknown.
- `autochair.shop_models`:
  - `PhotosModel` caches photos. `photo_for(product_type, type_id)` returns the matching image, or `""` when there is none.
  - `ProductsModel` caches products and the four seat catalogues. It provides `fetch_products`, `name_by_id`, `load_seat`, `load_product` and `add_to_basket`.
- `autochair.login_vm`: `LoginRegistrationViewModel`, the view model for login and registration.
- `autochair.basket_vm`: `BasketViewModel`, which holds the basket's products.
  - `create_order` sends one purchase order per basket product, for the signed-in user, with the status "Sending to delivery".
- `autochair.catalogue_vm`: `CatalogueViewModel` lists the products and applies the seat filters.
  - An empty filter list allows every value.
  - `filter_base_seats` checks each seat on its own.
  - `filter_child_seats`, `filter_sport_seats` and `filter_luxury_seats` keep seats only up to the first seat that does not match.
  - `clear_filters` shows everything again.
- `autochair.basket`: basket pricing and checkout.
  - `line_price` and `summarize` compute prices. The delivery charge is 100 per item and is included in `total_price`.
  - `checkout_order` raises `CheckoutError` when the basket or the address is empty.
- `autochair.account_forms`: validation of the account page forms, which raises `FormError` with a message meant for the user.
  - The checks are `validate_profile_edit`, `validate_email_change_code`, `validate_email_change`, `validate_password_change` and `validate_delete_code`.
  - `order_rows` builds the rows of the order table, in the column order of `ORDER_COLUMNS`.

## Examples

```python
from autochair.signals import Signal

changed = Signal()
changed.connect(lambda value: print("got", value))
changed.emit(42)
```

```python
from autochair.basket import summarize
from autochair.display import DisplayProduct

seat = DisplayProduct(id="1", name="Seat", price="1000", price_unit="UAH",
                      discount="10", has_discount="TRUE")
summary = summarize([seat])
print(summary.lines[0].price, summary.delivery_price, summary.total_price)  # 900 100 1000
```

## What it does not do

- It has no user interface and no command. Screens, dialogs and windows are left to the front end that connects to the signals.
- It has no API client. The models in `account_models` and `shop_models` take an `api` object, and the caller has to supply it. The methods and `Signal` attributes that object must provide are listed in those modules' docstrings.
- `NetworkManager` only moves JSON over a socket. It does not map requests to server operations, and it includes no server.
- Nothing wires the models and view models together. You construct each one yourself.