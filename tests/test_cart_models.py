import pytest

from wiieat.cart_models import LINE_SOURCE, Cart, CartLine, LineOption


def test_line_option_serialize():
    assert LineOption(7, 2).serialize() == {
        "child_options": [],
        "id": 7,
        "quantity": 2,
        "sub_option_ids": [],
    }


def test_line_option_round_trip():
    option = LineOption(11, 3)
    assert LineOption.deserialize(option.serialize()) == option


def test_line_option_missing_id():
    with pytest.raises(KeyError):
        LineOption.deserialize({"quantity": 1})


def test_cart_serialize():
    assert Cart().serialize() == {
        "brand": "GRUBHUB",
        "experiments": ["IGNORE_MINIMUM_TIP_REQUIREMENT", "LINEOPTION_ENHANCEMENTS"],
        "cart_attributes": [],
    }


def test_cart_deserialize_ignores_input():
    assert Cart.deserialize({"brand": "OTHER"}) == Cart()


def test_cart_experiments_not_shared():
    first = Cart()
    first.experiments.append("X")
    assert "X" not in Cart().experiments


def test_cart_line_serialize_fields():
    line = CartLine("store", "item", 1, 12.5)
    body = line.serialize()
    assert body["restaurant_id"] == "store"
    assert body["menu_item_id"] == "item"
    assert body["cost"] == 12.5
    assert body["isBadged"] is False
    assert body["source"] == LINE_SOURCE
    assert body["experiments"] == ["LINEOPTION_ENHANCEMENTS"]
    assert body["options"] == []


def test_cart_line_zero_cost_is_integer():
    body = CartLine("store", "item", 1, 0.0).serialize()
    assert body["cost"] == 0
    assert type(body["cost"]) is int


def test_cart_line_add_option_keeps_order():
    line = CartLine("store", "item", 1, 3.0)
    line.add_option(5, 1)
    line.add_option(9, 1)
    body = line.serialize()
    assert [option["id"] for option in body["options"]] == [5, 9]
    assert body["options"][0] == LineOption(5, 1).serialize()


def test_cart_line_deserialize_uses_store_and_count():
    line = CartLine.deserialize(
        {"store_id": "store", "menu_item_id": "item", "count": 4, "cost": 2}
    )
    assert line == CartLine("store", "item", 4, 2.0)


def test_cart_line_deserialize_wrong_type():
    with pytest.raises(TypeError):
        CartLine.deserialize(
            {"store_id": "store", "menu_item_id": "item", "count": 4, "cost": "2"}
        )