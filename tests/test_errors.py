import pytest

from rustdrill.lessons.errors import generate_nametag_text, purchase, total_cost


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as error:
        generate_nametag_text("")
    assert str(error.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as error:
        total_cost("beep boop")
    assert str(error.value) == "invalid digit found in string"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "cannot parse integer from empty string"),
        (" 34", "invalid digit found in string"),
        ("-", "invalid digit found in string"),
        ("3_4", "invalid digit found in string"),
        ("99999999999", "number too large to fit in target type"),
        ("-99999999999", "number too small to fit in target type"),
    ],
)
def test_item_quantity_parse_errors(text, message):
    with pytest.raises(ValueError) as error:
        total_cost(text)
    assert str(error.value) == message


def test_total_cost_overflow():
    with pytest.raises(OverflowError):
        total_cost("500000000")


def test_purchase_affordable(capsys):
    assert purchase(100, "8") == 59
    assert capsys.readouterr().out == "You now have 59 tokens.\n"


def test_purchase_unaffordable_keeps_tokens(capsys):
    assert purchase(100, "30") == 100
    assert capsys.readouterr().out == "You can't afford that many!\n"


def test_purchase_propagates_parse_error():
    with pytest.raises(ValueError, match="invalid digit found in string"):
        purchase(100, "eight")