from utils.currency import format_amount_input, format_currency


def test_format_currency():
    assert format_currency(35) == "$35.00"
    assert format_currency(1234.5, "€") == "€1,234.50"
    assert format_currency(-5) == "-$5.00"


def test_format_amount_input():
    assert format_amount_input(12.5) == "12.50"
    assert format_amount_input(10.0) == "10.00"
    assert format_amount_input(12.345) == "12.345"
    assert float(format_amount_input(0.1 + 0.2)) == 0.1 + 0.2
