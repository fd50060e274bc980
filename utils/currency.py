def format_currency(amount: float, symbol: str = "$") -> str:
    """'$1,234.56'; negatives keep the sign in front of the symbol ('-$5.00')."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_amount_input(amount: float) -> str:
    """Text for an editable amount field: '12.50', or every digit when two decimals would round."""
    text = f"{amount:.2f}"
    return text if float(text) == amount else repr(float(amount))
