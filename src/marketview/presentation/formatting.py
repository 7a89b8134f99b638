"""Display formatting for asset rows"""

from marketview.domain.models import Asset, Category


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_change(change_percent: float) -> str:
    sign = "+" if change_percent >= 0 else ""
    return f"{sign}{change_percent:.2f}%"


def price_change(asset: Asset) -> float:
    """Currency amount of the last move"""
    return asset.price * asset.change_percent / 100


def format_price_change(asset: Asset) -> str:
    """Signed currency amount of the last move, e.g. "+$3.75"

    Falling moves carry the minus after the currency sign ("$-540.00").
    """
    sign = "+" if is_positive(asset.change_percent) else ""
    return f"{sign}${price_change(asset):.2f}"


def format_category(category: Category) -> str:
    return category.value.upper()


def is_positive(change_percent: float) -> bool:
    """Zero counts as positive for colouring"""
    return change_percent >= 0
