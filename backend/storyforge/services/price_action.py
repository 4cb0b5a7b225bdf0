"""Price action line for the end of a story."""
from datetime import date
from typing import Optional, Tuple

from storyforge.config import get_settings
from storyforge.models.schemas import PriceQuote

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
FRIDAY = 4


def last_trading_day_name(today: Optional[date] = None) -> str:
    """Name of the most recent weekday; weekends roll back to Friday."""
    weekday = (today or date.today()).weekday()
    if weekday > FRIDAY:
        weekday = FRIDAY
    return DAY_NAMES[weekday]


def _move(change_percent: float) -> Tuple[str, str]:
    """Return (direction, unsigned percent) from the 2-decimal rendering of a change."""
    formatted = f"{change_percent:.2f}"
    if formatted.startswith("-"):
        return "fell", formatted[1:]
    return "rose", formatted


def build_price_action_line(
    ticker: str,
    quote: Optional[PriceQuote],
    day_name: Optional[str] = None,
) -> str:
    """
    Render "<TICKER> Price Action: ..." for a delayed quote.

    Args:
        ticker: Symbol as it should appear in the story
        quote: Delayed quote, or None when price data could not be obtained
        day_name: Trading day to mention; defaults to the last trading day

    Returns:
        A single line attributed to the configured price source
    """
    settings = get_settings()
    source = f'<a href="{settings.price_source_url}">{settings.price_source_name}</a>'
    ticker = ticker.strip().upper()

    if quote is None:
        return f"{ticker} Price Action: Price data unavailable, according to {source}."

    day_name = day_name or last_trading_day_name()
    direction, percent = _move(quote.change_percent)
    regular = (
        f"{ticker} Price Action: {ticker} shares {direction} {percent}% to ${quote.last:.2f} "
        f"during regular trading hours on {day_name}"
    )

    if quote.after_hours:
        after_direction, after_percent = _move(quote.after_hours_change_percent)
        return (
            f"{regular}. The stock {after_direction} {after_percent}% to ${quote.after_hours:.2f} "
            f"in after-hours trading, according to {source}."
        )

    return f"{regular}, according to {source}."
