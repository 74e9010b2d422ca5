"""
Display formatting helpers.

Dependencies: None
System role: Presentation formatting for storefront payloads
"""

from decimal import ROUND_HALF_UP, Decimal


def excerpt(text: str | None, length: int = 160) -> str:
    """First ``length`` characters of ``text`` ("" for None)."""
    if not text:
        return ""
    return text[:length]


def _plain_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_stat_value(label: str, value: float) -> str:
    """
    Format a homepage trust statistic.

    ``Average Rating`` renders out of five; large counts are abbreviated
    (``1200000`` -> ``1M+``, ``15000`` -> ``15K+``).
    """
    if label == "Average Rating":
        return f"{_plain_number(value)}/5"
    if value >= 1_000_000:
        return f"{_round_half_up(value / 1_000_000)}M+"
    if value >= 1_000:
        return f"{_round_half_up(value / 1_000)}K+"
    return _plain_number(value)


def split_paragraphs(text: str | None) -> list[str]:
    """Split rich text into paragraphs on blank lines, dropping empty ones."""
    if not text:
        return []
    return [part.strip() for part in text.split("\n\n") if part.strip()]
