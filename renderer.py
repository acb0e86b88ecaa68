from decimal import Decimal, ROUND_HALF_UP
from typing import Callable

from .datatypes import StatementSummary
from .pricing import PERCENT_FACTOR

Formatter = Callable[[int], str]


def to_display(cents: int) -> Decimal:
    """Convert minor units to a 2dp Decimal. Only used at output time."""
    return (Decimal(cents) / Decimal(PERCENT_FACTOR)).quantize(Decimal('0.01'), ROUND_HALF_UP)


def usd(cents: int) -> str:
    """Format cents like "$1,730.00" (negatives as "-$5.00")"""
    value = to_display(cents)
    if value < 0:
        return f'-${abs(value):,.2f}'
    return f'${value:,.2f}'


def render_text(summary: StatementSummary, formatter: Formatter = usd) -> str:
    """
    Format a statement summary as plain text.

    Example:
        Statement for BigCo
          Hamlet: $650.00 (55 seats)
        Amount owed is $650.00
        You earned 25 credits
    """
    lines = [f'Statement for {summary.customer}']
    for item in summary.lines:
        lines.append(f'  {item.play_name}: {formatter(item.amount)} ({item.audience} seats)')
    lines.append(f'Amount owed is {formatter(summary.total_amount)}')
    lines.append(f'You earned {summary.total_credits} credits')
    return "\n".join(lines) + "\n"
