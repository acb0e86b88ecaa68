from typing import Callable

from .catalog import PlayCatalog
from .datatypes import Invoice, LineItem, StatementSummary
from .pricing import price
from .renderer import render_text, usd


def summarize(invoice: Invoice, catalog: PlayCatalog) -> StatementSummary:
    """
    Price every performance on the invoice and total the results.

    Performances are processed in invoice order and line items keep that
    order. The first unknown play or unsupported genre raises and no
    summary is returned.
    """
    total_amount = 0
    total_credits = 0
    lines = []

    for performance in invoice.performances:
        play = catalog.lookup(performance.play_id)
        result = price(play, performance)

        lines.append(LineItem(play_name=play.name,
                              amount=result.amount,
                              audience=performance.audience))
        total_amount += result.amount
        total_credits += result.credits

    return StatementSummary(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount=total_amount,
        total_credits=total_credits,
    )


def statement(invoice: Invoice, catalog: PlayCatalog,
              formatter: Callable[[int], str] = usd) -> str:
    """Summarize and render in one step."""
    return render_text(summarize(invoice, catalog), formatter)
