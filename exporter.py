import pandas as pd
from pathlib import Path
from typing import Iterable
import logging

from .datatypes import StatementSummary
from .renderer import to_display

logger = logging.getLogger(__name__)

# Column order of the exported statement CSV
COLUMNS = [
    'Customer',
    'Play',
    'Seats',
    'Amount',
    'Credits',
]


def write_statements(csv_path: Path, summaries: Iterable[StatementSummary]) -> None:
    """Write one or more statement summaries to CSV, replacing any existing file"""
    rows_data = []
    for summary in summaries:
        rows_data.extend(_summary_to_dicts(summary))

    logger.info(f"Writing {len(rows_data)} statement rows to {csv_path}")
    df = pd.DataFrame(rows_data, columns=COLUMNS)
    # credits only appear on the total row; Int64 keeps them integral around the blanks
    df["Credits"] = df["Credits"].astype("Int64")
    df.to_csv(csv_path, index=False)
    logger.debug(f"Successfully wrote statements to {csv_path}")


def _summary_to_dicts(summary: StatementSummary) -> list[dict]:
    """Line items first, then a total row carrying the credits"""
    rows = []
    for item in summary.lines:
        rows.append({
            'Customer': summary.customer,
            'Play': item.play_name,
            'Seats': item.audience,
            'Amount': _format_money(item.amount),
            'Credits': None,
        })
    rows.append({
        'Customer': summary.customer,
        'Play': 'Total',
        'Seats': sum(item.audience for item in summary.lines),
        'Amount': _format_money(summary.total_amount),
        'Credits': summary.total_credits,
    })
    return rows


def _format_money(cents):
    """Format money amount with $ prefix"""
    return f'${to_display(cents):.2f}'
