"""
Export functionality for history data.
Converts daily summaries to a DataFrame and writes CSV files.
"""

from pathlib import Path
from typing import Sequence
import pandas as pd

from .logger import setup_logger
from .models import DaySummary

logger = setup_logger(__name__)

SUMMARY_COLUMNS = ['date', 'productive_minutes', 'waste_minutes', 'neutral_minutes', 'filled_slot_count']


def summaries_to_dataframe(summaries: Sequence[DaySummary]) -> pd.DataFrame:
    """
    Convert daily summaries to a DataFrame, one row per day.

    Args:
        summaries: DaySummary objects

    Returns:
        DataFrame with SUMMARY_COLUMNS (empty but typed for empty input)
    """
    rows = [
        {
            'date': s.date,
            'productive_minutes': s.productive_minutes,
            'waste_minutes': s.waste_minutes,
            'neutral_minutes': s.neutral_minutes,
            'filled_slot_count': s.filled_slot_count,
        }
        for s in summaries
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def export_history_csv(summaries: Sequence[DaySummary], filepath: str | Path) -> int:
    """
    Export daily summaries to a CSV file.

    Args:
        summaries: DaySummary objects
        filepath: Path where CSV should be saved

    Returns:
        Number of rows exported
    """
    df = summaries_to_dataframe(summaries)

    if df.empty:
        logger.warning("No history to export")
        return 0

    filepath = Path(filepath)
    export_df = df.rename(columns={
        'date': 'Date',
        'productive_minutes': 'Productive',
        'waste_minutes': 'Waste',
        'neutral_minutes': 'Neutral',
        'filled_slot_count': 'Entries',
    })
    export_df.to_csv(filepath, index=False, encoding='utf-8')

    logger.info(f"Exported {len(export_df)} days to {filepath.name}")
    return len(export_df)
