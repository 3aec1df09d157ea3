"""Tabular views and counts over a chore list."""

from datetime import date
from typing import Dict, List

import pandas as pd

from chore_tracker.domain.chore import Chore

CHORE_COLUMNS = ["description", "done", "deadline"]


def chores_to_frame(chores: List[Chore]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per chore, in list order.

    Args:
        chores: Chores to tabulate

    Returns:
        DataFrame with columns description, done, deadline (empty frame keeps them)
    """
    return pd.DataFrame([c.model_dump() for c in chores], columns=CHORE_COLUMNS)


def summarize(chores: List[Chore], today: date) -> Dict[str, int]:
    df = chores_to_frame(chores)
    if df.empty:
        return {"total": 0, "completed": 0, "pending": 0, "overdue": 0}

    pending = ~df["done"].astype(bool)
    overdue = pending & (df["deadline"] < today)
    return {
        "total": int(len(df)),
        "completed": int((~pending).sum()),
        "pending": int(pending.sum()),
        "overdue": int(overdue.sum()),
    }
