from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from .emitters import Emitter, compute_footprint

TABLE_COLUMNS = ["kind", "label", "footprint_mt_co2", "share_of_total"]


def build_footprint_table(emitters: Iterable[Emitter]) -> pd.DataFrame:
    """Tabulate footprints in emitter order with each one's share of the total."""
    rows = []
    for emitter in emitters:
        rows.append(
            {
                "kind": emitter.kind,
                "label": emitter.label,
                "footprint_mt_co2": compute_footprint(emitter),
            }
        )
    if not rows:
        return pd.DataFrame(columns=TABLE_COLUMNS)

    df = pd.DataFrame(rows)
    footprints = df["footprint_mt_co2"].to_numpy(dtype=float)
    total = footprints.sum()
    if total == 0:
        df["share_of_total"] = np.zeros_like(footprints)
    else:
        df["share_of_total"] = footprints / total
    return df[TABLE_COLUMNS]


def format_footprint_table(df: pd.DataFrame) -> str:
    if df.empty:
        return "No emitters."
    return df.to_string(index=False)
