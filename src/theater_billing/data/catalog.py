"""
Play and invoice loaders.

Plays come from a CSV table (play_id, name, type); invoices from a JSON list
of {"customer": ..., "performances": [{"playID": ..., "audience": ...}]}.
Play types and audiences are not validated here; the pricing engine does that
when a statement is built.
"""
import json
from pathlib import Path
from typing import Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from ..engine.models import Play, Performance, Invoice

PLAY_COLUMNS = ('play_id', 'name', 'type')


def load_plays(path: Optional[Path] = None, settings: Optional[Settings] = None) -> dict[str, Play]:
    """
    Load the play lookup table from CSV.

    Args:
        path: CSV file path (defaults to settings.plays_csv)
        settings: Optional settings override

    Returns:
        Dict of {play_id: Play}
    """
    path = Path(path or (settings or get_settings()).plays_csv)
    if not path.exists():
        raise FileNotFoundError(f"Play table not found at {path}.")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [col for col in PLAY_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")

    # Normalize
    for col in PLAY_COLUMNS:
        df[col] = df[col].astype(str).str.strip()

    blank = df[df['play_id'] == '']
    if not blank.empty:
        raise ValueError(f"Blank play id in {path.name} on data rows: {', '.join(str(i + 1) for i in blank.index)}")

    duplicates = df[df['play_id'].duplicated()]['play_id'].unique()
    if len(duplicates) > 0:
        raise ValueError(f"Duplicate play ids in {path.name}: {', '.join(duplicates)}")

    return {
        row['play_id']: Play(name=row['name'], type=row['type'])
        for row in df[list(PLAY_COLUMNS)].to_dict(orient='records')
    }


def parse_invoice(record: dict) -> Invoice:
    """Build an Invoice from one decoded JSON record."""
    if not isinstance(record, dict) or 'customer' not in record:
        raise ValueError(f"Invoice record has no customer: {record!r}")

    raw_performances = record.get('performances', [])
    if not isinstance(raw_performances, list):
        raise ValueError(f"Performances for {record['customer']} must be a list, got {raw_performances!r}")

    performances = []
    for perf in raw_performances:
        if not isinstance(perf, dict):
            raise ValueError(f"Performance for {record['customer']} must be an object: {perf!r}")
        if 'playID' not in perf or 'audience' not in perf:
            raise ValueError(f"Performance for {record['customer']} needs playID and audience: {perf!r}")
        audience = perf['audience']
        if isinstance(audience, bool) or not isinstance(audience, int):
            raise ValueError(f"Audience must be a whole number of seats, got {audience!r}")
        performances.append(Performance(play_id=str(perf['playID']), audience=audience))

    return Invoice(customer=str(record['customer']), performances=performances)


def load_invoices(path: Optional[Path] = None, settings: Optional[Settings] = None) -> list[Invoice]:
    """Load invoices from a JSON file (defaults to settings.invoices_json)."""
    path = Path(path or (settings or get_settings()).invoices_json)
    if not path.exists():
        raise FileNotFoundError(f"Invoices file not found at {path}.")

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    # A single invoice object is accepted as well as a list
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"{path.name} must hold an invoice object or a list of invoices")
    return [parse_invoice(record) for record in data]
