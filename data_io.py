# data_io.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import pandas as pd
from constants import CSV_EXTENSION, EXPECTED_COLS, SAMPLE_FILE

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """A dropped file could not be read or parsed."""


def file_extension(name: str) -> str:
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""

def _read_csv(file) -> pd.DataFrame:
    # every cell stays text; the normalizer owns numeric parsing
    return pd.read_csv(file, dtype=str, keep_default_na=False, skip_blank_lines=True)

def _read_workbook(file) -> pd.DataFrame:
    # "NA", "None" and friends are real text; only empty cells go missing
    df = pd.read_excel(file, sheet_name=0, dtype=str, keep_default_na=False, na_values=[""])
    return df.fillna("")

def read_rows(file) -> List[Dict[str, Any]]:
    name = getattr(file, "name", "") or ""
    if file_extension(name) == CSV_EXTENSION:
        df = _read_csv(file)
    else:
        df = _read_workbook(file)
    df.columns = [str(c) for c in df.columns]

    err = validate_columns(df.columns, EXPECTED_COLS)
    if err:
        logger.warning("%s: %s", name, err)
    logger.info("Parsed %d rows from %s", len(df), name)
    return df.to_dict(orient="records")

def validate_columns(columns: Iterable[str], expected: Iterable[str]) -> Optional[str]:
    present = set(columns)
    missing = [c for c in expected if c not in present]
    return f"Missing required columns: {', '.join(missing)}" if missing else None

def sample_path() -> Path:
    return Path(__file__).resolve().parent / SAMPLE_FILE
