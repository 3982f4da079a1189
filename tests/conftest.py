"""Shared fixtures for the freight origin map tests."""

import pytest
import pandas as pd


DALLAS_ATLANTA = {
    "origin_city": "Dallas",
    "origin_state": "TX",
    "orig_lat": "32.78",
    "orig_lng": "-96.80",
    "dest_city": "Atlanta",
    "dest_state": "GA",
    "dest_lat": "33.75",
    "dest_lng": "-84.39",
}


def make_row(**overrides):
    row = dict(DALLAS_ATLANTA)
    row.update(overrides)
    return row


@pytest.fixture
def write_csv(tmp_path):
    """Write rows to a CSV file under tmp_path and return its path."""
    def _write(rows, name="shipments.csv"):
        path = tmp_path / name
        pd.DataFrame(rows).to_csv(path, index=False)
        return path
    return _write


@pytest.fixture
def write_xlsx(tmp_path):
    """Write one or more sheets to an .xlsx workbook and return its path."""
    def _write(sheets, name="shipments.xlsx"):
        path = tmp_path / name
        with pd.ExcelWriter(path) as writer:
            for sheet_name, rows in sheets.items():
                pd.DataFrame(rows).to_excel(writer, sheet_name=sheet_name, index=False)
        return path
    return _write
