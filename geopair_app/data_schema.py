"""
data_schema.py
Centralized column definitions for the input and output CSV files.
"""

from enum import Enum

import pandas as pd


class InputFormat(str, Enum):
    """Coordinate notation of a whole input file (never mixed per row)."""
    DD = "dd"
    DMS = "dms"
    DDM = "ddm"

    def __str__(self) -> str:
        return self.value


# Required input headers (order-independent; extra columns are ignored)
REQUIRED_HEADERS = (
    "name_a",
    "lat_a",
    "lon_a",
    "name_b",
    "lat_b",
    "lon_b",
)

# Coordinate cells in the order they are parsed for each row
COORD_FIELDS = ("lat_a", "lon_a", "lat_b", "lon_b")

# Output CSV schema (column -> dtype), in output order
OUTPUT_SCHEMA = {
    "id": "int64",
    "name_a": str,
    "lat_a_in": str,
    "lon_a_in": str,
    "lat_a_dd": float,
    "lon_a_dd": float,
    "lat_a_dms": str,
    "lon_a_dms": str,
    "name_b": str,
    "lat_b_in": str,
    "lon_b_in": str,
    "lat_b_dd": float,
    "lon_b_dd": float,
    "lat_b_dms": str,
    "lon_b_dms": str,
    "distance_km": float,
    "distance_miles": float,
    "nearly_lat": bool,
    "nearly_lon": bool,
    "nearly_both": bool,
}

OUTPUT_COLUMNS = tuple(OUTPUT_SCHEMA.keys())
BOOL_COLUMNS = tuple(c for c, t in OUTPUT_SCHEMA.items() if t is bool)

# Decimal places applied by the pipeline
DD_DECIMALS = 6
DISTANCE_DECIMALS = 2

# Set by csv_io on rows that had more cells than the header
OVERLONG_ROW_COLUMN = "__overlong_row__"


def create_dataframe(schema=OUTPUT_SCHEMA):
    """Creates an empty pandas DataFrame based on the given schema."""
    return pd.DataFrame(columns=list(schema.keys())).astype(schema)
