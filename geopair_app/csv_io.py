# ============================== GEOPAIR STANDARD HEADER ==============================
# Script Name: csv_io.py
# Description:
#   - Reads the input CSV into an all-text DataFrame and checks its headers.
#   - Writes the normalized output DataFrame.
# External Data Sources:
#   - Input CSV file (header row + one point pair per row).
# Produced DataFrames:
#   - input_df: every cell as str, no NA inference ("" stays "").
#     Rows shorter than the header get NaN in the missing cells.
# Data Handling Notes:
#   - Rows with more cells than the header are blanked and flagged in
#     OVERLONG_ROW_COLUMN; the pipeline rejects them per line.
#   - Booleans are written as lowercase true/false.

from geopair_app.setup_imports import *

from geopair_app.data_schema import (
    BOOL_COLUMNS,
    OUTPUT_COLUMNS,
    OVERLONG_ROW_COLUMN,
    REQUIRED_HEADERS,
)
from geopair_app.errors import (
    InputReadError,
    InvalidHeaderError,
    MissingHeaderFieldError,
    OutputWriteError,
)

LOG = logging.getLogger(__name__)

_OVERLONG_MARK = "\x00overlong\x00"


def validate_headers(columns) -> None:
    """
    Raise MissingHeaderFieldError for the first required header not present.
    """
    present = set(columns)
    for name in REQUIRED_HEADERS:
        if name not in present:
            raise MissingHeaderFieldError(name)


def _read_header(path) -> List[str]:
    df = pd.read_csv(path, dtype=str, nrows=0, encoding="utf-8")
    return list(df.columns)


def read_input_csv(path) -> pd.DataFrame:
    """
    Load the input file as text and validate its header row.

    Rows with more cells than the header are kept (cells blanked) and
    flagged in OVERLONG_ROW_COLUMN so the pipeline can reject them by line.
    """
    try:
        columns = _read_header(path)
        width = len(columns)

        def mark_overlong(fields):
            return [_OVERLONG_MARK] * width

        # Header row read as data so an over-long first row is not taken as an index.
        df = pd.read_csv(
            path,
            header=None,
            names=columns,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            encoding="utf-8",
            engine="python",
            on_bad_lines=mark_overlong,
        )
    except pd.errors.EmptyDataError as e:
        raise InvalidHeaderError() from e
    except pd.errors.ParserError as e:
        raise InputReadError(path, f"malformed CSV: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(path, e) from e

    df = df.iloc[1:].reset_index(drop=True)
    validate_headers(df.columns)

    overlong = df.eq(_OVERLONG_MARK).all(axis=1)
    df.loc[overlong, columns] = ""
    df[OVERLONG_ROW_COLUMN] = overlong
    if overlong.any():
        LOG.warning("⚠️ %d row(s) with more cells than the header in %s", int(overlong.sum()), path)

    LOG.info("✅ Loaded %d row(s) from %s", len(df), path)
    return df


def _format_bool(value) -> str:
    return "true" if bool(value) else "false"


def to_output_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Order columns per OUTPUT_COLUMNS and render booleans as true/false.
    """
    out = df.reindex(columns=list(OUTPUT_COLUMNS)).copy()
    for col in BOOL_COLUMNS:
        out[col] = out[col].map(_format_bool).astype(object)
    return out


def write_output_csv(df: pd.DataFrame, path) -> None:
    """
    Write the normalized rows (header always written, even with no rows).
    """
    out = to_output_frame(df)
    try:
        out.to_csv(path, index=False, encoding="utf-8", lineterminator="\n")
    except OSError as e:
        raise OutputWriteError(path, e) from e
    LOG.info("✅ Wrote %d row(s) to %s", len(out), path)
