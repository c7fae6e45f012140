# pipeline_controller.py - Point-pair normalization pipeline
#
# Description:
# Turns the all-text input DataFrame into the normalized output DataFrame:
# - Parses the four coordinate cells of each row with the run's notation (DD / DMS / DDM)
# - Rounds every decimal value to 6 places and formats it back as DMS
# - Computes the haversine distance (km / miles) and the per-axis "nearly equal" flags
#
# Internal Variables:
# - `input_df`: text DataFrame from csv_io.read_input_csv (header already validated).
# - `records`: list of output row dicts, one per valid input row.
#
# Produced DataFrames:
# - `BatchResult.rows`: columns per data_schema.OUTPUT_SCHEMA, ids 1..n over written rows.
#
# Data Handling Notes:
# - Line numbers count the header as line 1.
# - Coordinates of a row are parsed lat_a, lon_a, lat_b, lon_b; the first failure wins.
# - Rows flagged with OVERLONG_ROW_COLUMN (more cells than the header) fail as a format mismatch.
# - strict=True re-raises the first RowError; otherwise the row is skipped and counted.

from geopair_app.setup_imports import *
from dataclasses import dataclass, field

from geopair_engine import (
    CoordinateKind,
    DdmError,
    DmsError,
    GeoTolerance,
    HaversineError,
    compute_nearly,
    dd_to_dms,
    ddm_to_dd,
    dms_to_dd,
    haversine,
    km_to_miles,
    round_to,
)
from geopair_engine.utils_parsing import parse_float_field

from geopair_app.data_schema import (
    COORD_FIELDS,
    DD_DECIMALS,
    DISTANCE_DECIMALS,
    OUTPUT_SCHEMA,
    OVERLONG_ROW_COLUMN,
    InputFormat,
    create_dataframe,
)
from geopair_app.errors import (
    DistanceCalculationError,
    InvalidDdmError,
    InvalidDmsError,
    MixedCoordinateFormatError,
    RowError,
)

LOG = logging.getLogger(__name__)

FIRST_DATA_LINE = 2

_KIND_BY_FIELD = {
    "lat_a": CoordinateKind.LATITUDE,
    "lon_a": CoordinateKind.LONGITUDE,
    "lat_b": CoordinateKind.LATITUDE,
    "lon_b": CoordinateKind.LONGITUDE,
}


@dataclass
class BatchResult:
    """
    Outcome of one batch: normalized rows plus skip accounting.
    """
    rows: pd.DataFrame
    written: int = 0
    invalid: int = 0
    errors: List[RowError] = field(default_factory=list)


def _parse_dd_cell(text: str, line: int) -> float:
    value = parse_float_field(text)
    if value is None or not np.isfinite(value):
        raise MixedCoordinateFormatError(line, expected=str(InputFormat.DD))
    return value


def parse_row_coordinates(row, input_format: InputFormat, line: int) -> Tuple[float, float, float, float]:
    """
    Parse lat_a, lon_a, lat_b, lon_b of one row into raw (unrounded) decimal degrees.

    Raises MixedCoordinateFormatError, InvalidDmsError or InvalidDdmError.
    """
    if row.get(OVERLONG_ROW_COLUMN, False):
        raise MixedCoordinateFormatError(line, expected=str(input_format))

    cells = [row.get(name) for name in COORD_FIELDS]
    names = [row.get("name_a"), row.get("name_b")]
    if not all(isinstance(c, str) for c in cells + names):
        raise MixedCoordinateFormatError(line, expected=str(input_format))

    values = []
    for name, text in zip(COORD_FIELDS, cells):
        kind = _KIND_BY_FIELD[name]
        if input_format == InputFormat.DD:
            values.append(_parse_dd_cell(text, line))
        elif input_format == InputFormat.DMS:
            try:
                values.append(dms_to_dd(text, kind))
            except DmsError as e:
                raise InvalidDmsError(line, e) from e
        else:
            try:
                values.append(ddm_to_dd(text, kind))
            except DdmError as e:
                raise InvalidDdmError(line, e) from e
    return tuple(values)


def build_normalized_record(row, coords: Tuple[float, float, float, float]) -> Dict:
    """
    Round each coordinate to 6 places and attach its DMS rendering.
    """
    lat_a, lon_a, lat_b, lon_b = (round_to(v, DD_DECIMALS) for v in coords)
    return {
        "name_a": row["name_a"],
        "lat_a_in": row["lat_a"],
        "lon_a_in": row["lon_a"],
        "lat_a_dd": lat_a,
        "lon_a_dd": lon_a,
        "lat_a_dms": dd_to_dms(lat_a, CoordinateKind.LATITUDE),
        "lon_a_dms": dd_to_dms(lon_a, CoordinateKind.LONGITUDE),
        "name_b": row["name_b"],
        "lat_b_in": row["lat_b"],
        "lon_b_in": row["lon_b"],
        "lat_b_dd": lat_b,
        "lon_b_dd": lon_b,
        "lat_b_dms": dd_to_dms(lat_b, CoordinateKind.LATITUDE),
        "lon_b_dms": dd_to_dms(lon_b, CoordinateKind.LONGITUDE),
    }


def compute_distance_metrics(record: Dict, tolerance: GeoTolerance, line: int) -> Dict:
    """
    Distance (km, miles; 2 decimals) and nearly flags from the rounded coordinates.
    """
    try:
        km = haversine(record["lat_a_dd"], record["lon_a_dd"], record["lat_b_dd"], record["lon_b_dd"])
    except HaversineError as e:
        raise DistanceCalculationError(line, e) from e

    distance_km = round_to(km, DISTANCE_DECIMALS)
    nearly = compute_nearly(
        record["lat_a_dd"],
        record["lon_a_dd"],
        record["lat_b_dd"],
        record["lon_b_dd"],
        tolerance,
    )
    return {
        "distance_km": distance_km,
        "distance_miles": round_to(km_to_miles(distance_km), DISTANCE_DECIMALS),
        "nearly_lat": nearly.lat,
        "nearly_lon": nearly.lon,
        "nearly_both": nearly.both,
    }


def process_row(row, input_format: InputFormat, tolerance: GeoTolerance, line: int) -> Dict:
    """Full normalization of one input row (without the id)."""
    coords = parse_row_coordinates(row, input_format, line)
    record = build_normalized_record(row, coords)
    record.update(compute_distance_metrics(record, tolerance, line))
    return record


def process_batch(
    input_df: pd.DataFrame,
    input_format: InputFormat,
    tolerance: GeoTolerance = GeoTolerance.DEFAULT,
    strict: bool = False,
) -> BatchResult:
    """
    Normalize every row of input_df.

    In strict mode the first RowError propagates; otherwise bad rows are
    logged, counted in `invalid` and kept in `errors`.
    """
    input_format = InputFormat(input_format)
    records = []
    errors: List[RowError] = []
    next_id = 1

    for offset, (_, row) in enumerate(input_df.iterrows()):
        line = FIRST_DATA_LINE + offset
        try:
            record = process_row(row, input_format, tolerance, line)
        except RowError as e:
            if strict:
                raise
            LOG.warning(f"⚠️ Skipping row: {e}")
            errors.append(e)
            continue

        record["id"] = next_id
        next_id += 1
        records.append(record)

    if records:
        rows = pd.DataFrame.from_records(records, columns=list(OUTPUT_SCHEMA.keys())).astype(OUTPUT_SCHEMA)
    else:
        rows = create_dataframe()

    result = BatchResult(rows=rows, written=len(records), invalid=len(errors), errors=errors)
    LOG.info(
        "Batch done (%s): %d written, %d ignored",
        input_format, result.written, result.invalid,
    )
    return result
