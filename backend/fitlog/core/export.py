import csv
import io
from decimal import Decimal
from typing import Iterable

from fitlog.core.constants import CSV_HEADER, REPORT_FILENAME
from fitlog.core.time_utils import time_to_hhmm, to_date_key


def _cell(value) -> str:
    """Render a field the way it was entered: 80.0 -> '80', None -> ''."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (float, Decimal)):
        f = float(value)
        return str(int(f)) if f.is_integer() else str(f)
    return str(value)


def csv_row(log) -> list[str]:
    return [
        to_date_key(log.date),
        _cell(log.weight),
        _cell(log.steps),
        _cell(log.calories),
        _cell(log.water_liters),
        "Yes" if log.workout_done else "No",
        _cell(log.workout_type),
        _cell(time_to_hhmm(log.wake_time)),
        _cell(time_to_hhmm(log.sleep_time)),
        _cell(log.notes),
    ]


def to_csv(logs: Iterable) -> str:
    """Serialize logs to CSV text, one row per log in the given order.

    The header is written bare; every data field is quoted. Embedded
    quotes are doubled so a standard CSV reader gets the exact strings back.
    """
    buf = io.StringIO()
    header = csv.writer(buf, lineterminator="\n")
    header.writerow(CSV_HEADER)
    rows = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for log in logs:
        rows.writerow(csv_row(log))
    return buf.getvalue()


def report_filename(start: str, end: str) -> str:
    return REPORT_FILENAME.format(start=start, end=end)
