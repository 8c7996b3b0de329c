from __future__ import annotations

import csv

_BOM = "\ufeff"


def parse_csv_line(line: str) -> list[str]:
    """Split one physical CSV line into trimmed fields.

    Quoted fields may contain commas and doubled quotes, and may follow
    spaces after the comma. An unmatched quote runs to the end of the line
    instead of raising. A quote in the middle of an unquoted value is kept
    as a literal character.
    """

    try:
        # skipinitialspace: a quote after ", " still opens a quoted field.
        row = next(csv.reader([line], skipinitialspace=True, strict=False), [])
    except csv.Error:
        # Stray carriage returns or NULs: fall back to a plain split.
        row = line.split(",")
    return [value.strip() for value in row]


def parse_csv(text: str) -> list[dict[str, str]]:
    """Parse GTFS CSV text into records keyed by header name.

    Blank lines are skipped and missing trailing fields become "".
    Values are compared as exact strings downstream (trip_id/stop_id joins).
    """

    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    lines = [line for line in text.replace("\r\n", "\n").split("\n") if line.strip()]
    if not lines:
        return []

    headers = parse_csv_line(lines[0])
    records: list[dict[str, str]] = []
    for line in lines[1:]:
        values = parse_csv_line(line)
        records.append(
            {h: (values[i] if i < len(values) else "") for i, h in enumerate(headers)}
        )
    return records
