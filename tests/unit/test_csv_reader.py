from __future__ import annotations

from src.domain.algorithms.csv_reader import parse_csv, parse_csv_line


def test_parse_csv_handles_quotes_crlf_and_blank_lines() -> None:
    text = 'a,b\r\n1,"x,y"\r\n\r\n2,"say ""hi"""\n'

    records = parse_csv(text)

    assert records == [{"a": "1", "b": "x,y"}, {"a": "2", "b": 'say "hi"'}]


def test_parse_csv_trims_fields_and_headers() -> None:
    records = parse_csv("stop_id , stop_name\n  S1 ,  Central  \n")

    assert records == [{"stop_id": "S1", "stop_name": "Central"}]


def test_parse_csv_missing_trailing_fields_are_empty() -> None:
    records = parse_csv("a,b,c\n1\n")

    assert records == [{"a": "1", "b": "", "c": ""}]


def test_parse_csv_drops_leading_bom() -> None:
    records = parse_csv("\ufeffstop_id,stop_name\nS1,Central\n")

    assert list(records[0]) == ["stop_id", "stop_name"]


def test_parse_csv_empty_input() -> None:
    assert parse_csv("") == []
    assert parse_csv("\n  \n") == []


def test_unmatched_quote_does_not_raise() -> None:
    fields = parse_csv_line('1,"open, still')

    assert fields[0] == "1"
    assert fields[1].startswith("open, still")


def test_ids_are_kept_as_exact_strings() -> None:
    records = parse_csv("trip_id,stop_id\n007,0001_01\n")

    assert records[0]["trip_id"] == "007"
    assert records[0]["stop_id"] == "0001_01"


def test_quoted_field_after_comma_and_space() -> None:
    assert parse_csv_line('a, "b, c", d') == ["a", "b, c", "d"]

    records = parse_csv('stop_id, stop_name, stop_lat\nS1, "Central, North", 35.1\n')

    assert records == [
        {"stop_id": "S1", "stop_name": "Central, North", "stop_lat": "35.1"}
    ]


def test_quoted_field_after_several_spaces_keeps_columns() -> None:
    fields = parse_csv_line('T1,   "08:00:00" ,S1,  "1"')

    assert fields == ["T1", "08:00:00", "S1", "1"]
