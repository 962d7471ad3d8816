import pytest

from csv_records import MalformedInputError, column, parse, width_issues

LINES = [
    "Header1;Header2;Header3;Header4",
    "CellA1;CellB1;CellC1;CellD1",
    "CellA2;CellB2;CellC2;CellD2",
    "CellA3;CellB3;CellC3;CellD3",
]

def test_parse_semicolon_table():
    result = parse(LINES, ";")

    assert len(result) == len(LINES) - 1
    assert result[0] == {
        "Header1": "CellA1",
        "Header2": "CellB1",
        "Header3": "CellC1",
        "Header4": "CellD1",
    }
    assert result[0]["Header2"] == "CellB1"
    assert column(result, "Header2") == ["CellB1", "CellB2", "CellB3"]
    assert column(result, "Header1")[2] == "CellA3"

def test_keys_follow_header_order():
    result = parse(LINES, ";")
    for record in result:
        assert list(record) == LINES[0].split(";")

def test_column_matches_header_position():
    result = parse(LINES, ";")
    header = LINES[0].split(";")
    for i, key in enumerate(header):
        assert column(result, key) == [line.split(";")[i] for line in LINES[1:]]

def test_default_separator_is_comma():
    assert parse(["a,b", "1,2"]) == [{"a": "1", "b": "2"}]

def test_empty_input():
    assert parse([]) == []

def test_header_only():
    assert parse(["a,b,c"]) == []

def test_short_row_keeps_leading_keys():
    assert parse(["a,b,c", "1,2"]) == [{"a": "1", "b": "2"}]

def test_long_row_drops_surplus_values():
    assert parse(["a,b", "1,2,3"]) == [{"a": "1", "b": "2"}]

def test_empty_data_line_is_empty_record():
    assert parse(["a,b", "", "1,2"]) == [{}, {"a": "1", "b": "2"}]

def test_multi_character_separator():
    assert parse(["a::b", "1::2"], "::") == [{"a": "1", "b": "2"}]

def test_empty_header_is_malformed():
    with pytest.raises(MalformedInputError):
        parse(["", "1,2"])

def test_empty_separator_rejected():
    with pytest.raises(ValueError):
        parse(["a,b"], "")

def test_width_issues():
    issues = width_issues(["a,b,c", "1,2,3", "1", "1,2,3,4,5"])

    assert [i["issue"] for i in issues] == ["row_too_short", "row_too_long"]
    assert issues[0]["row"] == 3
    assert issues[0]["action"] == "truncated_to_1"
    assert issues[1]["row"] == 4
    assert issues[1]["action"] == "dropped_2_values"

def test_width_issues_clean_table():
    assert width_issues(LINES, ";") == []

def test_column_stays_aligned_with_records():
    result = parse(["a,b", "1,x", "", "3,z", "4"])

    assert column(result, "a") == ["1", None, "3", "4"]
    assert column(result, "b") == ["x", None, "z", None]
    assert column(result, "a")[2] == "3"
    assert column(result, "missing") == [None, None, None, None]
