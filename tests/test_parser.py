"""Unit tests for CSV row parsing and normalization."""

from __future__ import annotations

import pytest

from pricelist.errors import PriceListConfigError, SheetContentError, SheetShapeError
from pricelist.parser import clean_sleeve, parse_price_list, parse_rate, split_columns
from pricelist.records import FlatRateRecord, MatrixRateRecord


def test_split_columns_keeps_quoted_commas() -> None:
    """A comma inside a quoted field is not a separator."""
    assert split_columns('A,"B, C",D,100') == ["A", "B, C", "D", "100"]


def test_split_columns_strips_whitespace_and_wrapping_quotes() -> None:
    assert split_columns(' A , "x" ,  ,"7"') == ["A", "x", "", "7"]


def test_split_columns_leaves_inner_quotes() -> None:
    assert split_columns('"say ""hi""",B') == ['say ""hi""', "B"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("₹1,200.50", 1200.5),
        ("1000", 1000.0),
        ("$ 2,500", 2500.0),
        ("-15.5", -15.5),
        ("", 0.0),
        (None, 0.0),
        ("n/a", 0.0),
        ("--", 0.0),
        ("1.2.3", 1.2),
    ],
)
def test_parse_rate_tolerates_noise(text, expected) -> None:
    assert parse_rate(text) == expected


def test_clean_sleeve_collapses_double_dash() -> None:
    assert clean_sleeve("A--1") == "A-1"
    assert clean_sleeve("A----1") == "A--1"
    assert clean_sleeve("B-2") == "B-2"


def test_flat_end_to_end(flat_csv: str) -> None:
    """Blank rows are skipped and fields are cleansed."""
    records = parse_price_list(flat_csv, "flat")

    assert records == [FlatRateRecord(sleeve="A-1", colour="D", clarity="VS1", rate=1000.0)]


def test_flat_keeps_source_order_and_defaults_blank_rate() -> None:
    text = "Sleeve,Colour,Clarity,Rate\nZ1,f,si1,300\nA1,g,vvs,\r\nM1,h,i1,abc\n"

    records = parse_price_list(text, "flat")

    assert [r.sleeve for r in records] == ["Z1", "A1", "M1"]
    assert [r.rate for r in records] == [300.0, 0.0, 0.0]
    assert [r.clarity for r in records] == ["SI1", "VVS", "I1"]


def test_flat_skips_rows_missing_identity_or_columns() -> None:
    text = "\n".join(
        [
            "Sleeve,Colour,Clarity,Rate",
            "A1,D,,100",
            ",D,VS1,100",
            "A2,D,VS1",
            "",
            "A3,E,VS2,250,extra",
        ]
    )

    records = parse_price_list(text, "flat")

    assert records == [FlatRateRecord(sleeve="A3", colour="E", clarity="VS2", rate=250.0)]


def test_matrix_end_to_end(matrix_csv: str) -> None:
    records = parse_price_list(matrix_csv, "matrix")

    assert records == [MatrixRateRecord(sleeve="B1", colour="E", vvs=500.0)]
    assert records[0].rates() == {
        "vvs": 500.0,
        "vs1": 0.0,
        "vs2": 0.0,
        "si1": 0.0,
        "si2": 0.0,
        "si3": 0.0,
        "i1": 0.0,
        "i2": 0.0,
    }


def test_matrix_skips_all_blank_rows_and_emits_partial_rows() -> None:
    text = "Sleeve,Colour,VVS,VS1,VS2,SI1,SI2,SI3,I1,I2\n,,,,,,,,,\nC--3,f,,,,,,,,\n,,,,,,,,,90\nX\n"

    records = parse_price_list(text, "matrix")

    assert records == [
        MatrixRateRecord(sleeve="C-3", colour="F"),
        MatrixRateRecord(sleeve="", colour="", i2=90.0),
    ]


def test_matrix_parses_every_grade_column() -> None:
    text = 'Sleeve,Colour,VVS,VS1,VS2,SI1,SI2,SI3,I1,I2\nD1,g,"1,000",900,800,700,600,500,400,300\n'

    (record,) = parse_price_list(text, "matrix")

    assert record.to_dict() == {
        "sleeve": "D1",
        "colour": "G",
        "vvs": 1000.0,
        "vs1": 900.0,
        "vs2": 800.0,
        "si1": 700.0,
        "si2": 600.0,
        "si3": 500.0,
        "i1": 400.0,
        "i2": 300.0,
    }


@pytest.mark.parametrize("text", ["", "   \n", "Sleeve,Colour,Clarity,Rate\n"])
def test_header_only_input_is_a_shape_failure(text: str) -> None:
    with pytest.raises(SheetShapeError):
        parse_price_list(text, "flat")


def test_no_valid_rows_is_a_content_failure() -> None:
    with pytest.raises(SheetContentError):
        parse_price_list("Sleeve,Colour,Clarity,Rate\n,,,\nA1,D\n\n,D,VS1,5\n", "flat")


def test_unknown_layout_is_rejected(flat_csv: str) -> None:
    with pytest.raises(PriceListConfigError):
        parse_price_list(flat_csv, "wide")  # type: ignore[arg-type]


@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\u2028", "\x85"])
def test_only_newline_ends_a_row(separator: str) -> None:
    """Other line-separator characters inside a cell stay part of the row."""
    text = f'Sleeve,Colour,Clarity,Rate\nA1,D,VS1,"Note{separator}line"\nA2,e,vs2,300\n'

    records = parse_price_list(text, "flat")

    assert records == [
        FlatRateRecord(sleeve="A1", colour="D", clarity="VS1", rate=0.0),
        FlatRateRecord(sleeve="A2", colour="E", clarity="VS2", rate=300.0),
    ]
