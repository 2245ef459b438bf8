import pytest

from mon_core import (
    BadStructure,
    Incomplete,
    MonError,
    NoContent,
    NoStructure,
    Record,
    iter_records,
    parse_all,
    serialize_all,
)

GROCERIES = b"title|12~grocery listdate|10~04/08/2020grocery list|21~1.|6~cheese2.|5~bread"


def test_parse_all_and_nested_content():
    recs = parse_all(GROCERIES)
    assert [r.name for r in recs] == ["title", "date", "grocery list"]
    assert recs[0].text == "grocery list"
    assert recs[1].text == "04/08/2020"
    assert recs[2].text == "1.|6~cheese2.|5~bread"

    items = parse_all(recs[2].content)
    assert [(r.name, r.text) for r in items] == [("1.", "cheese"), ("2.", "bread")]


def test_parse_all_does_not_recurse():
    data = b"first|4~ONE,second|4~TWO,third|6~THREE,container|29~name|5~NAME,content|7~CONTENT"
    recs = parse_all(data)
    assert len(recs) == 4
    assert [r.name for r in recs] == ["first", "second", "third", "container"]
    assert recs[0].text == "ONE,"
    assert recs[3].text == "name|5~NAME,content|7~CONTENT"


def test_nested_container_round_trip():
    children = [Record.with_content("object", "_" * 20), Record.with_content("object", "_" * 20)]
    data = Record.container("container", children).to_bytes()

    (outer,) = parse_all(data)
    assert parse_all(outer.content) == children


def test_empty_buffer_is_empty_sequence():
    assert parse_all(b"") == []


def test_zero_length_record_sequence():
    recs = parse_all(b"empty|0~")
    assert len(recs) == 1
    assert recs[0].content is None
    assert serialize_all(recs) == b"empty|0~"


def test_sequence_round_trip():
    recs = [Record("a"), Record.with_content("b", "x|1~y"), Record("c")]
    assert parse_all(serialize_all(recs)) == recs


@pytest.mark.parametrize(
    "data, error",
    [
        (b"a|1~xb", NoStructure),
        (b"a|1~xb|", Incomplete),
        (b"a|1~xb|2~", Incomplete),
        (b"a|1~xb|2~y", Incomplete),
        (b"a|3~xy", Incomplete),
        (b"a|1~xb|z~", BadStructure),
    ],
)
def test_leftover_or_shortfall_is_an_error(data, error):
    with pytest.raises(error):
        parse_all(data)


def test_iter_records_offsets():
    assert [(off, r.name) for off, r in iter_records(b"a|1~xbb|2~yz")] == [(0, "a"), (5, "bb")]


def test_iter_records_stops_at_first_error():
    it = iter_records(b"a|1~xb")
    off, rec = next(it)
    assert (off, rec.name) == (0, "a")
    with pytest.raises(NoStructure):
        next(it)


def test_error_texts(capsys):
    assert str(NoStructure()) == "Error: No structure: The data does not follow the mON structure."
    assert str(Incomplete("missing")) == "Error: Incomplete data: missing"
    assert str(BadStructure("abc")) == "Error: Bad data: abc"
    assert str(NoContent()) == "Error: Content of length 0 cannot be parsed."

    NoStructure().print()
    assert capsys.readouterr().out == "Error: No structure: The data does not follow the mON structure.\n"


def test_error_codes():
    codes = {cls.code for cls in (NoStructure, Incomplete, BadStructure, NoContent)}
    assert codes == {"E_NO_STRUCTURE", "E_INCOMPLETE", "E_BAD_STRUCTURE", "E_NO_CONTENT"}
    assert all(issubclass(cls, MonError) for cls in (NoStructure, Incomplete, BadStructure, NoContent))
