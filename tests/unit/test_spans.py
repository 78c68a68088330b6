import pytest

from char_ranges import InvalidOffsetError, Span
from char_ranges.spans import Match, SpanMapper, find_spans


def test_byte_position_walks_forward():
    mapper = SpanMapper("Hello 👋 World 🌏")
    assert mapper.byte_position(0) == 0
    assert mapper.byte_position(6) == 6
    assert mapper.byte_position(7) == 10
    assert mapper.byte_position(8) == 11
    assert mapper.byte_position(15) == 21


def test_byte_position_rewinds_for_earlier_index():
    mapper = SpanMapper("🗻12∈45🌏")
    assert mapper.byte_position(4) == 9
    assert mapper.byte_position(1) == 4
    assert mapper.byte_position(7) == 15


def test_to_byte_span_with_offset():
    mapper = SpanMapper("World 🌏", offset=11)
    assert mapper.to_byte_span(0, 1) == Span(11, 12)
    assert mapper.to_byte_span(6, 7) == Span(17, 21)


def test_mapper_rejects_out_of_range():
    mapper = SpanMapper("abc")
    with pytest.raises(InvalidOffsetError):
        mapper.byte_position(4)
    with pytest.raises(InvalidOffsetError):
        mapper.to_byte_span(2, 1)
    with pytest.raises(InvalidOffsetError):
        SpanMapper("abc", offset=-1)


def test_find_spans_reports_byte_spans():
    text = "Contact ∈lice@example.com or 🌏bob@example.org"
    matches = find_spans(r"\S+@\S+", text)
    assert [m.value for m in matches] == ["∈lice@example.com", "🌏bob@example.org"]
    data = text.encode("utf-8")
    for match in matches:
        assert data[match.span.to_slice()].decode("utf-8") == match.value
    assert matches[0] == Match(span=Span(8, 27), value="∈lice@example.com")


def test_find_spans_with_offset_and_zero_width_matches():
    matches = find_spans(r"\b", "ñ ñ", offset=3)
    assert [m.span for m in matches] == [Span(3, 3), Span(5, 5), Span(6, 6), Span(8, 8)]
