from hypothesis import given, strategies as st

from char_ranges import Span, char_ranges, char_ranges_offset

texts = st.text(max_size=48)


@given(texts)
def test_forward_reconstructs_text_with_contiguous_ranges(text: str) -> None:
    data = text.encode("utf-8", errors="surrogatepass")
    items = list(char_ranges(text))
    assert "".join(char for _span, char in items) == text
    position = 0
    for span, char in items:
        assert span.start == position
        assert data[span.to_slice()] == char.encode("utf-8", errors="surrogatepass")
        position = span.end
    assert position == len(data)


@given(texts)
def test_backward_is_reversed_forward(text: str) -> None:
    forward = list(char_ranges(text))
    backward = list(reversed(char_ranges(text)))
    assert backward[::-1] == forward


@given(texts, st.lists(st.booleans(), max_size=64))
def test_any_interleaving_covers_each_range_once(text: str, from_front: list[bool]) -> None:
    chars = char_ranges(text)
    front, back = [], []
    for step in from_front:
        item = chars.next_char() if step else chars.next_back()
        if item is None:
            break
        (front if step else back).append(item)
    front.extend(chars)
    assert front + back[::-1] == list(char_ranges(text))


@given(texts, st.integers(min_value=0, max_value=60))
def test_nth_matches_repeated_next(text: str, k: int) -> None:
    naive = char_ranges(text)
    expected = None
    for _ in range(k + 1):
        expected = naive.next_char()
        if expected is None:
            break
    fast = char_ranges(text)
    assert fast.nth(k) == expected
    assert fast.as_str() == naive.as_str()


@given(texts, st.integers(min_value=0, max_value=60))
def test_nth_back_matches_repeated_next_back(text: str, k: int) -> None:
    naive = char_ranges(text)
    expected = None
    for _ in range(k + 1):
        expected = naive.next_back()
        if expected is None:
            break
    fast = char_ranges(text)
    assert fast.nth_back(k) == expected
    assert fast.as_str() == naive.as_str()


@given(texts)
def test_last_matches_final_forward_item(text: str) -> None:
    items = list(char_ranges(text))
    assert char_ranges(text).last() == (items[-1] if items else None)


@given(texts)
def test_count_matches_length(text: str) -> None:
    chars = char_ranges(text)
    lower, upper = chars.size_hint()
    assert lower <= len(text) <= upper
    assert chars.count() == len(text)


@given(texts, st.integers(min_value=0, max_value=10_000))
def test_offset_shifts_every_range(text: str, offset: int) -> None:
    shifted = list(char_ranges_offset(text, offset))
    expected = [(Span(span.start + offset, span.end + offset), char) for span, char in char_ranges(text)]
    assert shifted == expected
