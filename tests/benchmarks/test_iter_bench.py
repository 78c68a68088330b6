import pytest

from char_ranges import char_ranges

TEXT = "Hello 🗻12∈45🌏 World\n" * 2000
DATA = TEXT.encode("utf-8")


@pytest.mark.bench
def test_forward_throughput(benchmark):
    benchmark(lambda: sum(1 for _ in char_ranges(DATA)))


@pytest.mark.bench
def test_backward_throughput(benchmark):
    benchmark(lambda: sum(1 for _ in reversed(char_ranges(DATA))))


@pytest.mark.bench
def test_nth_skip_throughput(benchmark):
    benchmark(lambda: char_ranges(DATA).nth(len(TEXT) - 1))
