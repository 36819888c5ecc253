import pytest

from arcanus.random_source import (
    FastRandomSource,
    RandomSource,
    SecureRandomSource,
    build_random_source,
)


@pytest.mark.parametrize("source", [SecureRandomSource(), FastRandomSource()])
@pytest.mark.parametrize("bound", [1, 5, 9, 21])
def test_next_index_within_bound(source, bound):
    draws = {source.next_index(bound) for _ in range(500)}
    assert draws <= set(range(bound))


@pytest.mark.parametrize("source", [SecureRandomSource(), FastRandomSource()])
@pytest.mark.parametrize("bound", [0, -3])
def test_next_index_rejects_non_positive_bound(source, bound):
    with pytest.raises(ValueError):
        source.next_index(bound)


def test_fast_source_covers_whole_range():
    source = FastRandomSource(seed=1)
    assert {source.next_index(6) for _ in range(1000)} == set(range(6))


def test_fast_source_seed_is_reproducible():
    first = FastRandomSource(seed=42)
    second = FastRandomSource(seed=42)
    assert [first.next_index(21) for _ in range(50)] == [
        second.next_index(21) for _ in range(50)
    ]


def test_build_random_source_variants():
    assert isinstance(build_random_source("secure"), SecureRandomSource)
    assert isinstance(build_random_source("fast", seed=3), FastRandomSource)
    assert isinstance(build_random_source(), RandomSource)


def test_build_random_source_unknown_kind():
    with pytest.raises(ValueError):
        build_random_source("quantum")  # type: ignore[arg-type]
