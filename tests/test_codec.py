# SPDX-License-Identifier: MIT
"""Tests for :class:`Hashids` encode and decode."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from idmask import (
    ConfigurationError,
    DecodeOverflowError,
    Hashids,
    HashidsConfig,
    InvalidHashidError,
)
from idmask.constants import INT32_MAX, INT64_MAX, UINT64_MAX

SALT = "this is my salt"


@pytest.mark.parametrize(
    ("numbers", "expected"),
    [
        ((1,), "NV"),
        ((22,), "K4"),
        ((333,), "OqM"),
        ((9999,), "kQVg"),
        ((12345,), "NkK9"),
        ((1, 2, 3), "laHquq"),
        ((2, 4, 6), "44uotN"),
        ((99, 25), "97Jun"),
        ((1337, 42, 314), "7xKhrUxm"),
        ((683, 94108, 123, 5), "aBMswoO2UB3Sj"),
        ((2147483648,), "21OjjRK"),
        ((4294967296,), "D54yen6"),
        ((666555444333222,), "KVO9yy1oO5j"),
        ((INT64_MAX,), "jvNx4BjM5KYjv"),
    ],
)
def test_reference_vectors(salted: Hashids, numbers, expected) -> None:
    assert salted.encode(*numbers) == expected
    assert salted.decode(expected) == numbers


def test_reference_vector_without_salt(codec: Hashids) -> None:
    assert codec.encode(1, 2, 3) == "o2fXhV"


def test_reference_vectors_with_min_length() -> None:
    assert Hashids(SALT, 8).encode(1) == "gB0NV05e"
    assert Hashids(SALT, 18).encode(1) == "aJEDngB0NV05ev1WwP"
    assert Hashids(SALT, 18).decode("aJEDngB0NV05ev1WwP") == (1,)


def test_reference_vector_with_custom_alphabet() -> None:
    codec = Hashids(SALT, alphabet="ABCDEFGhijklmn34567890-:")
    assert codec.encode(1, 2, 3, 4, 5) == "6nhmFDikA0"


def test_encode_accepts_single_iterable(salted: Hashids) -> None:
    assert salted.encode([1, 2, 3]) == "laHquq"
    assert salted.encode((n for n in (1, 2, 3))) == "laHquq"


def test_encode_empty_input(codec: Hashids) -> None:
    assert codec.encode() == ""
    assert codec.encode([]) == ""


@pytest.mark.parametrize(
    "numbers", [(-1,), (1, -1), (UINT64_MAX + 1,), (5, 2**70, 6)]
)
def test_encode_rejects_out_of_range(codec: Hashids, numbers) -> None:
    assert codec.encode(*numbers) == ""


def test_encode_accepts_full_unsigned_range(codec: Hashids) -> None:
    hashid = codec.encode(0, UINT64_MAX)
    assert codec.decode(hashid) == (0, UINT64_MAX)


@pytest.mark.parametrize("value", ["1", b"1", 1.5, True, None])
def test_encode_rejects_non_integers(codec: Hashids, value) -> None:
    with pytest.raises(TypeError):
        codec.encode(value)


def test_decode_blank_input(codec: Hashids) -> None:
    assert codec.decode("") == ()
    assert codec.decode("   ") == ()


def test_decode_rejects_foreign_characters(salted: Hashids) -> None:
    assert salted.decode("NkK#") == ()
    assert salted.decode("Nk K9") == ()


def test_decode_rejects_guard_only_input(salted: Hashids) -> None:
    guard = salted.guards[0]
    assert salted.decode(guard) == ()
    assert salted.decode(guard * 2) == ()


def test_decode_rejects_lottery_only_input(salted: Hashids) -> None:
    assert salted.decode("N") == ()


def test_decode_rejects_other_salt() -> None:
    hashid = Hashids(SALT).encode(1, 2, 3)
    other = Hashids("another salt")
    result = other.decode(hashid)
    assert result == () or other.encode(result) == hashid


def test_decode_strict_distinguishes_invalid(salted: Hashids) -> None:
    assert salted.decode_strict("") == ()
    assert salted.decode_strict("laHquq") == (1, 2, 3)
    with pytest.raises(InvalidHashidError) as excinfo:
        salted.decode_strict("laHquQ")
    assert excinfo.value.hashid == "laHquQ"
    with pytest.raises(InvalidHashidError):
        salted.decode_strict("  ")


def test_decode_int32_checks_width(codec: Hashids) -> None:
    assert codec.decode_int32(codec.encode(INT32_MAX)) == (INT32_MAX,)
    with pytest.raises(DecodeOverflowError) as excinfo:
        codec.decode_int32(codec.encode(1, INT32_MAX + 1))
    assert excinfo.value.bits == 32
    assert isinstance(excinfo.value, OverflowError)


def test_decode_int64_checks_width(codec: Hashids) -> None:
    assert codec.decode_int64(codec.encode(INT64_MAX)) == (INT64_MAX,)
    with pytest.raises(DecodeOverflowError):
        codec.decode_int64(codec.encode(UINT64_MAX))


def test_decode_width_helpers_keep_invalid_sentinel(codec: Hashids) -> None:
    assert codec.decode_int32("not-a-hashid") == ()
    assert codec.decode_int64("") == ()


def test_min_length_pads_exactly() -> None:
    codec = Hashids(SALT, 30)
    for numbers in [(0,), (1, 2, 3), (UINT64_MAX,)]:
        hashid = codec.encode(*numbers)
        assert len(hashid) == 30
        assert codec.decode(hashid) == numbers


def test_min_length_never_truncates_long_hashids() -> None:
    numbers = tuple(range(1000, 1020))
    unpadded = Hashids(SALT).encode(*numbers)
    padded = Hashids(SALT, 5).encode(*numbers)
    assert padded == unpadded
    assert len(padded) > 5


def test_multiple_numbers_use_separators(salted: Hashids) -> None:
    hashid = salted.encode(1, 2, 3)
    assert sum(char in salted.separators for char in hashid) == 2


def test_identical_configuration_identical_output() -> None:
    first = Hashids(SALT, 10)
    second = Hashids(SALT, 10)
    assert first.encode(7, 8, 9) == second.encode(7, 8, 9)


def test_different_salt_changes_output() -> None:
    assert Hashids("one").encode(42) != Hashids("two").encode(42)


def test_information_separator_salt_still_shuffles() -> None:
    assert Hashids(salt="\x1c\x1d").alphabet != Hashids().alphabet
    assert Hashids(salt=" \t").alphabet == Hashids().alphabet


@pytest.mark.parametrize(
    "kwargs",
    [
        {"alphabet": "abc"},
        {"alphabet": ""},
        {"alphabet": "                "},
        {"alphabet": None},
        {"min_length": -1},
        {"salt": None},
    ],
)
def test_invalid_configuration(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        Hashids(**kwargs)


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Hashids(alphabet="abc")


def test_from_config_matches_constructor() -> None:
    config = HashidsConfig(salt=SALT, min_length=8)
    assert Hashids.from_config(config).encode(1) == "gB0NV05e"
    assert Hashids.from_config(config).config == config


def test_instances_are_read_only(salted: Hashids) -> None:
    with pytest.raises(AttributeError):
        salted.alphabet = "abc"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        salted.extra = 1  # type: ignore[attr-defined]


def test_repr_hides_salt(salted: Hashids) -> None:
    assert SALT not in repr(salted)
    assert "min_length=0" in repr(salted)


def test_concurrent_calls_share_one_instance(salted: Hashids) -> None:
    inputs = [(n, n * 7, n * 13) for n in range(500)]
    expected = [salted.encode(*numbers) for numbers in inputs]

    def round_trip(numbers):
        hashid = salted.encode(*numbers)
        return hashid, salted.decode(hashid)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(round_trip, inputs))

    assert [hashid for hashid, _ in results] == expected
    assert [numbers for _, numbers in results] == inputs
