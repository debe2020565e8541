from hypothesis import given
from hypothesis import strategies as st

from graphpart.definitions import SEED, fnv0a, fnv1a, fnv2a


def _chain(data, start=SEED):
    value = start
    for byte in data:
        value = fnv0a(byte, value)
    return value


def test_fnv0a_zero_byte_matches_reference():
    assert fnv0a(0) == 0x050C5D1F


def test_fnv0a_letter_a_matches_reference():
    assert fnv0a(ord("a")) == 0xE40C292C


def test_fnv_chain_foobar_matches_reference():
    assert _chain(b"foobar") == 0xBF9CF968


def test_default_hash_is_seed():
    assert fnv0a(17) == fnv0a(17, SEED)
    assert fnv1a(17) == fnv1a(17, SEED)
    assert fnv2a(17) == fnv2a(17, SEED)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_fnv1a_folds_little_endian_bytes(value):
    assert fnv1a(value) == _chain(value.to_bytes(4, "little"))


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_fnv2a_folds_little_endian_bytes(value):
    assert fnv2a(value) == _chain(value.to_bytes(8, "little"))


@given(
    st.integers(min_value=0, max_value=2**64 - 1),
    st.integers(min_value=0, max_value=2**32 - 1),
)
def test_hashes_stay_in_32_bits(value, seed):
    assert 0 <= fnv2a(value, seed) < 2**32
    assert 0 <= fnv1a(value, seed) < 2**32


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_fnv1a_truncates_to_32_bits(value):
    assert fnv1a(value + 2**32) == fnv1a(value)


def test_fnv1a_matches_known_string_prefix():
    assert fnv1a(int.from_bytes(b"foob", "little")) == _chain(b"foob")