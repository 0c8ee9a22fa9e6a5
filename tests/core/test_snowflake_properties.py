"""Property tests for Snowflake laws.

Every law is stated against the raw 64-bit integer the snowflake wraps.
"""

from hypothesis import given
from hypothesis import strategies as st

from flakeid import Snowflake, coerce_snowflake, decode, parse_snowflake

uint64 = st.integers(min_value=0, max_value=2**64 - 1)

NON_DIGIT = st.characters().filter(lambda c: c not in "0123456789" and not c.isspace())


@st.composite
def malformed_text(draw):
    """Text with at least one character that is neither an ASCII digit nor whitespace."""
    prefix = draw(st.text(alphabet="0123456789", max_size=5))
    bad = draw(NON_DIGIT)
    suffix = draw(st.text(max_size=5))
    return prefix + bad + suffix


@given(uint64)
def test_integer_identity(v):
    assert int(Snowflake(v)) == v
    assert Snowflake(v).value == v


@given(uint64)
def test_text_round_trip(v):
    text = Snowflake(v).to_json()

    assert text == str(v)
    assert Snowflake(text) == v
    assert parse_snowflake(text) == v


@given(uint64)
def test_decimal_text_parses(v):
    assert Snowflake(str(v)).value == v
    assert coerce_snowflake(str(v)) == v


@given(malformed_text())
def test_malformed_text_is_empty(text):
    assert Snowflake(text).is_empty()
    assert coerce_snowflake(text) == 0


@given(st.integers(min_value=2**64, max_value=2**80))
def test_out_of_range_text_is_empty(v):
    assert Snowflake(str(v)).is_empty()


@given(uint64)
def test_bit_fields(v):
    sf = Snowflake(v)

    assert sf.worker_id == (v & 0x3E0000) >> 17
    assert sf.process_id == (v & 0x1F000) >> 12
    assert sf.increment == v & 0xFFF
    assert 0 <= sf.worker_id < 32
    assert 0 <= sf.process_id < 32
    assert 0 <= sf.increment < 4096


@given(uint64)
def test_creation_time(v):
    assert Snowflake(v).creation_time() == ((v >> 22) + 1420070400000) / 1000.0


@given(uint64)
def test_decode_matches_properties(v):
    parts = decode(v)
    sf = Snowflake(v)

    assert parts.timestamp == sf.timestamp
    assert parts.worker_id == sf.worker_id
    assert parts.process_id == sf.process_id
    assert parts.increment == sf.increment


@given(uint64, uint64)
def test_order_matches_integers(a, b):
    assert (Snowflake(a) < Snowflake(b)) == (a < b)
    assert (Snowflake(a) <= Snowflake(b)) == (a <= b)
    assert (Snowflake(a) == Snowflake(b)) == (a == b)


@given(uint64, uint64)
def test_newer_timestamp_sorts_later(a, b):
    sa, sb = Snowflake(a), Snowflake(b)
    if sa.timestamp < sb.timestamp:
        assert sa < sb


@given(uint64)
def test_hash_matches_integer(v):
    assert hash(Snowflake(v)) == hash(v)
