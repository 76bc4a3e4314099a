"""Fuzz tests for the parser.

The parser must return envelopes for any input and never raise.
"""

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from jsonrpc_envelope.protocol.envelope import Envelope
from jsonrpc_envelope.protocol.parser import parse, parse_batch, parse_batch_reply, parse_reply

json_like = st.recursive(
    st.one_of(
        st.none(),
        st.booleans(),
        st.integers(),
        st.floats(allow_nan=False, allow_infinity=False),
        st.text(max_size=20),
    ),
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(
            st.one_of(st.sampled_from(["jsonrpc", "method", "params", "result", "error", "id", "code", "message"]), st.text(max_size=5)),
            children,
            max_size=6,
        ),
    ),
    max_leaves=25,
)


def assert_envelopes(result):
    if isinstance(result, list):
        assert all(isinstance(env, Envelope) for env in result)
    else:
        assert isinstance(result, Envelope)


@pytest.mark.fuzz
class TestParserFuzzing:
    """Fuzz tests for parse / parse_batch / parse_reply."""

    @given(st.text(max_size=500))
    @settings(max_examples=200, deadline=5000)
    def test_fuzz_001_random_text(self, text: str):
        """FUZZ-001: Random text never raises."""
        assert_envelopes(parse(text))
        assert_envelopes(parse_batch(text))
        assert_envelopes(parse_reply(text))
        assert_envelopes(parse_batch_reply(text))

    @given(st.binary(max_size=300))
    @settings(max_examples=100, deadline=5000)
    def test_fuzz_002_random_bytes(self, data: bytes):
        """FUZZ-002: Random bytes never raise."""
        assert_envelopes(parse(data))
        assert_envelopes(parse_batch(data))

    @given(json_like)
    @settings(max_examples=200, deadline=5000)
    def test_fuzz_003_structured_json(self, value):
        """FUZZ-003: Arbitrary JSON documents classify without raising."""
        text = json.dumps(value)
        assert_envelopes(parse(text))
        assert_envelopes(parse_batch_reply(text))

    @given(st.lists(json_like, max_size=6))
    @settings(max_examples=100, deadline=5000)
    def test_fuzz_004_batch_length_preserved(self, members):
        """FUZZ-004: A decodable array yields one envelope per member."""
        result = parse_batch(json.dumps(members))
        assert len(result) == len(members)
