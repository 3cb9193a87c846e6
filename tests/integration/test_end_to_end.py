"""End-to-end integration tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from cborvariant import (
    CborValue,
    Float,
    Map,
    Text,
    UnsupportedFeatureError,
    decode,
    decode_from,
    encode,
    encode_onto,
    encoded_size,
    from_python,
    iter_decode,
    read_file,
    to_debug_string,
)

# RFC 7049 Appendix A examples within the supported subset. Each encoding is
# the shortest form, which is also what the encoder produces.
RFC_EXAMPLES: list[tuple[Any, str]] = [
    (0, "00"),
    (1, "01"),
    (10, "0a"),
    (23, "17"),
    (24, "1818"),
    (25, "1819"),
    (100, "1864"),
    (1000, "1903e8"),
    (1000000, "1a000f4240"),
    (-1, "20"),
    (-10, "29"),
    (-100, "3863"),
    (-1000, "3903e7"),
    (1.1, "fb3ff199999999999a"),
    (1.0e300, "fb7e37e43c8800759c"),
    (-4.1, "fbc010666666666666"),
    (None, "f6"),
    (b"", "40"),
    (b"\x01\x02\x03\x04", "4401020304"),
    ("", "60"),
    ("a", "6161"),
    ("IETF", "6449455446"),
    ('"\\', "62225c"),
    ("ü", "62c3bc"),
    ("水", "63e6b0b4"),
    ([], "80"),
    ([1, 2, 3], "83010203"),
    ([1, [2, 3], [4, 5]], "8301820203820405"),
    (list(range(1, 26)), "98190102030405060708090a0b0c0d0e0f101112131415161718181819"),
    ({}, "a0"),
    ({"a": 1, "b": [2, 3]}, "a26161016162820203"),
    (["a", {"b": "c"}], "826161a161626163"),
    (
        {"a": "A", "b": "B", "c": "C", "d": "D", "e": "E"},
        "a56161614161626142616361436164614461656145",
    ),
]

# Examples that only decode: single-precision floats and tagged items.
RFC_DECODE_ONLY: list[tuple[str, Any]] = [
    ("fa47c35000", 100000.0),
    ("fa7f7fffff", 3.4028234663852886e38),
    ("c074323031332d30332d32315432303a30343a30305a", "2013-03-21T20:04:00Z"),
    ("c11a514b67b0", 1363896240),
    ("c1fb41d452d9ec200000", 1363896240.5),
    ("d74401020304", b"\x01\x02\x03\x04"),
    ("d818456449455446", b"dIETF"),
    ("d82076687474703a2f2f7777772e6578616d706c652e636f6d", "http://www.example.com"),
]

# Valid CBOR outside the supported subset.
RFC_UNSUPPORTED = [
    "1b000000e8d4a51000",  # 1000000000000
    "3bffffffffffffffff",  # -18446744073709551616
    "f4",  # false
    "f5",  # true
    "f7",  # undefined
    "f90000",  # half-precision 0.0
    "5f42010243030405ff",  # indefinite byte string
    "9fff",  # indefinite array
    "bf61610161629f0203ffff",  # indefinite map
]


class TestRfcExamples:
    """Test against the RFC 7049 examples."""

    @pytest.mark.parametrize(("obj", "hex_encoding"), RFC_EXAMPLES)
    def test_encode(self, obj: Any, hex_encoding: str) -> None:
        """Test encoding matches the RFC byte for byte."""
        assert encode(from_python(obj)).hex() == hex_encoding

    @pytest.mark.parametrize(("obj", "hex_encoding"), RFC_EXAMPLES)
    def test_decode(self, obj: Any, hex_encoding: str) -> None:
        """Test decoding gives back the RFC value."""
        assert decode(bytes.fromhex(hex_encoding)).to_python() == obj

    @pytest.mark.parametrize(("hex_encoding", "obj"), RFC_DECODE_ONLY)
    def test_decode_only(self, hex_encoding: str, obj: Any) -> None:
        """Test widened floats and tag-wrapped items."""
        assert decode(bytes.fromhex(hex_encoding)).to_python() == obj

    @pytest.mark.parametrize("hex_encoding", RFC_UNSUPPORTED)
    def test_unsupported(self, hex_encoding: str) -> None:
        """Test items outside the subset are refused."""
        with pytest.raises(UnsupportedFeatureError):
            decode(bytes.fromhex(hex_encoding))

    def test_single_float_reencoded_as_double(self) -> None:
        """Test precision widening is one-way."""
        value = decode(bytes.fromhex("fa47c35000"))
        assert value == Float(value=100000.0)
        assert encode(value).hex() == "fb40f86a0000000000"


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_status_report_workflow(self, tmp_path: Path) -> None:
        """Test building, saving, loading and inspecting a document."""
        # 1. Create a document from plain Python data
        report = {
            "vehicle": "auv-3",
            "seq": 4471,
            "depth_m": 212.5,
            "battery": [98, 97, 95, -1],
            "payload": b"\xde\xad\xbe\xef",
            "fault": None,
        }
        value = from_python(report)

        # 2. Check encoded size
        size = encoded_size(value)

        # 3. Encode and store
        encoded = encode(value)
        assert len(encoded) == size
        path = tmp_path / "report.cbor"
        path.write_bytes(encoded)

        # 4. Load and decode
        decoded = decode(read_file(path))
        assert decoded == value
        assert decoded.to_python() == report

        # 5. Inspect
        rendering = to_debug_string(decoded)
        assert rendering.startswith('{"vehicle": "auv-3", "seq": 4471, "depth_m": 212.5')
        assert "bytes([0xde, 0xad, 0xbe, 0xef])" in rendering

    def test_stream_workflow(self) -> None:
        """Test writing a log of records and reading it back with a cursor."""
        records = [from_python({"seq": seq, "value": seq * 0.5}) for seq in range(50)]

        buffer = bytearray()
        for record in records:
            encode_onto(record, buffer)

        # Walk with explicit offsets
        offset = 0
        seen: list[CborValue] = []
        while offset < len(buffer):
            record, offset = decode_from(buffer, offset)
            seen.append(record)
        assert seen == records

        # Or iterate
        assert list(iter_decode(buffer)) == records

    def test_reencode_is_stable(self, sample_document: Map) -> None:
        """Test decode(encode(x)) re-encodes to identical bytes."""
        first = encode(sample_document)
        assert encode(decode(first)) == first

    def test_bytes_keys_come_back_as_text(self) -> None:
        """Test byte-string keys are written as text keys."""
        value = from_python({b"key": 1})
        decoded = decode(encode(value))
        assert isinstance(decoded, Map)
        assert list(decoded.entries) == [Text(value="key")]
