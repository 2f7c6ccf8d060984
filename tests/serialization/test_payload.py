from ipaddress import IPv4Address

import pytest
from structlog.testing import capture_logs

from torserde import DigestMismatchError, DiscardedMessageError, InvalidLengthError, OutOfDataError
from torserde.compound_encoding.collection import ListCodec
from torserde.compound_encoding.versions import FRAMED_VERSIONS, VERSIONS
from torserde.encoding.ip_address import IPAddressCodec
from torserde.encoding.uint import U16
from torserde.payload import check_digest, decode_payload, encode_payload, measure_payload


def test_encode_payload() -> None:
    codec = ListCodec.u8_prefixed(U16)
    values = [0, 23, 86, 35, 96, 83]
    data = encode_payload(codec, values)
    assert data == bytes([6, 0, 0, 0, 23, 0, 86, 0, 35, 0, 96, 0, 83])
    assert measure_payload(codec, values) == len(data)


def test_decode_payload() -> None:
    assert decode_payload(VERSIONS, bytes([0, 4, 0, 3, 0, 4])) == [3, 4]


def test_decode_framed_payload() -> None:
    data = encode_payload(FRAMED_VERSIONS, [3, 4, 5])
    assert decode_payload(FRAMED_VERSIONS, data, payload_length=3) == [3, 4, 5]


def test_decode_framed_payload_without_length() -> None:
    assert decode_payload(FRAMED_VERSIONS, bytes([0, 3, 0, 4])) == [3, 4]
    with pytest.raises(InvalidLengthError):
        decode_payload(FRAMED_VERSIONS, bytes([0, 3, 0, 4, 0]))


def test_payload_count_below_data() -> None:
    with capture_logs() as log_list:
        with pytest.raises(InvalidLengthError):
            decode_payload(FRAMED_VERSIONS, bytes([0, 3, 0, 4]), payload_length=1)
    assert [log['event'] for log in log_list] == ['trailing data after payload']
    assert log_list[0]['trailing'] == 2


def test_payload_count_beyond_data() -> None:
    with pytest.raises(OutOfDataError):
        decode_payload(FRAMED_VERSIONS, bytes([0, 3, 0, 4]), payload_length=3)


def test_trailing_data() -> None:
    with capture_logs() as log_list:
        with pytest.raises(InvalidLengthError):
            decode_payload(U16, b'\x00\x01\x02')
    assert [log['event'] for log in log_list] == ['trailing data after payload']


def test_truncated_payload() -> None:
    with pytest.raises(OutOfDataError):
        decode_payload(VERSIONS, bytes([0, 4, 0, 3]))


def test_bad_discriminant_discards_payload() -> None:
    codec = ListCodec.u8_prefixed(IPAddressCodec())
    data = bytearray(encode_payload(codec, [IPv4Address('10.0.0.1'), IPv4Address('10.0.0.2')]))
    data[7] = 9  # type of the second address
    with capture_logs() as log_list:
        with pytest.raises(DiscardedMessageError) as e:
            decode_payload(codec, data)
    assert e.value.__cause__.discriminant == 9  # type: ignore[union-attr]
    assert log_list[0]['event'] == 'discarding payload'
    assert log_list[0]['discriminant'] == 9
    assert log_list[0]['log_level'] == 'debug'


def test_check_digest() -> None:
    check_digest(b'\x01\x02', b'\x01\x02')
    with pytest.raises(DigestMismatchError) as e:
        check_digest(b'\x01\x02', b'\x01\x03')
    assert e.value.predicted == b'\x01\x02'
    assert e.value.actual == b'\x01\x03'
