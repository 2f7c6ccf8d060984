from datetime import datetime, timezone
from ipaddress import IPv4Address, IPv6Address

import pytest

from torserde import BadDiscriminantError, Deserializer, OutOfDataError, Serializer, TooLongError
from torserde.compound_encoding.collection import ListCodec, PrefixWidth, decode_collection, encode_collection
from torserde.encoding.cstring import CStringCodec
from torserde.encoding.ip_address import IPAddressCodec
from torserde.encoding.timestamp import TimestampCodec
from torserde.encoding.uint import U8, U16


def test_list_with_u8_prefix() -> None:
    codec = ListCodec.u8_prefixed(U16)
    values = [0, 23, 86, 35, 96, 83]
    assert list(codec.to_bytes(values)) == [6, 0, 0, 0, 23, 0, 86, 0, 35, 0, 96, 0, 83]
    assert codec.from_bytes(bytes([6, 0, 0, 0, 23, 0, 86, 0, 35, 0, 96, 0, 83])) == values


@pytest.mark.parametrize('width, prefix', [
    (PrefixWidth.U8, b'\x02'),
    (PrefixWidth.U16, b'\x00\x02'),
    (PrefixWidth.U32, b'\x00\x00\x00\x02'),
])
def test_prefix_widths(width: PrefixWidth, prefix: bytes) -> None:
    codec = ListCodec(U8, width)
    data = codec.to_bytes([7, 8])
    assert data == prefix + b'\x07\x08'
    assert codec.measure_size([7, 8]) == len(data)
    assert codec.from_bytes(data) == [7, 8]


def test_named_constructors() -> None:
    assert ListCodec.u8_prefixed(U8).width is PrefixWidth.U8
    assert ListCodec.u16_prefixed(U8).width is PrefixWidth.U16
    assert ListCodec.u32_prefixed(U8).width is PrefixWidth.U32
    assert ListCodec(U8, 2).width is PrefixWidth.U16


@pytest.mark.parametrize('width', [0, 3, 8])
def test_invalid_width_fails_at_construction(width: int) -> None:
    with pytest.raises(ValueError):
        ListCodec(U8, width)


def test_empty_list() -> None:
    codec = ListCodec.u16_prefixed(CStringCodec())
    assert codec.to_bytes([]) == b'\x00\x00'
    assert codec.from_bytes(b'\x00\x00') == []


def test_count_overflow_is_rejected() -> None:
    codec = ListCodec.u8_prefixed(U8)
    se = Serializer.build_bytes_serializer()
    with pytest.raises(TooLongError):
        codec.encode(se, [0] * 256)
    assert se.cur_pos() == 0
    # the maximum still fits
    assert len(codec.to_bytes([0] * 255)) == 256


def test_variable_size_elements() -> None:
    codec = ListCodec.u8_prefixed(CStringCodec())
    values = ['tor', '', 'onion']
    se = Serializer.build_bytes_serializer()
    written = codec.encode(se, values)
    assert written == codec.measure_size(values) == 1 + 4 + 1 + 6
    assert codec.from_bytes(se.finalize()) == values


def test_nested_lists() -> None:
    codec = ListCodec.u8_prefixed(ListCodec.u16_prefixed(U16))
    values = [[1, 2], [], [3]]
    data = codec.to_bytes(values)
    assert data == bytes([3, 0, 2, 0, 1, 0, 2, 0, 0, 0, 1, 0, 3])
    assert codec.measure_size(values) == len(data)
    assert codec.from_bytes(data) == values


def test_list_of_addresses_and_timestamps() -> None:
    addresses = ListCodec.u8_prefixed(IPAddressCodec())
    values = [IPv4Address('10.0.0.1'), IPv6Address('2001:db8::1')]
    assert addresses.from_bytes(addresses.to_bytes(values)) == values

    timestamps = ListCodec.u8_prefixed(TimestampCodec())
    times = [datetime(2015, 5, 15, tzinfo=timezone.utc), datetime(2021, 1, 1, tzinfo=timezone.utc)]
    assert timestamps.from_bytes(timestamps.to_bytes(times)) == times


def test_element_error_aborts_decode() -> None:
    codec = ListCodec.u8_prefixed(IPAddressCodec())
    data = bytes([2, 4, 4, 1, 2, 3, 4, 9, 4, 1, 2, 3, 4])
    with pytest.raises(BadDiscriminantError):
        codec.from_bytes(data)


def test_truncated_list() -> None:
    data = bytes([3, 0, 1, 0, 2])
    with pytest.raises(OutOfDataError):
        ListCodec.u8_prefixed(U16).from_bytes(data)


def test_truncated_prefix() -> None:
    with pytest.raises(OutOfDataError):
        ListCodec.u32_prefixed(U16).from_bytes(b'\x00\x00')


def test_functions_with_other_builders() -> None:
    se = Serializer.build_bytes_serializer()
    encode_collection(se, (1, 2, 3), U8.encode, width=PrefixWidth.U16)
    de = Deserializer.build_bytes_deserializer(se.finalize())
    assert decode_collection(de, U8.decode, frozenset, width=PrefixWidth.U16) == frozenset({1, 2, 3})
    de.finalize()
