from datetime import datetime, timedelta, timezone

import pytest

from torserde import Deserializer, OutOfDataError, Serializer
from torserde.encoding.timestamp import TimestampCodec, decode_timestamp, encode_timestamp, timestamp_to_wire


def test_timestamp() -> None:
    time = datetime.fromtimestamp(1431648000, timezone.utc)
    codec = TimestampCodec()
    assert list(codec.to_bytes(time)) == [85, 85, 55, 0]
    assert codec.from_bytes(bytes([85, 85, 55, 0])) == time


def test_decode_in_explicit_timezone() -> None:
    tz = timezone(timedelta(hours=-3))
    de = Deserializer.build_bytes_deserializer(bytes([85, 85, 55, 0]))
    decoded = decode_timestamp(de, tz=tz)
    assert decoded.tzinfo is tz
    assert decoded.hour == 21
    assert decoded == datetime(2015, 5, 15, tzinfo=timezone.utc)


def test_decoded_instant_does_not_depend_on_timezone() -> None:
    data = TimestampCodec().to_bytes(datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
    utc = TimestampCodec().from_bytes(data)
    other = TimestampCodec(timezone(timedelta(hours=9))).from_bytes(data)
    assert utc == other


def test_sub_second_precision_is_dropped() -> None:
    time = datetime(2020, 1, 2, 3, 4, 5, 999999, tzinfo=timezone.utc)
    codec = TimestampCodec()
    assert codec.from_bytes(codec.to_bytes(time)) == time.replace(microsecond=0)


def test_naive_datetime_is_local_time() -> None:
    naive = datetime(2020, 1, 2, 3, 4, 5)
    assert timestamp_to_wire(naive) == int(naive.timestamp())


def test_naive_datetime_decodes_as_aware() -> None:
    # encoding reads a naive value as local time, decoding always yields an aware value
    naive = datetime(2020, 1, 2, 3, 4, 5)
    codec = TimestampCodec()
    decoded = codec.from_bytes(codec.to_bytes(naive))
    assert decoded.tzinfo is timezone.utc
    assert decoded != naive
    assert decoded == naive.astimezone()
    assert decoded.replace(tzinfo=None) == naive.astimezone(timezone.utc).replace(tzinfo=None)


def test_out_of_range_wraps() -> None:
    after_2106 = datetime.fromtimestamp((1 << 32) + 10, timezone.utc)
    assert timestamp_to_wire(after_2106) == 10
    before_epoch = datetime.fromtimestamp(-1, timezone.utc)
    assert timestamp_to_wire(before_epoch) == (1 << 32) - 1


def test_size() -> None:
    se = Serializer.build_bytes_serializer()
    time = datetime(2030, 6, 1, tzinfo=timezone.utc)
    codec = TimestampCodec()
    assert codec.encode(se, time) == codec.measure_size(time) == 4


def test_truncated_input() -> None:
    se = Serializer.build_bytes_serializer()
    encode_timestamp(se, datetime(2030, 6, 1, tzinfo=timezone.utc))
    data = bytes(se.finalize())
    with pytest.raises(OutOfDataError):
        decode_timestamp(Deserializer.build_bytes_deserializer(data[:3]))
