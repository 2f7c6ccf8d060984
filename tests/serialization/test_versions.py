import pytest

from torserde import Deserializer, InvalidLengthError, OutOfDataError, SerializationError, Serializer, TooLongError
from torserde.compound_encoding.versions import (
    FRAMED_VERSIONS,
    VERSIONS,
    VersionsListCodec,
    decode_versions,
    decode_versions_framed,
    encode_versions,
)


def test_canonical_form() -> None:
    assert list(VERSIONS.to_bytes([3, 4])) == [0, 4, 0, 3, 0, 4]
    assert VERSIONS.from_bytes(bytes([0, 4, 0, 3, 0, 4])) == [3, 4]


def test_canonical_size_includes_prefix() -> None:
    se = Serializer.build_bytes_serializer()
    assert VERSIONS.encode(se, [3, 4, 5]) == VERSIONS.measure_size([3, 4, 5]) == 8


def test_framed_form() -> None:
    data = FRAMED_VERSIONS.to_bytes([3, 4, 5])
    assert list(data) == [0, 3, 0, 4, 0, 5]
    assert FRAMED_VERSIONS.measure_size([3, 4, 5]) == 6
    de = Deserializer.build_bytes_deserializer(data)
    assert FRAMED_VERSIONS.decode_framed(de, 3) == [3, 4, 5]
    de.finalize()


def test_framed_form_without_count_takes_the_rest() -> None:
    assert FRAMED_VERSIONS.from_bytes(bytes([0, 3, 0, 4])) == [3, 4]
    de = Deserializer.build_bytes_deserializer(bytes([0, 3, 0, 4]))
    assert FRAMED_VERSIONS.decode(de) == [3, 4]
    assert de.is_empty()


def test_framed_form_without_count_odd_length() -> None:
    with pytest.raises(InvalidLengthError) as e:
        FRAMED_VERSIONS.from_bytes(bytes([0, 3, 0]))
    assert isinstance(e.value, SerializationError)


def test_framed_decode_leaves_the_rest() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0, 3, 0, 4, 0xff]))
    assert decode_versions_framed(de, 2) == [3, 4]
    assert bytes(de.read_all()) == b'\xff'


def test_canonical_codec_with_external_framing() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0, 2, 0, 3, 0xff]))
    assert VERSIONS.decode_framed(de, 4) == [3]
    assert bytes(de.read_all()) == b'\xff'


def test_canonical_codec_with_wrong_external_framing() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0, 2, 0, 3, 0, 4]))
    with pytest.raises(InvalidLengthError):
        VERSIONS.decode_framed(de, 6)


def test_framed_count_beyond_data() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0, 3, 0, 4, 0]))
    with pytest.raises(OutOfDataError):
        decode_versions_framed(de, 3)


def test_framed_negative_count() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0, 3]))
    with pytest.raises(ValueError):
        FRAMED_VERSIONS.decode_framed(de, -1)


def test_odd_prefix() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0, 5]) + bytes(6))
    with pytest.raises(InvalidLengthError):
        decode_versions(de)


def test_truncated_versions() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0, 6, 0, 3, 0, 4]))
    with pytest.raises(OutOfDataError):
        decode_versions(de)


def test_empty() -> None:
    assert VERSIONS.to_bytes([]) == b'\x00\x00'
    assert VERSIONS.from_bytes(b'\x00\x00') == []
    assert FRAMED_VERSIONS.to_bytes([]) == b''


def test_too_many_versions() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(TooLongError):
        encode_versions(se, [1] * 32768)
    assert se.cur_pos() == 0
    encode_versions(se, [1] * 32767)


def test_version_out_of_range() -> None:
    with pytest.raises(TooLongError):
        VersionsListCodec().to_bytes([1 << 16])
