# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
The versions list is the payload of the message that negotiates the link protocol version.

Unlike other lists it is not prefixed by its element count, and it has two forms:

- canonical: [L: u16][version_0: u16]...[version_N-1: u16] where L is the length in bytes, 2 * N
- framed: [version_0: u16]...[version_N-1: u16], the number of versions comes from the enclosing message header

>>> se = Serializer.build_bytes_serializer()
>>> encode_versions(se, [3, 4])
>>> list(se.finalize())
[0, 4, 0, 3, 0, 4]

>>> de = Deserializer.build_bytes_deserializer(bytes([0, 4, 0, 3, 0, 4]))
>>> decode_versions(de)
[3, 4]

>>> se = Serializer.build_bytes_serializer()
>>> encode_versions(se, [3, 4, 5], framed=True)
>>> list(se.finalize())
[0, 3, 0, 4, 0, 5]

>>> de = Deserializer.build_bytes_deserializer(bytes([0, 3, 0, 4, 0, 5]))
>>> decode_versions_framed(de, 3)
[3, 4, 5]

Without a count from the header the framed form runs to the end of the source:

>>> de = Deserializer.build_bytes_deserializer(bytes([0, 3, 0, 4]))
>>> decode_versions_framed(de)
[3, 4]

An odd length cannot hold whole versions:

>>> de = Deserializer.build_bytes_deserializer(bytes([0, 3, 0, 3, 0, 4]))
>>> try:
...     decode_versions(de)
... except InvalidLengthError as e:
...     print(*e.args)
versions length must be even, got 3
"""

from collections.abc import Collection
from typing import Optional

from typing_extensions import override

from torserde import Deserializer, Serializer
from torserde.codec import Codec
from torserde.consts import VERSION_SIZE
from torserde.encoding.uint import decode_uint, encode_uint
from torserde.exceptions import InvalidLengthError, TooLongError

_LENGTH_PREFIX_SIZE = 2
_MAX_CANONICAL_COUNT = ((1 << (8 * _LENGTH_PREFIX_SIZE)) - 1) // VERSION_SIZE


def _count_from_length(length: int) -> int:
    if length % VERSION_SIZE:
        raise InvalidLengthError(f'versions length must be even, got {length}', actual=length)
    return length // VERSION_SIZE


def _decode_items(deserializer: Deserializer, count: int) -> list[int]:
    return [decode_uint(deserializer, length=VERSION_SIZE) for _ in range(count)]


def encode_versions(serializer: Serializer, versions: Collection[int], *, framed: bool = False) -> None:
    """ Encodes a versions list, with its byte-length prefix unless `framed` is set.

    This module's docstring has more details and examples.
    """
    if not framed:
        if len(versions) > _MAX_CANONICAL_COUNT:
            raise TooLongError(f'{len(versions)} versions do not fit in a versions list')
        encode_uint(serializer, len(versions) * VERSION_SIZE, length=_LENGTH_PREFIX_SIZE)
    for version in versions:
        encode_uint(serializer, version, length=VERSION_SIZE)


def decode_versions(deserializer: Deserializer) -> list[int]:
    """ Decodes a versions list in the canonical form, reading its byte-length prefix.

    This module's docstring has more details and examples.
    """
    length = decode_uint(deserializer, length=_LENGTH_PREFIX_SIZE)
    return _decode_items(deserializer, _count_from_length(length))


def decode_versions_framed(deserializer: Deserializer, count: Optional[int] = None) -> list[int]:
    """ Decodes a versions list without prefix, `count` is the number of versions given by the enclosing message.

    When `count` is None every remaining byte of the source belongs to the list.

    This module's docstring has more details and examples.
    """
    if count is None:
        data = memoryview(deserializer.read_all())
        count = _count_from_length(len(data))
        deserializer = Deserializer.build_bytes_deserializer(data)
    elif count < 0:
        raise ValueError('count cannot be negative')
    return _decode_items(deserializer, count)


class VersionsListCodec(Codec[list[int]]):
    """Codec of the versions list.

    For the framed form the length given to `decode_framed` is the number of versions, not a byte count, and plain
    `decode` takes the rest of the source.
    """

    def __init__(self, *, framed: bool = False) -> None:
        self.framed = framed

    def __repr__(self) -> str:
        return f'VersionsListCodec(framed={self.framed})'

    @override
    def _encode(self, serializer: Serializer, value: list[int]) -> None:
        encode_versions(serializer, value, framed=self.framed)

    @override
    def decode(self, deserializer: Deserializer) -> list[int]:
        if self.framed:
            return decode_versions_framed(deserializer)
        return decode_versions(deserializer)

    @override
    def decode_framed(self, deserializer: Deserializer, payload_length: int) -> list[int]:
        if not self.framed:
            return super().decode_framed(deserializer, payload_length)
        return decode_versions_framed(deserializer, payload_length)

    @override
    def measure_size(self, value: list[int]) -> int:
        size = len(value) * VERSION_SIZE
        if not self.framed:
            size += _LENGTH_PREFIX_SIZE
        return size


VERSIONS = VersionsListCodec()
FRAMED_VERSIONS = VersionsListCodec(framed=True)
