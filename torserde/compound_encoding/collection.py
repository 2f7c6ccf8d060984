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
A length-prefixed list is an ordered sequence of values of the same type preceded by its element count.

Layout: [N: unsigned int of 1, 2 or 4 bytes][value_0]...[value_N-1]

>>> from torserde.encoding.uint import U16
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, [0, 23, 86, 35, 96, 83], U16.encode, width=PrefixWidth.U8)
>>> list(se.finalize())
[6, 0, 0, 0, 23, 0, 86, 0, 35, 0, 96, 0, 83]

When decoding, the builder can be any collection that can be initialized with an `Iterable[T]`:

>>> data = bytes([0, 2, 0, 23, 0, 86])
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_collection(de, U16.decode, tuple, width=PrefixWidth.U16)
(23, 86)
>>> de.finalize()

A count that does not fit in the prefix is rejected before anything is written:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_collection(se, range(256), U16.encode, width=PrefixWidth.U8)
... except TooLongError as e:
...     print(*e.args)
256 elements do not fit in a 1-byte count
>>> se.cur_pos()
0
"""

from collections.abc import Collection, Iterable
from enum import IntEnum
from typing import Callable, Generic, TypeVar

from typing_extensions import override

from torserde import Deserializer, Serializer
from torserde.codec import Codec
from torserde.encoding.uint import decode_uint, encode_uint
from torserde.exceptions import TooLongError

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


class PrefixWidth(IntEnum):
    """Width in bytes of the element count of a list."""
    U8 = 1
    U16 = 2
    U32 = 4

    @property
    def max_count(self) -> int:
        return (1 << (8 * self.value)) - 1


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T], *,
                      width: PrefixWidth) -> None:
    count = len(values)
    if count > width.max_count:
        raise TooLongError(f'{count} elements do not fit in a {width.value}-byte count')
    encode_uint(serializer, count, length=width.value)
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    width: PrefixWidth,
) -> R:
    count = decode_uint(deserializer, length=width.value)
    return builder(decoder(deserializer) for _ in range(count))


class ListCodec(Codec[list[T]], Generic[T]):
    """Codec of a list whose elements are handled by `element`.

    The count width is chosen when the codec is built, either with a `PrefixWidth` or with one of the named
    constructors. Any other width fails right there.
    """

    def __init__(self, element: Codec[T], width: PrefixWidth | int) -> None:
        self.element = element
        self.width = PrefixWidth(width)

    def __repr__(self) -> str:
        return f'ListCodec({self.element!r}, {self.width.name})'

    @classmethod
    def u8_prefixed(cls, element: Codec[T]) -> 'ListCodec[T]':
        return cls(element, PrefixWidth.U8)

    @classmethod
    def u16_prefixed(cls, element: Codec[T]) -> 'ListCodec[T]':
        return cls(element, PrefixWidth.U16)

    @classmethod
    def u32_prefixed(cls, element: Codec[T]) -> 'ListCodec[T]':
        return cls(element, PrefixWidth.U32)

    @override
    def _encode(self, serializer: Serializer, value: list[T]) -> None:
        encode_collection(serializer, value, self.element.encode, width=self.width)

    @override
    def decode(self, deserializer: Deserializer) -> list[T]:
        return decode_collection(deserializer, self.element.decode, list, width=self.width)

    @override
    def measure_size(self, value: list[T]) -> int:
        return self.width.value + sum(self.element.measure_size(item) for item in value)
