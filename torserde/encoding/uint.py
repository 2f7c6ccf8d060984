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
This module implements encoding of unsigned integers with a fixed width.

The width is one of 1, 2, 4, 8 or 16 bytes and never depends on the value, the byte order is always big-endian.

>>> se = Serializer.build_bytes_serializer()
>>> encode_uint(se, 0x45, length=1)  # writes 45
>>> encode_uint(se, 0x39e3, length=2)  # writes 39e3
>>> encode_uint(se, 0x7e38d1a0, length=4)  # writes 7e38d1a0
>>> bytes(se.finalize()).hex()
'4539e37e38d1a0'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('4539e37e38d1a0'))
>>> hex(decode_uint(de, length=1))
'0x45'
>>> hex(decode_uint(de, length=2))
'0x39e3'
>>> hex(decode_uint(de, length=4))
'0x7e38d1a0'
>>> de.finalize()

>>> from torserde.exceptions import OutOfDataError
>>> de = Deserializer.build_bytes_deserializer(b'\x00\x01\x02')
>>> try:
...     decode_uint(de, length=4)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read: wanted 4, have 3
"""

from typing_extensions import override

from torserde import Deserializer, Serializer
from torserde.codec import Codec
from torserde.consts import UINT_WIDTHS
from torserde.exceptions import TooLongError


def encode_uint(serializer: Serializer, number: int, *, length: int) -> None:
    """ Encode an unsigned int using exactly `length` bytes.

    This module's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=False)
    except OverflowError:
        raise TooLongError(f'{number} does not fit in an unsigned {length}-byte integer')
    serializer.write_bytes(data)


def decode_uint(deserializer: Deserializer, *, length: int) -> int:
    """ Decode an unsigned int from exactly `length` bytes.

    This module's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='big', signed=False)


class UIntCodec(Codec[int]):
    def __init__(self, length: int) -> None:
        if length not in UINT_WIDTHS:
            raise ValueError(f'unsupported integer width: {length}')
        self.length = length

    def __repr__(self) -> str:
        return f'UIntCodec({self.length})'

    @override
    def _encode(self, serializer: Serializer, value: int) -> None:
        encode_uint(serializer, value, length=self.length)

    @override
    def decode(self, deserializer: Deserializer) -> int:
        return decode_uint(deserializer, length=self.length)

    @override
    def measure_size(self, value: int) -> int:
        return self.length


U8 = UIntCodec(1)
U16 = UIntCodec(2)
U32 = UIntCodec(4)
U64 = UIntCodec(8)
U128 = UIntCodec(16)
