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
This module implements encoding of a byte array whose length is fixed by the type, not by the value.

There is no length prefix, the bytes are written verbatim:

>>> se = Serializer.build_bytes_serializer()
>>> encode_fixed_bytes(se, bytes([0, 54, 34, 85, 78, 45, 8]), length=7)
>>> list(se.finalize())
[0, 54, 34, 85, 78, 45, 8]

>>> de = Deserializer.build_bytes_deserializer(bytes([0, 54, 34, 85, 78, 45, 8, 99]))
>>> list(decode_fixed_bytes(de, length=7))
[0, 54, 34, 85, 78, 45, 8]
>>> bytes(de.read_all())
b'c'

Encoding a value of the wrong length is an error, padding or truncating it would silently change the message:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_fixed_bytes(se, b'abc', length=4)
... except InvalidLengthError as e:
...     print(*e.args)
expected 4 bytes, got 3
"""

from typing_extensions import override

from torserde import Deserializer, Serializer
from torserde.codec import Codec
from torserde.exceptions import InvalidLengthError
from torserde.types import Buffer


def encode_fixed_bytes(serializer: Serializer, data: Buffer, *, length: int) -> None:
    view = memoryview(data).cast('B')
    if len(view) != length:
        raise InvalidLengthError(f'expected {length} bytes, got {len(view)}', expected=length, actual=len(view))
    serializer.write_bytes(view)


def decode_fixed_bytes(deserializer: Deserializer, *, length: int) -> bytes:
    return bytes(deserializer.read_bytes(length))


class FixedBytesCodec(Codec[bytes]):
    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError('length cannot be negative')
        self.length = length

    def __repr__(self) -> str:
        return f'FixedBytesCodec({self.length})'

    @override
    def _encode(self, serializer: Serializer, value: bytes) -> None:
        encode_fixed_bytes(serializer, value, length=self.length)

    @override
    def decode(self, deserializer: Deserializer) -> bytes:
        return decode_fixed_bytes(deserializer, length=self.length)

    @override
    def measure_size(self, value: bytes) -> int:
        return self.length
