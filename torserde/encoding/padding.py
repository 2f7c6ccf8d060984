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
This module implements zero padding, used to fill a payload up to a fixed size.

>>> se = Serializer.build_bytes_serializer()
>>> encode_padding(se, 3)
>>> bytes(se.finalize())
b'\x00\x00\x00'

Padding contents are not checked when decoding, only that there are enough bytes:

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x07')
>>> try:
...     decode_padding(de, 3)
... except InsufficientPaddingError as e:
...     print(e.required, e.available)
3 2
"""

from torserde import Deserializer, Serializer
from torserde.consts import PADDING_BYTE
from torserde.exceptions import InsufficientPaddingError


def encode_padding(serializer: Serializer, length: int) -> None:
    if length < 0:
        raise ValueError('padding length cannot be negative')
    serializer.write_bytes(bytes([PADDING_BYTE]) * length)


def decode_padding(deserializer: Deserializer, length: int) -> None:
    """Consume `length` padding bytes."""
    available = len(memoryview(deserializer.peek_bytes(length, exact=False)))
    if available < length:
        raise InsufficientPaddingError(length, available)
    deserializer.read_bytes(length)


def pad_to(serializer: Serializer, start_pos: int, total_size: int) -> int:
    """Pad what was written since `start_pos` up to `total_size` bytes, returns how many padding bytes were written."""
    written = serializer.cur_pos() - start_pos
    if written > total_size:
        raise ValueError(f'already wrote {written} bytes, more than {total_size}')
    encode_padding(serializer, total_size - written)
    return total_size - written
