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
The contract every codec in this package implements.

A codec knows how to write a value to a `Serializer`, read it back from a `Deserializer` and tell how many bytes
the value takes on the wire without writing it. Higher layers rely on `measure_size` to fill length fields before a
message is framed, so it must always agree with what `encode` writes:

>>> from torserde.encoding.uint import U16
>>> se = Serializer.build_bytes_serializer()
>>> U16.encode(se, 0x39e3)
2
>>> U16.measure_size(0x39e3)
2
>>> bytes(se.finalize())
b'9\xe3'
>>> U16.from_bytes(b'\x39\xe3') == 0x39e3
True
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from .deserializer import Deserializer
from .serializer import Serializer
from .types import Buffer

T = TypeVar('T')


class Codec(ABC, Generic[T]):
    @abstractmethod
    def _encode(self, serializer: Serializer, value: T) -> None:
        raise NotImplementedError

    @final
    def encode(self, serializer: Serializer, value: T) -> int:
        """Write `value` and return how many bytes were written."""
        pos0 = serializer.cur_pos()
        self._encode(serializer, value)
        return serializer.cur_pos() - pos0

    @abstractmethod
    def decode(self, deserializer: Deserializer) -> T:
        """Read one value, consuming only its bytes."""
        raise NotImplementedError

    @abstractmethod
    def measure_size(self, value: T) -> int:
        """Number of bytes `encode` writes for `value`."""
        raise NotImplementedError

    def to_bytes(self, value: T) -> bytes:
        se = Serializer.build_bytes_serializer()
        self.encode(se, value)
        return bytes(se.finalize())

    def from_bytes(self, data: Buffer) -> T:
        """Decode a value that must take all of `data`."""
        de = Deserializer.build_bytes_deserializer(data)
        value = self.decode(de)
        de.finalize()
        return value

    def decode_framed(self, deserializer: Deserializer, payload_length: int) -> T:
        """Decode a value whose length was given by an enclosing header.

        By default `payload_length` is a byte count: exactly that many bytes are consumed and the value must take all
        of them. Codecs whose header counts something else, like the framed versions list, override this.
        """
        if payload_length < 0:
            raise ValueError('payload length cannot be negative')
        data = deserializer.read_bytes(payload_length)
        return self.from_bytes(data)
