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
A source that refuses to give out more than a fixed number of bytes.

This is how a caller bounds decoders that would otherwise read without limit, like the wire string decoder on a
stream that never sends the terminator:

>>> from torserde.encoding.cstring import decode_cstring
>>> de = Deserializer.build_bytes_deserializer(b'no terminator here')
>>> try:
...     decode_cstring(de.with_max_bytes(8))
... except MaxBytesExceededError as e:
...     print(*e.args)
read more than 8 bytes

A read that would cross the bound fails before consuming anything:

>>> de = Deserializer.build_bytes_deserializer(b'abcdef')
>>> bounded = de.with_max_bytes(4)
>>> bytes(bounded.read_bytes(3))
b'abc'
>>> bounded.bytes_left
1
>>> try:
...     bounded.read_bytes(2)
... except MaxBytesExceededError as e:
...     print(e.bytes_left)
1
>>> bytes(de.read_all())
b'def'
"""

from typing import Generic, TypeVar

from typing_extensions import override

from torserde.deserializer import Deserializer
from torserde.exceptions import MaxBytesExceededError

from ..types import Buffer

D = TypeVar('D', bound=Deserializer)


class MaxBytesDeserializer(Deserializer, Generic[D]):
    """Reads from `inner`, at most `max_bytes` bytes in total."""

    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self.inner = deserializer
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    @property
    def bytes_left(self) -> int:
        """How many more bytes can be read through this adapter."""
        return self._bytes_left

    def _check(self, size: int) -> None:
        if size > self._bytes_left:
            raise MaxBytesExceededError(self._max_bytes, self._bytes_left)

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def peek_byte(self) -> int:
        self._check(1)
        return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if exact:
            self._check(n)
        return self.inner.peek_bytes(min(n, self._bytes_left), exact=exact)

    @override
    def read_byte(self) -> int:
        self._check(1)
        result = self.inner.read_byte()
        self._bytes_left -= 1
        return result

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if exact:
            self._check(n)
        result = self.inner.read_bytes(min(n, self._bytes_left), exact=exact)
        self._bytes_left -= len(memoryview(result))
        return result

    @override
    def read_all(self) -> Buffer:
        if len(memoryview(self.inner.peek_bytes(self._bytes_left + 1, exact=False))) > self._bytes_left:
            raise MaxBytesExceededError(self._max_bytes, self._bytes_left)
        return self.read_bytes(self._bytes_left, exact=False)
