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
Sink and source backed by a binary stream, like an open file or the file object of a socket.

The stream is borrowed: it is never closed and never retried. Any `OSError` it raises is wrapped in a
`WireIOError`, a short read is reported as an `OutOfDataError` and a short write as a `WireIOError`.

>>> import io
>>> buf = io.BytesIO()
>>> se = Serializer.build_stream_serializer(buf)
>>> se.write_bytes(b'tor')
>>> se.cur_pos()
3
>>> buf.getvalue()
b'tor'

>>> de = Deserializer.build_stream_deserializer(io.BytesIO(b'\x01\x02'))
>>> de.peek_byte()
1
>>> bytes(de.read_bytes(2))
b'\x01\x02'
>>> de.is_empty()
True
"""

from typing import BinaryIO

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import InvalidLengthError, OutOfDataError, WireIOError
from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pos: int = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        # int.to_bytes checks for correct range
        self.write_bytes(int.to_bytes(data, length=1, byteorder='big'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        try:
            written = self._stream.write(view)
        except OSError as e:
            raise WireIOError('failed to write to stream') from e
        # raw streams may accept less than what was given, buffered ones either write everything or raise
        if written is not None and written != len(view):
            raise WireIOError(f'short write: {written} of {len(view)} bytes')
        self._pos += len(view)


class StreamDeserializer(Deserializer):
    """Source that reads on demand from a stream.

    Peeked bytes are kept in a small look-ahead buffer until they are consumed.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._lookahead = bytearray()

    def _fill(self, n: int) -> None:
        missing = n - len(self._lookahead)
        if missing <= 0:
            return
        try:
            data = self._stream.read(missing)
        except OSError as e:
            raise WireIOError('failed to read from stream') from e
        if data:
            self._lookahead += data

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise InvalidLengthError('trailing data')

    @override
    def is_empty(self) -> bool:
        self._fill(1)
        return not self._lookahead

    @override
    def peek_byte(self) -> int:
        self._fill(1)
        if not self._lookahead:
            raise OutOfDataError('not enough bytes to read')
        return self._lookahead[0]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        self._fill(n)
        if exact and len(self._lookahead) < n:
            raise OutOfDataError(f'not enough bytes to read: wanted {n}, have {len(self._lookahead)}')
        return bytes(self._lookahead[:n])

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        del self._lookahead[:1]
        return b

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        b = self.peek_bytes(n, exact=exact)
        del self._lookahead[:len(b)]
        return b

    @override
    def read_all(self) -> bytes:
        try:
            rest = self._stream.read()
        except OSError as e:
            raise WireIOError('failed to read from stream') from e
        result = bytes(self._lookahead) + (rest or b'')
        self._lookahead.clear()
        return result
