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
This module implements the wire string: UTF-8 text followed by a single NUL terminator.

There is no length prefix, the terminator is the only framing:

>>> se = Serializer.build_bytes_serializer()
>>> encode_cstring(se, 'abcdefg')
>>> list(se.finalize())
[97, 98, 99, 100, 101, 102, 103, 0]

Decoding stops at the first NUL, anything after it is left in the source:

>>> de = Deserializer.build_bytes_deserializer(b'abcdefg\x00hij\x00')
>>> decode_cstring(de)
'abcdefg'
>>> decode_cstring(de)
'hij'
>>> de.finalize()

The bytes are validated as UTF-8:

>>> de = Deserializer.build_bytes_deserializer(b'\xff\xfe\x00')
>>> try:
...     decode_cstring(de)
... except EncodingError as e:
...     print(*e.args)
wire string is not valid utf-8

The content must not contain a NUL character, the encoder does not check it and a string that does would be cut
short when decoded. The decoder reads until it finds the terminator, on a source without one it only stops when the
source is exhausted, unless it is given `max_bytes`.
"""

from typing import Optional

from typing_extensions import override

from torserde import Deserializer, Serializer
from torserde.codec import Codec
from torserde.consts import STRING_SENTINEL
from torserde.exceptions import EncodingError
from torserde.settings import DEFAULT_SETTINGS, WireSettings


def encode_cstring(serializer: Serializer, value: str) -> None:
    """ Encodes a string as UTF-8 followed by the terminator.

    This module's docstring has more details and examples.
    """
    assert isinstance(value, str)
    serializer.write_bytes(value.encode('utf-8'))
    serializer.write_byte(STRING_SENTINEL)


def decode_cstring(deserializer: Deserializer, *, max_bytes: Optional[int] = None) -> str:
    """ Decodes a terminated UTF-8 string, `max_bytes` bounds the bytes read including the terminator.

    This module's docstring has more details and examples.
    """
    de = deserializer.with_optional_max_bytes(max_bytes)
    data = bytearray()
    while (byte := de.read_byte()) != STRING_SENTINEL:
        data.append(byte)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError('wire string is not valid utf-8') from e


class CStringCodec(Codec[str]):
    def __init__(self, settings: WireSettings = DEFAULT_SETTINGS) -> None:
        self.max_bytes = settings.max_string_bytes

    @override
    def _encode(self, serializer: Serializer, value: str) -> None:
        encode_cstring(serializer, value)

    @override
    def decode(self, deserializer: Deserializer) -> str:
        return decode_cstring(deserializer, max_bytes=self.max_bytes)

    @override
    def measure_size(self, value: str) -> int:
        return len(value.encode('utf-8')) + 1
