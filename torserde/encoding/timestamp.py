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
This module implements the wire timestamp: whole seconds since the Unix epoch as an u32.

Sub-second precision is dropped (the seconds are floored) and values outside of the u32 range wrap around silently,
the format cannot represent instants before 1970 or after early 2106. Naive datetimes are taken as local time, the
same way `datetime.timestamp()` does.

>>> from datetime import datetime, timezone
>>> se = Serializer.build_bytes_serializer()
>>> encode_timestamp(se, datetime(2015, 5, 15, tzinfo=timezone.utc))
>>> list(se.finalize())
[85, 85, 55, 0]

A bare second count has no timezone, so decoding takes one explicitly and defaults to UTC:

>>> de = Deserializer.build_bytes_deserializer(bytes([85, 85, 55, 0]))
>>> decode_timestamp(de)
datetime.datetime(2015, 5, 15, 0, 0, tzinfo=datetime.timezone.utc)

Converting to local time is up to the caller, for instance with `.astimezone()`.
"""

import math
from datetime import datetime, timezone, tzinfo

from typing_extensions import override

from torserde import Deserializer, Serializer
from torserde.codec import Codec
from torserde.consts import TIMESTAMP_MODULUS, TIMESTAMP_SIZE
from torserde.encoding.uint import decode_uint, encode_uint


def timestamp_to_wire(value: datetime) -> int:
    """Seconds since the epoch, floored and wrapped to the u32 range."""
    return math.floor(value.timestamp()) % TIMESTAMP_MODULUS


def encode_timestamp(serializer: Serializer, value: datetime) -> None:
    """ Encodes a datetime as an u32 count of seconds.

    This module's docstring has more details and examples.
    """
    assert isinstance(value, datetime)
    encode_uint(serializer, timestamp_to_wire(value), length=TIMESTAMP_SIZE)


def decode_timestamp(deserializer: Deserializer, *, tz: tzinfo = timezone.utc) -> datetime:
    """ Decodes an u32 count of seconds into an aware datetime in `tz`.

    This module's docstring has more details and examples.
    """
    seconds = decode_uint(deserializer, length=TIMESTAMP_SIZE)
    return datetime.fromtimestamp(seconds, tz)


class TimestampCodec(Codec[datetime]):
    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self.tz = tz

    @override
    def _encode(self, serializer: Serializer, value: datetime) -> None:
        encode_timestamp(serializer, value)

    @override
    def decode(self, deserializer: Deserializer) -> datetime:
        return decode_timestamp(deserializer, tz=self.tz)

    @override
    def measure_size(self, value: datetime) -> int:
        return TIMESTAMP_SIZE
