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

"""
Helpers to encode and decode a whole message payload with a single codec.

These sit between the codecs and whatever builds messages: a payload either decodes completely, taking all of its
bytes, or it is rejected with one error. A bad discriminant anywhere in a payload means the message cannot be
interpreted at all, so it is reported as a discarded message, with the original error as its cause.
"""

import hmac
from typing import Optional, TypeVar

from structlog import get_logger

from .codec import Codec
from .deserializer import Deserializer
from .exceptions import BadDiscriminantError, DigestMismatchError, DiscardedMessageError
from .serializer import Serializer
from .types import Buffer

logger = get_logger()

T = TypeVar('T')


def measure_payload(codec: Codec[T], value: T) -> int:
    """Length in bytes of `value`, to be written in a header before the payload itself."""
    return codec.measure_size(value)


def encode_payload(codec: Codec[T], value: T) -> bytes:
    se = Serializer.build_bytes_serializer()
    written = codec.encode(se, value)
    expected = codec.measure_size(value)
    assert written == expected, f'{codec!r} wrote {written} bytes but measured {expected}'
    return bytes(se.finalize())


def decode_payload(codec: Codec[T], data: Buffer, *, payload_length: Optional[int] = None) -> T:
    """Decode a payload that must take all of `data`.

    When `payload_length` is given it comes from the enclosing header and is passed on to `Codec.decode_framed`, so it
    is in the units of that codec.
    """
    log = logger.new(codec=repr(codec))
    de = Deserializer.build_bytes_deserializer(data)
    try:
        if payload_length is None:
            value = codec.decode(de)
        else:
            value = codec.decode_framed(de, payload_length)
    except BadDiscriminantError as e:
        log.debug('discarding payload', type_name=e.type_name, discriminant=e.discriminant)
        raise DiscardedMessageError(f'payload discarded: {e}') from e
    if not de.is_empty():
        log.debug('trailing data after payload', trailing=de.remaining())
    de.finalize()
    return value


def check_digest(predicted: bytes, actual: bytes) -> None:
    """Compare a digest computed by the caller with the one received, in constant time."""
    if not hmac.compare_digest(predicted, actual):
        raise DigestMismatchError(predicted, actual)
