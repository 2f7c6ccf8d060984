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

from typing import Optional


class SerializationError(Exception):
    """Base class for every error raised while writing or reading the wire format."""


class OutOfDataError(SerializationError, EOFError):
    """The source ended before the requested bytes could be read."""


class BadDataError(SerializationError, ValueError):
    """The bytes read do not form a valid value."""


class BadDiscriminantError(BadDataError):
    """An unrecognized tag was read while decoding a tagged variant."""

    def __init__(self, discriminant: int, type_name: str) -> None:
        super().__init__(f'{discriminant} is not a valid {type_name} discriminant')
        self.discriminant = discriminant
        self.type_name = type_name


class EncodingError(BadDataError):
    """Text bytes are not valid UTF-8."""


class InvalidLengthError(BadDataError):
    """A value did not have the length its framing declared."""

    def __init__(self, message: str, *, expected: Optional[int] = None, actual: Optional[int] = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InsufficientPaddingError(BadDataError):
    """Fewer trailing bytes than the padding requires."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f'padding requires {required} bytes, only {available} available')
        self.required = required
        self.available = available


class TooLongError(SerializationError, ValueError):
    """A value or element count does not fit in its wire width."""


class MaxBytesExceededError(SerializationError):
    """A bounded source was asked for more bytes than its bound allows.

    Nothing is consumed by the read that fails, `bytes_left` is what the bound still allowed at that point.
    """

    def __init__(self, max_bytes: int, bytes_left: int) -> None:
        super().__init__(f'read more than {max_bytes} bytes')
        self.max_bytes = max_bytes
        self.bytes_left = bytes_left


class WireIOError(SerializationError):
    """The underlying sink or source failed, the original `OSError` is the cause."""


class DiscardedMessageError(SerializationError):
    """A whole payload was dropped because of a bad discriminant inside it."""


class DigestMismatchError(SerializationError):
    """The predicted integrity value differs from the one actually received."""

    def __init__(self, predicted: bytes, actual: bytes) -> None:
        super().__init__(f'digest mismatch: predicted {predicted.hex()}, got {actual.hex()}')
        self.predicted = predicted
        self.actual = actual
