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
This package holds the compound encoders.

Compound encoders delegate part of the value to another encoder. A length-prefixed list, for instance, writes its
count and hands every element to the encoder of the element type, which can itself be another list.

The functions take plain `Encoder`/`Decoder` callables, the `Codec` subclasses take the element `Codec` so they
can also add up element sizes.
"""

from typing import Protocol, TypeVar

from torserde.deserializer import Deserializer
from torserde.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    """Writes a value, whatever it returns is ignored."""

    def __call__(self, serializer: Serializer, value: T_contra, /) -> object:
        ...
