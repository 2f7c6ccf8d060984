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
This package holds the encoders for the leaf types of the wire format.

Leaf in this context means "not compound": an encoder here can have parameters like the width of an integer, but it
never delegates part of the value to another encoder. Lists and the versions list live in `compound_encoding`.

Each submodule `x` deals with a single type and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

    class XCodec(Codec[ValueType]):
        ...

The functions are what other encoders compose, the `Codec` subclass binds the config params and adds
`measure_size`.
"""
