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

# Terminator of a wire string
STRING_SENTINEL: int = 0x00

# Address type tags and the address length that goes with each of them
IPV4_TAG: int = 4
IPV6_TAG: int = 6
IPV4_LENGTH: int = 4
IPV6_LENGTH: int = 16

# Widths of the unsigned integers the protocol uses
UINT_WIDTHS: frozenset[int] = frozenset({1, 2, 4, 8, 16})

# Each entry of a versions list is an u16
VERSION_SIZE: int = 2

# Timestamps are u32 seconds since the epoch
TIMESTAMP_SIZE: int = 4
TIMESTAMP_MODULUS: int = 1 << 32

PADDING_BYTE: int = 0x00
