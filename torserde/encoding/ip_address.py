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
This module implements the wire IP address, a tagged union of IPv4 and IPv6.

Layout: [type: u8][length: u8][address: length bytes], where type is 4 or 6 and length is 4 or 16 respectively.

>>> se = Serializer.build_bytes_serializer()
>>> encode_ip_address(se, IPv4Address('245.67.12.34'))
>>> list(se.finalize())
[4, 4, 245, 67, 12, 34]

>>> de = Deserializer.build_bytes_deserializer(bytes([4, 4, 245, 67, 12, 34]))
>>> decode_ip_address(de)
IPv4Address('245.67.12.34')
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> encode_ip_address(se, IPv6Address('fc86:6e01:204f:498a:33cf:b30a:6171:e74f'))
>>> bytes(se.finalize()).hex()
'0610fc866e01204f498a33cfb30a6171e74f'

Any other type is rejected:

>>> de = Deserializer.build_bytes_deserializer(bytes([5, 4, 1, 2, 3, 4]))
>>> try:
...     decode_ip_address(de)
... except BadDiscriminantError as e:
...     print(e.discriminant, *e.args)
5 5 is not a valid address type discriminant

The length byte is redundant with the type. By default a length that disagrees with the type is an error, with
`strict_length=False` it is ignored and the length implied by the type is used:

>>> data = bytes([4, 16, 10, 0, 0, 1])
>>> try:
...     decode_ip_address(Deserializer.build_bytes_deserializer(data))
... except InvalidLengthError as e:
...     print(*e.args)
address type 4 must have length 4, got 16
>>> decode_ip_address(Deserializer.build_bytes_deserializer(data), strict_length=False)
IPv4Address('10.0.0.1')
"""

from ipaddress import IPv4Address, IPv6Address
from typing import Union

from typing_extensions import override

from torserde import Deserializer, Serializer, consts
from torserde.codec import Codec
from torserde.encoding.fixed_bytes import decode_fixed_bytes, encode_fixed_bytes
from torserde.exceptions import BadDiscriminantError, InvalidLengthError
from torserde.settings import DEFAULT_SETTINGS, WireSettings

IPAddress = Union[IPv4Address, IPv6Address]


def _tag_and_length(value: IPAddress) -> tuple[int, int]:
    if isinstance(value, IPv4Address):
        return consts.IPV4_TAG, consts.IPV4_LENGTH
    elif isinstance(value, IPv6Address):
        return consts.IPV6_TAG, consts.IPV6_LENGTH
    else:
        raise TypeError(f'not an IP address: {value!r}')


def encode_ip_address(serializer: Serializer, value: IPAddress) -> None:
    """ Encodes an IPv4 or IPv6 address with its type and length bytes.

    This module's docstring has more details and examples.
    """
    tag, length = _tag_and_length(value)
    serializer.write_byte(tag)
    serializer.write_byte(length)
    encode_fixed_bytes(serializer, value.packed, length=length)


def decode_ip_address(deserializer: Deserializer, *, strict_length: bool = True) -> IPAddress:
    """ Decodes an address, dispatching on its type byte.

    This module's docstring has more details and examples.
    """
    tag = deserializer.read_byte()
    declared_length = deserializer.read_byte()
    match tag:
        case consts.IPV4_TAG:
            address_class: type[IPAddress] = IPv4Address
            length = consts.IPV4_LENGTH
        case consts.IPV6_TAG:
            address_class = IPv6Address
            length = consts.IPV6_LENGTH
        case _:
            raise BadDiscriminantError(tag, 'address type')
    if strict_length and declared_length != length:
        raise InvalidLengthError(
            f'address type {tag} must have length {length}, got {declared_length}',
            expected=length,
            actual=declared_length,
        )
    return address_class(decode_fixed_bytes(deserializer, length=length))


def measure_ip_address(value: IPAddress) -> int:
    _, length = _tag_and_length(value)
    return 2 + length


class IPAddressCodec(Codec[IPAddress]):
    def __init__(self, settings: WireSettings = DEFAULT_SETTINGS) -> None:
        self.strict_length = settings.strict_address_length

    @override
    def _encode(self, serializer: Serializer, value: IPAddress) -> None:
        encode_ip_address(serializer, value)

    @override
    def decode(self, deserializer: Deserializer) -> IPAddress:
        return decode_ip_address(deserializer, strict_length=self.strict_length)

    @override
    def measure_size(self, value: IPAddress) -> int:
        return measure_ip_address(value)
