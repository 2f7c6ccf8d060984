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

from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field


class BaseModel(PydanticBaseModel):
    """Substitute for pydantic's BaseModel.

    Instances are frozen and unknown fields are rejected, so a settings object can be shared freely once built.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)


class WireSettings(BaseModel):
    # Upper bound on the bytes read while looking for the terminator of a wire string, including the terminator.
    # None means unbounded, in which case the caller has to bound the source itself.
    max_string_bytes: Optional[int] = Field(default=None, gt=0)

    # Whether the length byte of an address must agree with its type tag. When False a mismatch is ignored and the
    # address is read with the length implied by the tag.
    strict_address_length: bool = True


DEFAULT_SETTINGS = WireSettings()
