# SPDX-FileCopyrightText: NVIDIA CORPORATION & AFFILIATES
# Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from decimal import Decimal
from typing import Optional, Union

from .lazy_imports import lazy

Quantity = Union[str, int, float]


def parse_quantity(value: Quantity) -> Decimal:
    """
    Parse a Kubernetes resource quantity such as ``"2"``, ``"500m"`` or ``"4Gi"``.

    Raises:
        ValueError: If the value is not a valid quantity.
    """
    return lazy.k8s.utils.parse_quantity(value)


def quantity_to_int(value: Optional[Quantity]) -> int:
    """
    Integer part of a quantity, fractions are truncated.

    A missing value is zero. A malformed value is kept as-is by the job description and also counts as zero here.
    """
    if value is None:
        return 0
    try:
        return int(parse_quantity(value))
    except ValueError:
        logging.warning(f"Resource quantity {value!r} is not a valid quantity, using 0")
        return 0
