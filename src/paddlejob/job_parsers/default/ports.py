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
from typing import List, Optional

from paddlejob.core import DEFAULT_CONFIG, ParserConfig
from paddlejob.models import ContainerPort


def allocate_ports(base_port: int, dense_count: int, sparse_count: int) -> List[ContainerPort]:
    """
    Allocate consecutive job ports for dense and sparse parameters.

    Args:
        base_port (int): First port of the range.
        dense_count (int): Number of dense parameter ports.
        sparse_count (int): Number of sparse parameter ports.

    Returns:
        List[ContainerPort]: ``dense_count + sparse_count`` ports named ``jobport-<port>``, ascending from
            ``base_port``.
    """
    total = dense_count + sparse_count
    logging.debug(f"Allocating {total} job ports from {base_port} (dense={dense_count}, sparse={sparse_count})")
    return [ContainerPort(name=f"jobport-{port}", container_port=port) for port in range(base_port, base_port + total)]


def allocate_master_ports(config: Optional[ParserConfig] = None) -> List[ContainerPort]:
    config = config or DEFAULT_CONFIG
    return [
        ContainerPort(name="master-port", container_port=config.master_port),
        ContainerPort(name="etcd-port", container_port=config.etcd_client_port),
    ]
