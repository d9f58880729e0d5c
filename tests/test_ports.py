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

import pytest

from paddlejob.core import ParserConfig
from paddlejob.job_parsers.default import allocate_master_ports, allocate_ports
from paddlejob.models import ContainerPort


@pytest.mark.parametrize("base,dense,sparse", [(7164, 1, 1), (8000, 3, 0), (1, 0, 5), (30000, 4, 4), (7164, 0, 0)])
def test_allocate_ports(base: int, dense: int, sparse: int):
    ports = allocate_ports(base, dense, sparse)

    assert len(ports) == dense + sparse
    assert [p.container_port for p in ports] == list(range(base, base + dense + sparse))
    assert all(p.name == f"jobport-{p.container_port}" for p in ports)


def test_allocate_ports_names():
    assert allocate_ports(7164, 1, 1) == [
        ContainerPort(name="jobport-7164", container_port=7164),
        ContainerPort(name="jobport-7165", container_port=7165),
    ]


def test_allocate_master_ports():
    assert allocate_master_ports() == [
        ContainerPort(name="master-port", container_port=8080),
        ContainerPort(name="etcd-port", container_port=2379),
    ]


def test_master_ports_follow_config():
    ports = allocate_master_ports(ParserConfig(master_port=9090, etcd_client_port=12379))
    assert [(p.name, p.container_port) for p in ports] == [("master-port", 9090), ("etcd-port", 12379)]
