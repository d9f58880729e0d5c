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
from pathlib import Path

import toml
from pydantic import BaseModel, ConfigDict, ValidationError

from ..models.job import GPU_RESOURCE_NAME
from .exceptions import JobDescriptionParsingError, format_validation_error


class ParserConfig(BaseModel):
    """
    Defaults and fixed values used by job parsers.

    Attributes
        default_image (str): Image used when a job does not set one.
        default_port (int): First job port when a job does not set one.
        default_ports_num (int): Dense port count when a job does not set one.
        default_ports_num_for_sparse (int): Sparse port count when a job does not set one.
        default_passes (int): Training passes when a job does not set them.
        image_pull_policy (str): Pull policy of trainer, master and etcd containers.
        gpu_resource_name (str): Resource name of GPU accelerators.
        ld_library_path (str): Native library search path injected into containers.
        master_port (int): Master service port.
        etcd_image (str): Image of the embedded etcd container.
        etcd_client_port (int): etcd client port.
        etcd_legacy_client_port (int): Legacy etcd client port.
        etcd_peer_port (int): etcd peer port.
        job_api_version (str): API version of batch job manifests.
        replica_set_api_version (str): API version of replica set manifests.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_image: str = "paddlepaddle/paddlecloud-job"
    default_port: int = 7164
    default_ports_num: int = 1
    default_ports_num_for_sparse: int = 1
    default_passes: int = 1
    image_pull_policy: str = "Always"
    gpu_resource_name: str = GPU_RESOURCE_NAME
    ld_library_path: str = "/usr/local/cuda/lib64"
    master_port: int = 8080
    etcd_image: str = "quay.io/coreos/etcd:v3.2.1"
    etcd_client_port: int = 2379
    etcd_legacy_client_port: int = 4001
    etcd_peer_port: int = 2380
    job_api_version: str = "batch/v1"
    replica_set_api_version: str = "apps/v1"

    @classmethod
    def from_toml(cls, path: Path) -> "ParserConfig":
        """
        Load a configuration from a TOML file, unset keys keep their defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            JobDescriptionParsingError: If the file content is not a valid configuration.
        """
        if not path.is_file():
            raise FileNotFoundError(f"The file '{path}' does not exist.")

        logging.debug(f"Loading parser config from: {path}")
        with path.open("r") as f:
            data = toml.load(f)

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logging.error(f"Failed to parse parser config: '{path}'")
            for err in e.errors(include_url=False):
                logging.error(format_validation_error(err))
            raise JobDescriptionParsingError(f"Failed to parse parser config '{path}'") from e


DEFAULT_CONFIG = ParserConfig()
