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

from typing import List, Optional

from paddlejob.core import DEFAULT_CONFIG, ParserConfig
from paddlejob.models import EnvVar, TrainingJob


def trainer_count(job: TrainingJob, config: Optional[ParserConfig] = None) -> int:
    """
    Number of trainer processes per trainer pod.

    Equals the requested GPU count when the trainer requests GPUs and the requested CPU count otherwise. A GPU limit
    without a request does not count. Fractional CPU requests are truncated, so ``500m`` gives 0.
    """
    config = config or DEFAULT_CONFIG
    resources = job.trainer.resources
    gpus = resources.request(config.gpu_resource_name)
    if gpus > 0:
        return gpus
    return resources.request("cpu")


def compose_environment(job: TrainingJob, config: Optional[ParserConfig] = None) -> List[EnvVar]:
    """
    Environment shared by trainer, pserver and etcd containers.

    Names and order are read by the ``paddle_k8s`` launcher of the training images and must stay stable.

    Args:
        job (TrainingJob): A validated job.
        config (Optional[ParserConfig]): Parser configuration.

    Returns:
        List[EnvVar]: Ordered environment, ``NAMESPACE`` and ``POD_IP`` are resolved at container start.
    """
    config = config or DEFAULT_CONFIG
    use_gpu = "1" if job.need_gpu(config.gpu_resource_name) else "0"

    return [
        EnvVar(name="PADDLE_JOB_NAME", value=job.name),
        # TRAINERS, PSERVERS and PADDLE_INIT_NUM_GRADIENT_SERVERS are only read in non fault-tolerant mode
        EnvVar(name="TRAINERS", value=str(job.trainer.min_instance)),
        EnvVar(name="PSERVERS", value=str(job.pserver.min_instance)),
        EnvVar(name="ENTRY", value=job.trainer.entrypoint),
        # deprecated alias of ENTRY
        EnvVar(name="TOPOLOGY", value=job.trainer.entrypoint),
        EnvVar(name="TRAINER_PACKAGE", value=job.trainer.workspace),
        EnvVar(name="PADDLE_INIT_PORT", value=str(job.port)),
        EnvVar(name="PADDLE_INIT_TRAINER_COUNT", value=str(trainer_count(job, config))),
        EnvVar(name="PADDLE_INIT_PORTS_NUM", value=str(job.ports_num)),
        EnvVar(name="PADDLE_INIT_PORTS_NUM_FOR_SPARSE", value=str(job.ports_num_for_sparse)),
        EnvVar(name="PADDLE_INIT_NUM_GRADIENT_SERVERS", value=str(job.trainer.min_instance)),
        EnvVar(name="PADDLE_INIT_NUM_PASSES", value=str(job.passes)),
        EnvVar(name="PADDLE_INIT_USE_GPU", value=use_gpu),
        EnvVar(name="LD_LIBRARY_PATH", value=config.ld_library_path),
        EnvVar(name="NAMESPACE", field_path="metadata.namespace"),
        EnvVar(name="POD_IP", field_path="status.podIP"),
    ]
