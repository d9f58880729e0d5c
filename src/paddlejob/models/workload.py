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

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .job import ResourceRequirements


class WorkloadKind(str, Enum):
    """Native resource a workload unit converts into."""

    JOB = "Job"
    REPLICA_SET = "ReplicaSet"


class ContainerPort(BaseModel):
    """Named container port."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    container_port: int

    def to_manifest(self) -> Dict[str, Any]:
        return {"name": self.name, "containerPort": self.container_port}


class EnvVar(BaseModel):
    """
    Container environment variable.

    Either a literal ``value`` or a ``field_path`` the execution environment resolves at container start
    (e.g. ``status.podIP``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    value: Optional[str] = None
    field_path: Optional[str] = None

    @model_validator(mode="after")
    def check_value_or_reference(self) -> "EnvVar":
        if self.value is not None and self.field_path is not None:
            raise ValueError(f"env var '{self.name}' can't have both a value and a field reference")
        return self

    @property
    def is_reference(self) -> bool:
        return self.field_path is not None

    def to_manifest(self) -> Dict[str, Any]:
        if self.field_path is not None:
            return {"name": self.name, "valueFrom": {"fieldRef": {"fieldPath": self.field_path}}}
        return {"name": self.name, "value": self.value or ""}


class Container(BaseModel):
    """Container of a workload unit's pod template."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    image: str
    command: List[str] = Field(default_factory=list)
    image_pull_policy: Optional[str] = None
    ports: List[ContainerPort] = Field(default_factory=list)
    env: List[EnvVar] = Field(default_factory=list)
    volume_mounts: List[Dict[str, Any]] = Field(default_factory=list)
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)

    def to_manifest(self) -> Dict[str, Any]:
        manifest: Dict[str, Any] = {"name": self.name, "image": self.image}
        if self.image_pull_policy:
            manifest["imagePullPolicy"] = self.image_pull_policy
        if self.command:
            manifest["command"] = list(self.command)
        if self.ports:
            manifest["ports"] = [p.to_manifest() for p in self.ports]
        if self.env:
            manifest["env"] = [e.to_manifest() for e in self.env]
        if self.volume_mounts:
            manifest["volumeMounts"] = [dict(m) for m in self.volume_mounts]
        resources = self.resources.to_manifest()
        if resources:
            manifest["resources"] = resources
        return manifest


class WorkloadUnit(BaseModel):
    """
    Group of identical pods with a desired replica count.

    Attributes
        kind (WorkloadKind): ``JOB`` units run to completion with ``replicas`` as parallelism, ``REPLICA_SET``
            units are kept at ``replicas`` running pods.
        name (str): Unit name.
        namespace (str): Unit namespace.
        replicas (int): Desired replica count (parallelism for jobs).
        labels (Dict[str, str]): Pod labels the execution layer selects the unit's pods by.
        containers (List[Container]): Pod containers.
        volumes (List[Dict[str, Any]]): Pod volumes.
        image_pull_secrets (List[Dict[str, Any]]): Pod image pull secrets.
        host_network (bool): Use the host network namespace.
        restart_policy (Optional[str]): Pod restart policy, platform default when unset.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: WorkloadKind
    api_version: str
    name: str
    namespace: str
    replicas: int
    labels: Dict[str, str] = Field(default_factory=dict)
    containers: List[Container] = Field(default_factory=list)
    volumes: List[Dict[str, Any]] = Field(default_factory=list)
    image_pull_secrets: List[Dict[str, Any]] = Field(default_factory=list)
    host_network: bool = False
    restart_policy: Optional[str] = None

    def container(self, name: str) -> Container:
        for c in self.containers:
            if c.name == name:
                return c
        raise KeyError(f"Container '{name}' not found in workload unit '{self.name}'.")

    def to_manifest(self) -> Dict[str, Any]:
        """
        Convert the unit into a Kubernetes manifest.

        Returns:
            Dict[str, Any]: A ``Job`` or ``ReplicaSet`` manifest, depending on ``kind``.
        """
        pod_spec: Dict[str, Any] = {"containers": [c.to_manifest() for c in self.containers]}
        if self.volumes:
            pod_spec["volumes"] = [dict(v) for v in self.volumes]
        if self.image_pull_secrets:
            pod_spec["imagePullSecrets"] = [dict(s) for s in self.image_pull_secrets]
        if self.host_network:
            pod_spec["hostNetwork"] = True
        if self.restart_policy:
            pod_spec["restartPolicy"] = self.restart_policy

        template = {"metadata": {"labels": dict(self.labels)}, "spec": pod_spec}
        if self.kind == WorkloadKind.JOB:
            spec: Dict[str, Any] = {"parallelism": self.replicas, "template": template}
        else:
            spec = {
                "replicas": self.replicas,
                "selector": {"matchLabels": dict(self.labels)},
                "template": template,
            }

        return {
            "apiVersion": self.api_version,
            "kind": self.kind.value,
            "metadata": {"name": self.name, "namespace": self.namespace},
            "spec": spec,
        }


class JobWorkloads(BaseModel):
    """The three workload units generated for one training job."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pserver: WorkloadUnit
    trainer: WorkloadUnit
    master: WorkloadUnit

    def units(self) -> List[WorkloadUnit]:
        return [self.pserver, self.trainer, self.master]

    def to_manifests(self) -> List[Dict[str, Any]]:
        return [u.to_manifest() for u in self.units()]
