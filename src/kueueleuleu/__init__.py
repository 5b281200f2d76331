"""Run the containers of Kubernetes Pods, Jobs and CronJobs sequentially."""

from kueueleuleu.core.convert import (
    convert_cronjob, convert_job, convert_manifest, convert_manifests, convert_pod,
)
from kueueleuleu.core.pod_spec import convert_pod_spec
from kueueleuleu.core.status import get_running_container_name
from kueueleuleu.pacts.helpers import is_converted, mark_converted
from kueueleuleu.pacts.types import ALL_STEPS_FINISHED, DEFAULT_CONFIG, SequencingConfig

__version__ = "0.1.0"

__all__ = [
    "ALL_STEPS_FINISHED", "DEFAULT_CONFIG", "SequencingConfig",
    "convert_cronjob", "convert_job", "convert_manifest", "convert_manifests",
    "convert_pod", "convert_pod_spec", "get_running_container_name",
    "is_converted", "mark_converted",
]
