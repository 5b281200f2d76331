"""Follow the steps of a converted pod running in a cluster.

Built on the official kubernetes client: a pod watch stream is reduced to
the sequence of steps the pod went through, as reported by
get_running_container_name().
"""

import logging
import time

from kubernetes import client, config, watch

from kueueleuleu.core.constants import PHASE_FAILED, PHASE_SUCCEEDED
from kueueleuleu.core.status import get_running_container_name
from kueueleuleu.pacts.errors import AlreadyFailed, PreconditionError
from kueueleuleu.pacts.types import DEFAULT_CONFIG, SequencingConfig, StepEvent

logger = logging.getLogger(__name__)


def load_kube_client() -> client.CoreV1Api:
    """Return a CoreV1Api using in-cluster config, falling back to kubeconfig."""
    try:
        config.load_incluster_config()
        logger.debug("Loaded in-cluster Kubernetes configuration")
    except config.ConfigException:
        config.load_kube_config()
        logger.debug("Loaded kubeconfig")
    return client.CoreV1Api()


def _as_dict(pod, api_client: client.ApiClient) -> dict:
    """Watch events carry V1Pod objects; the status reader works on manifests."""
    if isinstance(pod, dict):
        return pod
    return api_client.sanitize_for_serialization(pod)


def follow_steps(events, clock=time.monotonic,
                 seq_config: SequencingConfig = DEFAULT_CONFIG):
    """Yield a StepEvent each time the running step of the watched pod changes.

    `events` is an iterable of watch events ({"type": ..., "object": pod}).
    Stops after yielding a succeeded event; raises AlreadyFailed if the pod
    fails. Pods not running yet simply produce no event.
    """
    start = clock()
    running = None
    api_client = client.ApiClient()
    try:
        for event in events:
            pod = _as_dict(event["object"], api_client)
            phase = (pod.get("status") or {}).get("phase")
            if phase == PHASE_SUCCEEDED:
                yield StepEvent(elapsed=clock() - start, succeeded=True)
                return
            if phase == PHASE_FAILED:
                raise AlreadyFailed(f"pod {(pod.get('metadata') or {}).get('name', '?')} has failed")

            try:
                current = get_running_container_name(pod, seq_config)
            except PreconditionError as e:
                logger.debug("No running step yet: %s", e)
                continue
            if not current or current == running:
                continue
            running = current
            yield StepEvent(elapsed=clock() - start, container=current)
    finally:
        api_client.close()


def watch_pod_steps(name: str, namespace: str = "default", timeout_seconds: int = 120,
                    core_v1: client.CoreV1Api | None = None,
                    seq_config: SequencingConfig = DEFAULT_CONFIG):
    """Watch a pod until it succeeds, yielding StepEvents.

    Raises TimeoutError if the watch ends before the pod succeeded.
    """
    core_v1 = core_v1 or load_kube_client()
    w = watch.Watch()
    stream = w.stream(
        core_v1.list_namespaced_pod, namespace,
        field_selector=f"metadata.name={name}",
        timeout_seconds=timeout_seconds,
    )
    try:
        for step in follow_steps(stream, seq_config=seq_config):
            logger.info("Pod %s/%s: %s", namespace, name, step)
            yield step
            if step.succeeded:
                return
    finally:
        w.stop()
    raise TimeoutError(f"timeout exceeded, pod {name} did not succeed after {timeout_seconds}s")
