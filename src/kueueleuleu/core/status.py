"""Find the step a converted pod is currently executing."""

from kueueleuleu.core.constants import (
    PHASE_FAILED, PHASE_PENDING, PHASE_RUNNING, PHASE_SUCCEEDED,
)
from kueueleuleu.pacts.errors import (
    AlreadyFailed, AlreadySucceeded, NotConverted, NotYetRunning,
)
from kueueleuleu.pacts.helpers import is_converted
from kueueleuleu.pacts.types import ALL_STEPS_FINISHED, DEFAULT_CONFIG, SequencingConfig


def check_pod_phase(phase) -> None:
    """Raise unless the pod is Running or Pending."""
    if phase in (PHASE_RUNNING, PHASE_PENDING):
        return
    if phase == PHASE_SUCCEEDED:
        raise AlreadySucceeded()
    if phase == PHASE_FAILED:
        raise AlreadyFailed()
    raise NotYetRunning(phase)


def sort_container_statuses(pod: dict) -> list[dict]:
    """Return init then regular container statuses, in declared order.

    The API reports statuses sorted by container name, not in the order the
    containers are declared, so the order is rebuilt from the pod spec.
    Statuses of undeclared containers go last.
    """
    spec = pod.get("spec") or {}
    declared = (spec.get("initContainers") or []) + (spec.get("containers") or [])
    order = {c.get("name"): i for i, c in enumerate(declared)}
    status = pod.get("status") or {}

    def _key(container_status):
        return order.get(container_status.get("name"), len(order))

    return (sorted(status.get("initContainerStatuses") or [], key=_key)
            + sorted(status.get("containerStatuses") or [], key=_key))


def _is_finished(container_status: dict) -> bool:
    terminated = (container_status.get("state") or {}).get("terminated")
    # a terminated record without timestamp is not trusted as finished
    return bool(terminated) and bool(terminated.get("finishedAt"))


def get_running_container_name(pod: dict, config: SequencingConfig = DEFAULT_CONFIG):
    """Return the name of the active step, or ALL_STEPS_FINISHED.

    Raises NotConverted for pods without the conversion annotation,
    AlreadySucceeded/AlreadyFailed for terminal pods and NotYetRunning for
    any other phase than Running or Pending.
    """
    if not is_converted(pod.get("metadata"), config):
        raise NotConverted()
    check_pod_phase((pod.get("status") or {}).get("phase"))

    for container_status in sort_container_statuses(pod):
        # TODO: skip by position, a user container sharing this name is skipped too
        if container_status.get("name") == config.prepare_container_name:
            continue
        if not _is_finished(container_status):
            return container_status.get("name")
    return ALL_STEPS_FINISHED
