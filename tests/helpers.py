"""Builders for live pods and container statuses, and the testdata location."""

from pathlib import Path

TESTDATA = Path(__file__).parent / "testdata"


def running(name: str) -> dict:
    """Status of a container still running."""
    return {"name": name, "state": {"running": {"startedAt": "2024-01-01T00:00:00Z"}}}


def waiting(name: str) -> dict:
    return {"name": name, "state": {"waiting": {"reason": "PodInitializing"}}}


def finished(name: str, finished_at: str | None = "2024-01-01T00:00:10Z") -> dict:
    """Status of a terminated container; finished_at=None leaves the timestamp out."""
    terminated = {"exitCode": 0, "reason": "Completed"}
    if finished_at is not None:
        terminated["finishedAt"] = finished_at
    return {"name": name, "state": {"terminated": terminated}}


def live_pod(init_names: list[str], names: list[str], init_statuses: list[dict],
             statuses: list[dict], phase: str = "Running", converted: bool = True) -> dict:
    """A pod as returned by the API: declared containers plus reported statuses."""
    metadata = {"name": "live"}
    if converted:
        metadata["annotations"] = {"norbjd.github.io/kueueleuleu": "true"}
    return {
        "metadata": metadata,
        "spec": {
            "initContainers": [{"name": n, "image": "alpine"} for n in init_names],
            "containers": [{"name": n, "image": "alpine"} for n in names],
        },
        "status": {
            "phase": phase,
            "initContainerStatuses": init_statuses,
            "containerStatuses": statuses,
        },
    }
