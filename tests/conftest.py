"""Shared fixtures: a three-step pod spec wrapped as a Pod, a Job and a CronJob."""

import copy

import pytest


_RESOURCES = {
    "requests": {"cpu": "200m", "memory": "100M"},
    "limits": {"cpu": "200m", "memory": "100M"},
}

# "aaa" is declared second but sorts first: container statuses come back
# sorted by name, which must not be mistaken for execution order.
POD_SPEC = {
    "volumes": [
        {"name": "volume1", "emptyDir": {}},
        {"name": "volume2", "emptyDir": {}},
    ],
    "initContainers": [
        {
            "name": "dummy-init-container",
            "image": "alpine",
            "command": ["echo"],
            "args": ["toto"],
            "workingDir": "/tmp",
            "resources": {
                "requests": {"cpu": "50m", "memory": "100M"},
                "limits": {"cpu": "50m", "memory": "100M"},
            },
            "volumeMounts": [{"name": "volume1", "mountPath": "/tmp/volume1"}],
        },
    ],
    "containers": [
        {
            "name": "container1",
            "image": "alpine",
            "command": ["touch"],
            "args": ["/tmp/volume2/test.txt"],
            "resources": _RESOURCES,
            "volumeMounts": [{"name": "volume2", "mountPath": "/tmp/volume2"}],
        },
        {
            "name": "aaa",
            "image": "alpine",
            "command": ["ls"],
            "args": ["-al", "/tmp/volume1"],
            "workingDir": "/",
            "resources": _RESOURCES,
            "volumeMounts": [{"name": "volume1", "mountPath": "/tmp/volume1"}],
        },
        {
            "name": "container3",
            "image": "alpine",
            "command": ["stat"],
            "args": ["/tmp/volume2/test.txt"],
            "resources": _RESOURCES,
            "volumeMounts": [{"name": "volume2", "mountPath": "/tmp/volume2"}],
        },
    ],
    "restartPolicy": "Never",
    "automountServiceAccountToken": False,
}


@pytest.fixture
def pod_spec():
    """A fresh copy of the three-step pod spec."""
    return copy.deepcopy(POD_SPEC)


@pytest.fixture
def pod(pod_spec):
    return {"apiVersion": "v1", "kind": "Pod", "metadata": {"name": "dummy"}, "spec": pod_spec}


@pytest.fixture
def job(pod_spec):
    return {
        "apiVersion": "batch/v1", "kind": "Job",
        "metadata": {"name": "dummy"},
        "spec": {
            "template": {"spec": pod_spec},
            "backoffLimit": 1,
            "ttlSecondsAfterFinished": 100,
        },
    }


@pytest.fixture
def cronjob(pod_spec):
    return {
        "apiVersion": "batch/v1", "kind": "CronJob",
        "metadata": {"name": "dummy"},
        "spec": {
            "schedule": "0 0 * * *",
            "jobTemplate": {
                "spec": {
                    "template": {"spec": pod_spec},
                    "backoffLimit": 1,
                    "ttlSecondsAfterFinished": 100,
                },
            },
        },
    }
