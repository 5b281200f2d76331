"""Exceptions raised by the converter and the status reader."""


class KueueleuleuError(Exception):
    """Base class of every error raised by this package."""


class ValidationError(KueueleuleuError):
    """A pod spec cannot be converted as written."""


class ContainerMissingCommand(ValidationError):
    """One or more containers have no command to wrap.

    Lists every offending container, not only the first one.
    """

    def __init__(self, containers: list[str], context: str = ""):
        self.containers = list(containers)
        self.context = context
        names = ", ".join(f"'{c}'" for c in self.containers)
        message = f"container(s) {names} do not have a command, but one is expected"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)


class PreconditionError(KueueleuleuError):
    """A pod cannot be inspected for its running step."""


class NotConverted(PreconditionError):
    """The pod does not carry the conversion annotation."""

    def __init__(self, message: str = "not a kueueleuleu pod"):
        super().__init__(message)


class NotYetRunning(PreconditionError):
    """The pod is in a phase without a meaningful running step."""

    def __init__(self, phase):
        self.phase = phase
        super().__init__(f"pod is not running: got phase {phase}")


class TerminalStateError(KueueleuleuError):
    """The pod already reached a terminal phase."""


class AlreadySucceeded(TerminalStateError):
    def __init__(self, message: str = "pod is succeeded"):
        super().__init__(message)


class AlreadyFailed(TerminalStateError):
    def __init__(self, message: str = "pod is failed"):
        super().__init__(message)


class UnsupportedKindError(KueueleuleuError):
    """The manifest is not a Pod, Job or CronJob."""

    def __init__(self, api_version: str, kind: str):
        self.api_version = api_version
        self.kind = kind
        super().__init__(f"unknown k8s object: ({api_version}, {kind})")


class MalformedManifestError(KueueleuleuError):
    """The manifest lacks a string apiVersion or kind, or a field has the wrong type."""


class ConfigError(KueueleuleuError):
    """The configuration file cannot be used."""
