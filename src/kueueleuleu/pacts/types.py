"""Public data types shared by the converter, the status reader and the CLI."""

from dataclasses import dataclass, field

from kueueleuleu.core import constants


@dataclass(frozen=True)
class SequencingConfig:
    """Names, paths and image shared by converted pods and the entrypoint binary.

    Passed to every operation; the config file overrides individual values.
    """
    entrypoint_image: str = constants.ENTRYPOINT_IMAGE
    prepare_container_name: str = constants.PREPARE_CONTAINER_NAME
    annotation_key: str = constants.ANNOTATION_KEY
    annotation_value: str = constants.ANNOTATION_VALUE
    bin_volume: str = constants.BIN_VOLUME
    bin_path: str = constants.BIN_PATH
    steps_volume: str = constants.STEPS_VOLUME
    steps_path: str = constants.STEPS_PATH
    run_volume_prefix: str = constants.RUN_VOLUME_PREFIX
    run_path: str = constants.RUN_PATH

    @property
    def entrypoint_binary(self) -> str:
        """Location of the entrypoint binary once staged in the bin volume."""
        return f"{self.bin_path}/entrypoint"

    def run_volume(self, index: int) -> str:
        """Name of the signal volume of step `index`."""
        return f"{self.run_volume_prefix}{index}"

    def run_dir(self, index: int) -> str:
        """Mount path of the signal volume of step `index`."""
        return f"{self.run_path}/{index}"


DEFAULT_CONFIG = SequencingConfig()


@dataclass
class ConvertContext:
    """Shared state passed to converters during a conversion run."""
    config: SequencingConfig = DEFAULT_CONFIG
    warnings: list = field(default_factory=list)


class _AllStepsFinished:
    """Sentinel returned when no step is left to run."""
    __slots__ = ()

    def __repr__(self):
        return "ALL_STEPS_FINISHED"

    def __bool__(self):
        return False


ALL_STEPS_FINISHED = _AllStepsFinished()


@dataclass
class StepEvent:
    """One transition observed while following a live pod."""
    elapsed: float
    container: str | None = None
    succeeded: bool = False

    def __str__(self):
        text = f"[{round(self.elapsed)}s]"
        if self.container:
            text += f" {self.container}"
        if self.succeeded:
            text += " (succeeded)"
        return text
