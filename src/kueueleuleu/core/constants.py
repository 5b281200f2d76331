"""Fixed values of the entrypoint wire contract and supported kinds."""

# Synchronization init container, prepended to every converted pod
PREPARE_CONTAINER_NAME = "kueueleuleu-prepare"
ENTRYPOINT_IMAGE = (
    "gcr.io/tekton-releases/github.com/tektoncd/pipeline/cmd/entrypoint"
    "@sha256:40abc3a78b558f251e890085972ed25fe7ad428f47998bc9c9c18f564dc03c32"
)
# Path of the binary inside ENTRYPOINT_IMAGE (ko layout)
IMAGE_ENTRYPOINT_PATH = "/ko-app/entrypoint"

ANNOTATION_KEY = "norbjd.github.io/kueueleuleu"
ANNOTATION_VALUE = "true"

BIN_VOLUME = "tekton-internal-bin"
BIN_PATH = "/tekton/bin"
# Only mounted by the prepare container: `entrypoint init` expects /tekton/steps to exist
STEPS_VOLUME = "tekton-internal-steps"
STEPS_PATH = "/tekton/steps"
RUN_VOLUME_PREFIX = "tekton-internal-run-"
RUN_PATH = "/tekton/run"

# Flags understood by the entrypoint binary
WAIT_FILE_FLAG = "-wait_file"
POST_FILE_FLAG = "-post_file"
STEP_METADATA_DIR_FLAG = "-step_metadata_dir"
ENTRYPOINT_FLAG = "-entrypoint"
ARGS_SEPARATOR = "--"

# (apiVersion, kind) pairs the converter accepts
POD_KIND = ("v1", "Pod")
JOB_KIND = ("batch/v1", "Job")
CRONJOB_KIND = ("batch/v1", "CronJob")

# Pod phases, as reported in status.phase
PHASE_PENDING = "Pending"
PHASE_RUNNING = "Running"
PHASE_SUCCEEDED = "Succeeded"
PHASE_FAILED = "Failed"

DEFAULT_CONFIG_FILE = "kueueleuleu.yaml"
