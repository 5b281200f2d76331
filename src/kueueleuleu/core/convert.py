"""Manifest conversion: dispatch by kind, mark metadata, rewrite pod templates."""

import copy

from kueueleuleu.core.constants import CRONJOB_KIND, JOB_KIND, POD_KIND
from kueueleuleu.core.pod_spec import convert_pod_spec
from kueueleuleu.pacts.errors import MalformedManifestError, UnsupportedKindError
from kueueleuleu.pacts.helpers import full_name, is_converted, mark_converted
from kueueleuleu.pacts.types import DEFAULT_CONFIG, ConvertContext, SequencingConfig


def _child(node: dict, key: str) -> dict:
    """Return node[key], replacing a missing or null value by an empty mapping."""
    if not isinstance(node.get(key), dict):
        node[key] = {}
    return node[key]


class WorkloadConverter:
    """Convert one workload kind.

    template_path lists, from the manifest down to the pod template, the key
    sequences leading to every object whose metadata gets marked. The pod
    spec rewritten is the `spec` of the last of them.
    """

    def __init__(self, kind: tuple[str, str], template_path: tuple = ()):
        self.kind = kind
        self.template_path = template_path

    def convert(self, manifest: dict, ctx: ConvertContext) -> dict:
        """Return a converted copy of `manifest`."""
        name = full_name(manifest)
        converted = copy.deepcopy(manifest)
        node = converted
        node["metadata"] = mark_converted(node.get("metadata"), ctx.config)
        for keys in self.template_path:
            for key in keys:
                node = _child(node, key)
            node["metadata"] = mark_converted(node.get("metadata"), ctx.config)

        pod_spec = node.get("spec") or {}
        node["spec"] = convert_pod_spec(pod_spec, ctx.config, context=name)
        _warn_reserved_name(pod_spec, name, ctx)
        return converted


def _warn_reserved_name(pod_spec: dict, name: str, ctx: ConvertContext) -> None:
    """Warn when a user container reuses the prepare container's name."""
    reserved = ctx.config.prepare_container_name
    for c in (pod_spec.get("initContainers") or []) + (pod_spec.get("containers") or []):
        if c.get("name") == reserved:
            ctx.warnings.append(
                f"{name}: container '{reserved}' uses a reserved name, "
                f"its status will be ignored when looking for the running step"
            )


# Converter instances used by convert_manifest(), keyed by (apiVersion, kind)
_CONVERTERS = {c.kind: c for c in (
    WorkloadConverter(POD_KIND),
    WorkloadConverter(JOB_KIND, (("spec", "template"),)),
    WorkloadConverter(CRONJOB_KIND, (("spec", "jobTemplate"), ("spec", "template"))),
)}

CONVERTED_KINDS = tuple(_CONVERTERS)


def _context(config: SequencingConfig, warnings: list[str] | None) -> ConvertContext:
    return ConvertContext(config=config, warnings=warnings if warnings is not None else [])


def convert_pod(pod: dict, config: SequencingConfig = DEFAULT_CONFIG,
                warnings: list[str] | None = None) -> dict:
    """Convert a Pod: mark its metadata and rewrite its spec."""
    return _CONVERTERS[POD_KIND].convert(pod, _context(config, warnings))


def convert_job(job: dict, config: SequencingConfig = DEFAULT_CONFIG,
                warnings: list[str] | None = None) -> dict:
    """Convert a Job: mark the Job and its pod template, rewrite the template spec."""
    return _CONVERTERS[JOB_KIND].convert(job, _context(config, warnings))


def convert_cronjob(cronjob: dict, config: SequencingConfig = DEFAULT_CONFIG,
                    warnings: list[str] | None = None) -> dict:
    """Convert a CronJob down to the pod template of its job template."""
    return _CONVERTERS[CRONJOB_KIND].convert(cronjob, _context(config, warnings))


def manifest_kind(manifest: dict) -> tuple[str, str]:
    """Return (apiVersion, kind), raising MalformedManifestError if either isn't a string."""
    api_version = manifest.get("apiVersion")
    if not isinstance(api_version, str):
        raise MalformedManifestError("malformed k8s object: apiVersion is not a string")
    kind = manifest.get("kind")
    if not isinstance(kind, str):
        raise MalformedManifestError("malformed k8s object: kind is not a string")
    return api_version, kind


def convert_manifest(manifest: dict, config: SequencingConfig = DEFAULT_CONFIG,
                     warnings: list[str] | None = None) -> dict:
    """Convert any supported manifest. Already converted ones are returned as-is."""
    ctx = _context(config, warnings)
    api_version, kind = manifest_kind(manifest)
    converter = _CONVERTERS.get((api_version, kind))
    if converter is None:
        raise UnsupportedKindError(api_version, kind)
    if is_converted(manifest.get("metadata"), config):
        ctx.warnings.append(f"{full_name(manifest)} is already converted — left unchanged")
        return copy.deepcopy(manifest)
    return converter.convert(manifest, ctx)


def convert_manifests(manifests: list, config: SequencingConfig = DEFAULT_CONFIG,
                      warnings: list[str] | None = None) -> list[dict]:
    """Convert every document of a YAML stream, skipping empty documents."""
    if warnings is None:
        warnings = []
    converted = []
    for m in manifests:
        if not m:
            continue
        if not isinstance(m, dict):
            raise MalformedManifestError(f"malformed k8s object: expected a mapping, got {type(m).__name__}")
        converted.append(convert_manifest(m, config, warnings))
    return converted
