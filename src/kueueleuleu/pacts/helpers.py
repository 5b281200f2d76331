"""Public helpers to mark and recognize converted objects."""

from kueueleuleu.pacts.types import DEFAULT_CONFIG, SequencingConfig


def mark_converted(metadata: dict | None,
                   config: SequencingConfig = DEFAULT_CONFIG) -> dict:
    """Return a copy of `metadata` carrying the conversion annotation."""
    marked = dict(metadata or {})
    marked["annotations"] = dict(marked.get("annotations") or {})
    marked["annotations"][config.annotation_key] = config.annotation_value
    return marked


def is_converted(metadata: dict | None,
                 config: SequencingConfig = DEFAULT_CONFIG) -> bool:
    """Check whether `metadata` carries the conversion annotation."""
    annotations = (metadata or {}).get("annotations") or {}
    return annotations.get(config.annotation_key) == config.annotation_value


def full_name(manifest: dict) -> str:
    """Return 'Kind/name' string for use in messages."""
    meta = manifest.get("metadata") or {}
    return f"{manifest.get('kind', '?')}/{meta.get('name', '?')}"
