"""Tests for the conversion marker helpers."""

import dataclasses

import pytest

from kueueleuleu.pacts.helpers import full_name, is_converted, mark_converted
from kueueleuleu.pacts.types import ALL_STEPS_FINISHED, DEFAULT_CONFIG, SequencingConfig

KEY = "norbjd.github.io/kueueleuleu"


class TestMarkConverted:
    def test_creates_annotations(self):
        assert mark_converted({"name": "dummy"}) == {
            "name": "dummy", "annotations": {KEY: "true"},
        }

    def test_none_metadata(self):
        assert mark_converted(None) == {"annotations": {KEY: "true"}}

    def test_keeps_other_annotations(self):
        marked = mark_converted({"annotations": {"team": "data"}})
        assert marked["annotations"] == {"team": "data", KEY: "true"}

    def test_idempotent(self):
        once = mark_converted({"name": "dummy", "annotations": {"a": "b"}})
        assert mark_converted(once) == once

    def test_input_not_modified(self):
        meta = {"name": "dummy", "annotations": {"a": "b"}}
        mark_converted(meta)
        assert meta == {"name": "dummy", "annotations": {"a": "b"}}


class TestIsConverted:
    def test_plain_metadata(self):
        assert not is_converted({"name": "dummy"})
        assert not is_converted(None)
        assert not is_converted({"annotations": None})

    def test_marked_metadata(self):
        assert is_converted(mark_converted({"name": "dummy"}))

    def test_other_value_is_not_a_marker(self):
        assert not is_converted({"annotations": {KEY: "false"}})

    def test_custom_annotation(self):
        config = dataclasses.replace(DEFAULT_CONFIG, annotation_key="example.com/seq")
        marked = mark_converted({}, config)
        assert is_converted(marked, config)
        assert not is_converted(marked)


class TestTypes:
    def test_config_is_frozen(self):
        config = SequencingConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.bin_path = "/elsewhere"

    def test_run_paths(self):
        assert DEFAULT_CONFIG.run_volume(4) == "tekton-internal-run-4"
        assert DEFAULT_CONFIG.run_dir(4) == "/tekton/run/4"
        assert DEFAULT_CONFIG.entrypoint_binary == "/tekton/bin/entrypoint"

    def test_sentinel(self):
        assert repr(ALL_STEPS_FINISHED) == "ALL_STEPS_FINISHED"
        assert not ALL_STEPS_FINISHED

    def test_full_name(self):
        assert full_name({"kind": "Job", "metadata": {"name": "backup"}}) == "Job/backup"
        assert full_name({}) == "?/?"
