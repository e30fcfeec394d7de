"""Tests for the record builder — status mapping and label/annotation pairing."""

from __future__ import annotations

import pytest

from amnotify.alertmanager.builder import (
    build_record,
    pair_up,
    record_from_pairs,
    status_for,
)
from amnotify.alertmanager.exceptions import LabelMismatchError
from amnotify.alertmanager.types import AlertStatus
from amnotify.core.types import AlertLevel


# ── Status ──────────────────────────────────────────────────────


class TestStatus:
    def test_ok_is_resolved(self) -> None:
        assert status_for(AlertLevel.OK) == AlertStatus.RESOLVED

    def test_every_non_ok_level_is_firing(self) -> None:
        for level in AlertLevel:
            if level == AlertLevel.OK:
                continue
            assert status_for(level) == AlertStatus.FIRING, level

    def test_build_record_uses_status(self) -> None:
        for level in AlertLevel:
            rec = build_record(level, [], [], [], [])
            expected = "resolved" if level == AlertLevel.OK else "firing"
            assert rec.status.value == expected


# ── Pairing ─────────────────────────────────────────────────────


class TestPairing:
    def test_all_pairs_kept_including_last(self) -> None:
        names = ["alertname", "severity", "team"]
        values = ["DiskFull", "page", "storage"]
        rec = build_record(AlertLevel.CRITICAL, names, values, [], [])
        assert len(rec.labels) == 3
        for name, value in zip(names, values):
            assert rec.labels[name] == value
        assert rec.labels["team"] == "storage"

    def test_single_pair_is_not_dropped(self) -> None:
        rec = build_record(AlertLevel.WARNING, ["severity"], ["page"], ["summary"], ["disk full"])
        assert rec.labels == {"severity": "page"}
        assert rec.annotations == {"summary": "disk full"}

    def test_annotations_independent_of_label_count(self) -> None:
        rec = build_record(
            AlertLevel.WARNING,
            ["severity"],
            ["page"],
            ["summary", "description", "runbook"],
            ["disk full", "/var is at 99%", "https://runbooks.example/disk"],
        )
        assert len(rec.labels) == 1
        assert len(rec.annotations) == 3

    def test_empty_lists_give_empty_maps(self) -> None:
        rec = build_record(AlertLevel.INFO, [], [], [], [])
        assert rec.labels == {}
        assert rec.annotations == {}

    def test_label_length_mismatch_raises(self) -> None:
        with pytest.raises(LabelMismatchError, match="labels: got 2 names but 1 values"):
            build_record(AlertLevel.CRITICAL, ["a", "b"], ["1"], [], [])

    def test_annotation_length_mismatch_raises(self) -> None:
        with pytest.raises(LabelMismatchError) as exc_info:
            build_record(AlertLevel.CRITICAL, [], [], ["summary"], [])
        assert exc_info.value.kind == "annotations"

    def test_duplicate_names_last_wins(self) -> None:
        rec = build_record(AlertLevel.CRITICAL, ["env", "env"], ["staging", "prod"], [], [])
        assert rec.labels == {"env": "prod"}

    def test_pair_up_preserves_order(self) -> None:
        assert pair_up(["b", "a"], ["2", "1"]) == [("b", "2"), ("a", "1")]


# ── Pairs API ───────────────────────────────────────────────────


class TestRecordFromPairs:
    def test_pairs(self) -> None:
        rec = record_from_pairs(
            AlertLevel.OK,
            labels=[("instance", "db-1")],
            annotations=[("summary", "recovered")],
        )
        assert rec.status == AlertStatus.RESOLVED
        assert rec.labels == {"instance": "db-1"}
        assert rec.annotations == {"summary": "recovered"}

    def test_defaults_empty(self) -> None:
        rec = record_from_pairs(AlertLevel.CRITICAL)
        assert rec.labels == {}
        assert rec.annotations == {}


# ── Wire form ───────────────────────────────────────────────────


class TestWireForm:
    def test_capitalised_keys(self) -> None:
        rec = build_record(AlertLevel.CRITICAL, ["severity"], ["page"], ["summary"], ["disk full"])
        assert rec.to_wire() == {
            "Status": "firing",
            "Labels": {"severity": "page"},
            "Annotations": {"summary": "disk full"},
        }

    def test_key_order(self) -> None:
        rec = build_record(AlertLevel.OK, [], [], [], [])
        assert list(rec.to_wire()) == ["Status", "Labels", "Annotations"]
