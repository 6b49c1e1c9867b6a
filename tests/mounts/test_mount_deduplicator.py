# File: tests/mounts/test_mount_deduplicator.py
"""Unit tests for merging mounts that share a rafter."""

from src.solar_mounting.models.layout_types import Mount
from src.solar_mounting.mounts.mount_deduplicator import deduplicate_mounts


class TestDeduplicateMounts:
    """Tests for deduplicate_mounts."""

    def test_empty(self):
        assert deduplicate_mounts([]) == []

    def test_exact_duplicates_collapse(self):
        mounts = [Mount(x=10, y=35.55), Mount(x=10, y=35.55)]
        assert deduplicate_mounts(mounts) == [Mount(x=10, y=35.55)]

    def test_near_mounts_on_same_rafter_collapse(self):
        mounts = [Mount(x=10, y=35.9), Mount(x=10, y=35.55)]
        assert deduplicate_mounts(mounts) == [Mount(x=10, y=35.55)]

    def test_distant_mounts_on_same_rafter_kept(self):
        mounts = [Mount(x=10, y=35.55), Mount(x=10, y=37.0)]
        assert len(deduplicate_mounts(mounts)) == 2

    def test_compares_against_last_kept_mount(self):
        mounts = [Mount(x=10, y=0.0), Mount(x=10, y=0.8), Mount(x=10, y=1.6)]
        assert deduplicate_mounts(mounts) == [Mount(x=10, y=0.0), Mount(x=10, y=1.6)]

    def test_different_rafters_never_merge(self):
        mounts = [Mount(x=26, y=35.55), Mount(x=10, y=35.55)]
        assert deduplicate_mounts(mounts) == [Mount(x=10, y=35.55), Mount(x=26, y=35.55)]

    def test_custom_merge_distance(self):
        mounts = [Mount(x=10, y=0.0), Mount(x=10, y=0.5)]
        assert len(deduplicate_mounts(mounts, merge_distance=0.25)) == 2

    def test_idempotent(self):
        mounts = [
            Mount(x=10, y=35.55),
            Mount(x=10, y=36.0),
            Mount(x=42, y=35.55),
            Mount(x=10, y=107.15),
        ]
        once = deduplicate_mounts(mounts)
        assert deduplicate_mounts(once) == once
