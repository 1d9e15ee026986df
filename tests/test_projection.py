"""Tests for bathtub.core.projection – level to segment list."""

from __future__ import annotations

import pytest

from bathtub.core.projection import Segment, project


class TestSegment:
    def test_name(self):
        assert Segment(index=3).name == "level-3"

    def test_frozen(self):
        s = Segment(index=0)
        with pytest.raises(AttributeError):
            s.index = 1  # type: ignore[misc]


class TestProject:
    def test_empty_tub(self):
        assert project(0) == []

    def test_length_matches_level(self):
        assert len(project(7)) == 7

    def test_indices_from_floor(self):
        assert [s.index for s in project(4)] == [0, 1, 2, 3]

    def test_negative_level_is_empty(self):
        assert project(-2) == []

    def test_returns_fresh_list(self):
        a = project(3)
        b = project(3)
        assert a == b
        assert a is not b
