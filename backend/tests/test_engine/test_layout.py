"""Tests for the cluster layout generator."""

import math

import pytest

from honeycomb.engine.layout import CANVAS_LAYOUT, LayoutConfig, generate_cluster_layout, row_content_width


def test_row_content_width():
    assert row_content_width(0, 10, 5) == 0
    assert row_content_width(1, 10, 5) == 20
    assert row_content_width(3, 10, 5) == 70


def test_single_row_is_centered():
    cfg = LayoutConfig(hex_size=10, gap=5, row_gap=0, canvas_width=200, rows=[3])
    anchors = generate_cluster_layout(cfg)
    xs = [a.cx for a in anchors]
    assert xs == pytest.approx([75, 100, 125])
    assert anchors[0].id == "row0-hex0"


def test_rows_share_center_line():
    cfg = LayoutConfig(hex_size=10, gap=5, row_gap=2, canvas_width=200, rows=[2, 3])
    anchors = generate_cluster_layout(cfg)
    row0 = [a.cx for a in anchors if a.row == 0]
    row1 = [a.cx for a in anchors if a.row == 1]
    assert sum(row0) / 2 == pytest.approx(sum(row1) / 3)


def test_row_step_and_top_padding():
    cfg = LayoutConfig(hex_size=10, gap=5, row_gap=3, canvas_width=200, rows=[1, 1], min_top_padding=20)
    a, b = generate_cluster_layout(cfg)
    hex_height = math.sqrt(3) * 10
    assert a.cy == pytest.approx(hex_height / 2 + 20)
    assert b.cy - a.cy == pytest.approx(hex_height * 0.866 + 3)


def test_overflowing_row_is_left_clamped():
    cfg = LayoutConfig(hex_size=50, gap=50, row_gap=0, canvas_width=200, rows=[3, 1])
    anchors = generate_cluster_layout(cfg)
    assert anchors[0].cx == pytest.approx(50)
    # Narrow row centred on the wide row, not the canvas
    assert anchors[3].cx == pytest.approx(200)


def test_count_matches_rows():
    assert len(generate_cluster_layout(CANVAS_LAYOUT.layout)) == 10
    assert generate_cluster_layout(LayoutConfig(10, 5, 0, 100, rows=[])) == []
