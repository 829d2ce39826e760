"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from honeycomb.engine.composer import compose
from honeycomb.engine.domain import Cluster, MapFile, MasterTemplate, TemplateSlot
from honeycomb.engine.geometry import HexCoordinate

SAMPLE_DATA_DIR = Path(__file__).resolve().parents[2] / "samples" / "data"

FIXED_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

# Default template labels in slot order
DEFAULT_LABELS = ["ELN", "LIMS", "SDMS", "CDS", "BI", "ODM", "CM", "Strategy", "Digital", "RSP", "QMS"]

# One cluster at the origin whose only cell sits on the cluster center
ORIGIN_TEMPLATE = MasterTemplate(
    id="t-origin",
    version="1.0.0",
    clusters=(
        Cluster(
            id="K",
            center=HexCoordinate(0, 0, 0),
            slots=(TemplateSlot(id="X", slot="C1", service_area="ELN", offset=HexCoordinate(0, 0)),),
        ),
    ),
)
ORIGIN_MAP = MapFile(id="m-origin", client_id="acme", version="1.0.0", active_cells=frozenset({"X"}))

# Two clusters with catalog-placed slots
TWO_CLUSTER_TEMPLATE = MasterTemplate(
    id="t-two",
    version="2.0.0",
    clusters=(
        Cluster(
            id="left",
            center=HexCoordinate(0, 0),
            label="Left",
            slots=(
                TemplateSlot(id="a", slot="C1", service_area="ELN", service_type_id="ST_ELN"),
                TemplateSlot(id="b", slot="C2", service_area="LIMS", service_type_id="ST_LIMS", display_name="Lab"),
                TemplateSlot(id="c", slot="C3", service_area="ODM", service_type_id="ST_ODM"),
            ),
        ),
        Cluster(
            id="right",
            center=HexCoordinate(6, -3),
            label="Right",
            slots=(
                TemplateSlot(id="d", slot="C1", service_area="BI", service_type_id="ST_BI", cell_state="ENGAGED"),
                TemplateSlot(id="e", slot="C7", service_area="CM"),
            ),
        ),
    ),
)
TWO_CLUSTER_MAP = MapFile(
    id="m-two",
    client_id="globex",
    version="3.0.0",
    active_cells=frozenset({"a", "b", "c", "d", "e"}),
    cell_display_names={"a": "Notebook"},
)


class StaticSource:
    """Template source returning fixed documents, or raising a preset error."""

    def __init__(self, master=None, map_file=None, error: Exception | None = None):
        self.master = master
        self.map_file = map_file
        self.error = error
        self.calls = 0

    def fetch_master_template(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.master

    def fetch_map_file(self, client_id):
        if self.error is not None:
            raise self.error
        return self.map_file


@pytest.fixture
def origin_footprint():
    return compose(ORIGIN_TEMPLATE, ORIGIN_MAP, now=FIXED_NOW)


@pytest.fixture
def two_cluster_footprint():
    return compose(TWO_CLUSTER_TEMPLATE, TWO_CLUSTER_MAP, now=FIXED_NOW)
