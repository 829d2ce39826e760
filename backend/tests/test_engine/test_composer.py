"""Tests for the template composer."""

import logging
from dataclasses import replace

import pytest

from honeycomb.engine.composer import (
    TemplateLoadError,
    compose,
    compose_default,
    load_footprint,
    resolve_display_name,
    update_cell_state,
)
from honeycomb.engine.domain import (
    Cluster,
    EngagementState,
    MapFile,
    MasterTemplate,
    TemplateSlot,
)
from honeycomb.engine.geometry import HexCoordinate
from tests.conftest import (
    DEFAULT_LABELS,
    FIXED_NOW,
    ORIGIN_MAP,
    ORIGIN_TEMPLATE,
    TWO_CLUSTER_MAP,
    TWO_CLUSTER_TEMPLATE,
    StaticSource,
)


def test_origin_cell(origin_footprint):
    assert len(origin_footprint.generated_cells) == 1
    cell = origin_footprint.generated_cells[0]
    assert cell.id == "X"
    assert cell.position == HexCoordinate(0, 0, 0)
    assert cell.engagement_state == EngagementState.NOT_ENGAGED
    assert cell.is_active
    assert origin_footprint.id == "acme-1.0.0"


def test_compose_is_idempotent():
    a = compose(TWO_CLUSTER_TEMPLATE, TWO_CLUSTER_MAP, now=FIXED_NOW)
    b = compose(TWO_CLUSTER_TEMPLATE, TWO_CLUSTER_MAP, now=FIXED_NOW)
    assert a == b


def test_positions_are_center_plus_slot_offset(two_cluster_footprint):
    positions = {c.id: c.position for c in two_cluster_footprint.generated_cells}
    assert positions["a"] == HexCoordinate(-2, 0)
    assert positions["b"] == HexCoordinate(0, -1)
    assert positions["d"] == HexCoordinate(4, -3)
    assert positions["e"] == HexCoordinate(6, -3)


def test_inactive_cells_are_absent():
    map_file = replace(TWO_CLUSTER_MAP, active_cells=frozenset({"a", "d"}))
    fp = compose(TWO_CLUSTER_TEMPLATE, map_file, now=FIXED_NOW)
    assert [c.id for c in fp.generated_cells] == ["a", "d"]


def test_cluster_visibility_defaults_to_visible(two_cluster_footprint):
    assert {c.cluster_id for c in two_cluster_footprint.generated_cells} == {"left", "right"}


def test_hidden_cluster_produces_no_cells():
    map_file = replace(TWO_CLUSTER_MAP, cluster_visibility={"left": False})
    fp = compose(TWO_CLUSTER_TEMPLATE, map_file, now=FIXED_NOW)
    assert {c.cluster_id for c in fp.generated_cells} == {"right"}


def test_all_clusters_hidden_is_empty():
    map_file = replace(TWO_CLUSTER_MAP, cluster_visibility={"left": False, "right": False})
    assert compose(TWO_CLUSTER_TEMPLATE, map_file, now=FIXED_NOW).generated_cells == ()


def test_display_name_chain(two_cluster_footprint):
    names = {c.id: c.display_name for c in two_cluster_footprint.generated_cells}
    # map file override
    assert names["a"] == "Notebook"
    # template display name
    assert names["b"] == "Lab"
    # service type abbreviation
    assert names["d"] == "BI"
    # unknown service type falls back to the service area
    assert names["c"] == "ODM"
    # no service type at all
    assert names["e"] == "CM"


def test_display_name_ignores_empty_override():
    slot = TemplateSlot(id="a", slot="C1", service_area="ELN", service_type_id="ST_ELN")
    map_file = MapFile(id="m", client_id="c", version="1", cell_display_names={"a": ""})
    assert resolve_display_name(slot, map_file) == "ELN"


def test_unknown_slot_is_skipped(caplog):
    template = MasterTemplate(
        id="t",
        version="1",
        clusters=(Cluster(id="k", center=HexCoordinate(0, 0), slots=(TemplateSlot("z", "C99", "ELN"),)),),
    )
    map_file = MapFile(id="m", client_id="c", version="1", active_cells=frozenset({"z"}))
    with caplog.at_level(logging.WARNING):
        fp = compose(template, map_file, now=FIXED_NOW)
    assert fp.generated_cells == ()
    assert "unknown slot C99" in caplog.text


def test_cell_state_carried_through(two_cluster_footprint):
    assert two_cluster_footprint.get_cell("d").cell_state == "ENGAGED"
    assert two_cluster_footprint.get_cell("a").cell_state is None


def test_baseline_has_no_explicit_fill(two_cluster_footprint):
    for cell in two_cluster_footprint.generated_cells:
        assert cell.visual_properties.background_color is None


def test_default_template_labels():
    fp = compose_default("regeneron", now=FIXED_NOW)
    assert [c.display_name for c in fp.generated_cells] == DEFAULT_LABELS
    assert len({c.position for c in fp.generated_cells}) == len(fp.generated_cells)


def test_default_template_is_deterministic():
    assert compose_default("x", now=FIXED_NOW) == compose_default("x", now=FIXED_NOW)


def test_load_footprint_from_source():
    source = StaticSource(TWO_CLUSTER_TEMPLATE, TWO_CLUSTER_MAP)
    fp = load_footprint("globex", source, now=FIXED_NOW)
    assert fp.client_id == "globex"
    assert len(fp.generated_cells) == 5


def test_load_footprint_falls_back_to_defaults(caplog):
    source = StaticSource(error=TemplateLoadError("service unavailable"))
    with caplog.at_level(logging.WARNING, logger="honeycomb.engine.composer"):
        fp = load_footprint("initech", source, now=FIXED_NOW)
    assert fp.client_id == "initech"
    assert fp.master_template.id == "default-1.0.0"
    assert len(fp.generated_cells) == 11
    assert "service unavailable" in caplog.text


def test_load_footprint_propagates_other_errors():
    source = StaticSource(error=RuntimeError("boom"))
    with pytest.raises(RuntimeError):
        load_footprint("initech", source)


def test_update_cell_state(origin_footprint):
    updated = update_cell_state(origin_footprint, "X", EngagementState.CURRENTLY_ENGAGED, now=FIXED_NOW)
    assert updated.get_cell("X").engagement_state == EngagementState.CURRENTLY_ENGAGED
    # original untouched
    assert origin_footprint.get_cell("X").engagement_state == EngagementState.NOT_ENGAGED


def test_update_unknown_cell_is_noop(origin_footprint):
    assert update_cell_state(origin_footprint, "nope", EngagementState.CURRENTLY_ENGAGED) is origin_footprint


def test_duplicate_cell_ids_rejected():
    with pytest.raises(ValueError, match="Duplicate cell id"):
        MasterTemplate(
            id="t",
            version="1",
            clusters=(
                Cluster(id="a", center=HexCoordinate(0, 0), slots=(TemplateSlot("x", "C1", "ELN"),)),
                Cluster(id="b", center=HexCoordinate(5, 0), slots=(TemplateSlot("x", "C1", "LIMS"),)),
            ),
        )


def test_cluster_slot_limit():
    slots = tuple(TemplateSlot(f"s{i}", f"C{i}", "ELN") for i in range(1, 12))
    with pytest.raises(ValueError):
        Cluster(id="k", center=HexCoordinate(0, 0), slots=slots)


def test_duplicate_slot_key_rejected():
    with pytest.raises(ValueError, match="Duplicate slot"):
        Cluster(id="k", center=HexCoordinate(0, 0), slots=(TemplateSlot("a", "C1", "ELN"), TemplateSlot("b", "C1", "BI")))
