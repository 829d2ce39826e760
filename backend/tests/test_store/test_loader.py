"""Tests for template sources and on-disk documents."""

import json
import logging

import pytest

from honeycomb.config import Settings
from honeycomb.engine.composer import TemplateLoadError, load_footprint
from honeycomb.engine.geometry import HexCoordinate
from honeycomb.loader import DefaultTemplateSource, FileTemplateSource, create_template_source
from honeycomb.models.documents import MapFileDocument, MasterTemplateDocument
from tests.conftest import FIXED_NOW, SAMPLE_DATA_DIR


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_sample_documents_load():
    source = FileTemplateSource(SAMPLE_DATA_DIR)
    fp = load_footprint("regeneron", source, now=FIXED_NOW)
    assert fp.master_template.version == "2.1.0"
    assert fp.map_file.version == "1.2.0"
    names = {c.id: c.display_name for c in fp.generated_cells}
    assert names["odm"] == "ODM"
    assert names["digital"] == "Digital"
    assert names["regulatory"] == "RSP"
    assert fp.get_cell("bi").cell_state == "ACTIVE_PERSUAL"


def test_missing_map_file_raises(tmp_path):
    source = FileTemplateSource(tmp_path)
    with pytest.raises(TemplateLoadError):
        source.fetch_map_file("acme")


def test_missing_documents_fall_back(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        fp = load_footprint("acme", FileTemplateSource(tmp_path), now=FIXED_NOW)
    assert fp.master_template.id == "default-1.0.0"
    assert "using default template" in caplog.text


def test_invalid_json_raises(tmp_path):
    (tmp_path / "master_template.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(TemplateLoadError):
        FileTemplateSource(tmp_path).fetch_master_template()


def test_duplicate_cell_ids_raise_load_error(tmp_path):
    _write(tmp_path / "master_template.json", {
        "version": "1",
        "clusters": [
            {"id": "a", "cellSlots": [{"slot": "C1", "id": "x"}]},
            {"id": "b", "cellSlots": [{"slot": "C1", "id": "x"}]},
        ],
    })
    with pytest.raises(TemplateLoadError):
        FileTemplateSource(tmp_path).fetch_master_template()


def test_client_id_cannot_escape_data_dir(tmp_path):
    with pytest.raises(TemplateLoadError):
        FileTemplateSource(tmp_path).fetch_map_file("../secrets")


def test_snake_case_fields_accepted(tmp_path):
    _write(tmp_path / "maps" / "acme.json", {
        "client_id": "acme",
        "active_cells": ["x"],
        "cluster_visibility": {"k": False},
        "unknown_field": 1,
    })
    map_file = FileTemplateSource(tmp_path).fetch_map_file("acme")
    assert map_file.active_cells == frozenset({"x"})
    assert not map_file.is_cluster_visible("k")
    assert map_file.is_cluster_visible("other")


def test_fractional_offsets_are_normalized(caplog):
    doc = MasterTemplateDocument.model_validate({
        "version": "1",
        "clusters": [{
            "id": "k",
            "centerPosition": {"q": 1, "r": -1, "s": 0},
            "cellSlots": [{"slot": "C1", "id": "x", "axialOffset": {"q": -1.5, "r": 0.5, "s": 2}}],
        }],
    })
    with caplog.at_level(logging.WARNING):
        template = doc.to_domain()
    assert template.clusters[0].slots[0].offset == HexCoordinate(-1, 1)
    assert "Normalized slot offset" in caplog.text


def test_nested_configuration_is_flattened():
    doc = MapFileDocument.model_validate({
        "clientId": "acme",
        "configuration": {"activeCells": ["a", "b"], "cellDisplayNames": {"a": "Alpha"}},
    })
    assert doc.active_cells == ["a", "b"]
    assert doc.to_domain().cell_display_names == {"a": "Alpha"}
    assert doc.to_domain().id == "acme-1.0.0"


def test_slot_id_defaults_to_slot_key():
    doc = MasterTemplateDocument.model_validate({"clusters": [{"id": "k", "cellSlots": [{"slot": "C3"}]}]})
    assert doc.to_domain().clusters[0].slots[0].id == "C3"


def test_create_template_source():
    assert isinstance(create_template_source(Settings(data_dir="")), DefaultTemplateSource)
    source = create_template_source(Settings(data_dir=str(SAMPLE_DATA_DIR)))
    assert isinstance(source, FileTemplateSource)


def test_undecodable_map_file_falls_back(tmp_path, caplog):
    path = tmp_path / "maps" / "acme.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b'{"clientId": "acme\xff"}')
    with pytest.raises(TemplateLoadError):
        FileTemplateSource(tmp_path).fetch_map_file("acme")

    _write(tmp_path / "master_template.json", {"version": "1", "clusters": []})
    with caplog.at_level(logging.WARNING):
        fp = load_footprint("acme", FileTemplateSource(tmp_path), now=FIXED_NOW)
    assert fp.master_template.id == "default-1.0.0"
    assert fp.client_id == "acme"


def test_undecodable_master_template_falls_back(tmp_path):
    (tmp_path / "master_template.json").write_bytes(b'{"version": "1\xfe"}')
    fp = load_footprint("acme", FileTemplateSource(tmp_path), now=FIXED_NOW)
    assert fp.master_template.id == "default-1.0.0"


@pytest.mark.parametrize("offset", ['{"q": 1e400}', '{"q": 0, "r": -1e400}', '{"q": 0, "r": 0, "s": 1e400}'])
def test_non_finite_offsets_fall_back(tmp_path, offset):
    (tmp_path / "master_template.json").write_text(
        '{"version": "1", "clusters": [{"id": "k", "centerPosition": ' + offset + "}]}",
        encoding="utf-8",
    )
    with pytest.raises(TemplateLoadError):
        FileTemplateSource(tmp_path).fetch_master_template()
    fp = load_footprint("acme", FileTemplateSource(tmp_path), now=FIXED_NOW)
    assert fp.master_template.id == "default-1.0.0"


def test_map_file_for_other_client_is_keyed_to_requested_client(tmp_path, caplog):
    _write(tmp_path / "maps" / "acme.json", {"clientId": "globex", "version": "2.0.0", "activeCells": ["x"]})
    with caplog.at_level(logging.WARNING):
        map_file = FileTemplateSource(tmp_path).fetch_map_file("acme")
    assert map_file.client_id == "acme"
    assert map_file.id == "acme-2.0.0"
    assert "declares client globex" in caplog.text
