"""Unit tests for catalog ingestion and the in-memory index."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from musterroll.reference import CatalogIndex, build_snapshot, load_tables_dir, parse_pipe_table


class TestParsePipeTable:
    def test_header_and_rows(self):
        raw = "\ufeffid|name|faction_id|\n000001|Boyz|ORK|\n\n000002|Trukk|ORK|\n"
        assert parse_pipe_table(raw) == [
            {"id": "000001", "name": "Boyz", "faction_id": "ORK"},
            {"id": "000002", "name": "Trukk", "faction_id": "ORK"},
        ]

    def test_short_rows_are_padded(self):
        assert parse_pipe_table("a|b|c\n1|2") == [{"a": "1", "b": "2", "c": ""}]

    def test_empty(self):
        assert parse_pipe_table("") == []
        assert parse_pipe_table("id|name|") == []


class TestBuildSnapshot:
    def test_tables_map_to_fields(self, orks_snapshot):
        assert len(orks_snapshot.datasheets) == 8
        assert len(orks_snapshot.shared_abilities) == 3
        assert orks_snapshot.last_update == "2026-09-30 12:00:00"

    def test_missing_and_unknown_tables(self):
        snapshot = build_snapshot({"Factions": [{"id": "ORK", "name": "Orks"}], "Bogus": []})
        assert [f.id for f in snapshot.factions] == ["ORK"]
        assert snapshot.datasheets == []
        assert snapshot.last_update == "unknown"

    def test_invalid_row_raises(self):
        with pytest.raises(ValidationError):
            build_snapshot({"Factions": [{"id": "", "name": "Orks"}]})


def test_load_tables_dir(tmp_path):
    (tmp_path / "Factions.csv").write_text("id|name|link|\nORK|Orks||\n", encoding="utf-8")
    (tmp_path / "Datasheets.csv").write_text(
        "id|name|faction_id|transport|\nD_TRUKK|Trukk|ORK|capacity of 12 models|\n",
        encoding="utf-8",
    )
    (tmp_path / "Last_update.csv").write_text("last_update|\n2026-10-01 08:00:00|\n")

    snapshot = load_tables_dir(tmp_path)

    assert snapshot.factions[0].name == "Orks"
    assert snapshot.datasheets[0].transport == "capacity of 12 models"
    assert snapshot.models == []
    assert snapshot.last_update == "2026-10-01 08:00:00"


class TestCatalogIndex:
    def test_name_lookups_normalise(self, orks_index):
        assert orks_index.faction_id_by_name("ORKS") == "ORK"
        sheet = orks_index.datasheet_by_name("ORK", "  boyz")
        assert sheet is not None and sheet.id == "D_BOYZ"
        assert orks_index.datasheet_by_name("XX", "Boyz") is None

    def test_rows_by_datasheet(self, orks_index):
        assert [m.name for m in orks_index.models("D_GHAZ")] == ["Ghazghkull Thraka", "Makari"]
        assert len(orks_index.wargear("D_BOYZ")) == 3
        assert orks_index.models("D_NOPE") == []

    def test_leader_targets(self, orks_index):
        assert orks_index.leader_targets("D_WARBOSS") == ["D_BOYZ", "D_MEGA"]
        assert orks_index.leader_targets("D_BOYZ") == []

    def test_detachment_content(self, orks_index):
        detachment = orks_index.detachment_by_name("ORK", "WAR HORDE")
        assert detachment is not None
        assert [a.name for a in orks_index.detachment_abilities(detachment.id)] == ["Get Stuck In"]
        assert len(orks_index.stratagems(detachment.id)) == 2
        assert len(orks_index.enhancements(detachment.id)) == 2

    def test_enhancement_by_name_folds_quotes(self, orks_index):
        enhancement = orks_index.enhancement_by_name("ORK", "headwoppa’s killchoppa")
        assert enhancement is not None and enhancement.id == "E_HEAD"

    def test_shared_abilities(self, orks_index):
        assert orks_index.ability("A_DEMISE").name == "Deadly Demise"
        assert [a.id for a in orks_index.faction_abilities("ORK")] == ["A_WAAAGH"]
        assert orks_index.ability("A_NOPE") is None

    def test_last_update(self, orks_index):
        assert orks_index.last_update == "2026-09-30 12:00:00"


def test_index_over_minimal_snapshot():
    tables = {
        "Factions": [{"id": "ORK", "name": "Orks"}],
        "Datasheets": [{"id": "D1", "name": "Boyz", "faction_id": "ORK"}],
    }
    index = CatalogIndex(build_snapshot(tables))
    assert index.datasheet("D1").name == "Boyz"
    assert index.faction("ORK").name == "Orks"
