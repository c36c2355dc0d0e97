"""Tests for API runtime helpers (settings-driven rules and state lifecycle)."""

from __future__ import annotations

import pytest

from musterroll.api.runtime import ApiState, rules_from_settings
from musterroll.config import Settings
from musterroll.domain.rules_config import DEFAULT_RULES
from musterroll.repository import JsonCatalogRepository


def _settings(tmp_path, **overrides) -> Settings:
    return Settings(catalog_path=tmp_path / "catalog.json", **overrides)


def test_rules_from_settings(tmp_path):
    rules = rules_from_settings(_settings(tmp_path, max_leaders_per_unit=3))
    assert rules.allocation.max_leaders_per_unit == 3
    assert rules.allocation.default_model_slots == DEFAULT_RULES.allocation.default_model_slots
    assert rules.matching == DEFAULT_RULES.matching


def test_state_wires_workspace_rules(tmp_path):
    state = ApiState(settings=_settings(tmp_path, max_leaders_per_unit=1))
    assert state.workspace.rules.allocation.max_leaders_per_unit == 1
    assert not state.catalog.is_loaded


def test_startup_loads_stored_catalog(tmp_path, orks_snapshot):
    JsonCatalogRepository(tmp_path / "catalog.json").save(orks_snapshot)
    state = ApiState(settings=_settings(tmp_path))

    state.startup()

    assert state.catalog.is_loaded
    assert state.catalog.last_update == "2026-09-30 12:00:00"


def test_startup_without_catalog_leaves_it_unloaded(tmp_path):
    state = ApiState(settings=_settings(tmp_path))
    state.startup()
    assert not state.catalog.is_loaded


@pytest.mark.asyncio
async def test_shutdown_resets_workspace(tmp_path, orks_snapshot, sample_list):
    state = ApiState(settings=_settings(tmp_path))
    state.catalog.use(orks_snapshot)
    state.workspace.import_text(sample_list)

    await state.shutdown()

    assert state.workspace.army is None
