"""Unit tests for ComparisonFactory and the create_comparison entry points."""
from __future__ import annotations

import json

import pytest

import modelcompare
from modelcompare.compare.factory import ComparisonFactory
from modelcompare.compare.handles import (
    Cancelled,
    ComparisonVariant,
    DimensionalComparison,
    StructuredComparison,
)
from modelcompare.errors import (
    ConnectivityError,
    DefinitionError,
    DirectQueryMismatchError,
    MixedCompatibilityLevelsError,
    UnsupportedDataSourceVersionError,
)
from modelcompare.schema.policy import CompatibilityPolicy
from tests.fixtures import write_definition
from tests.fixtures.doubles import (
    PBI_SOURCE,
    SOURCE,
    TARGET,
    ScriptedConfirm,
    make_config,
    make_connector,
)


def _build(connector, config, confirm=None, policy=None):
    return ComparisonFactory(connector, confirm or ScriptedConfirm(), policy).build(config)


def test_structured_for_matching_tabular_levels():
    result = _build(make_connector(1400, 1400), make_config())
    assert isinstance(result, StructuredComparison)
    assert result.variant is ComparisonVariant.STRUCTURED
    assert result.upgraded_from is None
    assert not result.target_upgraded


def test_dimensional_for_cube_source():
    result = _build(make_connector(1103, 1103), make_config())
    assert isinstance(result, DimensionalComparison)
    assert result.variant is ComparisonVariant.DIMENSIONAL


def test_handle_is_bound_to_the_config():
    config = make_config()
    result = _build(make_connector(1200, 1200), config)
    assert result.config is config
    assert result.config.levels == (1200, 1200)


def test_dimensional_mismatch_is_not_negotiated():
    confirm = ScriptedConfirm(answers=[True])
    connector = make_connector(1103, 1400)
    result = _build(connector, make_config(interactive=True), confirm)
    assert isinstance(result, DimensionalComparison)
    assert result.config.levels == (1103, 1400)
    assert confirm.questions == []
    assert connector.commits == []


def test_non_interactive_mismatch_returns_mismatched_handle():
    # Known gap: without an operator the level mismatch is not rejected.
    connector = make_connector(1400, 1200)
    confirm = ScriptedConfirm(answers=[True])

    result = _build(connector, make_config(), confirm)

    assert isinstance(result, StructuredComparison)
    assert result.config.levels == (1400, 1200)
    assert result.upgraded_from is None
    assert confirm.questions == []
    assert connector.commits == []


def test_non_interactive_mismatch_logs_warning(caplog):
    with caplog.at_level("WARNING", logger="modelcompare"):
        _build(make_connector(1400, 1200), make_config())
    assert "non-interactive" in caplog.text


def test_interactive_accept_upgrades_target():
    connector = make_connector(1400, 1200)
    confirm = ScriptedConfirm(answers=[True])

    result = _build(connector, make_config(interactive=True), confirm)

    assert isinstance(result, StructuredComparison)
    assert result.config.target.compatibility_level == 1400
    assert result.upgraded_from == 1200
    assert result.target_upgraded
    assert connector.commits == [(TARGET, 1400)]
    assert len(confirm.questions) == 1


def test_interactive_decline_raises():
    connector = make_connector(1400, 1200)
    with pytest.raises(MixedCompatibilityLevelsError) as exc_info:
        _build(connector, make_config(interactive=True), ScriptedConfirm(answers=[False]))
    assert exc_info.value.details == {"source_level": 1400, "target_level": 1200}
    assert connector.commits == []


def test_interactive_target_above_source_is_not_negotiated():
    confirm = ScriptedConfirm(answers=[True])
    result = _build(make_connector(1200, 1400), make_config(interactive=True), confirm)
    assert isinstance(result, StructuredComparison)
    assert confirm.questions == []


def test_cancel_during_resolution_returns_cancelled():
    connector = make_connector(1400, 1200, prepare_answers={TARGET: False})
    confirm = ScriptedConfirm(answers=[True])

    result = _build(connector, make_config(interactive=True), confirm)

    assert result == Cancelled(endpoint=TARGET)
    assert connector.commits == []
    assert confirm.questions == []


def test_validation_error_propagates():
    connector = make_connector(1400, 1400, source_dq=True)
    with pytest.raises(DirectQueryMismatchError):
        _build(connector, make_config())


def test_validation_runs_before_negotiation():
    connector = make_connector(1400, 1200, source_dq=True)
    confirm = ScriptedConfirm(answers=[True])
    with pytest.raises(DirectQueryMismatchError):
        _build(connector, make_config(interactive=True), confirm)
    assert confirm.questions == []
    assert connector.commits == []


def test_cloud_source_with_unsupported_version():
    connector = make_connector(1400, 1400, source=PBI_SOURCE, source_version="PowerBI_V1")
    with pytest.raises(UnsupportedDataSourceVersionError) as exc_info:
        _build(connector, make_config(source=PBI_SOURCE))
    assert exc_info.value.role == "source"


def test_connectivity_error_propagates_unchanged():
    connector = make_connector(1400, 1400, unreachable={SOURCE})
    with pytest.raises(ConnectivityError):
        _build(connector, make_config())


def test_commit_failure_propagates_without_handle():
    connector = make_connector(1400, 1200)

    def failing_commit(endpoint, level):
        raise ConnectivityError("Commit rejected.", address=endpoint.address)

    connector.commit_compatibility_level = failing_commit
    config = make_config(interactive=True)

    with pytest.raises(ConnectivityError):
        _build(connector, config, ScriptedConfirm(answers=[True]))
    assert config.target.compatibility_level == 1200


def test_build_is_idempotent_on_valid_config():
    connector = make_connector(1400, 1400)
    confirm = ScriptedConfirm(answers=[True, True])
    factory = ComparisonFactory(connector, confirm)
    config = make_config(interactive=True)

    first = factory.build(config)
    second = factory.build(config)

    assert first.variant is second.variant is ComparisonVariant.STRUCTURED
    assert confirm.questions == []


def test_rebuild_after_accepted_upgrade_does_not_negotiate_again():
    connector = make_connector(1400, 1200)
    confirm = ScriptedConfirm(answers=[True, True])
    factory = ComparisonFactory(connector, confirm)
    config = make_config(interactive=True)

    factory.build(config)
    again = factory.build(config)

    assert isinstance(again, StructuredComparison)
    assert again.upgraded_from is None
    assert len(confirm.questions) == 1
    assert connector.commits == [(TARGET, 1400)]


def test_custom_policy_threshold():
    policy = CompatibilityPolicy(structured_threshold=1400)
    result = _build(make_connector(1200, 1200), make_config(), policy=policy)
    assert isinstance(result, DimensionalComparison)


def test_create_comparison_interactive_override():
    connector = make_connector(1400, 1200)
    config = make_config(interactive=False)

    result = modelcompare.create_comparison(
        config, connector, interactive=True, confirm=ScriptedConfirm(answers=[True])
    )

    assert config.interactive is False
    assert result.config.interactive is True
    assert result.upgraded_from == 1200
    assert config.target.compatibility_level == 1400


def test_create_comparison_from_file(models_dir):
    path = write_definition(models_dir, "sales_1400.bim", "sales_1400.bim")
    result = modelcompare.create_comparison_from_file(path)
    assert isinstance(result, StructuredComparison)
    assert result.config.levels == (1400, 1400)


def test_create_comparison_from_file_interactive_upgrade(models_dir):
    path = write_definition(models_dir, "sales_1400.bim", "sales_1200.bim", interactive=True)

    result = modelcompare.create_comparison_from_file(
        path, confirm=ScriptedConfirm(answers=[True])
    )

    assert result.upgraded_from == 1200
    written = json.loads((models_dir / "sales_1200.bim").read_text())
    assert written["compatibilityLevel"] == 1400


def test_create_comparison_from_missing_file(tmp_path):
    with pytest.raises(DefinitionError):
        modelcompare.create_comparison_from_file(tmp_path / "missing.json")
