"""Smoke tests for the command-line entry point, external sources mocked."""

import logging
from unittest.mock import MagicMock, patch

import pytest
import yaml

import funding_matcher.main as main_mod
from funding_matcher.models import StoredMatch


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.dump({
        "profile": {"sectors": ["Retail"], "fundingTypes": ["Loans"]},
        "programs": [
            {"id": "p-mining", "name": "Mining Fund", "sectors": "Mining", "summary": "equity"},
            {"id": "p-retail", "name": "Retail Loans", "sectors": "Retail", "summary": "loan"},
            {"id": "p-open", "name": "Open Fund", "sectors": "", "summary": "loan"},
        ],
    }))
    return str(path)


def test_file_source_prints_qualifying_programs(catalog_file, capsys):
    code = main_mod.run(["biz-1", "--file", catalog_file])

    out = capsys.readouterr().out
    assert code == main_mod.EXIT_OK
    assert "Retail Loans" in out
    assert "Open Fund" in out
    assert "Mining Fund" not in out
    assert out.index("Retail Loans") < out.index("Open Fund")
    assert "✓ Matches funding type: Loans" in out


def test_all_flag_and_top(catalog_file, capsys):
    code = main_mod.run(["biz-1", "--file", catalog_file, "--all", "--top", "1"])

    out = capsys.readouterr().out
    assert code == main_mod.EXIT_OK
    assert "Mining Fund" in out
    assert "does not qualify" in out
    assert "Retail Loans" not in out


def test_missing_profile_exit_code(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.dump({"programs": []}))

    assert main_mod.run(["biz-1", "--file", str(path)]) == main_mod.EXIT_NO_PROFILE


def test_unreadable_source_exit_code(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        code = main_mod.run(["biz-1", "--file", str(tmp_path / "missing.yaml")])

    assert code == main_mod.EXIT_SOURCE_ERROR
    assert "Could not load profile or programs" in caplog.text


def test_supabase_source_with_drift_check(catalog_file, caplog, capsys):
    from funding_matcher.database import FileSource

    file_source = FileSource(catalog_file)
    mock_db = MagicMock()
    mock_db.get_business_profile.side_effect = file_source.get_business_profile
    mock_db.get_active_programs.side_effect = file_source.get_active_programs
    mock_db.get_stored_matches.return_value = [
        StoredMatch(business_id="biz-1", program_id="p-retail", match_score=90),
    ]

    fake_config = MagicMock()
    fake_config.supabase_url = "https://fake.supabase.co"
    fake_config.supabase_key = "fake-key"
    fake_config.match_history_limit = 20
    fake_config.log_level = "INFO"

    with (
        patch.object(main_mod, "load_config", return_value=fake_config),
        patch.object(main_mod, "SupabaseClient", return_value=mock_db) as mock_client_cls,
        caplog.at_level(logging.WARNING),
    ):
        code = main_mod.run(["biz-1", "--compare-stored"])

    assert code == main_mod.EXIT_OK
    mock_client_cls.assert_called_once_with("https://fake.supabase.co", "fake-key")
    mock_db.get_stored_matches.assert_called_once_with("biz-1", limit=20)
    assert "Drift on program p-retail: computed=55 stored=90 delta=+35" in caplog.text
    assert "Retail Loans" in capsys.readouterr().out
