"""Tests for the shamba and shamba-aez commands."""

import json

import pytest

from shamba.cli import aez_main, main
from shamba.config import Settings


@pytest.fixture(autouse=True)
def _no_tracking_store(monkeypatch):
    """Keep the CLI from creating an MLflow store in the working directory."""
    monkeypatch.setattr("shamba.cli.init_tracing", lambda settings: None)


def _run(monkeypatch, *argv):
    monkeypatch.setattr("sys.argv", ["shamba", *argv])
    main()


class TestMain:
    def test_grouped_report(self, monkeypatch, capsys, sample_data_dir):
        _run(monkeypatch, "Ngecha", "Tigoni", "--data-dir", str(sample_data_dir))
        out = capsys.readouterr().out

        assert "Ward:         Ngecha Tigoni" in out
        assert "AEZ:          zone III (Lower Highlands)" in out
        assert "CROPS (4 of 7 suitable varieties)" in out
        assert "No variety reached" not in out
        assert "      - TRFK 6/8: 97% (Highly Suitable)" in out
        assert "      - Rosecoco: 69% (Moderately Suitable)" in out
        assert "LIVESTOCK (3 breeds suited to zone III)" in out
        assert "  Dairy Cattle: Friesian, Ayrshire" in out
        assert "  Goats: Toggenburg" in out
        assert "PASTURE & FODDER (2 varieties suited to zone III)" in out
        assert "  Grass: Napier grass (Kakamega 1)" in out
        assert "  Legume: Desmodium (Silverleaf)" in out

    def test_crop_groups_follow_ranking_order(self, monkeypatch, capsys, sample_data_dir):
        _run(monkeypatch, "Ngecha", "Tigoni", "--data-dir", str(sample_data_dir))
        out = capsys.readouterr().out

        positions = [out.index(f"\n  {crop_type}:") for crop_type in ("Beverage", "Cereal", "Root & Tuber", "Legume")]
        assert positions == sorted(positions)

    def test_fallback_notice(self, monkeypatch, capsys, sample_data_dir):
        monkeypatch.setattr("shamba.cli.settings", Settings(suitability_threshold=100))
        _run(monkeypatch, "Ngecha", "Tigoni", "--data-dir", str(sample_data_dir))
        out = capsys.readouterr().out

        assert "CROPS (7 of 7 suitable varieties)" in out
        assert "No variety reached 100%, showing the best available." in out

    def test_json_output(self, monkeypatch, capsys, sample_data_dir):
        _run(monkeypatch, "Iftin", "--county", "Garissa", "--data-dir", str(sample_data_dir), "--json")
        data = json.loads(capsys.readouterr().out)

        assert data["zone"] == "zone VII"
        assert data["location"]["ward"] == "Iftin"
        assert data["used_fallback"] is False
        assert [(r["crop"]["variety"], r["suitability_score"]) for r in data["crops"]] == [
            ("Gadam", 85),
            ("N26", 70),
        ]
        assert data["crops"][0]["crop"]["soil_textures"] == ["Sandy", "Sandy loam", "Loam"]
        assert [r["livestock"]["breed"] for r in data["livestock"]] == ["Sahiwal", "Galla", "Somali"]
        assert [r["pasture"]["variety"] for r in data["pasture"]] == ["Molopo"]

    def test_unknown_ward_exits(self, monkeypatch, capsys, sample_data_dir):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "Atlantis", "--data-dir", str(sample_data_dir))
        assert exc.value.code == 1
        assert "Ward not found: Atlantis" in capsys.readouterr().out

    def test_missing_data_dir_exits(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "Iftin", "--data-dir", str(tmp_path / "missing"))
        assert exc.value.code == 1
        assert "Could not load catalog" in capsys.readouterr().out


class TestAezMain:
    def test_prints_zone_and_name(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["shamba-aez", "2000", "1300"])
        aez_main()
        assert capsys.readouterr().out.strip() == "zone III (Lower Highlands)"

    def test_usage_on_missing_args(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["shamba-aez", "2000"])
        with pytest.raises(SystemExit) as exc:
            aez_main()
        assert exc.value.code == 1
        assert "Usage" in capsys.readouterr().out

    def test_rejects_non_numeric(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["shamba-aez", "high", "wet"])
        with pytest.raises(SystemExit):
            aez_main()
        assert "must be numbers" in capsys.readouterr().out
