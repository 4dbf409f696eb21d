"""Tests for squad export ingestion, cleaning and snapshot building.

Fixture ``cleaner`` is provided by conftest.py.
"""

import json

import pandas as pd
import pytest

from src.squad_data.ingestion import SquadIngester, SquadIngestionError
from src.squad_data.snapshots import (
    PlayerSnapshot,
    SnapshotBuilder,
    load_squad,
    make_player_id,
)

_SQUAD_CSV = """Name,Age,CA,PA,Position,Acc,Pac,Mar,Tck
"Bukayo Saka",22,150,170,AM RL,16,15,8,-
Name,Age,CA,PA,Position,Acc,Pac,Mar,Tck
 William Saliba ,23,155,175,D C,14,13,16,12-15
,,,,,,,,
"""


def _write_csv(tmp_path, text=_SQUAD_CSV, name="squad.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _make_frame(rows, columns=("Name", "Age", "Acc", "Pac")):
    return pd.DataFrame(rows, columns=list(columns), dtype=object)


# ── Ingestion ────────────────────────────────────────────────────────

class TestReadSquad:
    def test_reads_players(self, tmp_path):
        df = SquadIngester(_write_csv(tmp_path)).read_squad()
        assert df["Name"].tolist() == ["Bukayo Saka", "William Saliba"]

    def test_values_are_raw_strings(self, tmp_path):
        df = SquadIngester(_write_csv(tmp_path)).read_squad()
        assert df.loc[0, "Acc"] == "16"
        assert df.loc[1, "Tck"] == "12-15"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SquadIngester(tmp_path / "missing.csv").read_squad()

    def test_missing_required_column(self, tmp_path):
        path = _write_csv(tmp_path, "Name,Acc\nSaka,16\n")
        with pytest.raises(SquadIngestionError, match="Age"):
            SquadIngester(path).read_squad()

    def test_empty_file(self, tmp_path):
        path = _write_csv(tmp_path, "")
        with pytest.raises(SquadIngestionError):
            SquadIngester(path).read_squad()


class TestReadJson:
    def test_nested_attributes_flattened(self, tmp_path):
        path = tmp_path / "squad.json"
        path.write_text(json.dumps([
            {"Name": "Saka", "Age": 22, "attributes": {"Pace": 15, "Crossing": 14}},
        ]))
        df = SquadIngester(path).read_json()

        assert df.loc[0, "Pace"] == 15
        assert df.loc[0, "Crossing"] == 14
        assert "attributes" not in df.columns

    def test_players_key(self, tmp_path):
        path = tmp_path / "squad.json"
        path.write_text(json.dumps({"players": [{"Name": "Saka", "Age": 22}]}))
        assert len(SquadIngester(path).read_json()) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "squad.json"
        path.write_text("[{")
        with pytest.raises(SquadIngestionError, match="Invalid JSON"):
            SquadIngester(path).read_json()

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "squad.json"
        path.write_text(json.dumps("Saka"))
        with pytest.raises(SquadIngestionError, match="Expected a list"):
            SquadIngester(path).read_json()


# ── Cleaning ─────────────────────────────────────────────────────────

class TestNormalizeAttributeName:
    @pytest.mark.parametrize("header, expected", [
        ("Acc", "Acceleration"),
        ("OtB", "Off the Ball"),
        ("1v1", "One on Ones"),
        ("TRO", "Rushing Out"),
        ("L  Th", "Long Throws"),
        ("Acceleration", "Acceleration"),
        ("Custom", "Custom"),
    ])
    def test_headers(self, cleaner, header, expected):
        assert cleaner.normalize_attribute_name(header) == expected


class TestParseAttributeValue:
    @pytest.mark.parametrize("raw, expected", [
        ("14", 14),
        (" 7 ", 7),
        (14, 14),
        (14.0, 14),
        ("12-15", 12),
        ("-", None),
        ("?", None),
        ("", None),
        (None, None),
        (float("nan"), None),
        (True, None),
        ("abc", None),
    ])
    def test_values(self, cleaner, raw, expected):
        assert cleaner.parse_attribute_value(raw) == expected


class TestNormalizePlayerName:
    def test_curly_apostrophe(self, cleaner):
        assert cleaner.normalize_player_name("Martin Ødegaard\u2019s") == "Martin Ødegaard's"

    def test_whitespace(self, cleaner):
        assert cleaner.normalize_player_name('  "Declan   Rice" ') == "Declan Rice"

    def test_empty(self, cleaner):
        assert cleaner.normalize_player_name("") is None

    def test_nan(self, cleaner):
        assert cleaner.normalize_player_name(float("nan")) is None


class TestCleanSquad:
    def test_headers_expanded(self, cleaner, tmp_path):
        raw = SquadIngester(_write_csv(tmp_path)).read_squad()
        cleaned = cleaner.clean_squad(raw)
        for col in ("Acceleration", "Pace", "Marking", "Tackling"):
            assert col in cleaned.columns

    def test_attribute_values_parsed(self, cleaner, tmp_path):
        raw = SquadIngester(_write_csv(tmp_path)).read_squad()
        cleaned = cleaner.clean_squad(raw)

        assert cleaned.loc[0, "Acceleration"] == 16
        assert pd.isna(cleaned.loc[0, "Tackling"])
        assert cleaned.loc[1, "Tackling"] == 12
        assert str(cleaned["Tackling"].dtype) == "Int64"

    def test_identity_columns_parsed(self, cleaner, tmp_path):
        raw = SquadIngester(_write_csv(tmp_path)).read_squad()
        cleaned = cleaner.clean_squad(raw)

        assert cleaned.loc[1, "Age"] == 23
        assert cleaned.loc[1, "CA"] == 155
        assert cleaned.loc[1, "Position"] == "D C"

    def test_invalid_age_dropped(self, cleaner, caplog):
        raw = _make_frame([["Saka", "22", "16", "15"], ["Nobody", "abc", "10", "10"]])
        cleaned = cleaner.clean_squad(raw)

        assert cleaned["Name"].tolist() == ["Saka"]
        assert "Skipping 1 rows" in caplog.text

    def test_duplicate_attribute_keeps_first(self, cleaner, caplog):
        raw = _make_frame(
            [["Saka", "22", "16", "9"]], columns=("Name", "Age", "Acc", "Acceleration")
        )
        cleaned = cleaner.clean_squad(raw)

        assert cleaned.loc[0, "Acceleration"] == 16
        assert "Duplicate attribute column" in caplog.text

    def test_out_of_range_logged(self, cleaner, caplog):
        raw = _make_frame([["Saka", "22", "25", "15"]])
        cleaner.clean_squad(raw)
        assert "outside 1-20" in caplog.text

    def test_does_not_mutate_input(self, cleaner):
        raw = _make_frame([["Saka", "22", "16", "15"]])
        cleaner.clean_squad(raw)
        assert list(raw.columns) == ["Name", "Age", "Acc", "Pac"]


# ── Snapshots ────────────────────────────────────────────────────────

class TestSnapshotBuilder:
    def test_build_from_export(self, cleaner, tmp_path):
        raw = SquadIngester(_write_csv(tmp_path)).read_squad()
        saka, saliba = SnapshotBuilder().build(cleaner.clean_squad(raw))

        assert saka.player_id == "bukayo_saka_22"
        assert saka.current_ability == 150
        assert saka.positions == "AM RL"
        assert dict(saka.attributes) == {"Acceleration": 16, "Pace": 15, "Marking": 8}
        assert saliba.attributes["Tackling"] == 12

    def test_uid_column_used(self, cleaner):
        raw = _make_frame([["Saka", "22", "16", "15", "9001"]],
                          columns=("Name", "Age", "Acc", "Pac", "UID"))
        (snapshot,) = SnapshotBuilder().build(cleaner.clean_squad(raw))
        assert snapshot.player_id == "9001"

    def test_duplicate_ids_suffixed(self, cleaner, caplog):
        raw = _make_frame([["Saka", "22", "16", "15"], ["Saka", "22", "10", "10"]])
        first, second = SnapshotBuilder().build(cleaner.clean_squad(raw))

        assert first.player_id == "saka_22"
        assert second.player_id == "saka_22_2"
        assert "Duplicate player id" in caplog.text

    def test_values_are_plain_ints(self, cleaner):
        raw = _make_frame([["Saka", "22", "16", "15"]])
        (snapshot,) = SnapshotBuilder().build(cleaner.clean_squad(raw))
        assert type(snapshot.age) is int
        assert all(type(v) is int for v in snapshot.attributes.values())


class TestPlayerSnapshot:
    def test_make_player_id(self):
        assert make_player_id("Bukayo Saka", 22) == "bukayo_saka_22"

    def test_attributes_read_only(self):
        snapshot = PlayerSnapshot("p1", "Saka", 22, {"Pace": 15})
        with pytest.raises(TypeError):
            snapshot.attributes["Pace"] = 20

    def test_source_dict_copied(self):
        attrs = {"Pace": 15}
        snapshot = PlayerSnapshot("p1", "Saka", 22, attrs)
        attrs["Pace"] = 1
        assert snapshot.attributes["Pace"] == 15

    def test_from_dict_without_id(self):
        snapshot = PlayerSnapshot.from_dict(
            {"name": "Bukayo Saka", "age": 22, "attributes": {"Pace": "15"}}
        )
        assert snapshot.player_id == "bukayo_saka_22"
        assert snapshot.attributes == {"Pace": 15}

    def test_from_dict_id_key(self):
        snapshot = PlayerSnapshot.from_dict({"id": 7, "name": "Saka", "age": 22})
        assert snapshot.player_id == "7"
        assert snapshot.attributes == {}

    def test_from_dict_skips_null_attributes(self):
        snapshot = PlayerSnapshot.from_dict(
            {"id": 1, "name": "Saka", "age": 22, "attributes": {"Pace": None, "Stamina": 14}}
        )
        assert snapshot.attributes == {"Stamina": 14}

    def test_from_dict_null_attribute_map(self):
        snapshot = PlayerSnapshot.from_dict({"id": 1, "name": "Saka", "age": 22, "attributes": None})
        assert snapshot.attributes == {}

    def test_to_dict(self):
        snapshot = PlayerSnapshot("p1", "Saka", 22, {"Pace": 15}, current_ability=150)
        assert snapshot.to_dict() == {
            "player_id": "p1",
            "name": "Saka",
            "age": 22,
            "current_ability": 150,
            "potential_ability": None,
            "positions": None,
            "attributes": {"Pace": 15},
        }


class TestLoadSquad:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Run the import first"):
            load_squad(tmp_path / "squad_latest.json")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "squad.json"
        path.write_text(json.dumps({"metadata": {}}))
        with pytest.raises(ValueError, match="Malformed squad file"):
            load_squad(path)

    def test_loads_players(self, tmp_path):
        path = tmp_path / "squad.json"
        path.write_text(json.dumps({"players": [
            {"player_id": "p1", "name": "Saka", "age": 22, "attributes": {"Pace": 15}},
        ]}))
        (player,) = load_squad(path)
        assert player.player_id == "p1"
        assert player.attributes["Pace"] == 15

    def test_null_attribute_skipped(self, tmp_path):
        path = tmp_path / "squad.json"
        path.write_text(json.dumps({"players": [
            {"player_id": "p1", "name": "Saka", "age": 22,
             "attributes": {"Pace": None, "Crossing": 14}},
        ]}))
        (player,) = load_squad(path)
        assert "Pace" not in player.attributes
        assert player.attributes["Crossing"] == 14
