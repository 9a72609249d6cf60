"""
Tests for slotgrid.cli
=======================
"""

import json

import pytest

from slotgrid.cli import load_capabilities, main, parse_capability
from slotgrid.capabilities import CapabilitiesFormatError


class TestParseCapability:

    @pytest.mark.parametrize("cap_str, expected", [
        ("se:downloadsEnabled=true", ("se:downloadsEnabled", True)),
        ("acceptInsecureCerts=False", ("acceptInsecureCerts", False)),
        ("se:noVncPort=7900", ("se:noVncPort", 7900)),
        ("myApp:ratio=0.5", ("myApp:ratio", 0.5)),
        ("browserVersion=131.0.6778.85", ("browserVersion", "131.0.6778.85")),
        ("myApp:expr=a=b", ("myApp:expr", "a=b")),
        ("se:recordVideo", ("se:recordVideo", True)),
    ])
    def test_coercion(self, cap_str, expected):
        assert parse_capability(cap_str) == expected


class TestLoadCapabilities:

    def test_inline_json(self):
        assert load_capabilities('{"browserName": "chrome"}')["browserName"] == "chrome"

    def test_file(self, tmp_path):
        path = tmp_path / "caps.json"
        path.write_text(json.dumps({"browserName": "firefox"}))
        assert load_capabilities(f"@{path}")["browserName"] == "firefox"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CapabilitiesFormatError):
            load_capabilities(f"@{tmp_path / 'nope.json'}")

    def test_overrides(self):
        caps = load_capabilities('{"browserName": "chrome"}', ["se:downloadsEnabled=true", "browserName=edge"])
        assert caps["se:downloadsEnabled"] is True
        assert caps["browserName"] == "edge"


class TestMain:

    def test_match(self, capsys):
        code = main([
            "match",
            "--stereotype", '{"browserName": "chrome", "browserVersion": "131.0.6778.85"}',
            "--request", '{"browserName": "chrome", "browserVersion": "131"}',
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == "match"

    def test_no_match_prints_reason(self, capsys):
        code = main([
            "match",
            "--stereotype", '{"browserName": "chrome"}',
            "--request", '{"browserName": "chrome"}',
            "--cap", "se:downloadsEnabled=true",
        ])
        assert code == 1
        out = capsys.readouterr().out
        assert out.startswith("no match:")
        assert "se:downloadsEnabled" in out

    def test_match_honours_ignored_namespaces_env(self, monkeypatch, capsys):
        monkeypatch.setenv("SLOTGRID_IGNORED_NAMESPACES", "appium")
        code = main([
            "match",
            "--stereotype", '{"platformName": "ios"}',
            "--request", '{"platformName": "ios", "appium:noReset": true}',
        ])
        assert code == 0

    def test_compare(self, capsys):
        assert main(["compare", "133", "133.0a1"]) == 0
        assert capsys.readouterr().out.strip() == "1"

    def test_eligible(self, tmp_path, capsys):
        slots = [
            {"node_id": "node-a", "slot_id": "0", "stereotype": {"browserName": "chrome"}},
            {"node_id": "node-b", "slot_id": "0", "stereotype": {"browserName": "firefox"}},
        ]
        path = tmp_path / "slots.json"
        path.write_text(json.dumps(slots))
        code = main(["eligible", "--slots", str(path), "--request", '{"browserName": "firefox"}'])
        assert code == 0
        assert capsys.readouterr().out.split() == ["node-b/0"]

    def test_eligible_none(self, tmp_path, capsys):
        path = tmp_path / "slots.json"
        path.write_text(json.dumps([{"node_id": "node-a", "stereotype": {"browserName": "chrome"}}]))
        assert main(["eligible", "--slots", str(path), "--request", '{"browserName": "safari"}']) == 1
        assert capsys.readouterr().out == ""

    def test_bad_json_exits_2(self):
        assert main(["match", "--stereotype", "{", "--request", "{}"]) == 2

    def test_bad_slots_file_exits_2(self, tmp_path):
        path = tmp_path / "slots.json"
        path.write_text(json.dumps({"node_id": "node-a"}))
        assert main(["eligible", "--slots", str(path), "--request", "{}"]) == 2
        path.write_text(json.dumps([{"stereotype": {}}]))
        assert main(["eligible", "--slots", str(path), "--request", "{}"]) == 2
