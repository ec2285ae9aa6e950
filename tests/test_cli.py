import json

import pytest

from add_binary.cli import main


class TestCli:
    """Command line entry point"""

    def test_default_strategy(self, capsys):
        assert main(["5", "3"]) == 0
        assert capsys.readouterr().out.strip() == "1000"

    def test_named_strategy(self, capsys):
        assert main(["15", "0", "--strategy", "iterative"]) == 0
        assert capsys.readouterr().out.strip() == "1111"

    def test_all_strategies(self, capsys):
        assert main(["4", "4", "--all"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["builtin: 1000", "iterative: 1000", "recursive: 1000"]

    def test_json_output(self, capsys):
        assert main(["0", "0", "--all", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "a": 0,
            "b": 0,
            "results": {"builtin": "0", "iterative": "0", "recursive": "0"},
        }

    def test_negative_operand(self, capsys):
        assert main(["--", "-1", "0"]) == 0
        assert capsys.readouterr().out.strip() == "1" * 32

    def test_conversion_error(self, capsys, monkeypatch):
        monkeypatch.setenv("ADD_BINARY_NEGATIVE_POLICY", "error")
        assert main(["--", "-1", "0"]) == 2
        assert "negative" in capsys.readouterr().err

    def test_invalid_strategy_choice(self):
        with pytest.raises(SystemExit):
            main(["1", "1", "--strategy", "quantum"])

    def test_invalid_log_level(self, capsys, monkeypatch):
        monkeypatch.setenv("ADD_BINARY_LOG_LEVEL", "verbose")
        assert main(["1", "1"]) == 2
        assert "invalid configuration" in capsys.readouterr().err
