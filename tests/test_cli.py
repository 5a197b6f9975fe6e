"""
Tests for the command-line interface.
"""

import json

from decision_criteria.cli import main, parse_matrix, parse_vector


class TestParsing:
    """Tests for inline argument parsing."""

    def test_parse_matrix(self):
        assert parse_matrix("10,0;4,4") == [[10.0, 0.0], [4.0, 4.0]]
        assert parse_matrix("1,2;") == [[1.0, 2.0]]

    def test_parse_vector(self):
        assert parse_vector("0.5,0.5") == [0.5, 0.5]


class TestMain:
    """Tests for main()."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "uncertainty" in capsys.readouterr().out

    def test_uncertainty_json(self, capsys):
        code = main(["uncertainty", "--matrix", "4,-2;0,3", "--format", "json"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["savage"]["decision_index_1based"] == 2
        assert data["worst_case_view"] == "minimax"

    def test_uncertainty_overrides(self, capsys):
        code = main([
            "uncertainty", "-m", "10,0;4,4",
            "--alpha-optimistic", "1", "--alpha-pessimistic", "0",
            "--view", "maximin", "-f", "json",
        ])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["hurwicz_optimistic"]["overall"] == 10.0
        assert data["hurwicz_pessimistic"]["overall"] == 4.0
        assert data["worst_case_view"] == "maximin"

    def test_risk_from_input_file(self, tmp_path, capsys):
        path = tmp_path / "input.json"
        path.write_text(json.dumps({"matrix": [[10, 0], [4, 4]], "probabilities": [0.5, 0.5]}))
        code = main(["risk", "--input", str(path), "-f", "json", "-t", "4"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["bayesian"]["expected"] == [5.0, 4.0]
        assert data["threshold"]["scores"] == [0.5, 0.0]

    def test_config_file(self, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"output_format": "markdown"}))
        code = main(["uncertainty", "-m", "10,0;4,4", "--config", str(config)])
        assert code == 0
        assert capsys.readouterr().out.startswith("# Decision Under Uncertainty")

    def test_output_file(self, tmp_path, capsys):
        path = tmp_path / "report.md"
        code = main(["risk", "-m", "10,0;4,4", "-p", "0.5,0.5", "-o", str(path)])
        assert code == 0
        assert "Report saved to" in capsys.readouterr().out
        assert path.read_text(encoding="utf-8").startswith("# Decision Under Risk")

    def test_probability_mismatch_exits_2(self, capsys):
        code = main(["risk", "-m", "10,0;4,4", "-p", "0.5,0.3,0.2"])
        assert code == 2
        assert "Expected 2 probabilities" in capsys.readouterr().err

    def test_jagged_matrix_exits_2(self, capsys):
        assert main(["uncertainty", "-m", "1,2;3"]) == 2
        assert "Row 1" in capsys.readouterr().err

    def test_missing_matrix_exits_2(self, capsys):
        assert main(["uncertainty"]) == 2
        assert "No payoff matrix" in capsys.readouterr().err

    def test_missing_probabilities_exits_2(self, capsys):
        assert main(["risk", "-m", "1,2"]) == 2
        assert "No probabilities" in capsys.readouterr().err

    def test_bad_number_exits_2(self, capsys):
        assert main(["uncertainty", "-m", "1,x"]) == 2
        assert "error:" in capsys.readouterr().err

    def test_missing_input_file_exits_2(self, tmp_path, capsys):
        missing = tmp_path / "nope.json"
        assert main(["uncertainty", "--input", str(missing)]) == 2
        assert "nope.json" in capsys.readouterr().err

    def test_missing_config_file_exits_2(self, tmp_path, capsys):
        missing = tmp_path / "settings.json"
        assert main(["uncertainty", "-m", "1,2", "--config", str(missing)]) == 2
        assert "settings.json" in capsys.readouterr().err

    def test_non_numeric_config_value_exits_2(self, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"alpha_optimistic": "0.5"}))
        assert main(["uncertainty", "-m", "10,0;4,4", "--config", str(config)]) == 2
        assert "alpha_optimistic must be a number" in capsys.readouterr().err
