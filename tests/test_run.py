"""Tests for run configuration and orchestration."""

from pathlib import Path

import pandas as pd
import pytest
import yaml

from percolation_grid.run import RunConfig, RunOrchestrator, run_from_config


def _make_config_data(base_dir: Path, **overrides) -> dict:
    data = {
        "run_name": "test_run",
        "grid": {"sizes": [3, 5]},
        "simulation": {"trials": 4, "seed": 42},
        "output": {"base_dir": str(base_dir)},
    }
    data.update(overrides)
    return data


class TestRunConfig:
    """Tests for RunConfig."""

    def test_properties(self, tmp_path):
        config = RunConfig(_make_config_data(tmp_path))

        assert config.run_name == "test_run"
        assert config.description == ""
        assert config.grid_sizes == [3, 5]
        assert config.trials == 4
        assert config.seed == 42
        assert config.confidence == 0.95
        assert config.trials_csv == tmp_path / "trials.csv"
        assert config.summary_csv == tmp_path / "summary.csv"

    def test_single_grid_size(self, tmp_path):
        config = RunConfig(_make_config_data(tmp_path, grid={"n": 7}))

        assert config.grid_sizes == [7]

    @pytest.mark.parametrize("section", ["run_name", "grid", "simulation", "output"])
    def test_missing_section(self, tmp_path, section):
        data = _make_config_data(tmp_path)
        del data[section]

        with pytest.raises(ValueError, match=section):
            RunConfig(data)

    @pytest.mark.parametrize("overrides", [
        {"grid": {}},
        {"grid": {"sizes": [3, 0]}},
        {"simulation": {"trials": 0}},
        {"simulation": {}},
        {"simulation": {"trials": 3, "confidence": 1.2}},
        {"output": {}},
        {"grid": {"sizes": []}},
        {"grid": {"sizes": 5}},
        {"grid": {"sizes": [True]}},
        {"grid": {"n": 2.5}},
        {"simulation": {"trials": True}},
        {"simulation": {"trials": 3, "seed": "abc"}},
        {"simulation": {"trials": 3, "confidence": None}},
    ])
    def test_invalid_values(self, tmp_path, overrides):
        with pytest.raises(ValueError):
            RunConfig(_make_config_data(tmp_path, **overrides))

    @pytest.mark.parametrize("section", ["grid", "simulation", "output"])
    @pytest.mark.parametrize("value", [None, 5, [3, 5]])
    def test_section_must_be_mapping(self, tmp_path, section, value):
        """Empty or scalar YAML sections are rejected before any lookup."""
        with pytest.raises(ValueError, match="must be a mapping"):
            RunConfig(_make_config_data(tmp_path, **{section: value}))

    def test_from_yaml(self, tmp_path):
        config_path = tmp_path / "run.yaml"
        data = _make_config_data(tmp_path / "out")
        data["output"]["trials_csv"] = "all_trials.csv"
        config_path.write_text(yaml.safe_dump(data))

        config = RunConfig.from_yaml(str(config_path))

        assert config.grid_sizes == [3, 5]
        assert config.trials_csv == tmp_path / "out" / "all_trials.csv"

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RunConfig.from_yaml(str(tmp_path / "missing.yaml"))


class TestRunOrchestrator:
    """Tests for RunOrchestrator."""

    def test_run_writes_outputs(self, tmp_path, capsys):
        config = RunConfig(_make_config_data(tmp_path / "results"))

        summary = run_from_config(config)
        captured = capsys.readouterr().out

        assert "Running: test_run" in captured
        assert config.trials_csv.exists()
        assert config.summary_csv.exists()

        trials = pd.read_csv(config.trials_csv)
        assert len(trials) == 8
        assert sorted(trials['n'].unique().tolist()) == [3, 5]
        assert (trials['run_name'] == "test_run").all()

        assert summary['n'].tolist() == [3, 5]
        saved = pd.read_csv(config.summary_csv)
        assert saved['mean'].tolist() == pytest.approx(summary['mean'].tolist())

    def test_seeded_runs_are_reproducible(self, tmp_path):
        first = RunOrchestrator(RunConfig(_make_config_data(tmp_path / "a"))).run()
        second = RunOrchestrator(RunConfig(_make_config_data(tmp_path / "b"))).run()

        assert first['mean'].tolist() == second['mean'].tolist()

    def test_sizes_use_independent_streams(self, tmp_path):
        """Adding a grid size does not change the results of the others."""
        orch_small = RunOrchestrator(RunConfig(
            _make_config_data(tmp_path / "a", grid={"sizes": [4]})))
        orch_both = RunOrchestrator(RunConfig(
            _make_config_data(tmp_path / "b", grid={"sizes": [4, 6]})))
        orch_small.run()
        orch_both.run()

        assert orch_small.stats[0].thresholds.tolist() == orch_both.stats[0].thresholds.tolist()
