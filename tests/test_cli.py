"""Integration tests for the run_floyd.py and run_benchmark.py entry points.

Subprocess tests run the scripts exactly as a user would; in-process tests
call main() with an argv list for faster checks of exit codes.
"""

import json
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

import pytest

from apsp.config import DEFAULT_CONFIG, BenchmarkConfig, SampleConfig, config_to_json

import run_benchmark
import run_floyd

REPO_ROOT = Path(__file__).resolve().parents[1]

FOUR_VERTEX_FILE = """4
7
0 1 3.0
0 3 7.0
1 0 8.0
1 2 2.0
2 0 5.0
2 3 1.0
3 0 2.0
"""

NEGATIVE_CYCLE_FILE = "3\n3\n0 1 1.0\n1 2 -3.0\n2 0 1.0\n"

DETOUR_FILE = "4\n4\n0 1 5.0\n0 3 10.0\n1 2 3.0\n2 3 1.0\n"


def _write(tmp_path: Path, text: str, name: str = "graph.txt") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def _run_script(script: str, *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, script, *args],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        timeout=120,
    )


class TestRunFloydSubprocess:
    """run_floyd.py end to end."""

    def test_default_prints_report(self, tmp_path: Path) -> None:
        result = _run_script("run_floyd.py", str(_write(tmp_path, FOUR_VERTEX_FILE)))
        assert result.returncode == 0, result.stderr
        assert "=== Floyd-Warshall Algorithm Execution Result ===" in result.stdout
        assert "Iterations performed: 64" in result.stdout
        assert "Negative cycle detected: No" in result.stdout

    def test_path_query(self, tmp_path: Path) -> None:
        graph_file = _write(tmp_path, DETOUR_FILE)
        result = _run_script("run_floyd.py", "-p", "0", "3", str(graph_file))
        assert result.returncode == 0, result.stderr
        assert "Shortest distance from 0 to 3: 9.00" in result.stdout
        assert "Path: 0 -> 1 -> 2 -> 3" in result.stdout
        # report is suppressed when only a path is requested
        assert "Execution Result" not in result.stdout

    def test_output_file(self, tmp_path: Path) -> None:
        graph_file = _write(tmp_path, FOUR_VERTEX_FILE)
        out = tmp_path / "results.txt"
        result = _run_script("run_floyd.py", "-o", str(out), str(graph_file))
        assert result.returncode == 0, result.stderr
        assert f"Results saved to: {out}" in result.stdout
        assert "Path from 1 to 0 (distance: 5.00): 1 -> 2 -> 3 -> 0" in out.read_text()

    def test_invalid_file(self, tmp_path: Path) -> None:
        result = _run_script("run_floyd.py", str(_write(tmp_path, "abc\n")))
        assert result.returncode == 1
        assert "Invalid graph file format" in result.stderr

    def test_missing_arguments(self) -> None:
        result = _run_script("run_floyd.py")
        assert result.returncode == 2
        assert "usage" in result.stderr.lower()

    def test_help(self) -> None:
        result = _run_script("run_floyd.py", "--help")
        assert result.returncode == 0
        assert "--optimized" in result.stdout


class TestRunFloydMain:
    """run_floyd.main() exit codes and outputs."""

    def _main(self, *argv: str) -> int:
        with pytest.raises(SystemExit) as exc_info:
            run_floyd.main(list(argv))
        return exc_info.value.code

    def test_negative_cycle_warning(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, NEGATIVE_CYCLE_FILE)
        out = tmp_path / "results.txt"
        assert self._main("-o", str(out), str(graph_file)) == 0
        stdout = capsys.readouterr().out
        assert "Warning: Negative cycle detected in the graph." in stdout
        assert "Negative cycle involves vertex 0" in stdout
        assert not out.exists()

    def test_optimized_flag(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, DETOUR_FILE)
        assert self._main("-s", str(graph_file)) == 0
        stdout = capsys.readouterr().out
        assert "Algorithm: optimized" in stdout
        assert "Iterations performed: 16" in stdout

    def test_invalid_path_vertices(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, DETOUR_FILE)
        assert self._main("-p", "0", "7", str(graph_file)) == 1
        assert "Valid range: 0-3" in capsys.readouterr().err

    def test_no_path(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, DETOUR_FILE)
        assert self._main("-p", "3", "0", str(graph_file)) == 0
        assert "No path exists" in capsys.readouterr().out

    def test_self_loop_fails_execution(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, "2\n1\n0 0 1.0\n")
        assert self._main(str(graph_file)) == 1
        err = capsys.readouterr().err
        assert "Algorithm execution failed" in err
        assert "Diagonal distance at vertex 0" in err

    def test_verbose_and_memory(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, FOUR_VERTEX_FILE)
        assert self._main("-v", "-m", str(graph_file)) == 0
        stdout = capsys.readouterr().out
        assert "Graph loaded successfully: 4 vertices" in stdout
        assert "Adjacency Matrix (weights):" in stdout
        assert "=== Shortest Distance Matrix ===" in stdout
        assert "=== Memory Statistics ===" in stdout
        assert "Total:            256 bytes" in stdout
        assert "Program completed successfully." in stdout

    def test_json_and_plot(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, FOUR_VERTEX_FILE)
        json_dir = tmp_path / "results"
        plot_dir = tmp_path / "plots"
        assert self._main(
            "--json-dir", str(json_dir), "--plot-dir", str(plot_dir), str(graph_file)
        ) == 0

        result_files = list(json_dir.glob("*/result.json"))
        assert len(result_files) == 1
        result = json.loads(result_files[0].read_text())
        assert result["distances"][1][0] == 5.0
        assert result["metadata"]["graph_file"] == str(graph_file)
        assert (plot_dir / "distance_heatmap.png").exists()
        assert (plot_dir / "distance_heatmap.svg").exists()

    def test_unwritable_json_dir_reported(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, FOUR_VERTEX_FILE)
        blocker = _write(tmp_path, "", "not_a_dir")
        assert self._main("--json-dir", str(blocker), str(graph_file)) == 0
        captured = capsys.readouterr()
        assert f"Error: Failed to save result JSON to: {blocker}" in captured.err
        assert "Result JSON saved" not in captured.out

    def test_unwritable_plot_dir_reported(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, FOUR_VERTEX_FILE)
        blocker = _write(tmp_path, "", "not_a_dir")
        assert self._main("--plot-dir", str(blocker), str(graph_file)) == 0
        captured = capsys.readouterr()
        assert f"Error: Failed to save heatmap to: {blocker}" in captured.err
        assert "Heatmap saved" not in captured.out

    def test_generate_sample(self, tmp_path: Path, capsys) -> None:
        graph_file = tmp_path / "sample.txt"
        assert self._main("--generate", "6", str(graph_file)) == 0
        stdout = capsys.readouterr().out
        assert f"Sample graph written to {graph_file}: 6 vertices, 9 edges" in stdout
        assert graph_file.read_text().splitlines()[:2] == ["6", "9"]

    def test_generate_without_count_uses_config(self, tmp_path: Path, capsys) -> None:
        graph_file = tmp_path / "sample.txt"
        assert self._main(str(graph_file), "--generate") == 0
        stdout = capsys.readouterr().out
        assert f"Sample graph written to {graph_file}: 10 vertices, 27 edges" in stdout
        assert graph_file.read_text().splitlines()[:2] == ["10", "27"]

    def test_generate_zero_vertices_rejected(self, tmp_path: Path, capsys) -> None:
        assert self._main("--generate", "0", str(tmp_path / "empty.txt")) == 1
        assert "vertices must be in" in capsys.readouterr().err

    def test_config_file(self, tmp_path: Path, capsys) -> None:
        cfg = replace(
            DEFAULT_CONFIG,
            sample=SampleConfig(vertices=4, density=1.0),
            benchmark=BenchmarkConfig(sizes=(4,)),
        )
        config_path = _write(tmp_path, config_to_json(cfg), "config.json")
        graph_file = tmp_path / "sample.txt"
        assert self._main("--config", str(config_path), "--generate", "4", str(graph_file)) == 0
        assert "4 vertices, 12 edges" in capsys.readouterr().out
        assert self._main("--config", str(config_path), str(graph_file), "--generate") == 0
        assert "4 vertices, 12 edges" in capsys.readouterr().out

    def test_missing_config(self, tmp_path: Path, capsys) -> None:
        graph_file = _write(tmp_path, FOUR_VERTEX_FILE)
        assert self._main("--config", str(tmp_path / "absent.json"), str(graph_file)) == 1
        assert "config file not found" in capsys.readouterr().err

    def test_malformed_config(self, tmp_path: Path, capsys) -> None:
        config_path = _write(tmp_path, '{"engine": {"bogus": 1}}', "config.json")
        graph_file = _write(tmp_path, FOUR_VERTEX_FILE)
        assert self._main("--config", str(config_path), str(graph_file)) == 1
        assert "Error:" in capsys.readouterr().err

    def test_generate_too_many_vertices(self, tmp_path: Path, capsys) -> None:
        assert self._main("--generate", "5000", str(tmp_path / "big.txt")) == 1
        assert "vertices must be in" in capsys.readouterr().err


class TestRunBenchmark:
    """run_benchmark.py entry point."""

    def test_main_prints_table(self, capsys) -> None:
        run_benchmark.main(["--sizes", "4", "8", "--density", "0.5", "--seed", "1"])
        stdout = capsys.readouterr().out
        assert "Floyd-Warshall Algorithm Performance Benchmark" in stdout
        assert "Graph Density: 50.0%" in stdout
        assert "FAIL" not in stdout

    def test_invalid_density(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_benchmark.main(["--sizes", "4", "--density", "2.0"])
        assert exc_info.value.code == 1
        assert "density" in capsys.readouterr().err

    def test_subprocess(self) -> None:
        result = _run_script("run_benchmark.py", "--sizes", "5", "10")
        assert result.returncode == 0, result.stderr
        lines = result.stdout.splitlines()
        assert lines[-1].split()[0] == "10"
