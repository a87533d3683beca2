"""
Tests for the benchmark command line.
"""

from pathlib import Path

import pytest
import yaml

from vendor_regex.bench import main, run_benchmark
from vendor_regex.config import AbbreviatorConfig
from vendor_regex.pool import CollisionPool


@pytest.fixture
def pool_file(tmp_path: Path, gem_names: list[str], descriptions: list[str]) -> Path:
    path = tmp_path / "pool.yaml"
    path.write_text(
        yaml.dump({"labels": gem_names, "descriptions": descriptions}),
        encoding="utf-8",
    )
    return path


class TestRunBenchmark:
    """Tests for run_benchmark()."""

    def test_one_result_per_label(self, gem_names: list[str]) -> None:
        pool = CollisionPool(labels=gem_names)
        results, elapsed = run_benchmark(pool, AbbreviatorConfig())
        assert [label for label, _ in results] == gem_names
        assert elapsed >= 0
        assert dict(results)["Fireball"] == "ireb"


class TestMain:
    """Tests for the CLI entry point."""

    def test_report(self, pool_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(pool_file), "--threshold", "4"]) == 0
        out = capsys.readouterr().out
        assert "Labels: 40" in out
        assert "Patterns > 4 chars:" in out
        assert "Full-label fallbacks: 1" in out
        assert "  Arc\n" in out

    def test_all_patterns(self, pool_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(pool_file), "--all", "--bundled-fragments"]) == 0
        out = capsys.readouterr().out
        assert "--- All Abbreviation Patterns ---" in out
        assert "Fragments: 0" not in out

    def test_missing_pool_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.yaml")]) == 1

    def test_no_labels(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("fragments: [Rarity: Rare]\n", encoding="utf-8")
        assert main([str(path)]) == 0
        assert "No labels to abbreviate." in capsys.readouterr().out

    def test_invalid_env_config(
        self, pool_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VENDOR_REGEX_MAX_REPAIR_ROUNDS", "-3")
        assert main([str(pool_file)]) == 2
