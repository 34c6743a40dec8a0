import pytest

pytest.importorskip("typer")

from typer.testing import CliRunner

app = pytest.importorskip("strsim.cli").app


def test_compare_single_algorithm_raw() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["compare", "nushell", "nutshell", "--algorithm", "lev"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "1"


def test_compare_single_algorithm_normalized() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["compare", "nushell", "nutshell", "-a", "levenshtein", "-n"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "0.88"


def test_compare_all_algorithms_table() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["compare", "nushell", "nutshell"])

    assert result.exit_code == 0
    assert "algorithm" in result.stdout
    assert "distance" in result.stdout
    assert result.stdout.index("bag") < result.stdout.index("yujian_bo")


def test_compare_sorted_normalized_table() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["compare", "nushell", "nutshell", "--normalize", "--sort", "--workers", "2"]
    )

    assert result.exit_code == 0
    assert "overlap" in result.stdout


def test_compare_unknown_algorithm_fails() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["compare", "a", "b", "-a", "not-a-real-algorithm"])

    assert result.exit_code == 1
    assert "not-a-real-algorithm" in result.output


def test_list_algorithms() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "alias" in result.stdout
    assert "lcsubseq" in result.stdout


def test_config_precision_applies(tmp_path) -> None:
    config_path = tmp_path / "strsim.toml"
    config_path.write_text("[output]\nprecision = 3\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["--config", str(config_path), "compare", "nushell", "nutshell", "-a", "lev", "-n"],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "0.875"


def test_invalid_log_level_is_rejected() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--log-level", "CHATTY", "list"])

    assert result.exit_code == 2
    assert "Invalid log level" in result.output


@pytest.mark.parametrize(
    "content",
    [
        "output = 3\n",
        "[output]\nunknown = 1\n",
        "[parallelism]\nworkers = 0\n",
    ],
)
def test_malformed_config_is_rejected(tmp_path, content: str) -> None:
    config_path = tmp_path / "strsim.toml"
    config_path.write_text(content, encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["--config", str(config_path), "list"])

    assert result.exit_code == 2
    assert "--config" in result.output
