from click.testing import CliRunner

from token_stats.rules_cli import rules_group
from token_stats.tokenization import DEFAULT_RULES

runner = CliRunner()


def test_rules_list_prints_table_in_order():
    result = runner.invoke(rules_group, ["list"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == len(DEFAULT_RULES)
    assert lines[0].split()[:2] == ["1", "clitic-not"]
    assert "tilde" in lines[-1]


def test_rules_list_with_custom_slash_exception():
    result = runner.invoke(rules_group, ["list", "--slash-exception", "c"])

    assert result.exit_code == 0
    assert r"(?<!\bc)/" in result.output


def test_rules_trace_shows_changed_rules():
    result = runner.invoke(rules_group, ["trace", "He's here."])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "clitic-is: 'He is here.'"
    assert any(line.startswith("trailing-full-stop:") for line in lines)
    assert lines[-1] == "He | is | here | ."
