import logging

import pytest
from click.testing import CliRunner

from intcalc.repl import main


def test_single_expression() -> None:
    result = CliRunner().invoke(main, ["(2 + 3) * 4"])
    assert result.exit_code == 0
    assert result.output == "20\n"


def test_single_expression_error() -> None:
    result = CliRunner().invoke(main, ["(1+2"])
    assert result.exit_code == 1
    assert "Expected ')', found end of input at position 4" in result.output
    assert "(1+2\n    ^" in result.output


def test_single_expression_lex_error() -> None:
    result = CliRunner().invoke(main, ["3+@"])
    assert result.exit_code == 1
    assert "Unknown symbol '@' at position 2" in result.output


def test_interactive_session() -> None:
    result = CliRunner().invoke(main, [], input="1+2\n5/0\n\n10-2-3\nquit\n99\n")
    assert result.exit_code == 0
    lines = result.output.replace("> ", "").splitlines()
    assert lines[0] == "3"
    assert lines[1] == "[Evaluator error] Division by zero at position 1"
    assert lines[2] == "5/0"
    assert lines[3] == " ^"
    assert lines[4] == "0"
    assert lines[5] == "5"
    assert "99" not in lines


def test_interactive_session_ends_at_eof() -> None:
    result = CliRunner().invoke(main, [], input="12+8\n")
    assert result.exit_code == 0
    assert "20" in result.output


def test_interactive_session_survives_deep_nesting() -> None:
    deep = "(" * 1000 + "1" + ")" * 1000
    result = CliRunner().invoke(main, [], input=f"{deep}\n1+1\n")
    assert result.exit_code == 0
    assert result.exception is None
    assert "nested too deeply" in result.output
    assert result.output.replace("> ", "").splitlines()[-1] == "2"


@pytest.mark.parametrize(
    "args",
    [
        pytest.param(["-1"], id="leading-minus"),
        pytest.param(["--", "-1"], id="after-double-dash"),
    ],
)
def test_expression_starting_with_minus(args: list[str]) -> None:
    result = CliRunner().invoke(main, args)
    assert result.exit_code == 1
    assert "Unexpected '-' at position 0" in result.output


def test_expression_words_are_joined() -> None:
    result = CliRunner().invoke(main, ["2", "+", "3", "*", "4"])
    assert result.exit_code == 0
    assert result.output == "14\n"


def test_verbose_logs_tokens_and_result(caplog: pytest.LogCaptureFixture) -> None:
    result = CliRunner().invoke(main, ["-v", "1+2"])
    assert result.exit_code == 0
    messages = [r.getMessage() for r in caplog.records if r.name == "intcalc.repl" and r.levelno == logging.DEBUG]
    assert "Tokens: <NUMBER>1 <PLUS>+ <NUMBER>2 <END>" in messages
    assert "Result of '1+2': 3" in messages


def test_quiet_by_default(caplog: pytest.LogCaptureFixture) -> None:
    result = CliRunner().invoke(main, ["1+2"])
    assert result.exit_code == 0
    assert not [r for r in caplog.records if r.name == "intcalc.repl" and r.levelno == logging.DEBUG]
