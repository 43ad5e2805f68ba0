import io
import sys

from config.config import validate_config
from main import repl, parse_args, run
from session import Session


def test_repl_runs_until_exit():
    stdin = io.StringIO("1 2 +\n4 *\nbad\nexit\n5\n")
    stdout = io.StringIO()
    stack = repl(Session(), stdin, stdout, prompt="> ")
    assert stack == [12]
    assert stdout.getvalue() == (
        "> Stack:  3, Result: 3\n"
        "> Stack:  12, Result: 12\n"
        "> Parsing Error!\n"
        "> "
    )


def test_repl_stops_at_end_of_input():
    stdout = io.StringIO()
    stack = repl(Session(), io.StringIO("2 3 ^"), stdout, prompt="")
    assert stack == [8]
    assert stdout.getvalue() == "Stack:  8, Result: 8\n"


def test_parse_args():
    args = parse_args([])
    assert args.log_level == "WARNING"
    assert args.prompt == "> "
    assert not args.no_prompt

    args = parse_args(["--log-level", "debug", "--no-prompt"])
    assert args.log_level == "DEBUG"
    assert args.no_prompt


def test_run_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 1 +\nexit\n"))
    assert run(["--no-prompt"]) == 0
    assert capsys.readouterr().out == "Stack:  2, Result: 2\n"


def test_validate_config():
    assert validate_config()
