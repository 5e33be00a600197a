import pytest

from tsxlate.cli import main, parse_args
from tsxlate.translator import TranslationMode


def test_defaults_to_vtsls_in_replace_mode():
    assert parse_args([]) == (TranslationMode.REPLACE, ["vtsls", "--stdio"])


def test_append_flag_sets_mode():
    mode, command = parse_args(["--append"])
    assert mode is TranslationMode.APPEND
    assert command == ["vtsls", "--stdio"]


def test_custom_command_keeps_its_arguments():
    mode, command = parse_args(["typescript-language-server", "--stdio"])
    assert mode is TranslationMode.REPLACE
    assert command == ["typescript-language-server", "--stdio"]


def test_append_flag_is_taken_from_anywhere():
    mode, command = parse_args(["tsserver", "--append", "--stdio"])
    assert mode is TranslationMode.APPEND
    assert command == ["tsserver", "--stdio"]


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help_flags_request_help(flag):
    assert parse_args(["server", flag, "--append"]) is None


def test_main_help_prints_usage(capsys):
    assert main(["--help"]) == 0
    err = capsys.readouterr().err
    assert "--append" in err
    assert "vtsls --stdio" in err


def test_main_reports_missing_server(capsys):
    assert main(["tsxlate-no-such-language-server-command"]) == 1
    assert capsys.readouterr().err.startswith("Error:")