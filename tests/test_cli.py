import pytest

import score_grader.ui.cli as cli
from score_grader.core.grader import GradeLabel
from score_grader.utils.error_handler import UserCancelledError


class TestReadScoreInput:
    def test_prompt_has_no_newline(self, stdin_text, capsys):
        stdin_text("72\n")
        assert cli.read_score_input("Score:") == "72"
        assert capsys.readouterr().out == "Score:"

    def test_prompt_is_not_markup(self, stdin_text, capsys):
        stdin_text("1\n")
        cli.read_score_input("[bold]x")
        assert capsys.readouterr().out == "[bold]x"

    def test_end_of_input_cancels(self, stdin_text):
        stdin_text("")
        with pytest.raises(UserCancelledError):
            cli.read_score_input("Score:")


def test_display_grade_writes_single_letter(capsys):
    cli.display_grade(GradeLabel.C)
    captured = capsys.readouterr()
    assert captured.out == "C"
    assert captured.err == ""


def test_messages_go_to_stderr(capsys):
    cli.display_error("bad [input]")
    cli.display_warning("careful")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "bad [input]" in captured.err
    assert "careful" in captured.err


def test_long_prompt_is_not_wrapped(stdin_text, capsys):
    prompt = "Score " * 20
    stdin_text("80\n")
    assert cli.read_score_input(prompt) == "80"
    assert capsys.readouterr().out == prompt


def test_prompt_emoji_codes_are_kept(stdin_text, capsys):
    stdin_text("80\n")
    cli.read_score_input("Grade :smile: ")
    assert capsys.readouterr().out == "Grade :smile: "
