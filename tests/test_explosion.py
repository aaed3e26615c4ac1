import pytest

from algosolve.explosion import EMPTY_RESULT, explode, main


def test_worked_example():
    assert explode("mirkovC4nizCC44", "C4") == "mirkovniz"


def test_nested_bombs_leave_nothing():
    assert explode("12ab112ab2ab", "12ab") == ""


def test_text_without_bomb_is_unchanged():
    assert explode("abcdef", "xyz") == "abcdef"


def test_empty_bomb_leaves_text():
    assert explode("abc", "") == "abc"


@pytest.mark.parametrize(
    "text,bomb",
    [("aabbab", "ab"), ("xxyyxy", "xy"), ("C4C4C4", "C4"), ("hello", "l")],
)
def test_result_never_contains_bomb(text, bomb):
    assert bomb not in explode(text, bomb)


def test_result_is_subsequence_of_text():
    text, bomb = "mirkovC4nizCC44", "C4"
    remaining = iter(text)
    assert all(char in remaining for char in explode(text, bomb))


def test_main_prints_frula_when_empty(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("12ab112ab2ab\n12ab\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == EMPTY_RESULT


def test_main_prints_remaining_text(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("mirkovC4nizCC44\nC4\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == explode("mirkovC4nizCC44", "C4")


def test_main_needs_two_tokens(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("onlyone\n")
    with pytest.raises(ValueError):
        main([str(path)])