from algosolve.html_format import RULE_LINE, main, render_html, wrap_words


def test_words_join_with_single_spaces():
    assert render_html(["hello", "world"]) == "hello world"


def test_rule_alone():
    assert render_html(["<hr>"]) == "-" * 80 + "\n"


def test_break_starts_new_line():
    assert render_html(["a", "<br>", "b"]).split("\n") == ["a", "b"]


def test_rule_after_text_closes_the_line():
    assert list(wrap_words(["a", "<hr>", "b"])) == ["a", RULE_LINE, "b"]


def test_line_of_exactly_eighty_fits():
    words = ["x" * 40, "y" * 39]
    assert list(wrap_words(words)) == ["x" * 40 + " " + "y" * 39]


def test_line_of_eighty_one_wraps():
    words = ["x" * 40, "y" * 40]
    assert list(wrap_words(words)) == ["x" * 40, "y" * 40]


def test_lines_stay_within_width_and_keep_words():
    words = [("w" * (i % 9 + 1)) for i in range(300)]
    text = render_html(words)
    assert all(len(line) <= 80 for line in text.split("\n"))
    assert text.split() == words


def test_trailing_rule_after_text_prints_eighty_dashes():
    assert render_html(["a", "<hr>"]) == "a\n" + "-" * 80 + "\n"


def test_main_prints_layout(tmp_path, capsys):
    source = tmp_path / "page.txt"
    source.write_text("one two\n<br> three <hr>\n")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == render_html(["one", "two", "<br>", "three", "<hr>"])