from bstmap.cli import WORDS, lower_than_string, main


def test_lower_than_string():
    assert lower_than_string("casa", "case")
    assert not lower_than_string("saco", "saca")
    assert not lower_than_string("cosa", "cosa")


def test_main_prints_words_in_order(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == sorted(WORDS)
    assert lines[0] == "casa"
    assert lines[-1] == "seco"


def test_main_ignores_arguments(capsys):
    assert main(["extra"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == len(WORDS)