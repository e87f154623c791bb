from tools.run_sequence import main
from tools.generate_html import generate, rows_taken


def test_run_sequence_exit_codes(capsys):
    assert main(["ups"]) == 0
    assert "ACCEPTED" in capsys.readouterr().out
    assert main(["us", "--quiet"]) == 1
    assert "REJECTED in QE (Error)" in capsys.readouterr().out


def test_generate_html_highlights_path(tmp_path):
    assert rows_taken("ups") == {0, 2, 4}
    assert rows_taken("p") == {1}
    out = generate(tmp_path / "dfa.html", sequence="ups")
    text = out.read_text(encoding="utf-8")
    assert text.count("class='taken'") == 3
    assert "Q3 (Login Successful)" in text
