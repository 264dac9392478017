from wordrank.cli import main


def test_main_success(tmp_path, write_wordlist, capsys):
    src = write_wordlist(["crane", "slate", "cards"])
    out = tmp_path / "ranked.txt"
    assert main(["--in", str(src), "--out", str(out)]) == 0
    assert "reordered 3 words" in capsys.readouterr().out
    assert len(out.read_text().splitlines()) == 3


def test_main_verbose_preview(tmp_path, write_wordlist, capsys):
    src = write_wordlist(["crane", "slate", "cards"])
    out = tmp_path / "ranked.txt"
    assert main(["--in", str(src), "--out", str(out), "-v", "--top", "2"]) == 0
    stdout = capsys.readouterr().out
    assert "filtering stats" in stdout
    assert "top 2 words" in stdout


def test_main_flags(tmp_path, write_wordlist):
    src = write_wordlist(["cat", "cat", "dog", "crane"])
    out = tmp_path / "ranked.txt"
    assert main(["--in", str(src), "--out", str(out), "--len", "3", "--no-dedupe",
                 "--plural-penalty", "0", "--unique-weight", "0.1"]) == 0
    assert out.read_text().splitlines().count("cat") == 2


def test_main_missing_input(tmp_path, capsys):
    assert main(["--in", str(tmp_path / "missing.txt"), "--out", str(tmp_path / "o.txt")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_main_empty_corpus(tmp_path, write_wordlist, capsys):
    src = write_wordlist(["cat"])
    assert main(["--in", str(src), "--out", str(tmp_path / "o.txt")]) == 1
    assert "no words of length 5" in capsys.readouterr().err


def test_main_unwritable_output(tmp_path, write_wordlist, capsys):
    src = write_wordlist(["crane"])
    assert main(["--in", str(src), "--out", str(tmp_path)]) == 1
    assert "cannot write" in capsys.readouterr().err


def test_main_rejects_zero_length(tmp_path, write_wordlist, capsys):
    src = write_wordlist(["crane"])
    out = tmp_path / "o.txt"
    assert main(["--in", str(src), "--out", str(out), "--len", "0"]) == 2
    assert capsys.readouterr().err.startswith("error:")
    assert not out.exists()


def test_main_rejects_negative_top(tmp_path, write_wordlist, capsys):
    src = write_wordlist(["crane"])
    out = tmp_path / "o.txt"
    assert main(["--in", str(src), "--out", str(out), "--top", "-1"]) == 2
    assert capsys.readouterr().err.startswith("error:")
    assert not out.exists()
