from hordeshooter.highscore import (
    create_high_score_file_if_not_exist,
    read_high_score,
    write_high_score,
)


def test_missing_file_reads_zero(tmp_path):
    assert read_high_score(tmp_path / "none.txt") == 0


def test_round_trip(tmp_path):
    path = tmp_path / "highscore.txt"
    write_high_score(1230, path)
    assert read_high_score(path) == 1230
    write_high_score(40, path)
    assert read_high_score(path) == 40


def test_written_file_holds_plain_number(tmp_path):
    path = tmp_path / "highscore.txt"
    write_high_score(70, path)
    assert path.read_text() == "70"


def test_leading_whitespace_and_trailing_text(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("  \n 42 points\n")
    assert read_high_score(path) == 42


def test_negative_number(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("-5")
    assert read_high_score(path) == -5


def test_garbage_reads_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("abc")
    assert read_high_score(path) == 0


def test_create_makes_zero_file(tmp_path):
    path = tmp_path / "highscore.txt"
    create_high_score_file_if_not_exist(path)
    assert path.read_text() == "0"
    assert read_high_score(path) == 0


def test_create_keeps_existing_file(tmp_path):
    path = tmp_path / "highscore.txt"
    write_high_score(500, path)
    create_high_score_file_if_not_exist(path)
    assert read_high_score(path) == 500


def test_create_reports_failure_on_stderr(tmp_path, capsys):
    path = tmp_path / "missing_dir" / "highscore.txt"
    create_high_score_file_if_not_exist(path)
    assert not path.exists()
    assert "highscore.txt" in capsys.readouterr().err