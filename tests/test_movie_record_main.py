import json

import movie_record.main as cli


def _quiet(monkeypatch):
    # los diagnósticos de record_utils no deben ensuciar stdout
    monkeypatch.setattr(cli.logger, "is_silent_mode", lambda: True)
    monkeypatch.setattr(cli.logger, "is_debug_mode", lambda: False)


def test_examples_prints_sample_report(monkeypatch, capsys):
    _quiet(monkeypatch)

    assert cli.main(["--examples"]) == cli.EXIT_OK

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Movie Title: Toy Story",
        "Movie Year: 1995",
        "Is Classic: True",
        "Movie Keys: ['id', 'title', 'director', 'year', 'genre', 'rating', 'cast']",
        "Properties Count: 7",
    ]


def test_show_examples_flag_runs_demo_without_args(monkeypatch, capsys):
    _quiet(monkeypatch)
    monkeypatch.setattr(cli, "MOVIE_RECORD_SHOW_EXAMPLES", True)

    assert cli.main([]) == cli.EXIT_OK
    assert "Movie Title: Toy Story" in capsys.readouterr().out


def test_nothing_to_do(monkeypatch):
    _quiet(monkeypatch)
    monkeypatch.setattr(cli, "MOVIE_RECORD_SHOW_EXAMPLES", False)

    assert cli.main([]) == cli.EXIT_NOTHING_TO_DO


def test_json_record(monkeypatch, capsys, tmp_path):
    _quiet(monkeypatch)
    path = tmp_path / "movie.json"
    path.write_text(json.dumps({"title": "Inception", "year": 2010}), encoding="utf-8")

    assert cli.main(["--json", str(path)]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "Movie Title: Inception" in out
    assert "Is Classic: False" in out
    assert "Properties Count: 2" in out


def test_json_non_object_reports_sentinels(monkeypatch, capsys, tmp_path):
    _quiet(monkeypatch)
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert cli.main(["--json", str(path)]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "Movie Title: \n" in out
    assert "Movie Keys: []" in out
    assert "Properties Count: 0" in out


def test_json_unreadable(monkeypatch, tmp_path):
    _quiet(monkeypatch)
    errors = []
    monkeypatch.setattr(cli.logger, "error", lambda msg, *a, **k: errors.append(msg))

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    assert cli.main(["--json", str(bad)]) == cli.EXIT_BAD_INPUT
    assert cli.main(["--json", str(tmp_path / "missing.json")]) == cli.EXIT_BAD_INPUT
    assert len(errors) == 2


def test_json_record_with_huge_year(monkeypatch, capsys, tmp_path):
    _quiet(monkeypatch)
    path = tmp_path / "far_future.json"
    path.write_text('{"title": "Far Future", "year": 1' + "0" * 400 + "}", encoding="utf-8")

    assert cli.main(["--json", str(path)]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "Movie Year: 1" + "0" * 400 in out
    assert "Is Classic: False" in out
