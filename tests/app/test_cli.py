# tests/app/test_cli.py
import logging

import pytest

from aoc_search.app.cli import main

EXAMPLE = "#############\n#...........#\n###B#C#B#D###\n  #A#D#C#A#\n  #########\n"


def test_cli_prints_report(tmp_path, capsys):
    p = tmp_path / "2021_23.txt"
    p.write_text(EXAMPLE)
    rc = main(["2021", "23", "--input", str(p), "--part", "1"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["Year 2021 Day 23 Part 1", "12521"]


def test_cli_missing_file_is_fatal(tmp_path, capsys):
    rc = main(["2021", "23", "--input", str(tmp_path / "nope.txt")])
    assert rc == 1
    assert capsys.readouterr().out == ""


def test_cli_bad_input_is_fatal(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("not a burrow\n")
    assert main(["2021", "23", "--input", str(p)]) == 1


def test_cli_unknown_day_is_fatal(tmp_path):
    p = tmp_path / "x.txt"
    p.write_text("")
    assert main(["2018", "1", "--input", str(p)]) == 1


def test_cli_lists_puzzles(capsys):
    assert main(["--list"]) == 0
    assert "2021 23" in capsys.readouterr().out.splitlines()


def test_cli_requires_year_and_day_without_list():
    with pytest.raises(SystemExit) as exc:
        main(["2021"])
    assert exc.value.code == 2


def test_cli_debug_emits_sampled_expansions(tmp_path, caplog):
    # one A left in the hallway: a single expansion reaches the sorted burrow
    p = tmp_path / "almost.txt"
    p.write_text(
        "#############\n#A..........#\n###.#B#C#D###\n  #A#B#C#D#\n  #########\n"
    )
    caplog.set_level(logging.DEBUG, logger="aoc_search")
    rc = main(["2021", "23", "--input", str(p), "--part", "1", "--debug", "--sample-every", "1"])
    assert rc == 0
    msgs = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "aoc_search"]
    assert (logging.INFO, "search_start") in msgs
    assert (logging.DEBUG, "expand") in msgs
    assert logging.getLogger("aoc_search").level == logging.DEBUG
