"""Tests for the command-line entry point."""

import argparse

import pytest

from labyrinth.__main__ import build_parser, config_from_args, main
from labyrinth.domain.types import ASCII_GLYPHS, DEFAULT_GLYPHS


def test_prints_maze_then_path(capsys):
    assert main(["9", "7", "--seed", "3", "--ascii"]) == 0

    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    maze, blank, solved, summary = lines[:7], lines[7], lines[8:15], lines[15]
    assert len(lines) == 16
    assert all(len(line) == 9 for line in maze + solved)
    assert blank == ""
    assert "x" not in "".join(maze)
    assert "x" in "".join(solved)
    assert summary.startswith("Path:")


def test_same_seed_same_output(capsys):
    main(["20", "8", "--seed", "5", "--ascii"])
    first = capsys.readouterr().out
    main(["20", "8", "--seed", "5", "--ascii"])
    assert capsys.readouterr().out == first


def test_multiple_runs(capsys):
    assert main(["9", "7", "--seed", "1", "--runs", "2", "--ascii"]) == 0
    out = capsys.readouterr().out
    assert out.count("Path:") == 2


@pytest.mark.parametrize("argv", [["4", "4"], ["9"], ["--runs", "0"]])
def test_errors_exit_with_status_1(argv, capsys):
    assert main(argv) == 1
    assert "Error:" in capsys.readouterr().err


def test_config_defaults_to_compact_preset():
    config = config_from_args(build_parser().parse_args([]))
    assert (config.width, config.height) == (50, 10)
    assert config.crossroad_policy == "first"
    assert config.glyphs == DEFAULT_GLYPHS


def test_config_from_arguments():
    args = build_parser().parse_args(["--preset", "wide", "--policy", "random",
                                      "--max-steps", "500", "--ascii"])
    config = config_from_args(args)
    assert (config.width, config.height) == (135, 18)
    assert config.crossroad_policy == "random"
    assert config.max_search_steps == 500
    assert config.glyphs == ASCII_GLYPHS


def test_explicit_size_overrides_preset():
    args = argparse.Namespace(width=30, height=12, preset="wide", policy="first",
                              max_steps=None, ascii=False)
    config = config_from_args(args)
    assert (config.width, config.height) == (30, 12)
