import pytest

from kchess.race import CAR1, CAR2, main, race_frames, render_cars


def test_render_cars_layout():
    frame = render_cars(2, 3)
    lines = frame.splitlines()
    assert lines[0] == "CAR #1: **"
    assert lines[1] == "CAR #2: ***"
    assert lines[2] == "-----------------------------------"
    assert frame.endswith("\n")


def test_render_cars_with_no_progress():
    assert render_cars(0, 0).splitlines()[:2] == ["CAR #1: ", "CAR #2: "]


def test_star_counts_match_positions():
    for first, second in zip(CAR1, CAR2):
        lines = render_cars(first, second).splitlines()
        assert lines[0].count("*") == first
        assert lines[1].count("*") == second


def test_race_frames_one_per_step():
    frames = list(race_frames(CAR1, CAR2))
    assert len(frames) == len(CAR1)
    assert frames[0] == render_cars(CAR1[0], CAR2[0])
    assert frames[-1] == render_cars(30, 30)


def test_race_frames_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        list(race_frames([1, 2], [1]))


def test_main_prints_every_frame(capsys):
    assert main(["--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert out == "".join(race_frames(CAR1, CAR2))


def test_main_rejects_negative_delay():
    with pytest.raises(SystemExit):
        main(["--delay", "-1"])