from __future__ import annotations

import pytest

from sor_core import (
    CompetitorProfile,
    RawResult,
    SorCell,
    SorConfig,
    Time,
    compute_sum_of_ranks,
    event_codes,
)


def _result(person_id, event_id, best, average="0"):
    return RawResult(
        competitionId="PerthOpen2023",
        eventId=event_id,
        best=best,
        average=average,
        personId=person_id,
        personName=f"Name {person_id}",
    )


def _profiles():
    return [
        CompetitorProfile.from_results(
            [
                _result("A", "333", "800", "1000"),
                _result("A", "222", "300", "400"),
                _result("A", "333oh", "2000", "-1"),
            ]
        ),
        CompetitorProfile.from_results([_result("B", "333", "700", "900")]),
        CompetitorProfile.from_results([_result("C", "222", "250", "0")]),
    ]


def _rows_by_id(board):
    return {row.competitor_id: row for row in board.rows}


def test_single_board_sums_event_ranks():
    out = compute_sum_of_ranks(_profiles())
    board = out.single
    assert board.title == "SOR (Single)"
    assert board.headers == event_codes()
    # 15 events where nobody has a result add 1 each.
    assert [(row.competitor_id, row.total, row.rank) for row in board.rows] == [
        ("A", 20, 1),
        ("B", 21, 2),
        ("C", 21, 2),
    ]
    by_id = _rows_by_id(board)
    assert by_id["A"].cells[2] == SorCell(kind="normal", rank=2)
    assert by_id["C"].cells[2] == SorCell(kind="default", rank=3)
    assert by_id["C"].cells[1] == SorCell(kind="normal", rank=1)
    assert by_id["A"].cells[5] == SorCell(kind="default", rank=1)
    assert sum(cell.value for cell in by_id["B"].cells) == by_id["B"].total


def test_average_board_leaves_multi_blind_blank():
    out = compute_sum_of_ranks(_profiles())
    board = out.average
    assert board.title == "SOR (Average)"
    assert [(row.competitor_id, row.total, row.rank) for row in board.rows] == [
        ("A", 18, 1),
        ("B", 18, 1),
        ("C", 20, 3),
    ]
    for row in board.rows:
        assert row.cells[5] == SorCell(kind="blank")
        assert row.cells[5].value == 0
    # Everyone is invalid in 333oh average (DNF or nothing): shared rank 1, all default.
    assert all(row.cells[4] == SorCell(kind="default", rank=1) for row in board.rows)


def test_multi_blind_average_is_blank_even_with_a_single_result():
    profiles = [
        CompetitorProfile.from_results([_result("A", "333mbo", "X960400345", "X960400345")]),
        CompetitorProfile.from_results([_result("B", "333mbf", "0970034501")]),
    ]
    out = compute_sum_of_ranks(profiles)
    assert all(row.cells[5].kind == "blank" for row in out.average.rows)
    single_cells = {row.competitor_id: row.cells[5] for row in out.single.rows}
    assert single_cells["A"] == SorCell(kind="normal", rank=1)
    assert single_cells["B"] == SorCell(kind="normal", rank=1)


def test_event_rankings_are_exposed_per_event_and_metric():
    out = compute_sum_of_ranks(_profiles())
    assert len(out.event_rankings) == 18 + 17
    assert out.event_ranking("333mbf", "average") is None
    assert out.event_ranking("333mbo", "single") is not None
    assert out.event_ranking("magic", "single") is None

    ranking = out.event_ranking("333", "single")
    assert [(row.competitor_id, row.rank, row.is_default) for row in ranking.rows] == [
        ("B", 1, False),
        ("A", 2, False),
        ("C", 3, True),
    ]
    assert ranking.rows[0].score == Time(700)
    assert ranking.rows[0].competitor_name == "Name B"


def test_board_lookup_by_metric():
    out = compute_sum_of_ranks(_profiles())
    assert out.board("single") is out.single
    assert out.board("average") is out.average


def test_empty_population():
    out = compute_sum_of_ranks([])
    assert out.single.rows == ()
    assert out.average.rows == ()
    assert all(ranking.rows == () for ranking in out.event_rankings)


def test_config_titles_and_extra_unranked_average_events():
    config = SorConfig(
        single_title="Single",
        average_title="Average",
        unranked_average_events=("333mbo", "333"),
    )
    assert config.unranked_average_events == ("333mbf", "333")
    out = compute_sum_of_ranks(_profiles(), config)
    assert out.single.title == "Single"
    assert out.average.title == "Average"
    assert out.event_ranking("333", "average") is None
    assert all(row.cells[2].kind == "blank" for row in out.average.rows)
    assert out.event_ranking("333", "single") is not None


def test_config_rejects_unknown_event_codes():
    with pytest.raises(ValueError):
        SorConfig(unranked_average_events=("magic",))
