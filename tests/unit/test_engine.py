"""Unit tests for the scoreboard engine lifecycle, ranking and queries."""

from icpc_board.board import Reason, ScoreboardEngine, Snapshot

from .helpers import AC, RE, WA


def ranking(engine):
    return list(engine.ranking)


def test_add_team_rules(engine):
    """Duplicate names and late registrations are rejected."""
    assert engine.add_team("bravo").ok
    assert engine.add_team("alpha").ok

    result = engine.add_team("bravo")
    assert result.reason is Reason.DUPLICATE_TEAM

    engine.start(300, 2)
    result = engine.add_team("charlie")
    assert result.reason is Reason.ALREADY_STARTED
    assert ranking(engine) == ["alpha", "bravo"]


def test_start_twice_and_invalid_arguments(engine):
    engine.add_team("alpha")

    assert engine.start(300, 0).reason is Reason.INVALID_ARGUMENT
    assert engine.start(300, 27).reason is Reason.INVALID_ARGUMENT
    assert engine.start(-1, 3).reason is Reason.INVALID_ARGUMENT
    assert not engine.started

    assert engine.start(300, 3).ok
    assert engine.problems == "ABC"
    assert set(engine.teams["alpha"].problems) == {"A", "B", "C"}
    assert engine.start(300, 3).reason is Reason.ALREADY_STARTED


def test_operations_before_start_are_rejected(engine):
    engine.add_team("alpha")

    assert engine.submit("A", "alpha", AC, 1).reason is Reason.NOT_STARTED
    assert engine.flush().reason is Reason.NOT_STARTED
    assert engine.freeze().reason is Reason.NOT_STARTED
    assert engine.scroll().reason is Reason.NOT_STARTED


def test_submit_lookup_errors(started):
    assert started.submit("A", "nobody", AC, 1).reason is Reason.TEAM_NOT_FOUND
    assert started.submit("E", "alpha", AC, 1).reason is Reason.PROBLEM_NOT_FOUND
    assert started.teams["alpha"].history == []


def test_submit_does_not_rerank_until_flush(started, reporter):
    started.submit("A", "charlie", AC, 10)

    assert ranking(started) == ["alpha", "bravo", "charlie"]
    assert reporter.events == []

    assert started.flush().ok
    assert ranking(started) == ["charlie", "alpha", "bravo"]

    [snapshot] = reporter.snapshots
    assert snapshot.trigger == "flush"
    assert [row.team for row in snapshot.rows] == ["charlie", "alpha", "bravo"]
    assert snapshot.rows[0].solved == 1
    assert snapshot.rows[0].penalty == 10


def test_submission_to_solved_problem_is_audit_only(started):
    started.submit("A", "alpha", AC, 10)
    started.submit("A", "alpha", WA, 20)
    started.submit("A", "alpha", AC, 30)

    record = started.teams["alpha"].problems["A"]
    assert record.solve_time == 10
    assert record.wrong_attempts == 0
    assert len(record.submissions) == 3
    assert started.teams["alpha"].aggregate.penalty == 10


def test_freeze_twice_fails(started):
    assert started.freeze().ok
    result = started.freeze()

    assert result.reason is Reason.ALREADY_FROZEN
    assert started.frozen


def test_frozen_submissions_are_queued(started):
    started.submit("A", "alpha", AC, 10)
    started.freeze()
    started.submit("B", "alpha", WA, 20)
    started.submit("B", "alpha", AC, 25)
    started.submit("A", "alpha", WA, 30)

    team = started.teams["alpha"]
    assert len(team.problems["B"].pending) == 2
    assert team.problems["B"].wrong_attempts == 0
    assert not team.problems["B"].solved
    # solved problems never queue
    assert team.problems["A"].pending == []
    assert team.aggregate.solved == 1
    assert len(team.history) == 4


def test_flush_while_frozen_hides_pending(started, reporter):
    started.freeze()
    started.submit("A", "charlie", AC, 10)
    started.flush()

    assert ranking(started) == ["alpha", "bravo", "charlie"]
    row = reporter.snapshots[-1].rows[2]
    assert row.team == "charlie"
    assert row.problems[0].pending == 1
    assert row.problems[0].frozen


def test_rank_of(started):
    started.submit("A", "bravo", AC, 10)
    started.flush()

    query = started.rank_of("bravo").value
    assert query.rank == 1
    assert not query.frozen

    started.freeze()
    assert started.rank_of("alpha").value.frozen
    assert started.rank_of("alpha").value.rank == 2
    assert started.rank_of("nobody").reason is Reason.TEAM_NOT_FOUND


def test_rank_before_flush_follows_names():
    engine = ScoreboardEngine()
    for name in ("zulu", "mike", "alpha"):
        engine.add_team(name)

    assert engine.rank_of("alpha").value.rank == 1
    assert engine.rank_of("zulu").value.rank == 3


def test_last_submission_filters(started):
    started.submit("A", "alpha", WA, 5)
    started.submit("B", "alpha", RE, 8)
    started.submit("A", "alpha", AC, 12)
    started.submit("C", "alpha", WA, 20)

    assert started.last_submission("alpha").value.timestamp == 20
    assert started.last_submission("alpha", problem="A").value.outcome is AC
    assert started.last_submission("alpha", outcome=WA).value.problem == "C"
    assert started.last_submission("alpha", "A", WA).value.timestamp == 5
    assert started.last_submission("alpha", "B", AC).value is None
    assert started.last_submission("alpha", "B", AC).ok
    assert started.last_submission("nobody").reason is Reason.TEAM_NOT_FOUND


def test_last_submission_tie_goes_to_smallest_problem(started):
    started.submit("B", "alpha", WA, 10)
    started.submit("A", "alpha", RE, 10)

    latest = started.last_submission("alpha").value
    assert latest.problem == "A"
    assert latest.outcome is RE

    started.submit("A", "bravo", WA, 10)
    started.submit("B", "bravo", RE, 10)

    assert started.last_submission("bravo").value.problem == "A"


def test_last_submission_tie_within_problem_goes_to_first_arrival(started):
    started.submit("C", "alpha", WA, 15)
    started.submit("C", "alpha", AC, 15)

    latest = started.last_submission("alpha", problem="C").value
    assert latest.outcome is WA


def test_last_submission_includes_frozen(started):
    started.freeze()
    started.submit("D", "bravo", AC, 280)

    latest = started.last_submission("bravo", outcome=AC).value
    assert latest.problem == "D"
    assert latest.timestamp == 280


def test_end_blocks_everything(started):
    assert started.end().ok

    assert started.end().reason is Reason.ALREADY_ENDED
    assert started.submit("A", "alpha", AC, 1).reason is Reason.ALREADY_ENDED
    assert started.flush().reason is Reason.ALREADY_ENDED
    assert started.add_team("delta").reason is Reason.ALREADY_ENDED


def test_penalty_minutes_configurable():
    engine = ScoreboardEngine(penalty_minutes=10)
    engine.add_team("alpha")
    engine.start(60, 1)
    engine.submit("A", "alpha", WA, 3)
    engine.submit("A", "alpha", AC, 7)
    engine.flush()

    assert engine.standings()[0].penalty == 17


def test_flush_snapshot_is_read_only_copy(started, reporter):
    started.flush()
    snapshot = reporter.snapshots[0]
    started.submit("A", "alpha", AC, 10)

    assert isinstance(snapshot, Snapshot)
    assert snapshot.rows[0].solved == 0
    assert snapshot.rows[0].problems[0].solved is False
