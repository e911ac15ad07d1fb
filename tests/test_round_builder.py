from qperf.models.accumulator import Accumulator
from qperf.models.event import EventCode, EventRecord
from qperf.models.round import Roster
from qperf.tournament.round_builder import reconstruct_rounds


def _event(code, name="", team=0, seat=0, question=0, room="1", round_id="1"):
    return EventRecord(
        tournament="Spring",
        room=room,
        round_id=round_id,
        question_number=question,
        name=name,
        team_number=team,
        seat_number=seat,
        code=EventCode(code),
    )


def _roster(room="1", round_id="1"):
    return [
        _event("TN", "Eagles", team=0, room=room, round_id=round_id),
        _event("QN", "Ann", team=0, seat=0, room=room, round_id=round_id),
        _event("TN", "Hawks", team=1, room=room, round_id=round_id),
        _event("QN", "Dee", team=1, seat=0, room=room, round_id=round_id),
    ]


def test_round_without_action_is_discarded():
    accumulator = Accumulator()
    records = _roster(round_id="P") + _roster(round_id="1") + [
        _event("TC", "Ann", question=1, round_id="1")
    ]

    rounds = reconstruct_rounds(records, accumulator)

    assert list(rounds) == ["Room1Round1"]
    assert rounds["Room1Round1"].team_names == ["Eagles", "Hawks"]
    assert accumulator.warnings == []


def test_trailing_round_is_confirmed():
    records = _roster() + [_event("TE", "Dee", team=1, question=2)]

    rounds = reconstruct_rounds(records, Accumulator())

    confirmed = rounds["Room1Round1"]
    assert confirmed.room == "1"
    assert confirmed.round_id == "1"
    assert [e.code for e in confirmed.events] == [EventCode.INCORRECT_ANSWER]
    assert not confirmed.is_scored


def test_room_change_is_a_boundary():
    records = (
        _roster(room="1")
        + [_event("TC", "Ann", question=1, room="1")]
        + _roster(room="2")
        + [_event("BE", "Dee", team=1, question=1, room="2")]
    )

    rounds = reconstruct_rounds(records, Accumulator())

    assert list(rounds) == ["Room1Round1", "Room2Round1"]
    assert len(rounds["Room1Round1"].events) == 1
    assert len(rounds["Room2Round1"].events) == 1


def test_names_and_room_markers_are_not_action():
    records = _roster() + [_event("RM", "Room 1")]
    assert reconstruct_rounds(records, Accumulator()) == {}


def test_duplicate_round_key_overwrites_with_warning():
    accumulator = Accumulator()
    records = (
        _roster()
        + [_event("TC", "Ann", question=1)]
        + _roster(room="2")
        + [_event("TC", "Ann", question=1, room="2")]
        + _roster()
        + [_event("TC", "Dee", team=1, question=1), _event("TC", "Dee", team=1, question=2)]
    )

    rounds = reconstruct_rounds(records, accumulator)

    # The overwritten round moves to the end of the registry
    assert list(rounds) == ["Room2Round1", "Room1Round1"]
    assert len(rounds["Room1Round1"].events) == 2
    assert accumulator.warnings == [
        "Warning: Duplicate round number: Room1Round1, overwriting!"
    ]


def test_unnamed_slots_and_empty_seats_are_pruned():
    records = [
        _event("TN", "Eagles", team=0),
        _event("QN", "Ann", team=0, seat=2),
        _event("QN", "Ghost", team=2, seat=0),
        _event("TN", "Hawks", team=3),
        _event("TC", "Ann", question=1),
    ]

    confirmed = reconstruct_rounds(records, Accumulator())["Room1Round1"]

    assert confirmed.team_names == ["Eagles", "Hawks"]
    assert confirmed.teams[0].quizzers == ["Ann"]
    assert confirmed.teams[1].quizzers == []


def test_team_name_replaces_slot():
    roster = Roster()
    roster.declare_quizzer(1, 0, "Dee")
    roster.declare_team(1, "Hawks")

    assert [slot.name for slot in roster.slots] == ["", "Hawks"]
    assert roster.slots[1].quizzers == []
    assert [slot.name for slot in roster.pruned()] == ["Hawks"]


def test_registry_keeps_first_team_per_quizzer():
    accumulator = Accumulator()
    records = (
        _roster()
        + [_event("TC", "Ann", question=1)]
        + [
            _event("TN", "Owls", team=0, round_id="2"),
            _event("QN", "Ann", team=0, seat=0, round_id="2"),
            _event("TC", "Ann", question=1, round_id="2"),
        ]
    )

    reconstruct_rounds(records, accumulator)
    accumulator.seed_stats()

    assert accumulator.confirmed_teams == ["Eagles", "Hawks", "Owls"]
    assert accumulator.confirmed_quizzers == [("Ann", "Eagles"), ("Dee", "Hawks")]
    assert [s.name for s in accumulator.stats] == ["Ann", "Dee"]
    assert accumulator.stats["Ann"].team == "Eagles"
