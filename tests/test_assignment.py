import random

from santa.services.assignment import generate_assignment, most_constrained_order
from santa.services.feasibility import check_solvable
from santa.services.participants import Participant


def people(*names, exclusions=None):
    exclusions = exclusions or {}
    return [
        Participant(name=name, exclusions=tuple(exclusions.get(name, ())), id=index)
        for index, name in enumerate(names, start=1)
    ]


def assert_valid(participants, pairs):
    by_name = {p.name: p for p in participants}
    assert [pair.giver_name for pair in pairs] == [p.name for p in participants]
    assert sorted(pair.assigned_to for pair in pairs) == sorted(by_name)
    for pair in pairs:
        assert pair.giver_name != pair.assigned_to
        assert pair.assigned_to not in by_name[pair.giver_name].exclusions
        assert pair.participant_id == by_name[pair.giver_name].id


def test_assignment_basic_bijection():
    participants = people("A", "B", "C", "D")
    pairs = generate_assignment(participants, seed=42)
    assert_valid(participants, pairs)


def test_assignment_two_people():
    pairs = generate_assignment(people("A", "B"), seed=1)
    assert {(p.giver_name, p.assigned_to) for p in pairs} == {("A", "B"), ("B", "A")}


def test_assignment_three_people_is_a_cycle():
    cycles = {
        frozenset({("A", "B"), ("B", "C"), ("C", "A")}),
        frozenset({("A", "C"), ("C", "B"), ("B", "A")}),
    }
    seen = set()
    for seed in range(30):
        pairs = generate_assignment(people("A", "B", "C"), seed=seed)
        result = frozenset((p.giver_name, p.assigned_to) for p in pairs)
        assert result in cycles
        seen.add(result)
    assert seen == cycles


def test_assignment_deterministic_seed():
    participants = people("A", "B", "C", "D", "E")
    first = generate_assignment(participants, seed=123)
    second = generate_assignment(participants, seed=123)
    assert first == second


def test_assignment_respects_exclusions():
    participants = people("A", "B", "C", "D", exclusions={"A": ["B", "C"], "D": ["A"]})
    for seed in range(20):
        pairs = generate_assignment(participants, seed=seed)
        assert_valid(participants, pairs)
        assert pairs[0].assigned_to == "D"


def test_assignment_accepts_mappings_and_threads_ids():
    participants = [
        {"id": "u-1", "name": "Ann", "exclusions": ["Bob"]},
        {"id": "u-2", "name": "Bob"},
        {"id": "u-3", "name": "Cid", "exclusions": None},
    ]
    pairs = generate_assignment(participants, seed=3)
    assert [p.participant_id for p in pairs] == ["u-1", "u-2", "u-3"]
    assert pairs[0].assigned_to == "Cid"


def test_assignment_fails_for_too_few_participants():
    assert generate_assignment(people("A")) is None
    assert generate_assignment([]) is None
    assert generate_assignment(None) is None


def test_assignment_fails_for_tight_constraints():
    participants = people("A", "B", "C", exclusions={"A": ["B"], "B": ["A"]})
    assert generate_assignment(participants, seed=7) is None


def test_assignment_unique_receivers():
    participants = people("A", "B", "C", "D", "E", "F")
    pairs = generate_assignment(participants, seed=77)
    assert len({p.assigned_to for p in pairs}) == len(participants)


def test_most_constrained_order_is_stable():
    assert most_constrained_order([3, 1, 2, 1, 3]) == [1, 3, 2, 0, 4]


def test_feasible_groups_always_get_assigned():
    rng = random.Random(2024)
    names = [f"P{i}" for i in range(7)]
    for trial in range(60):
        exclusions = {
            name: rng.sample([other for other in names if other != name], rng.randint(0, 3))
            for name in names
        }
        participants = people(*names, exclusions=exclusions)
        verdict = check_solvable(participants)
        pairs = generate_assignment(participants, seed=trial)
        if verdict.possible:
            assert pairs is not None
            assert_valid(participants, pairs)
        else:
            assert pairs is None
