import pytest

from pawapay_connect.enums import TransactionStatus as S
from pawapay_connect.exceptions import PawapayError
from pawapay_connect.gateway.state_machine import (
    InvalidTransition,
    Phase,
    assert_transition,
    is_final,
    is_lookup_outcome,
    is_processing,
    is_successful,
    phase_of,
    statuses_in,
)


def test_phases_are_disjoint_and_complete():
    groups = [statuses_in(p) for p in Phase]
    assert set().union(*groups) == set(S)
    assert sum(len(g) for g in groups) == len(S)
    assert statuses_in(Phase.TERMINAL) == {S.COMPLETED, S.FAILED}
    assert phase_of(S.DUPLICATE_IGNORED) is Phase.INITIATION


def test_is_final_only_for_terminal_statuses():
    assert {s for s in S if is_final(s)} == {S.COMPLETED, S.FAILED}


def test_is_processing():
    assert {s for s in S if is_processing(s)} == {
        S.ACCEPTED, S.SUBMITTED, S.ENQUEUED, S.PROCESSING, S.IN_RECONCILIATION,
    }
    for status in (S.COMPLETED, S.FAILED, S.FOUND, S.NOT_FOUND):
        assert not is_processing(status)


def test_is_successful():
    assert is_successful(S.ACCEPTED)
    assert is_successful(S.DUPLICATE_IGNORED)
    assert not is_successful(S.REJECTED)


def test_lookup_outcomes():
    assert is_lookup_outcome(S.FOUND)
    assert is_lookup_outcome(S.NOT_FOUND)
    assert not is_lookup_outcome(S.COMPLETED)


def test_accepts_plain_strings():
    assert is_final("COMPLETED")
    assert phase_of("ENQUEUED") is Phase.INTERMEDIATE


def test_terminal_states_are_absorbing():
    assert_transition(None, S.PROCESSING)
    assert_transition(S.SUBMITTED, S.COMPLETED)
    assert_transition(S.COMPLETED, S.COMPLETED)
    with pytest.raises(InvalidTransition):
        assert_transition(S.COMPLETED, S.PROCESSING)
    with pytest.raises(InvalidTransition):
        assert_transition(S.FAILED, S.COMPLETED)


def test_invalid_transition_is_a_pawapay_error():
    with pytest.raises(PawapayError) as exc:
        assert_transition(S.FAILED, S.PROCESSING)
    assert exc.value.to_dict()["code"] == "INVALID_TRANSITION"
