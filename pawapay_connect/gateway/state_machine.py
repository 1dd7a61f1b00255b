"""
Phase classification for gateway transaction statuses.

Status changes are driven by the gateway only; nothing here mutates a
transaction. COMPLETED and FAILED are absorbing.
"""
from enum import Enum
from typing import Dict, Optional, Set

from ..enums import TransactionStatus
from ..exceptions import PawapayError


class Phase(str, Enum):
    INITIATION = "INITIATION"
    INTERMEDIATE = "INTERMEDIATE"
    TERMINAL = "TERMINAL"
    LOOKUP = "LOOKUP"


class InvalidTransition(PawapayError):
    code = "INVALID_TRANSITION"


PHASES: Dict[TransactionStatus, Phase] = {
    TransactionStatus.ACCEPTED: Phase.INITIATION,
    TransactionStatus.REJECTED: Phase.INITIATION,
    TransactionStatus.DUPLICATE_IGNORED: Phase.INITIATION,
    TransactionStatus.SUBMITTED: Phase.INTERMEDIATE,
    TransactionStatus.ENQUEUED: Phase.INTERMEDIATE,
    TransactionStatus.PROCESSING: Phase.INTERMEDIATE,
    TransactionStatus.IN_RECONCILIATION: Phase.INTERMEDIATE,
    TransactionStatus.COMPLETED: Phase.TERMINAL,
    TransactionStatus.FAILED: Phase.TERMINAL,
    TransactionStatus.FOUND: Phase.LOOKUP,
    TransactionStatus.NOT_FOUND: Phase.LOOKUP,
}

_missing = [s.value for s in TransactionStatus if s not in PHASES]
if _missing:
    raise RuntimeError(f"Transaction statuses without a phase: {_missing}")


def phase_of(status: TransactionStatus) -> Phase:
    return PHASES[TransactionStatus(status)]


def statuses_in(phase: Phase) -> Set[TransactionStatus]:
    return {s for s, p in PHASES.items() if p is phase}


def is_final(status: TransactionStatus) -> bool:
    return phase_of(status) is Phase.TERMINAL


def is_processing(status: TransactionStatus) -> bool:
    # ACCEPTED means the gateway took the deposit and has not settled it yet
    status = TransactionStatus(status)
    return phase_of(status) is Phase.INTERMEDIATE or status is TransactionStatus.ACCEPTED


def is_successful(status: TransactionStatus) -> bool:
    """
    Outcome of a submit call. DUPLICATE_IGNORED counts as success: an earlier
    submission with the same depositId was already accepted, so retrying it
    would be wrong.
    """
    return TransactionStatus(status) in (TransactionStatus.ACCEPTED, TransactionStatus.DUPLICATE_IGNORED)


def is_lookup_outcome(status: TransactionStatus) -> bool:
    return phase_of(status) is Phase.LOOKUP


def assert_transition(previous: Optional[TransactionStatus], current: TransactionStatus) -> None:
    if previous is None:
        return
    previous, current = TransactionStatus(previous), TransactionStatus(current)
    if is_final(previous) and current is not previous:
        raise InvalidTransition(f"Illegal deposit transition: {previous.value} -> {current.value}")

