"""A small token-driven state machine with wildcard states."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

START = "START"
WILDCARD = "*"


def _is_wildcard(state: str) -> bool:
    return state.startswith(WILDCARD)


class StateMachine:
    """Validates token sequences against a table of state transitions.

    States whose names begin with ``*`` are wildcards: a token that matches
    no named transition moves the machine into the first wildcard neighbour
    (in sorted order), and while in a wildcard state unmatched tokens are
    consumed without failing.
    """

    def __init__(
        self,
        transitions: Mapping[str, Iterable[str]] | Iterable[tuple[str, Iterable[str]]] = (),
    ) -> None:
        self._transitions: dict[str, frozenset[str]] = {}
        pairs = transitions.items() if isinstance(transitions, Mapping) else transitions
        for state, next_states in pairs:
            self.add_state(state, next_states)

    def add_state(self, state: str, next_states: Iterable[str]) -> None:
        """Set the states reachable from ``state``, replacing any earlier entry."""
        self._transitions[state] = frozenset(next_states)

    def validate(self, tokens: Iterable[str]) -> bool:
        """Return whether the machine accepts the given token sequence."""
        current = START
        for token in tokens:
            neighbours = self._transitions.get(current)
            if neighbours is None:
                return False

            if token in neighbours:
                current = token
                continue

            wildcards = sorted(state for state in neighbours if _is_wildcard(state))
            if wildcards:
                current = wildcards[0]
                if token in self._transitions.get(current, frozenset()):
                    current = token
                continue

            if _is_wildcard(current):
                continue
            return False
        return True