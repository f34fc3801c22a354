"""
Run State Machine - tracks a single run from start to the exit
"""

from enum import Enum, auto


class RunState(Enum):
    """Run states"""
    ACTIVE = auto()
    PAUSED = auto()
    WON = auto()


# WON is terminal
ALLOWED_TRANSITIONS = {
    RunState.ACTIVE: {RunState.PAUSED, RunState.WON},
    RunState.PAUSED: {RunState.ACTIVE},
    RunState.WON: set(),
}


class RunStateManager:
    """
    Manages run state transitions
    """
    def __init__(self):
        self.current_state = RunState.ACTIVE
        self.previous_state = None

    def can_transition(self, new_state):
        """Check whether new_state is reachable from the current state"""
        return new_state in ALLOWED_TRANSITIONS[self.current_state]

    def transition_to(self, new_state):
        """
        Transition to a new state

        Raises:
            ValueError: if the transition is not allowed
        """
        if not self.can_transition(new_state):
            raise ValueError(
                f"Illegal run transition {self.current_state.name} -> {new_state.name}"
            )
        self.previous_state = self.current_state
        self.current_state = new_state

    def is_state(self, state):
        """Check if currently in a specific state"""
        return self.current_state == state

    def __repr__(self):
        return f"RunStateManager(current={self.current_state.name})"
