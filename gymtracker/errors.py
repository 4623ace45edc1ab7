class PersistenceError(Exception):
    """Raised by the store when the underlying database rejects a save or fetch."""


class LedgerError(Exception):
    pass


class SessionInProgressError(LedgerError):
    def __init__(self, workout_id: int | None):
        super().__init__(f"workout {workout_id} is already in progress")
        self.workout_id = workout_id


class NoActiveSessionError(LedgerError):
    def __init__(self):
        super().__init__("no workout in progress")
