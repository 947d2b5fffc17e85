class GameError(Exception):
    """Base class for errors raised by the kiosk domain."""


class InvalidTransition(GameError):
    def __init__(self, action: str, phase: str):
        super().__init__(f"cannot {action} while {phase}")
        self.action = action
        self.phase = phase


class InvalidPinInput(GameError):
    pass


class StoreReadError(GameError):
    """The event store could not be read."""


class PinGateClosed(GameError):
    def __init__(self, action: str):
        super().__init__(f"PIN gate is closed, cannot {action}")
        self.action = action
