"""Staff PIN gate for the "reset for next customer" action.

The PIN list is counter-staff friction, not authentication: four digits,
a handful of known cashiers, no lockout. Do not reuse it to protect
anything sensitive.

Digits and submits are only accepted while the gate is open; the keypad
has to be brought up with open() first.
"""

import threading
from typing import Callable, Dict, Mapping, Optional

from stopclock.errors import InvalidPinInput, PinGateClosed

PIN_LENGTH = 4

CASHIERS: Dict[str, str] = {
    '1357': 'Lisa',
    '2468': 'Marco',
    '8024': 'Dana',
}


class PinGate:
    def __init__(self, registry: Mapping[str, str], on_authorized: Callable[[str], object]):
        self._registry = registry
        self._on_authorized = on_authorized
        self._lock = threading.Lock()
        self.is_open = False
        self.buffer = ''
        self.error = False

    def open(self) -> None:
        with self._lock:
            self.is_open = True
            self.buffer = ''
            self.error = False

    def append_digit(self, digit: str) -> None:
        if not isinstance(digit, str) or len(digit) != 1 or digit not in '0123456789':
            raise InvalidPinInput(f"not a digit: {digit!r}")
        with self._lock:
            if not self.is_open:
                raise PinGateClosed('digit')
            if len(self.buffer) >= PIN_LENGTH:
                return
            self.buffer += digit
            self.error = False

    def clear(self) -> None:
        with self._lock:
            self.buffer = ''
            self.error = False

    def submit(self) -> Optional[str]:
        """Check the buffer against the registry; on a match close the gate and run the reset."""
        with self._lock:
            if not self.is_open:
                raise PinGateClosed('submit')
            pin, self.buffer = self.buffer, ''
            cashier = self._registry.get(pin) if len(pin) == PIN_LENGTH else None
            if cashier is None:
                self.error = True
                return None
            self.error = False
            self.is_open = False
        self._on_authorized(cashier)
        return cashier

    def cancel(self) -> None:
        with self._lock:
            self.is_open = False
            self.buffer = ''
            self.error = False

    def to_dict(self):
        with self._lock:
            return {
                'open': self.is_open,
                'digits_entered': len(self.buffer),
                'error': self.error,
            }
