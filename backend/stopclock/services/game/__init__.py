from .rules import MAX_OFFICIAL_ATTEMPTS, AttemptRecord, evaluate, format_time
from .session import GameController, Phase, Session
from .access import CASHIERS, PinGate
