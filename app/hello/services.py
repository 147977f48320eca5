import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_NAME = "World"
GREETING_TEMPLATE = "Hello, {name}! You are visitor number {visitor}"


class VisitCounter:
    """
    Monotonic visitor tally shared by concurrent callers.

    Python integers never overflow, so the count grows without bound.
    """

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value as a single step"""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class GreetingService:
    """Counting greeting business logic"""

    def __init__(self, counter: Optional[VisitCounter] = None):
        self._counter = counter if counter is not None else VisitCounter()

    @property
    def visitors(self) -> int:
        """Number of greetings served so far"""
        return self._counter.value

    def greet(self, name: Optional[str] = None) -> str:
        """
        Count a visit and build its greeting.

        A missing or empty name falls back to "World".
        """
        if not name:
            name = DEFAULT_NAME
        visitor = self._counter.increment()
        logger.debug(f"Assigned visitor number {visitor}")
        return GREETING_TEMPLATE.format(name=name, visitor=visitor)
