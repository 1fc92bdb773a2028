"""Shared test helpers for RedFlash."""

from redflash.timer.engine import TimerEngine


class FakeClock:
    """Synthetic monotonic clock.  Call it to read, ``advance`` to move."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_to_alarm(engine: TimerEngine, clock: FakeClock) -> None:
    """Start (if needed) and jump straight past the deadline."""
    engine.start()
    clock.advance(engine.remaining_seconds())
    engine.on_tick()
