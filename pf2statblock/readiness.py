import time

from pf2statblock.constants import READINESS_ATTEMPTS, READINESS_INTERVAL
from pf2statblock.errors import ReadinessTimeout

WAITING = "Waiting"
READY = "Ready"
TIMED_OUT = "TimedOut"


class CancelToken():
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ReadinessWaiter():
    """Polls a readiness condition until it holds or the attempts run out.

    The sleep and clock are injectable so tests can drive both the fast
    success path and the timeout path without waiting on real time.
    """
    def __init__(self, condition, max_attempts=READINESS_ATTEMPTS,
                 interval=READINESS_INTERVAL, sleep=time.sleep,
                 clock=time.monotonic, cancel_token=None):
        assert max_attempts > 0, "max_attempts must be positive"
        self.condition = condition
        self.max_attempts = max_attempts
        self.interval = interval
        self.sleep = sleep
        self.clock = clock
        self.cancel_token = cancel_token or CancelToken()
        self.state = WAITING
        self.attempts = 0
        self.started = None
        self.finished = None

    @property
    def done(self):
        return self.state != WAITING

    def step(self):
        if self.done:
            return self.state
        if self.started is None:
            self.started = self.clock()
        if self.cancel_token.cancelled:
            return self._finish(TIMED_OUT)
        self.attempts += 1
        if self.condition():
            return self._finish(READY)
        if self.attempts >= self.max_attempts:
            return self._finish(TIMED_OUT)
        return self.state

    def wait(self):
        while not self.done:
            if self.step() == WAITING:
                self.sleep(self.interval)
        if self.state == TIMED_OUT:
            raise ReadinessTimeout(
                "Content failed to load after %s attempts (%.2fs)" % (
                    self.attempts, self.elapsed))
        return self.elapsed

    @property
    def elapsed(self):
        if self.started is None:
            return 0
        end = self.finished if self.finished is not None else self.clock()
        return end - self.started

    def _finish(self, state):
        self.state = state
        self.finished = self.clock()
        return state
