import threading


class Debouncer:
    """
    Delays calls to ``function`` until ``delay`` seconds pass without a new
    call. Each call cancels the pending one; only the latest arguments are used.
    """

    def __init__(self, delay, function, timer_factory=threading.Timer):
        self.delay = delay
        self.function = function
        self.timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._pending = None
        self._generation = 0

    @property
    def pending(self):
        return self._pending is not None

    def __call__(self, *args, **kwargs):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = self.timer_factory(self.delay, self._expire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def _take(self, generation=None):
        with self._lock:
            # a timer that lost the race against a newer call must not fire
            if generation is not None and generation != self._generation:
                return None
            if self._timer is not None:
                self._timer.cancel()
            call, self._pending, self._timer = self._pending, None, None
        return call

    def _run(self, call):
        if call is not None:
            args, kwargs = call
            self.function(*args, **kwargs)

    def _expire(self, generation):
        self._run(self._take(generation))

    def flush(self):
        """Run the pending call now instead of waiting for the delay."""
        self._run(self._take())

    def cancel(self):
        self._take()
