"""
Fixed-interval polling owned by a view.

A view creates its pollers on mount and the router stops them on every route
change, so no polling thread outlives the view that started it.
"""
import threading
import traceback


class Poller:

    def __init__(self, interval: float, callback, name: str = "poller"):
        if interval <= 0:
            raise ValueError("Poll interval must be positive")
        self.interval = interval
        self.callback = callback
        self.name = name
        self._stop_event = None
        self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Run the callback now, then every `interval` seconds until stopped."""
        if self.running:
            return self
        # Each run gets its own event, so a loop that outlived stop() never restarts
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(self._stop_event,), name=self.name, daemon=True)
        self._thread.start()
        print(f"🚀 {self.name} started (every {self.interval}s)")
        return self

    def stop(self, timeout: float = 2.0):
        if self._stop_event is not None:
            self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
            if thread.is_alive():
                print(f"⚠️ {self.name} still finishing a tick, it exits after that")
        self._thread = None
        print(f"🛑 {self.name} stopped")

    def _run(self, stop_event):
        while not stop_event.is_set():
            try:
                self.callback()
            except Exception as ex:
                print(f"❌ {self.name} tick error: {ex}")
                traceback.print_exc()
            # wait() returns early as soon as stop() is called
            if stop_event.wait(self.interval):
                break

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


class PollerRegistry:
    """Pollers of the view currently on screen."""

    def __init__(self):
        self._pollers = []
        self._lock = threading.Lock()

    def add(self, poller: Poller) -> Poller:
        with self._lock:
            self._pollers.append(poller)
        return poller

    def stop_all(self):
        with self._lock:
            pollers, self._pollers = self._pollers, []
        for poller in pollers:
            poller.stop()

    def __len__(self):
        with self._lock:
            return len(self._pollers)
