import asyncio
import threading
from typing import Any, Coroutine


class EventLoopThread:
    """A single asyncio loop kept alive on a daemon thread.

    Streamlit re-runs the page script on every interaction, so timers such
    as the status clear need a loop that outlives a single run.
    """

    def __init__(self):
        self.loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self.loop.run_forever, name="catalog-ui-loop", daemon=True
        )
        self._thread.start()

    def run(self, coro: Coroutine[Any, Any, Any]) -> Any:
        return asyncio.run_coroutine_threadsafe(coro, self.loop).result()

    def stop(self) -> None:
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join()
        self.loop.close()
