"""Observable holder for the single APOD fetch of a page session."""

import logging
import threading
from typing import Callable, Generic, TypeVar

from apodview.fetch import ApodFetchError
from apodview.models import Error, Loading, ResourceState, Success

_LOG = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[ResourceState], None]


class RemoteResource(Generic[T]):
    """Runs `fetch` once on a background thread and exposes the latest state.

    The state goes Loading -> Success | Error exactly once. Readers only ever
    see the most recent value; listeners are called on the fetch thread.
    """

    def __init__(self, fetch: Callable[[], T], name: str = "resource"):
        self._fetch = fetch
        self._name = name
        self._state: ResourceState = Loading()
        self._lock = threading.Lock()
        self._settled = threading.Event()
        self._thread: threading.Thread | None = None
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ResourceState:
        with self._lock:
            return self._state

    def start(self) -> None:
        """Launch the fetch. Later calls are no-ops."""
        with self._lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._run, name=f"fetch-{self._name}", daemon=True
            )
        self._thread.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the fetch settles. Returns False on timeout."""
        return self._settled.wait(timeout)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener` for state changes. Returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: ResourceState) -> None:
        with self._lock:
            self._state = state
            listeners = list(self._listeners)
        for listener in listeners:
            listener(state)

    def _run(self) -> None:
        try:
            data = self._fetch()
        except ApodFetchError as e:
            _LOG.warning("%s fetch failed: %s", self._name, e)
            self._publish(Error(cause=str(e)))
        except Exception as e:
            _LOG.exception("%s fetch crashed", self._name)
            self._publish(Error(cause=repr(e)))
        else:
            self._publish(Success(data))
        finally:
            self._settled.set()
