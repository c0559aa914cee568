"""Threads that hand back a result and exchange messages by identifier."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Hashable, Optional

from .text import String

_local = threading.local()


class _Finished(BaseException):
    """Unwinds a worker thread carrying the value given to ``Thread.finish``."""

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value


def _key(message_id: Any) -> Hashable:
    if isinstance(message_id, String):
        return str(message_id)
    return message_id


class Thread:
    """Runs ``target(*args, **kwargs)`` on a new thread as soon as it is built.

    Inside the target, ``Thread.finish(value)`` ends the thread and makes
    ``value`` its result; otherwise the target's return value is the result.
    Any thread may post values with ``Thread.send`` and take them with
    ``Thread.receive``; a message is removed once it has been received.
    """

    _messages: Dict[Hashable, Any] = {}
    _mailbox = threading.Condition()

    def __init__(self, target: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        if not callable(target):
            raise TypeError(f"thread target must be callable, not {type(target).__name__}")
        self._result: Any = None
        self._error: Optional[BaseException] = None
        self._worker = threading.Thread(
            target=self._run, args=(target, args, kwargs), daemon=True
        )
        self._worker.start()

    def _run(self, target: Callable[..., Any], args: tuple, kwargs: dict) -> None:
        _local.managed = True
        try:
            self._result = target(*args, **kwargs)
        except _Finished as finished:
            self._result = finished.value
        except BaseException as exc:  # handed to the caller of get()
            self._error = exc

    @staticmethod
    def send(message_id: Any, value: Any) -> None:
        """Post ``value`` under ``message_id`` for some thread to receive."""
        key = _key(message_id)
        with Thread._mailbox:
            if key in Thread._messages:
                raise ValueError(f"message {key!r} is already waiting to be received")
            Thread._messages[key] = value
            Thread._mailbox.notify_all()

    @staticmethod
    def receive(message_id: Any, timeout: Optional[float] = None) -> Any:
        """Wait for the message posted under ``message_id``, remove it and return it.

        Raises :class:`TimeoutError` if ``timeout`` seconds pass first.
        """
        key = _key(message_id)
        with Thread._mailbox:
            if not Thread._mailbox.wait_for(lambda: key in Thread._messages, timeout):
                raise TimeoutError(f"no message {key!r} within {timeout} seconds")
            return Thread._messages.pop(key)

    @staticmethod
    def finish(value: Any) -> Any:
        """End the calling worker thread with ``value`` as its result.

        Called from a thread not started by this class, it simply returns
        ``value`` and the caller carries on.
        """
        if getattr(_local, "managed", False):
            raise _Finished(value)
        return value

    def get(self) -> Any:
        """Wait for the thread to end and return its result.

        An exception raised by the target is raised again here.
        """
        self._worker.join()
        if self._error is not None:
            raise self._error
        return self._result

    def wait(self) -> None:
        """Wait for the thread to end, discarding its result."""
        self._worker.join()

    def is_alive(self) -> bool:
        """True while the target is still running."""
        return self._worker.is_alive()

    def __repr__(self) -> str:
        state = "running" if self.is_alive() else "finished"
        return f"<Thread {self._worker.name} {state}>"