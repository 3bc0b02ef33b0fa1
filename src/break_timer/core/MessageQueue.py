"""Single ordered delivery queue shared by all message producers."""
import queue
from typing import Iterator

from break_timer.core.messages import Message


class MessageQueue:
    def __init__(self) -> None:
        # Producers may live on background threads (the timer), the
        # consumer is always the main loop.
        self._queue: queue.Queue[Message] = queue.Queue()

    def push(self, message: Message) -> None:
        self._queue.put(message)

    def drain(self) -> Iterator[Message]:
        """Yield pending messages one at a time until the queue is empty."""
        while True:
            try:
                yield self._queue.get_nowait()
            except queue.Empty:
                break

    def size(self) -> int:
        return self._queue.qsize()
