"""Thread-backed line reader for the console chat.

Blocking console input runs on a daemon thread so the event loop keeps
firing auto-reply timers while the user types.

Design:
- Each readline() starts one short-lived daemon thread
- The thread hands its result back with call_soon_threadsafe
- Ctrl+C is delivered to the main thread, so it never passes through here
"""

import asyncio
import threading

from rich.console import Console


class ThreadedLineReader:
    """Reads prompted lines from the console without blocking the event loop.

    Example:
        reader = ThreadedLineReader(console, "You: ")
        line = await reader.readline()  # raises EOFError at end of input
    """

    def __init__(self, console: Console, prompt: str) -> None:
        self._console = console
        self._prompt = prompt

    async def readline(self) -> str:
        """Prompt for one line.

        Raises:
            EOFError: If input is exhausted
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[str] = loop.create_future()
        thread = threading.Thread(
            target=self._read,
            args=(loop, future),
            name="console-input",
            daemon=True,
        )
        thread.start()
        return await future

    def _read(self, loop: asyncio.AbstractEventLoop, future: "asyncio.Future[str]") -> None:
        """Runs on the reader thread."""
        try:
            line = self._console.input(self._prompt)
        except EOFError as exc:
            self._hand_over(loop, future, None, exc)
            return
        self._hand_over(loop, future, line, None)

    @staticmethod
    def _hand_over(
        loop: asyncio.AbstractEventLoop,
        future: "asyncio.Future[str]",
        line: str | None,
        error: BaseException | None,
    ) -> None:
        if loop.is_closed():
            return

        def _resolve() -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(line or "")

        loop.call_soon_threadsafe(_resolve)
