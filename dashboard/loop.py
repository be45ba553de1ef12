"""Single-consumer control loop for the dashboard controller.

Intents and job events share one asyncio.Queue. The loop takes one message
at a time, applies it to the controller, and starts any jobs the controller
hands back as independent tasks. A finished job only puts its event into
the queue, so the controller is never mutated concurrently.
"""

import asyncio
import contextlib
from typing import Callable, List, Optional, Set

from utils import get_logger

from .controller import DashboardController
from .events import Intent, Message
from .jobs import Job

logger = get_logger(__name__)


class ControlLoop:
    """Drive a DashboardController from a mailbox.

    Example:
        ```python
        loop = ControlLoop(controller)
        loop.send(Intent.SUBMIT)
        await loop.run_until_idle()
        ```
    """

    def __init__(
        self,
        controller: DashboardController,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        """Initialize the loop.

        Args:
            controller: Controller that owns all dashboard state
            on_change: Called after every applied message, on the loop's task
        """
        self.controller = controller
        self._on_change = on_change
        self._mailbox: asyncio.Queue[Message] = asyncio.Queue()
        self._tasks: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        """Number of jobs that have not reported back yet."""
        return sum(1 for task in self._tasks if not task.done())

    def send(self, message: Message) -> None:
        """Queue an intent or event for the loop."""
        self._mailbox.put_nowait(message)

    def process(self, message: Message) -> List[Job]:
        """Apply one message to the controller and start the resulting jobs."""
        jobs: List[Job] = []
        if isinstance(message, Intent):
            jobs = self.controller.handle_intent(message)
            self._spawn(jobs)
        else:
            self.controller.apply_event(message)

        if self._on_change is not None:
            self._on_change()
        return jobs

    def _spawn(self, jobs: List[Job]) -> None:
        for job in jobs:
            task = asyncio.create_task(self._run_job(job))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _run_job(self, job: Job) -> None:
        try:
            event = await job.run()
        except Exception as e:
            logger.exception(f"Job {job!r} crashed")
            event = job.failed(e)
        self._mailbox.put_nowait(event)

    async def run(self) -> None:
        """Process messages until the controller asks to quit."""
        while not self.controller.quit_requested:
            message = await self._mailbox.get()
            self.process(message)

    async def run_until_idle(self) -> None:
        """Process messages until the mailbox is empty and no job is in flight."""
        while True:
            while not self._mailbox.empty():
                self.process(self._mailbox.get_nowait())

            pending = {task for task in self._tasks if not task.done()}
            if not pending:
                if self._mailbox.empty():
                    return
                continue
            await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)

    async def shutdown(self) -> None:
        """Cancel in-flight jobs and wait for their processes to be killed."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task
        self._tasks.clear()
