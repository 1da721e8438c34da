"""Database connection supervision with bounded exponential backoff."""

import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import ConnectionState, Database

logger = logging.getLogger(__name__)


class ConnectionSupervisor:
    """
    Establishes the database connection for the lifetime of the process.

    The first attempt runs inline during startup. If it fails, the remaining
    attempts run in a background task so the HTTP server can report liveness
    while the database is unreachable. Once `max_attempts` is exhausted the
    database is marked degraded and no further attempts are made.
    """

    def __init__(
        self,
        database: Database,
        max_attempts: int = 10,
        initial_delay: float = 5.0,
        max_delay: float = 60.0,
        backoff_factor: float = 2.0,
    ):
        self.database = database
        self.max_attempts = max(1, max_attempts)
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.attempts = 0
        self._task: Optional[asyncio.Task] = None

    @classmethod
    def from_settings(cls, database: Database, settings) -> "ConnectionSupervisor":
        return cls(
            database,
            max_attempts=settings.DB_CONNECT_MAX_ATTEMPTS,
            initial_delay=settings.DB_CONNECT_INITIAL_DELAY,
            max_delay=settings.DB_CONNECT_MAX_DELAY,
            backoff_factor=settings.DB_CONNECT_BACKOFF_FACTOR,
        )

    def delay_for(self, attempt: int) -> float:
        """Delay before `attempt` (2-based; the first attempt is immediate)."""
        delay = self.initial_delay * (self.backoff_factor ** (attempt - 2))
        return min(delay, self.max_delay)

    async def _attempt(self) -> bool:
        self.attempts += 1
        try:
            await asyncio.to_thread(self.database.connect)
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database connection attempt {self.attempts}/{self.max_attempts} failed: {e}")
            return False

    async def start(self) -> None:
        self.database.state = ConnectionState.connecting
        if await self._attempt():
            return
        if self.attempts >= self.max_attempts:
            self._give_up()
            return
        self._task = asyncio.create_task(self._retry())

    async def _retry(self) -> None:
        try:
            while self.attempts < self.max_attempts:
                delay = self.delay_for(self.attempts + 1)
                logger.info(f"Retrying database connection in {delay:.1f} seconds")
                await asyncio.sleep(delay)
                if await self._attempt():
                    return
        except Exception as e:
            logger.error(f"Database connection retries aborted by unexpected error: {e}", exc_info=e)
        self._give_up()

    def _give_up(self) -> None:
        self.database.state = ConnectionState.degraded
        logger.error(f"Giving up on database connection after {self.attempts} attempts; running degraded")

    async def wait(self) -> None:
        """Block until the background retry loop, if any, has finished."""
        if self._task is not None:
            await self._task

    async def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self.database.close()
