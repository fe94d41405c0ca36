"""
Single Writer Pattern for persisted store state.

This module provides a write queue that serializes all durable writes through a
single background task. Store mutations hand their write to the queue and return
immediately; the writer applies the writes in submission order.

Usage:
    from infrastructure.database.write_queue import WriteQueue

    queue = WriteQueue()

    # At app startup
    await queue.start()

    # Fire-and-forget write
    queue.submit(storage.set("feedback", document))

    # Write and wait for the result
    result = await queue.enqueue(my_write_coroutine())

    # At app shutdown
    await queue.stop()
"""

import asyncio
import logging
from typing import Awaitable, Optional, Set, TypeVar

logger = logging.getLogger("WriteQueue")

T = TypeVar("T")


class WriteOperation:
    """Wrapper for a write operation with an optional result future."""

    def __init__(self, coro: Awaitable[T], future: Optional[asyncio.Future] = None):
        self.coro = coro
        self.future = future

    async def run(self) -> None:
        try:
            result = await self.coro
        except Exception as e:
            logger.error(f"Write operation failed: {e}")
            if self.future is not None and not self.future.done():
                self.future.set_exception(e)
            return
        if self.future is not None and not self.future.done():
            self.future.set_result(result)


class WriteQueue:
    """
    Serializes writes through one background task.

    When the writer is not running, writes still happen: they are scheduled on
    the running event loop, or run to completion when no loop is running.
    """

    def __init__(self):
        self._queue: Optional[asyncio.Queue] = None
        self._writer_task: Optional[asyncio.Task] = None
        self._shutdown_event: Optional[asyncio.Event] = None
        self._detached: Set[asyncio.Task] = set()

    async def _writer_loop(self) -> None:
        """
        Background task that processes write operations sequentially.
        """
        logger.info("Write queue started - all store writes will be serialized")

        while True:
            try:
                # Wait for a write operation with timeout to check shutdown
                try:
                    op: Optional[WriteOperation] = await asyncio.wait_for(self._queue.get(), timeout=1.0)
                except asyncio.TimeoutError:
                    if self._shutdown_event.is_set():
                        logger.info("Write queue shut down gracefully")
                        return
                    continue

                # None is the stop sentinel; everything queued before it has run
                if op is None:
                    self._queue.task_done()
                    logger.info("Write queue shut down gracefully")
                    return

                try:
                    await op.run()
                finally:
                    self._queue.task_done()

            except asyncio.CancelledError:
                logger.info("Write queue cancelled")
                raise
            except Exception as e:
                logger.error(f"Unexpected error in writer loop: {e}")
                # Continue processing - don't let one error stop the queue

    async def start(self) -> None:
        """Start the background writer task."""
        if self.is_running:
            logger.warning("Writer task already running")
            return

        self._queue = asyncio.Queue()
        self._shutdown_event = asyncio.Event()
        self._writer_task = asyncio.create_task(self._writer_loop())
        logger.info("Write queue initialized")

    async def stop(self, timeout: float = 10.0) -> None:
        """
        Stop the background writer task gracefully.

        Args:
            timeout: Maximum time to wait for pending writes to complete
        """
        if self._writer_task is None:
            await self._wait_detached()
            return

        logger.info("Stopping write queue...")
        self._shutdown_event.set()
        self._queue.put_nowait(None)

        try:
            await asyncio.wait_for(asyncio.shield(self._writer_task), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Write queue didn't stop within {timeout}s, cancelling...")
            self._writer_task.cancel()
            try:
                await self._writer_task
            except asyncio.CancelledError:
                pass

        dropped = self._queue.qsize() if self._queue is not None else 0
        if dropped:
            logger.warning(f"Dropped {dropped} pending write(s) at shutdown")

        self._writer_task = None
        self._queue = None
        self._shutdown_event = None
        await self._wait_detached()
        logger.info("Write queue stopped")

    def submit(self, coro: Awaitable) -> None:
        """
        Hand a write to the queue without waiting for it.

        Never raises for a failing write; failures are logged. With no event
        loop at all (a synchronous caller) the write runs to completion before
        this returns.

        Args:
            coro: The write coroutine
        """
        if self.is_running:
            self._queue.put_nowait(WriteOperation(coro))
            return

        op = WriteOperation(coro)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop (synchronous caller): perform the write inline
            logger.debug("No running event loop, executing write inline")
            asyncio.run(op.run())
            return

        logger.debug("Write queue not running, scheduling write on the event loop")
        task = loop.create_task(op.run())
        self._detached.add(task)
        task.add_done_callback(self._detached.discard)

    async def enqueue(self, coro: Awaitable[T]) -> T:
        """
        Enqueue a write operation and wait for its result.

        Args:
            coro: The coroutine to execute

        Returns:
            The result of the coroutine

        Raises:
            Any exception raised by the coroutine
        """
        if not self.is_running:
            # Fallback: execute directly if queue not initialized
            logger.warning("Write queue not initialized, executing directly")
            return await coro

        future = asyncio.get_running_loop().create_future()
        await self._queue.put(WriteOperation(coro, future))
        return await future

    async def drain(self) -> None:
        """Wait until every write submitted so far has completed."""
        if self._queue is not None:
            await self._queue.join()
        await self._wait_detached()

    async def _wait_detached(self) -> None:
        if self._detached:
            await asyncio.gather(*list(self._detached), return_exceptions=True)

    @property
    def is_running(self) -> bool:
        """Check if the writer task is running."""
        return self._writer_task is not None and not self._writer_task.done()

    @property
    def qsize(self) -> int:
        """Get the current number of pending writes."""
        if self._queue is None:
            return 0
        return self._queue.qsize()
