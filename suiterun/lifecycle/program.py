"""
Asyncio host for the lifecycle.

Requests the startup time once, fires Init, then performs delegate commands
and feeds their results back until no command remains.
"""

import asyncio
import inspect
from typing import Any, Optional

from ..core.clock import Clock, SystemClock
from .delegate import Command
from .machine import Lifecycle, Model


class Program:
    def __init__(self, lifecycle: Lifecycle, clock: Optional[Clock] = None) -> None:
        self.lifecycle = lifecycle
        self.clock = clock or SystemClock()

    async def start(self) -> Command:
        """Suspend on the clock, then initialize."""
        now = await self.clock.now()
        return self.lifecycle.init(now)

    def send(self, message: Any) -> Command:
        return self.lifecycle.send(message)

    @staticmethod
    async def perform(command: Command) -> Any:
        result = command()
        if inspect.isawaitable(result):
            result = await result
        return result

    async def run(self) -> Model:
        """
        Start and drain commands.

        Returns:
            Final lifecycle model
        """
        command = await self.start()
        while command is not None:
            message = await self.perform(command)
            command = self.send(message)
        return self.lifecycle.model

    def subscriptions(self):
        return self.lifecycle.subscriptions()


def run_program(lifecycle: Lifecycle, clock: Optional[Clock] = None) -> Model:
    """Blocking wrapper around Program.run()."""
    return asyncio.run(Program(lifecycle, clock).run())
