"""Transaction senders: the signing/dispatch capability injected into command builders.

A sender turns a typed command into an applied transaction. Remote senders
(sign + submit over RPC) live with the host; LocalSender applies commands to
an in-process dispatcher, which is what tests and replay tools use.
"""

from typing import Any, Protocol

from src.pm_gateway.commands import Command, PlayerId
from src.pm_gateway.dispatcher import CommandDispatcher


class TransactionSender(Protocol):
    @property
    def pid(self) -> PlayerId: ...

    def send(self, command: Command) -> Any: ...


class LocalSender:
    def __init__(self, dispatcher: CommandDispatcher, pid: PlayerId) -> None:
        self._dispatcher = dispatcher
        self._pid: PlayerId = (pid[0], pid[1])

    @property
    def pid(self) -> PlayerId:
        return self._pid

    def send(self, command: Command) -> Any:
        return self._dispatcher.handle(self._pid, command)
