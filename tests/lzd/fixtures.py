from __future__ import annotations

"""Sample interfaces and delegates for exercising lzd."""

import enum
import typing as t

from pydantic import BaseModel

from lzd.delegate import DelegatingClient


class VersionInfo(BaseModel):
    build: str


class Signal(str, enum.Enum):
    HUP = 'SIGHUP'
    INT = 'SIGINT'
    KILL = 'SIGKILL'
    TERM = 'SIGTERM'


@t.final
class Labels:
    """Sealed value type: built with its constructor, never mocked."""

    def __init__(self) -> None:
        self.values: t.Dict[str, str] = {}


@t.final
class Checkpoint:
    """Sealed type without a zero-argument constructor."""

    def __init__(self, path: str) -> None:
        self.path = path


class ContainerApi:
    """A small container runtime interface."""

    def pause(self, id: str) -> None:
        raise NotImplementedError

    def version(self) -> VersionInfo:
        raise NotImplementedError

    def kill(self, id: str, signal: Signal) -> None:
        raise NotImplementedError

    def logs(self, id: str, *, tail: t.Optional[int] = None, follow: bool = False) -> t.Iterator[bytes]:
        raise NotImplementedError

    def inspect(self, id, size = False):
        raise NotImplementedError

    def label(self, id: str, labels: Labels) -> t.Dict[str, str]:
        raise NotImplementedError

    def run(self, image: str, *command: str, **options: t.Any) -> str:
        raise NotImplementedError

    async def wait(self, id: str, condition: t.Literal['created', 'running', 'exited'] = 'exited') -> int:
        raise NotImplementedError

    async def stop(self, id: str) -> None:
        raise NotImplementedError

    @property
    def api_version(self) -> str:
        return '1.45'

    @classmethod
    def from_env(cls) -> 'ContainerApi':
        return cls()

    def _request(self, path: str) -> bytes:
        raise NotImplementedError


CONTAINER_API_OPERATIONS = [
    'inspect', 'kill', 'label', 'logs', 'pause', 'run', 'stop', 'version', 'wait',
]


class InMemoryContainerApi(ContainerApi):
    """Working implementation used as a real delegate."""

    def __init__(self) -> None:
        self.paused: t.List[str] = []
        self.killed: t.List[t.Tuple[str, Signal]] = []
        self.build = '42'

    def pause(self, id: str) -> None:
        if id == 'missing':
            raise LookupError(f'No such container: {id}')
        self.paused.append(id)

    def version(self) -> VersionInfo:
        return VersionInfo(build = self.build)

    def kill(self, id: str, signal: Signal) -> None:
        self.killed.append((id, signal))

    def logs(self, id: str, *, tail: t.Optional[int] = None, follow: bool = False) -> t.Iterator[bytes]:
        lines = [f'{id}: line {i}'.encode() for i in range(5)]
        return iter(lines[-tail:] if tail else lines)

    def inspect(self, id, size = False):
        return {'Id': id, 'SizeRw': 0 if size else None}

    def label(self, id: str, labels: Labels) -> t.Dict[str, str]:
        return dict(labels.values)

    def run(self, image: str, *command: str, **options: t.Any) -> str:
        return ' '.join([image, *command, *(f'{k}={v}' for k, v in sorted(options.items()))])

    async def wait(self, id: str, condition: t.Literal['created', 'running', 'exited'] = 'exited') -> int:
        return 0

    async def stop(self, id: str) -> None:
        self.paused.append(f'stopped:{id}')


class DelegatingContainerApi(DelegatingClient[ContainerApi], interface = ContainerApi):
    """Wrapper bound to the sample interface."""


class CheckpointApi:

    def restore(self, checkpoint: Checkpoint) -> None:
        raise NotImplementedError

    def status(self) -> str:
        raise NotImplementedError


class DelegatingCheckpointApi(DelegatingClient[CheckpointApi], interface = CheckpointApi):
    pass


class UnresolvedApi:

    def fetch(self, ref: NotDefinedAnywhere) -> NotDefinedAnywhere:  # noqa: F821
        raise NotImplementedError

    def drop(self, ref: str) -> None:
        raise NotImplementedError

    def tag(self, ref: NotDefinedAnywhere, labels: Labels) -> Labels:  # noqa: F821
        raise NotImplementedError
