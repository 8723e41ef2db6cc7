from __future__ import annotations

"""
Delegating client whose forwarding methods are generated from an interface
"""

import functools
import typing as t
from lzd.configs import settings
from lzd.errors import InterfaceError
from lzd.interface import Operation, discover_operations
from lzd.logging import logger

DelegateT = t.TypeVar('DelegateT')
ResultT = t.TypeVar('ResultT')

AnswerHook = t.Callable[[t.Any], t.Any]
VoidHook = t.Callable[[], None]

# Extension points that an interface must not redefine
RESERVED_NAMES = frozenset({'get_delegate', 'on_answer', 'on_void_complete'})


def build_forwarder(operation: Operation) -> t.Callable[..., t.Any]:
    """
    Builds the method that forwards `operation` to the delegate.

    The hook is called explicitly inside the generated method, so a subclass
    that defines its own version of the operation bypasses it.
    """
    name = operation.name

    if operation.is_async:
        if operation.is_void:
            async def forward(self: 'DelegatingClient', *args, **kwargs):
                delegate = self.get_delegate()
                if settings.debug_enabled: self._log_forward(delegate, name, 'void')
                await getattr(delegate, name)(*args, **kwargs)
                self.on_void_complete()
        else:
            async def forward(self: 'DelegatingClient', *args, **kwargs):
                delegate = self.get_delegate()
                if settings.debug_enabled: self._log_forward(delegate, name, 'answer')
                result = await getattr(delegate, name)(*args, **kwargs)
                return self.on_answer(result)

    elif operation.is_void:
        def forward(self: 'DelegatingClient', *args, **kwargs):
            delegate = self.get_delegate()
            if settings.debug_enabled: self._log_forward(delegate, name, 'void')
            getattr(delegate, name)(*args, **kwargs)
            self.on_void_complete()
    else:
        def forward(self: 'DelegatingClient', *args, **kwargs):
            delegate = self.get_delegate()
            if settings.debug_enabled: self._log_forward(delegate, name, 'answer')
            result = getattr(delegate, name)(*args, **kwargs)
            return self.on_answer(result)

    if operation.function is not None:
        functools.update_wrapper(forward, operation.function)
    forward.__lzd_operation__ = operation
    return forward


class DelegatingClient(t.Generic[DelegateT]):
    """
    Simple delegate for a third-party client interface.

    Bind it to an interface when subclassing:

        class MyDockerClient(DelegatingClient['docker.APIClient'], interface = docker.APIClient):
            ...

    Every public method of the interface is then implemented by a generated
    method that:

    - calls `get_delegate()`,
    - calls the matching method of the delegate with the same arguments,
    - for operations annotated to return `None`, calls `on_void_complete()`
      and returns `None`,
    - for every other operation, calls `on_answer()` with the delegate's
      result and returns whatever it returned.

    Exceptions raised by the delegate propagate unchanged and no hook runs.

    Methods defined in the subclass body, or in a mixin or base class it
    inherits from, are kept as-is, which lets a subclass intercept a single
    operation. Such an override decides itself whether to call the hooks.

    Args:
        delegate: The instance every call is forwarded to.
        on_answer: Optional callable used by the default `on_answer`.
        on_void_complete: Optional callable used by the default `on_void_complete`.
    """

    __interface__: t.ClassVar[t.Optional[type]] = None
    __operations__: t.ClassVar[t.Tuple[Operation, ...]] = ()
    __interface_filters__: t.ClassVar[t.Dict[str, t.Any]] = {}

    def __init_subclass__(
        cls,
        interface: t.Optional[type] = None,
        include: t.Optional[t.Iterable[str]] = None,
        exclude: t.Optional[t.Iterable[str]] = None,
        packages: t.Optional[t.Iterable[str]] = None,
        **kwargs: t.Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if interface is None: return
        include, exclude = tuple(include or ()), tuple(exclude or ())
        packages = tuple(packages) if packages else None
        operations = discover_operations(interface, include = include, exclude = exclude, packages = packages)
        if not operations:
            raise InterfaceError(f'`{interface.__qualname__}` declares no operations', interface = interface)
        reserved = RESERVED_NAMES.intersection(op.name for op in operations)
        if reserved:
            raise InterfaceError(
                f'`{interface.__qualname__}` defines {sorted(reserved)}, which collide with the delegating extension points',
                interface = interface,
            )
        generated = 0
        for operation in operations:
            if cls._defines_operation(operation.name): continue
            forward = build_forwarder(operation)
            forward.__module__ = cls.__module__
            forward.__qualname__ = f'{cls.__qualname__}.{operation.name}'
            setattr(cls, operation.name, forward)
            generated += 1
        cls.__interface__ = interface
        cls.__interface_filters__ = {'include': include, 'exclude': exclude, 'packages': packages}
        cls.__operations__ = tuple(operations)
        logger.bind(wrapper = cls.__name__, operation = interface.__qualname__, kind = 'bind').debug(
            f'Generated {generated}/{len(operations)} forwarding methods'
        )

    @classmethod
    def _defines_operation(cls, name: str) -> bool:
        """
        Returns True if `name` is written by hand in the class or one of its
        bases (mixins included), ignoring forwarders generated for an
        earlier binding.
        """
        for klass in cls.__mro__:
            if klass is DelegatingClient: break
            if name in klass.__dict__:
                return not hasattr(klass.__dict__[name], '__lzd_operation__')
        return False

    def __init__(
        self,
        delegate: DelegateT,
        on_answer: t.Optional[AnswerHook] = None,
        on_void_complete: t.Optional[VoidHook] = None,
    ):
        if delegate is None:
            raise ValueError(f'{type(self).__name__} requires a delegate')
        self._delegate = delegate
        self._answer_hook = on_answer
        self._void_hook = on_void_complete

    def get_delegate(self) -> DelegateT:
        """
        Returns the instance to forward to. Subclasses can override this to
        hook into every call before anything else happens, or to pick a
        different delegate per call.
        """
        return self._delegate

    def on_answer(self, original_answer: ResultT) -> ResultT:
        """
        Called with the delegate's result just before a non-void operation
        returns. The returned value is what the caller receives.

        Overriding this (or passing `on_answer`) intercepts every operation,
        including ones the interface gains later. To act on a few specific
        operations, override those instead.
        """
        if self._answer_hook is None:
            return original_answer
        return self._answer_hook(original_answer)

    def on_void_complete(self) -> None:
        """
        Called just before a void operation returns.
        """
        if self._void_hook is not None:
            self._void_hook()

    def _log_forward(self, delegate: DelegateT, name: str, kind: str) -> None:
        logger.bind(wrapper = type(self).__name__, operation = name, kind = kind).debug(
            f'Forwarding to {type(delegate).__name__}'
        )

    def __repr__(self) -> str:
        return f'<{type(self).__name__} delegate={self._delegate!r}>'
