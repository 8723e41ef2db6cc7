"""Lazy proxy used for module settings and lazily-connected delegates."""

import contextlib
import threading
import typing as t


ProxyObjT = t.TypeVar('ProxyObjT')

empty = object()

__all__ = ["ProxyObject", "ProxyObjT", "new_method_proxy", "empty"]


def new_method_proxy(func: t.Callable[..., t.Any]) -> t.Callable[..., t.Any]:
    """Builds the proxied object if needed, then applies `func` to it."""

    def inner(self: 'ProxyObject', *args: t.Any):
        if self._wrapped is empty:
            self._setup()
        return func(self._wrapped, *args)
    return inner


class ProxyObject(t.Generic[ProxyObjT]):
    """
    Builds the wrapped object on first attribute access.

    Used for module-level settings and for delegates whose construction
    opens connections (e.g. a `docker.APIClient`).
    """

    _wrapped = None

    def __init__(
        self,
        obj_cls: t.Optional[t.Type[ProxyObjT]] = None,
        obj_getter: t.Optional[t.Callable[..., ProxyObjT]] = None,
        obj_args: t.Optional[t.Iterable[t.Any]] = None,
        obj_kwargs: t.Optional[t.Dict[str, t.Any]] = None,
        threadsafe: t.Optional[bool] = True,
    ):
        """
        Args:
            obj_cls: Class instantiated on first use when no ``obj_getter``
                is provided.
            obj_getter: Callable that builds the wrapped object on demand.
            obj_args: Positional arguments forwarded to the constructor.
            obj_kwargs: Keyword arguments forwarded to the constructor.
            threadsafe: When ``True`` construction is guarded by a lock so
                concurrent first accesses build exactly one object.
        """
        if obj_cls is None and obj_getter is None:
            raise ValueError("ProxyObject needs an `obj_cls` or an `obj_getter`")
        self._wrapped = empty
        self.__dict__['__obj_cls_'] = obj_cls
        self.__dict__['__obj_getter_'] = obj_getter
        self.__dict__['__threadlock_'] = threading.Lock() if threadsafe else None
        self.__dict__['__obj_args_'] = list(obj_args or [])
        self.__dict__['__obj_kwargs_'] = dict(obj_kwargs or {})

    @contextlib.contextmanager
    def _objlock_(self):
        """Guards construction of the wrapped object."""
        if self.__dict__['__threadlock_'] is not None:
            with self.__dict__['__threadlock_']:
                yield
        else:
            yield

    __getattr__ = new_method_proxy(getattr)
    __dir__ = new_method_proxy(dir)
    __bool__ = new_method_proxy(bool)

    def __setattr__(self, name, value):
        if name == "_wrapped":
            # bypass the proxied setattr
            self.__dict__["_wrapped"] = value
        else:
            if self._wrapped is empty:
                self._setup()
            setattr(self._wrapped, name, value)

    def __delattr__(self, name):
        if name == "_wrapped":
            raise TypeError("the proxied object cannot be removed")
        if self._wrapped is empty:
            self._setup()
        delattr(self._wrapped, name)

    def __call__(self, *args: t.Any, **kwargs: t.Any) -> t.Any:
        if self._wrapped is empty:
            self._setup()
        return self._wrapped(*args, **kwargs)

    def __repr__(self) -> str:
        if self._wrapped is empty:
            target = self.__dict__['__obj_getter_'] or self.__dict__['__obj_cls_']
            return f'<{type(self).__name__} for {getattr(target, "__qualname__", target)!r} (unloaded)>'
        return repr(self._wrapped)

    @property
    def _is_loaded_(self) -> bool:
        """Returns True once the wrapped object has been built"""
        return self._wrapped is not empty

    def _setup(self) -> None:
        """Instantiate the wrapped object if it isn't available."""
        with self._objlock_():
            if self._wrapped is not empty:
                return
            args, kwargs = self.__dict__['__obj_args_'], self.__dict__['__obj_kwargs_']
            if self.__dict__['__obj_getter_'] is not None:
                self.__dict__['_wrapped'] = self.__dict__['__obj_getter_'](*args, **kwargs)
            else:
                self.__dict__['_wrapped'] = self.__dict__['__obj_cls_'](*args, **kwargs)
