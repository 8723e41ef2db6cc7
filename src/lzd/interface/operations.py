from __future__ import annotations

"""
Operation model and capability introspection for wrapped interfaces
"""

import enum
import inspect
import types
import typing as t
from pydantic import BaseModel, ConfigDict, Field
from lzd.errors import InterfaceError
from lzd.logging import logger

__all__ = [
    'ParameterKind',
    'Parameter',
    'Operation',
    'discover_operations',
    'build_operation',
    'render_annotation',
]


class ParameterKind(str, enum.Enum):
    POSITIONAL_ONLY = 'positional_only'
    POSITIONAL_OR_KEYWORD = 'positional_or_keyword'
    VAR_POSITIONAL = 'var_positional'
    KEYWORD_ONLY = 'keyword_only'
    VAR_KEYWORD = 'var_keyword'

    @classmethod
    def from_inspect(cls, kind: inspect._ParameterKind) -> 'ParameterKind':
        return cls(kind.name.lower())

    @property
    def is_variadic(self) -> bool:
        return self in {ParameterKind.VAR_POSITIONAL, ParameterKind.VAR_KEYWORD}


def render_annotation(annotation: t.Any) -> str:
    """
    Renders a type the way it appears in an operation's display name

    Classes render by their simple name, typing constructs without the
    `typing.` prefix, and missing annotations as `Any`.
    """
    if annotation is inspect.Parameter.empty or annotation is t.Any:
        return 'Any'
    if annotation is None or annotation is type(None):
        return 'None'
    if isinstance(annotation, type) and not t.get_args(annotation):
        return annotation.__name__
    if isinstance(annotation, str):
        return annotation
    return repr(annotation).replace('typing.', '')


class Parameter(BaseModel):
    """
    A single parameter of an operation
    """
    model_config = ConfigDict(frozen = True, arbitrary_types_allowed = True)

    name: str
    kind: ParameterKind
    annotation: t.Any = Field(default_factory = lambda: t.Any)
    default: t.Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty

    @property
    def type_name(self) -> str:
        """
        Returns the rendered type, prefixed with `*` / `**` for variadics
        """
        name = render_annotation(self.annotation)
        if self.kind == ParameterKind.VAR_POSITIONAL: return f'*{name}'
        if self.kind == ParameterKind.VAR_KEYWORD: return f'**{name}'
        return name


class Operation(BaseModel):
    """
    One named, typed method of a wrapped interface
    """
    model_config = ConfigDict(frozen = True, arbitrary_types_allowed = True)

    name: str
    parameters: t.Tuple[Parameter, ...] = ()
    return_annotation: t.Any = inspect.Signature.empty
    is_async: bool = False
    function: t.Optional[t.Callable[..., t.Any]] = None

    @property
    def is_void(self) -> bool:
        """
        Returns True if the operation is annotated to return nothing.

        Operations without a return annotation are not void.
        """
        return self.return_annotation is None or self.return_annotation is type(None)

    @property
    def display_name(self) -> str:
        """
        Returns `name(Type1,Type2,...)`
        """
        return f'{self.name}({",".join(p.type_name for p in self.parameters)})'

    def __str__(self) -> str:
        return self.display_name


def _resolve_hints(func: t.Callable[..., t.Any]) -> t.Dict[str, t.Any]:
    """
    Resolves the type hints of a function.

    When the hints cannot be resolved together (an unknown forward
    reference), each annotation is evaluated on its own and the ones that
    still fail degrade to `Any`.
    """
    target = inspect.unwrap(func)
    try:
        return t.get_type_hints(target)
    except Exception as e:
        logger.debug(f'Unable to resolve type hints for {getattr(target, "__qualname__", target)}: {e}')
    globalns = getattr(target, '__globals__', {})
    hints = {}
    for key, value in getattr(target, '__annotations__', {}).items():
        # resolve one annotation at a time so a bad one only affects itself
        holder = types.SimpleNamespace(__annotations__ = {key: value})
        try:
            value = t.get_type_hints(holder, globalns = globalns)[key]
        except Exception:
            value = t.Any
        hints[key] = value
    return hints


def build_operation(name: str, func: t.Callable[..., t.Any]) -> Operation:
    """
    Builds an Operation from an (unbound) interface function
    """
    signature = inspect.signature(func)
    hints = _resolve_hints(func)
    params = list(signature.parameters.values())
    # Drop the bound instance parameter
    if params and params[0].kind in {inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD}:
        params = params[1:]
    parameters = tuple(
        Parameter(
            name = p.name,
            kind = ParameterKind.from_inspect(p.kind),
            annotation = hints.get(p.name, t.Any),
            default = p.default,
        )
        for p in params
    )
    return Operation(
        name = name,
        parameters = parameters,
        return_annotation = hints.get('return', inspect.Signature.empty),
        is_async = inspect.iscoroutinefunction(inspect.unwrap(func)),
        function = func,
    )


def _root_package(obj: t.Any) -> str:
    return (getattr(obj, '__module__', None) or '').split('.')[0]


def _find_owner(interface: type, name: str) -> t.Optional[type]:
    for klass in interface.__mro__:
        if name in klass.__dict__:
            return klass
    return None


def discover_operations(
    interface: type,
    include: t.Optional[t.Iterable[str]] = None,
    exclude: t.Optional[t.Iterable[str]] = None,
    packages: t.Optional[t.Iterable[str]] = None,
) -> t.List[Operation]:
    """
    Enumerates the operations declared by an interface class.

    An operation is a public instance method owned (per the MRO) by a class
    whose top-level package is one of `packages`, which defaults to the
    interface's own top-level package. Methods inherited from unrelated
    bases are skipped unless listed in `include`.

    Args:
        interface: The class to introspect.
        include: Names that are always operations, even if private or
            inherited from another package.
        exclude: Names that are never operations.
        packages: Top-level package names whose methods count as declared.

    Returns:
        The operations sorted by display name.
    """
    if not isinstance(interface, type):
        raise InterfaceError(f'Interface must be a class, got {interface!r}', interface = interface)
    include = set(include or ())
    exclude = set(exclude or ())
    packages = set(packages or {_root_package(interface)})

    operations: t.List[Operation] = []
    for name in dir(interface):
        if name in exclude: continue
        if name.startswith('_') and name not in include: continue
        owner = _find_owner(interface, name)
        if owner is None: continue
        if name not in include and _root_package(owner) not in packages: continue
        raw = inspect.getattr_static(interface, name)
        # properties, classmethods, staticmethods and plain attributes are not operations
        if not inspect.isfunction(raw):
            if name in include:
                raise InterfaceError(f'`{interface.__qualname__}.{name}` is not an instance method', interface = interface)
            continue
        operations.append(build_operation(name, raw))

    missing = include - {op.name for op in operations} - exclude
    if missing:
        raise InterfaceError(f'`{interface.__qualname__}` does not define {sorted(missing)}', interface = interface)
    operations.sort(key = lambda op: op.display_name)
    return operations
