from __future__ import annotations

import collections
import inspect
import typing as t

import pytest

from lzd.errors import InterfaceError
from lzd.interface import Parameter, ParameterKind, discover_operations, render_annotation

from . import fixtures


def test_discovery_finds_every_public_instance_method() -> None:
    operations = discover_operations(fixtures.ContainerApi)

    assert [op.name for op in operations] == fixtures.CONTAINER_API_OPERATIONS


def test_discovery_is_sorted_by_display_name() -> None:
    names = [op.display_name for op in discover_operations(fixtures.ContainerApi)]

    assert names == sorted(names)
    assert 'pause(str)' in names
    assert 'version()' in names
    assert 'kill(str,Signal)' in names
    assert 'label(str,Labels)' in names
    assert 'inspect(Any,Any)' in names
    assert 'run(str,*str,**Any)' in names


def test_properties_classmethods_and_private_methods_are_not_operations() -> None:
    names = {op.name for op in discover_operations(fixtures.ContainerApi)}

    assert 'api_version' not in names
    assert 'from_env' not in names
    assert '_request' not in names


def test_include_and_exclude_filters() -> None:
    names = {op.name for op in discover_operations(fixtures.ContainerApi, include=['_request'], exclude=['run'])}

    assert '_request' in names
    assert 'run' not in names


def test_methods_from_other_packages_are_skipped_unless_included() -> None:
    class Remote(collections.UserDict):
        def fetch(self, key: str) -> str:
            return self[key]

    names = {op.name for op in discover_operations(Remote)}
    assert names == {'fetch'}

    names = {op.name for op in discover_operations(Remote, include=['copy'])}
    assert names == {'fetch', 'copy'}

    names = {op.name for op in discover_operations(Remote, packages=['tests', 'collections'])}
    assert {'fetch', 'copy'} <= names
    assert 'fromkeys' not in names


def test_void_and_async_detection() -> None:
    operations = {op.name: op for op in discover_operations(fixtures.ContainerApi)}

    assert operations['pause'].is_void
    assert not operations['version'].is_void
    assert operations['version'].return_annotation is fixtures.VersionInfo
    assert operations['stop'].is_async and operations['stop'].is_void
    assert operations['wait'].is_async and not operations['wait'].is_void
    assert not operations['pause'].is_async


def test_unannotated_operations_are_not_void() -> None:
    operation = {op.name: op for op in discover_operations(fixtures.ContainerApi)}['inspect']

    assert operation.return_annotation is inspect.Signature.empty
    assert not operation.is_void


def test_parameters_keep_kind_and_defaults() -> None:
    operation = {op.name: op for op in discover_operations(fixtures.ContainerApi)}['logs']

    assert [p.name for p in operation.parameters] == ['id', 'tail', 'follow']
    assert operation.parameters[0].kind == ParameterKind.POSITIONAL_OR_KEYWORD
    assert operation.parameters[1].kind == ParameterKind.KEYWORD_ONLY
    assert operation.parameters[1].annotation == t.Optional[int]
    assert operation.parameters[2].default is False
    assert not operation.parameters[0].has_default


def test_unresolvable_annotations_degrade_to_any() -> None:
    operations = {op.name: op for op in discover_operations(fixtures.UnresolvedApi)}

    assert operations['fetch'].display_name == 'fetch(Any)'
    assert not operations['fetch'].is_void
    assert operations['drop'].display_name == 'drop(str)'
    assert operations['drop'].is_void


def test_discovery_rejects_non_classes() -> None:
    with pytest.raises(InterfaceError):
        discover_operations(fixtures.InMemoryContainerApi())


def test_discovery_rejects_unknown_includes() -> None:
    with pytest.raises(InterfaceError, match='does not define'):
        discover_operations(fixtures.ContainerApi, include=['restart'])


def test_discovery_rejects_included_non_methods() -> None:
    with pytest.raises(InterfaceError, match='not an instance method'):
        discover_operations(fixtures.ContainerApi, include=['api_version'])


def test_render_annotation() -> None:
    assert render_annotation(inspect.Parameter.empty) == 'Any'
    assert render_annotation(t.Any) == 'Any'
    assert render_annotation(None) == 'None'
    assert render_annotation(str) == 'str'
    assert render_annotation(fixtures.VersionInfo) == 'VersionInfo'
    assert render_annotation(t.List[str]) == 'List[str]'
    assert render_annotation(list[str]) == 'list[str]'


def test_resolvable_annotations_survive_an_unresolvable_neighbour() -> None:
    operation = {op.name: op for op in discover_operations(fixtures.UnresolvedApi)}['tag']

    assert operation.display_name == 'tag(Any,Labels)'
    assert operation.parameters[1].annotation is fixtures.Labels
    assert operation.return_annotation is fixtures.Labels


def test_parameters_default_to_any() -> None:
    parameter = Parameter(name='id', kind=ParameterKind.POSITIONAL_OR_KEYWORD)

    assert parameter.annotation is t.Any
    assert parameter.type_name == 'Any'
    assert not parameter.has_default
