from abc import ABC, abstractmethod
from typing import Optional, Protocol

import pytest

from moldbind import BindingRegistry, InspectIntrospector, ParameterInfo, Resolver, UnresolveableClassError


class Logger(ABC):
    @abstractmethod
    def log(self, msg: str) -> None: ...


class NeedsMissingType:
    def __init__(self, dep: "MissingDependency"):  # noqa: F821
        self.dep = dep


def test_unannotated_parameter_has_no_declared_type():
    class Repo:
        def __init__(self, db):
            self.db = db

    (param,) = InspectIntrospector().parameters(Repo)
    assert param == ParameterInfo("db", None)


def test_parameters_report_class_annotations_only():
    class Service:
        def __init__(self, logger: Logger, port: int, name: Optional[str], *args, retries: int = 3, **kwargs):
            pass

    params = InspectIntrospector().parameters(Service)

    assert [p.name for p in params] == ["logger", "port", "name", "retries"]
    assert params[0].declared_type is Logger
    assert params[1].declared_type is None
    assert params[2].declared_type is None
    assert params[3].optional
    assert params[3].keyword_only


def test_class_without_init_has_no_parameters():
    class Plain: ...

    assert InspectIntrospector().parameters(Plain) == []


def test_is_instantiable():
    class Concrete: ...

    class SupportsGet(Protocol):
        def get(self) -> int: ...

    introspector = InspectIntrospector()
    assert introspector.is_instantiable(Concrete)
    assert not introspector.is_instantiable(Logger)
    assert not introspector.is_instantiable(SupportsGet)
    assert not introspector.is_instantiable("token")


def test_unresolvable_annotation_is_reported(caplog):
    with caplog.at_level("WARNING"):
        (param,) = InspectIntrospector().parameters(NeedsMissingType)

    assert param.declared_type is None
    assert "MissingDependency" in param.annotation_error
    assert "MissingDependency" in caplog.text


def test_resolve_names_unresolvable_annotation():
    r = Resolver(BindingRegistry())

    with pytest.raises(UnresolveableClassError) as ctx:
        r.resolve(NeedsMissingType)
    assert ctx.value.token is NeedsMissingType
    assert "name 'MissingDependency' is not defined" in str(ctx.value)
