"""Built-in components and the @component decorator.

A custom element ``<Page title={t}>...</Page>`` is built by calling
``Page(title=t, children=...)``. Any class whose instances implement
``render_into(sink)`` works; @component derives such a class from a plain
function whose parameters are the fields.

Example:
    >>> from plume import SimpleElement, component, html
    >>> @component
    ... def Greeting(name, children=()):
    ...     return SimpleElement("p", {"class": "greeting"}, (f"Hello, {name}! ", children))
    >>> html("<Greeting name={'Ada'}>Welcome</Greeting>", Greeting=Greeting)
    '<p class="greeting">Hello, Ada! Welcome</p>'

"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, ClassVar

from plume.errors import ComponentError
from plume.renderers.html import get_default_renderer
from plume.renderers.protocol import Sink

_NOT_KEYWORD = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.VAR_POSITIONAL)


class FunctionComponent:
    """Base class of the classes produced by @component.

    Instances hold the bound keyword fields; rendering calls the wrapped
    function with them and renders whatever it returns.
    """

    __slots__ = ("_fields",)

    _function: ClassVar[Callable[..., Any]]
    _signature: ClassVar[inspect.Signature]

    def __init__(self, **fields: Any) -> None:
        parameters = self._signature.parameters
        if not any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters.values()):
            # Unknown fields are reported ahead of missing ones.
            unexpected = [name for name in fields if name not in parameters]
            if unexpected:
                names = ", ".join(repr(name) for name in unexpected)
                raise TypeError(
                    f"{type(self).__name__}: got an unexpected keyword argument {names}"
                )
        try:
            bound = self._signature.bind(**fields)
        except TypeError as exc:
            raise TypeError(f"{type(self).__name__}: {exc}") from None
        bound.apply_defaults()
        self._fields: dict[str, Any] = {}
        for name, value in bound.arguments.items():
            if parameters[name].kind is inspect.Parameter.VAR_KEYWORD:
                self._fields.update(value)
            else:
                self._fields[name] = value

    def __getattr__(self, name: str) -> Any:
        if name == "_fields":
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} component has no field {name!r}"
            ) from None

    def render_into(self, sink: Sink) -> None:
        result = type(self)._function(**self._fields)
        get_default_renderer().render_into(result, sink)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields == other._fields  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self._fields.items())
        return f"{type(self).__name__}({fields})"


def component(function: Callable[..., Any]) -> type[FunctionComponent]:
    """Turn a function into a component class.

    The function's parameters become the component's keyword fields.
    Declare a ``children`` parameter to receive the element body.

    Raises:
        ComponentError: If a parameter cannot be passed by keyword
    """
    signature = inspect.signature(function)
    for parameter in signature.parameters.values():
        if parameter.kind in _NOT_KEYWORD:
            raise ComponentError(
                function.__name__,
                f"parameter {parameter.name!r} must be passable by keyword",
            )

    namespace = {
        "__slots__": (),
        "__doc__": function.__doc__,
        "__module__": function.__module__,
        "__qualname__": function.__qualname__,
        "__signature__": signature.replace(return_annotation=inspect.Signature.empty),
        "_function": staticmethod(function),
        "_signature": signature,
    }
    return type(function.__name__, (FunctionComponent,), namespace)


class HTML5Doctype:
    """HTML 5 doctype declaration, ``<!DOCTYPE html>``.

    A zero-field component: ``<HTML5Doctype />``.
    """

    __slots__ = ()

    def render_into(self, sink: Sink) -> None:
        sink.write("<!DOCTYPE html>")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HTML5Doctype)

    def __hash__(self) -> int:
        return hash(HTML5Doctype)

    def __repr__(self) -> str:
        return "HTML5Doctype()"


__all__ = ["FunctionComponent", "HTML5Doctype", "component"]
