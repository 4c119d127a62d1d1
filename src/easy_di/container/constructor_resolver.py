"""
Selection and inspection of the constructor used to build an instance.

A class can be built either through ``__init__`` or through a classmethod
factory. Factories only take part when they are marked with ``injector``'s
``@inject``:

    class Client:
        def __init__(self, host: str, port: int) -> None:
            ...

        @classmethod
        @inject
        def from_settings(cls, settings: Settings) -> "Client":
            return cls(settings.host, settings.port)
"""

import inspect
import logging
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from injector import ProviderOf

from easy_di.exception.easy_di_exception import EasyDiException

logger = logging.getLogger(__name__)

_INJECTABLE_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


@dataclass(frozen=True)
class InjectedParameter:
    """A single constructor parameter the container has to fill."""

    name: str
    dependency_type: Any
    positional_only: bool = False
    lazy: bool = False


@dataclass
class InjectionPoint:
    """The selected constructor of a class together with its parameters."""

    owner: type
    factory: Callable[..., Any]
    description: str
    parameters: List[InjectedParameter] = field(default_factory=list)

    def invoke(self, arguments: Dict[str, Any]) -> Any:
        positional = [
            arguments[parameter.name]
            for parameter in self.parameters
            if parameter.positional_only
        ]
        keywords = {
            parameter.name: arguments[parameter.name]
            for parameter in self.parameters
            if not parameter.positional_only
        }
        return self.factory(*positional, **keywords)


class ConstructorResolver:
    """Finds out which constructor will be used for instantiation.

    - No candidate marked with ``@inject``: ``__init__`` is used.
    - Exactly one marked candidate (``__init__`` or a classmethod factory):
      that one is used.
    - More than one marked candidate: the class is rejected.
    """

    def resolve(self, type_: type) -> InjectionPoint:
        marked = self._find_marked_factories(type_)

        if len(marked) > 1:
            names = ", ".join(name for name, _ in marked)
            raise EasyDiException(
                type_,
                "There is more than one constructor marked with @inject so I don't know "
                f"which one to use ({names}). Fix this by marking exactly one of "
                "__init__ or the classmethod factories with the injector.inject decorator.",
            )

        if marked and marked[0][0] != "__init__":
            name, function = marked[0]
            logger.debug(f"Using factory {type_.__qualname__}.{name} for instantiation")
            return InjectionPoint(
                owner=type_,
                factory=getattr(type_, name),
                description=f"{type_.__qualname__}.{name}",
                parameters=self._inspect_parameters(type_, function),
            )

        init = type_.__init__
        if init is object.__init__:
            parameters: List[InjectedParameter] = []
        else:
            parameters = self._inspect_parameters(type_, init)

        return InjectionPoint(
            owner=type_,
            factory=type_,
            description=f"{type_.__qualname__}.__init__",
            parameters=parameters,
        )

    @staticmethod
    def _find_marked_factories(type_: type) -> List[Tuple[str, Callable[..., Any]]]:
        marked: List[Tuple[str, Callable[..., Any]]] = []

        if _is_marked(getattr(type_, "__init__", None)):
            marked.append(("__init__", type_.__init__))

        for name, member in vars(type_).items():
            if isinstance(member, classmethod) and _is_marked(member.__func__):
                marked.append((name, member.__func__))

        return marked

    def _inspect_parameters(
        self, type_: type, function: Callable[..., Any]
    ) -> List[InjectedParameter]:
        try:
            signature = inspect.signature(function)
        except (TypeError, ValueError) as e:
            raise EasyDiException(
                type_, f"The constructor signature can't be inspected: {e}"
            ) from e

        # drop ``self`` / ``cls``
        declared = list(signature.parameters.values())[1:]
        if not declared:
            return []

        hints = self._type_hints(type_, function)

        parameters: List[InjectedParameter] = []
        for parameter in declared:
            if parameter.kind not in _INJECTABLE_KINDS:
                continue
            if parameter.default is not inspect.Parameter.empty:
                continue

            annotation = hints.get(parameter.name)
            if annotation is None:
                raise EasyDiException(
                    type_,
                    f"The constructor parameter '{parameter.name}' has no type annotation, "
                    "so I don't know what to inject. Add a type annotation or a default value.",
                )

            parameters.append(self._to_injected_parameter(type_, parameter, annotation))

        return parameters

    @staticmethod
    def _type_hints(type_: type, function: Callable[..., Any]) -> Dict[str, Any]:
        try:
            return typing.get_type_hints(function)
        except Exception as e:
            raise EasyDiException(
                type_, f"The type annotations of the constructor can't be evaluated: {e!r}"
            ) from e

    @staticmethod
    def _to_injected_parameter(
        type_: type, parameter: inspect.Parameter, annotation: Any
    ) -> InjectedParameter:
        positional_only = parameter.kind is inspect.Parameter.POSITIONAL_ONLY

        if annotation is ProviderOf:
            raise EasyDiException(
                type_,
                "There is a ProviderOf without a type parameter declared as dependency. "
                "When using injector.ProviderOf as dependency you need to define a type "
                f"parameter for this provider (parameter '{parameter.name}')!",
            )

        if typing.get_origin(annotation) is ProviderOf:
            (provided_type,) = typing.get_args(annotation)
            return InjectedParameter(
                name=parameter.name,
                dependency_type=provided_type,
                positional_only=positional_only,
                lazy=True,
            )

        return InjectedParameter(
            name=parameter.name,
            dependency_type=annotation,
            positional_only=positional_only,
        )


def _is_marked(function: Optional[Callable[..., Any]]) -> bool:
    """Check if ``injector.inject`` was applied to the given function."""
    return getattr(function, "__bindings__", None) is not None
