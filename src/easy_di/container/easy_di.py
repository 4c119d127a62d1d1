"""
EasyDI main class.

A typical usage looks like this:

    easy_di = EasyDI()

    instance = easy_di.get_instance(MyClass)

Dependencies are taken from the type annotations of the constructor. The
markers of the ``injector`` distribution are understood:

- ``@singleton`` on a class: only one instance is created per container.
- ``@inject`` on ``__init__`` or on a classmethod factory: selects the
  constructor when there is more than one candidate.
- ``ProviderOf[T]`` as parameter annotation: a lazy provider for ``T``.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Set, Type, TypeVar

from injector import ProviderOf

from easy_di.container.constructor_resolver import (
    ConstructorResolver,
    InjectedParameter,
    InjectionPoint,
)
from easy_di.container.type_inspection import (
    has_singleton_marker,
    is_abstract_class,
    is_interface,
)
from easy_di.exception.easy_di_exception import (
    EasyDiException,
    ResolutionError,
    describe_type,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class EasyDI:
    """Dependency injection container.

    Each container keeps its own bindings and singleton instances. All
    operations are serialized by a re-entrant lock, so a container can be
    shared between threads and constructors may call back into it.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._resolver = ConstructorResolver()

        # implementation type (value) that should be used for an interface type (key)
        self._interface_mappings: Dict[type, type] = {}
        self._providers: Dict[type, Callable[[], Any]] = {}
        # classes treated as singleton even without the @singleton marker
        self._singleton_classes: Set[type] = set()
        self._singleton_instances: Dict[type, Any] = {}
        # types currently being created, outermost first
        self._resolution_path: List[type] = []

    def get_instance(self, requested_type: Type[T]) -> T:
        """
        Get an instance of the given class type.

        Args:
            requested_type: The class type of which an instance is retrieved.

        Returns:
            An instance of the given type.

        Raises:
            ResolutionError: If there is a misconfiguration or a requested class
                can't be instantiated. The root cause is chained as ``__cause__``.
        """
        with self._lock:
            return self._get_instance(requested_type, None)

    def get(self, interface: Type[T]) -> T:
        """Alias of :meth:`get_instance`, used by injected ``ProviderOf`` objects."""
        return self.get_instance(interface)

    def bind_interface(self, interface_type: Type[T], implementation_type: Type[T]) -> None:
        """
        Define what implementing class should be used for a given interface.

        This way interface types can be used as dependencies without depending
        on specific implementations. The second argument has to be an actual
        implementing class of the interface. It may not be an abstract class.

        Alternatively, use :meth:`bind_instance` to define an instance of the
        interface, or :meth:`bind_provider` to define a provider for it.

        If an interface is bound more than once, the last binding wins.

        Raises:
            TypeError: If the first argument is not an interface, or the second
                argument is an interface or an abstract class.
        """
        if not is_interface(interface_type):
            raise TypeError(
                f"The given type {describe_type(interface_type)} is not an interface. "
                "Expecting the first argument to be an interface."
            )
        if is_interface(implementation_type):
            raise TypeError(
                f"The given type {describe_type(implementation_type)} is an interface. "
                "Expecting the second argument to not be an interface but an actual class"
            )
        if is_abstract_class(implementation_type):
            raise TypeError(
                f"The given type {describe_type(implementation_type)} is an abstract class. "
                "Expecting the second argument to be an actual implementing class"
            )
        if not getattr(interface_type, "_is_protocol", False) and not issubclass(
            implementation_type, interface_type
        ):
            raise TypeError(
                f"The given type {describe_type(implementation_type)} does not implement "
                f"{describe_type(interface_type)}."
            )

        with self._lock:
            self._interface_mappings[interface_type] = implementation_type
        logger.debug(
            f"Bound interface {describe_type(interface_type)} to {describe_type(implementation_type)}"
        )

    def bind_provider(self, class_type: Type[T], provider: Callable[[], T]) -> None:
        """
        Define a provider for a given type.

        The type can either be an interface or a class type. This is a good way
        to integrate third-party classes that aren't suitable for injection by
        default, or to configure a new instance before it is injected.

        Providers combine with singletons: when the type is a singleton, the
        provider is only called once, on the first request.

        Args:
            class_type: The type for which the provider is used.
            provider: A callable without arguments returning an instance.
        """
        if not callable(provider):
            raise TypeError(f"The provider for {describe_type(class_type)} is not callable.")

        with self._lock:
            self._providers[class_type] = provider
        logger.debug(f"Bound provider for {describe_type(class_type)}")

    def bind_instance(self, class_type: Type[T], instance: T) -> None:
        """
        Define an instance that is used every time the given type is requested.

        This way the given instance is effectively a singleton. It also works
        for interfaces and abstract classes.
        """
        self.bind_provider(class_type, lambda: instance)

    def mark_as_singleton(self, type_: type) -> None:
        """
        Mark a class as singleton.

        Alternative to the ``@singleton`` marker, e.g. for third-party classes.
        Interfaces can't be marked as singleton.

        Raises:
            TypeError: If the given type is an interface.
        """
        if is_interface(type_):
            raise TypeError(
                f"The given type is an interface ({describe_type(type_)}). "
                "Expecting the param to be an actual class"
            )

        with self._lock:
            self._singleton_classes.add(type_)
        logger.debug(f"Marked {describe_type(type_)} as singleton")

    def _get_instance(self, requested_type: Any, parent: Any) -> Any:
        try:
            return self._resolve(requested_type)
        except EasyDiException as root_cause:
            logger.warning(f"Resolution of {describe_type(requested_type)} failed: {root_cause}")
            raise ResolutionError(requested_type, parent) from root_cause

    def _resolve(self, requested_type: Any) -> Any:
        if not isinstance(requested_type, type):
            raise EasyDiException(
                requested_type,
                "It is not a class. Only classes can be requested or used as constructor "
                "parameter types; use 'bind_provider' for anything else.",
            )

        type_ = requested_type

        if is_interface(requested_type):
            if requested_type in self._interface_mappings:
                type_ = self._interface_mappings[requested_type]
            elif requested_type in self._providers:
                return self._instance_from_provider(requested_type)
            else:
                raise EasyDiException(
                    requested_type,
                    "It is an interface and there was no implementation class mapping defined "
                    "for this type. Please use the 'bind_interface' method of EasyDI to define "
                    "what implementing class should be used for a given interface.",
                )

        if is_abstract_class(requested_type):
            if requested_type in self._providers:
                return self._instance_from_provider(requested_type)
            raise EasyDiException(
                requested_type,
                "It is an abstract class and there is no provider for this class available. "
                "Please define a provider with the 'bind_provider' method for this abstract "
                "class type.",
            )

        if type_ in self._resolution_path:
            cycle = self._resolution_path[self._resolution_path.index(type_):] + [type_]
            raise EasyDiException(
                type_,
                "A cyclic dependency was detected: "
                + " -> ".join(t.__qualname__ for t in cycle),
            )

        if type_ in self._singleton_instances:
            return self._singleton_instances[type_]

        self._resolution_path.append(type_)
        try:
            if type_ in self._providers:
                instance = self._instance_from_provider(type_)
            else:
                instance = self._create_new_instance(type_)
        finally:
            self._resolution_path.pop()

        if self._is_singleton(type_):
            self._singleton_instances[type_] = instance

        return instance

    def _create_new_instance(self, type_: type) -> Any:
        if type_.__module__ == "builtins":
            raise EasyDiException(
                type_,
                "It is a built-in type. Built-in values are not created automatically; "
                "give the parameter a default value or define a provider with 'bind_provider'.",
            )

        injection_point = self._resolver.resolve(type_)

        # recursively get all constructor arguments
        arguments = {
            parameter.name: self._argument_for(parameter, type_)
            for parameter in injection_point.parameters
        }

        return self._invoke(injection_point, arguments)

    def _argument_for(self, parameter: InjectedParameter, owner: type) -> Any:
        if parameter.lazy:
            return ProviderOf(self, parameter.dependency_type)
        return self._get_instance(parameter.dependency_type, owner)

    @staticmethod
    def _invoke(injection_point: InjectionPoint, arguments: Dict[str, Any]) -> Any:
        try:
            instance = injection_point.invoke(arguments)
        except Exception as e:
            raise EasyDiException(
                injection_point.owner,
                f"An Exception was thrown during the instantiation ({injection_point.description}).",
            ) from e

        logger.debug(f"Created new instance of {describe_type(injection_point.owner)}")
        return instance

    def _instance_from_provider(self, type_: type) -> Any:
        provider = self._providers[type_]
        try:
            return provider()
        except Exception as e:
            raise EasyDiException(type_, "An Exception was thrown by the provider.") from e

    def _is_singleton(self, type_: type) -> bool:
        return has_singleton_marker(type_) or type_ in self._singleton_classes

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"{self.__class__.__name__}("
                f"{len(self._interface_mappings)} interface mappings, "
                f"{len(self._providers)} providers, "
                f"{len(self._singleton_instances)} singletons)"
            )
