"""
Helpers that classify types the way the container needs them.

Python has no separate interface construct, so the container treats two
kinds of classes as interfaces:

- ``typing.Protocol`` classes, and
- ABCs that declare nothing but abstract members (the ``IFooService(ABC)``
  style with ``@abstractmethod`` only).

Every other class with unimplemented abstract methods is an abstract class.
"""

import inspect
from typing import Any

from injector import SingletonScope


def is_interface(type_: Any) -> bool:
    """Return ``True`` if the given type is an interface."""
    if not isinstance(type_, type):
        return False

    if getattr(type_, "_is_protocol", False):
        return True

    if not inspect.isabstract(type_) or "__init__" in vars(type_):
        return False

    return all(
        _is_abstract_member(member)
        for name, member in vars(type_).items()
        if not (name.startswith("__") and name.endswith("__"))
        and _is_method_like(member)
    )


def is_abstract_class(type_: Any) -> bool:
    """
    Return ``True`` only if the given type is an abstract class.

    Interfaces are not abstract classes.
    """
    return (
        isinstance(type_, type)
        and not is_interface(type_)
        and inspect.isabstract(type_)
    )


def has_singleton_marker(type_: Any) -> bool:
    """
    Check if the class itself carries ``injector``'s ``@singleton`` marker.

    The marker is read from the class namespace only, so it is neither
    inherited by subclasses nor picked up from an implemented interface.
    """
    scope = vars(type_).get("__scope__") if isinstance(type_, type) else None
    return isinstance(scope, type) and issubclass(scope, SingletonScope)


def _is_method_like(member: Any) -> bool:
    if isinstance(member, type):
        return False
    if isinstance(member, (classmethod, staticmethod, property)):
        return True
    return callable(member)


def _is_abstract_member(member: Any) -> bool:
    if isinstance(member, property):
        return bool(getattr(member.fget, "__isabstractmethod__", False))
    function = getattr(member, "__func__", member)
    return bool(getattr(function, "__isabstractmethod__", False))
