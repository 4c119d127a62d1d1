from .constructor_resolver import ConstructorResolver, InjectedParameter, InjectionPoint
from .easy_di import EasyDI
from .type_inspection import has_singleton_marker, is_abstract_class, is_interface

__all__ = [
    "ConstructorResolver",
    "EasyDI",
    "InjectedParameter",
    "InjectionPoint",
    "has_singleton_marker",
    "is_abstract_class",
    "is_interface",
]
