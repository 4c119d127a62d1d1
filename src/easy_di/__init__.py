"""EasyDI.

A small dependency injection container that builds object graphs from
constructor type annotations, using the markers of the ``injector``
distribution (``inject``, ``singleton``, ``ProviderOf``).
"""

__version__ = "0.6.0"

from injector import ProviderOf, inject, singleton

from .container.easy_di import EasyDI
from .exception.easy_di_exception import EasyDiException, ResolutionError

__all__ = [
    # Container
    "EasyDI",
    # Errors
    "EasyDiException",
    "ResolutionError",
    # Markers re-exported from injector
    "ProviderOf",
    "inject",
    "singleton",
]
