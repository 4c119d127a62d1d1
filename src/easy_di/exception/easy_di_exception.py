"""Exceptions raised while resolving object graphs."""

from typing import Any


def describe_type(type_: Any) -> str:
    """Return the fully qualified name of a type for error messages."""
    module = getattr(type_, "__module__", None)
    qualname = getattr(type_, "__qualname__", None) or repr(type_)
    if module and module != "builtins":
        return f"{module}.{qualname}"
    return qualname


class EasyDiException(Exception):
    """Root cause of a failed resolution.

    Raised while a single type is inspected or instantiated. Callers of
    ``EasyDI.get_instance`` never see this exception directly; it is always
    chained as ``__cause__`` of a :class:`ResolutionError`.
    """

    def __init__(self, type_: Any, reason: str) -> None:
        self.type = type_
        self.reason = reason
        super().__init__(
            f"EasyDI can't create an instance of the class [{describe_type(type_)}]. {reason}"
        )


class ResolutionError(RuntimeError):
    """Raised by ``EasyDI.get_instance`` when a class hierarchy can't be built."""

    def __init__(self, requested_type: Any, parent: Any = None) -> None:
        self.requested_type = requested_type
        self.parent = parent

        message = "EasyDI wasn't able to create your class hierarchy. "
        if parent is not None:
            message += (
                f"\nCannot instantiate the class [{describe_type(parent)}]. "
                f"At least one of the constructor parameters of type "
                f"[{describe_type(requested_type)}] can't be instantiated. "
            )
        message += "See the root cause exception for a detailed explanation."
        super().__init__(message)
