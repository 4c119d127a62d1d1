from .easy_di_exception import EasyDiException, ResolutionError, describe_type

__all__ = ["EasyDiException", "ResolutionError", "describe_type"]
