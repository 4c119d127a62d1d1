from .coffee_app import create_context, main

__all__ = ["create_context", "main"]
