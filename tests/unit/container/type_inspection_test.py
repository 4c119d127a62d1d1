"""
Unit tests for the type inspection helpers.
"""

from abc import ABC, abstractmethod
from typing import Protocol

import pytest
from injector import singleton

from easy_di.container.type_inspection import (
    has_singleton_marker,
    is_abstract_class,
    is_interface,
)


class Repository(ABC):
    @abstractmethod
    def load(self) -> str:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @classmethod
    @abstractmethod
    def create(cls) -> "Repository":
        pass


class BaseRepository(Repository):
    def __init__(self) -> None:
        self.loaded = 0

    def load(self) -> str:
        self.loaded += 1
        return "data"


class AbstractWithHelper(ABC):
    @abstractmethod
    def run(self) -> None:
        pass

    def helper(self) -> str:
        return "help"


class Readable(Protocol):
    def read(self) -> bytes:
        ...


class Plain:
    pass


class EmptyAbc(ABC):
    pass


@singleton
class Marked:
    pass


class InheritsMarker(Marked):
    pass


class TestIsInterface:
    """Test cases for is_interface."""

    @pytest.mark.parametrize("type_", [Repository, Readable])
    def test_interfaces(self, type_: type) -> None:
        assert is_interface(type_) is True

    @pytest.mark.parametrize(
        "type_", [BaseRepository, AbstractWithHelper, Plain, EmptyAbc, int]
    )
    def test_non_interfaces(self, type_: type) -> None:
        assert is_interface(type_) is False

    def test_non_types(self) -> None:
        assert is_interface("Repository") is False
        assert is_interface(None) is False


class TestIsAbstractClass:
    """Test cases for is_abstract_class."""

    def test_abstract_classes(self) -> None:
        assert is_abstract_class(BaseRepository) is True
        assert is_abstract_class(AbstractWithHelper) is True

    def test_interfaces_are_not_abstract_classes(self) -> None:
        assert is_abstract_class(Repository) is False
        assert is_abstract_class(Readable) is False

    def test_concrete_classes(self) -> None:
        # An ABC without abstract members can be instantiated
        assert is_abstract_class(EmptyAbc) is False
        assert is_abstract_class(Plain) is False


class TestHasSingletonMarker:
    """Test cases for has_singleton_marker."""

    def test_marked_class(self) -> None:
        assert has_singleton_marker(Marked) is True

    def test_marker_is_not_inherited(self) -> None:
        assert has_singleton_marker(InheritsMarker) is False

    def test_unmarked_class(self) -> None:
        assert has_singleton_marker(Plain) is False
