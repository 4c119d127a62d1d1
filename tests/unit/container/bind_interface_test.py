"""
Unit tests for EasyDI.bind_interface.

Verifies how the container deals with interfaces: ABCs declaring only
abstract members and typing.Protocol classes.
"""

from abc import ABC, abstractmethod
from typing import Protocol

import pytest
from injector import singleton

from conftest import error_chain_text
from easy_di.container.easy_di import EasyDI
from easy_di.exception.easy_di_exception import ResolutionError


class A(ABC):
    @abstractmethod
    def name(self) -> str:
        pass


class B(ABC):
    @abstractmethod
    def other(self) -> str:
        pass


class ExampleOne(A):
    def name(self) -> str:
        return "one"


class ExampleTwo(A, B):
    def name(self) -> str:
        return "two"

    def other(self) -> str:
        return "other"


class SubInterface(A):
    @abstractmethod
    def more(self) -> str:
        pass


class AbstractA(A):
    """Abstract class: has a concrete helper but leaves name() open."""

    def describe(self) -> str:
        return f"example {self.name()}"


class Greeter(Protocol):
    def greet(self) -> str:
        ...


class EnglishGreeter:
    def greet(self) -> str:
        return "hello"


@singleton
class WannabeSingleton(ABC):
    @abstractmethod
    def value(self) -> int:
        pass


class NonSingleton(WannabeSingleton):
    def value(self) -> int:
        return 1


class TestBindInterface:
    """Test cases for interface bindings."""

    def test_works_with_a_correct_binding(self, easy_di: EasyDI) -> None:
        """Test that a bound interface resolves to its implementation."""
        # Given
        easy_di.bind_interface(A, ExampleOne)

        # When
        instance = easy_di.get_instance(A)

        # Then
        assert isinstance(instance, ExampleOne)

    def test_works_with_protocols(self, easy_di: EasyDI) -> None:
        """Test that a Protocol can be bound to a structural implementation."""
        # Given
        easy_di.bind_interface(Greeter, EnglishGreeter)

        # When
        instance = easy_di.get_instance(Greeter)

        # Then
        assert instance.greet() == "hello"

    def test_fails_without_a_binding(self, easy_di: EasyDI) -> None:
        """Test that an unbound interface can't be instantiated."""
        # Given
        # no binding for A

        # When
        with pytest.raises(ResolutionError) as exc_info:
            easy_di.get_instance(A)

        # Then
        message = error_chain_text(exc_info.value)
        assert "is an interface" in message
        assert "use the 'bind_interface' method" in message

    def test_last_binding_is_used(self, easy_di: EasyDI) -> None:
        """Test that a second binding for the same interface overwrites the first."""
        # Given
        easy_di.bind_interface(A, ExampleOne)
        easy_di.bind_interface(A, ExampleTwo)

        # When
        instance = easy_di.get_instance(A)

        # Then
        assert isinstance(instance, ExampleTwo)

    def test_interfaces_cannot_be_marked_as_singletons(self, easy_di: EasyDI) -> None:
        """Test that @singleton on an interface is ignored."""
        # Given
        easy_di.bind_interface(WannabeSingleton, NonSingleton)

        # When
        instance_one = easy_di.get_instance(WannabeSingleton)
        instance_two = easy_di.get_instance(WannabeSingleton)

        # Then
        assert instance_one is not instance_two

    def test_fails_when_first_param_is_not_an_interface(self, easy_di: EasyDI) -> None:
        """Test that only interfaces can be bound."""
        # Given/When
        with pytest.raises(TypeError) as exc_info:
            easy_di.bind_interface(ExampleOne, ExampleOne)

        # Then
        assert "not an interface" in str(exc_info.value)

    def test_fails_when_second_param_is_also_an_interface(self, easy_di: EasyDI) -> None:
        """Test that an interface can't be bound to another interface."""
        # Given/When
        with pytest.raises(TypeError) as exc_info:
            easy_di.bind_interface(A, SubInterface)

        # Then
        assert "is an interface" in str(exc_info.value)

    def test_fails_when_second_param_is_an_abstract_class(self, easy_di: EasyDI) -> None:
        """Test that an interface can't be bound to an abstract class."""
        # Given/When
        with pytest.raises(TypeError) as exc_info:
            easy_di.bind_interface(A, AbstractA)

        # Then
        assert "is an abstract class" in str(exc_info.value)

    def test_fails_when_second_param_does_not_implement_the_interface(
        self, easy_di: EasyDI
    ) -> None:
        """Test that the implementation has to subclass a nominal interface."""
        # Given/When/Then
        with pytest.raises(TypeError, match="does not implement"):
            easy_di.bind_interface(B, ExampleOne)

    def test_mapped_implementation_gets_dependencies(self, easy_di: EasyDI) -> None:
        """Test that an interface can be used as a constructor dependency."""
        # Given
        class Consumer:
            def __init__(self, a: A) -> None:
                self.a = a

        easy_di.bind_interface(A, ExampleTwo)

        # When
        consumer = easy_di.get_instance(Consumer)

        # Then
        assert consumer.a.name() == "two"
