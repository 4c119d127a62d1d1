"""Coffee machine example: interfaces, providers and singletons end to end."""

from easy_di.container.easy_di import EasyDI
from easy_di.examples.coffee.components import (
    BeanContainer,
    CoffeeMachine,
    WaterSupply,
    WaterTank,
)
from easy_di.logging.logging_config import configure_logging


def create_context(beans: int = 100) -> EasyDI:
    """Create a container configured for the coffee machine."""
    easy_di = EasyDI()
    easy_di.bind_interface(WaterSupply, WaterTank)

    def bean_container() -> BeanContainer:
        container = BeanContainer()
        container.set_amount(beans)
        return container

    easy_di.bind_provider(BeanContainer, bean_container)
    return easy_di


def main() -> None:
    configure_logging()
    coffee_machine = create_context().get_instance(CoffeeMachine)
    coffee_machine.make_coffee()


if __name__ == "__main__":
    main()
