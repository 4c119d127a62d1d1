"""Parts of a coffee machine, wired together by EasyDI in ``coffee_app``."""

import logging
from abc import ABC, abstractmethod

from injector import singleton

logger = logging.getLogger(__name__)


class WaterSupply(ABC):
    @abstractmethod
    def get_water(self) -> str:
        pass


@singleton
class WaterTank(WaterSupply):
    """A tank shared by every part that needs water."""

    def __init__(self) -> None:
        logger.info("new WaterTank()")
        self.refills = 0

    def get_water(self) -> str:
        self.refills += 1
        logger.info("WaterTank: get water from the tank")
        return "water from the tank"


class DirectWaterSupply(WaterSupply):
    def __init__(self) -> None:
        logger.info("new DirectWaterSupply()")

    def get_water(self) -> str:
        logger.info("DirectWaterSupply: get water from the water tap")
        return "water from the tap"


class BeanContainer:
    """Has no dependencies but needs to be filled before use, so it comes from a provider."""

    def __init__(self) -> None:
        self.amount = 0

    def set_amount(self, amount: int) -> None:
        self.amount = amount

    def get_beans(self, amount: int) -> int:
        if amount > self.amount:
            raise ValueError(f"Not enough beans: requested {amount}, available {self.amount}")
        self.amount -= amount
        logger.info(f"BeanContainer: {self.amount} beans left")
        return amount


class Mill:
    def grind(self) -> None:
        logger.info("Mill: grinding")


class CoffeePowderProvider:
    def __init__(self, mill: Mill, container: BeanContainer) -> None:
        logger.info("new CoffeePowderProvider(...)")
        self.mill = mill
        self.container = container

    def get_powder(self) -> int:
        logger.info("CoffeePowderProvider: Start making coffee powder.")
        beans = self.container.get_beans(10)
        self.mill.grind()
        logger.info("CoffeePowderProvider: Here you have your coffee powder")
        return beans


class MilkFrother:
    def __init__(self, water_supply: WaterSupply) -> None:
        logger.info("new MilkFrother(...)")
        self.water_supply = water_supply

    def make_milk_froth(self) -> None:
        # heat the water up to get steam
        self.water_supply.get_water()
        logger.info("MilkFrother: making milk froth")


class CoffeeMachine:
    def __init__(
        self,
        coffee_powder_provider: CoffeePowderProvider,
        water_supply: WaterSupply,
        frother: MilkFrother,
    ) -> None:
        logger.info("new CoffeeMachine(...)")
        self.coffee_powder_provider = coffee_powder_provider
        self.water_supply = water_supply
        self.frother = frother

    def make_coffee(self) -> str:
        logger.info("CoffeeMachine: Start making coffee")
        water = self.water_supply.get_water()
        beans = self.coffee_powder_provider.get_powder()
        self.frother.make_milk_froth()

        logger.info("CoffeeMachine: I have all ingredients. Let's go")
        logger.info("CoffeeMachine: Coffee is finished")
        return f"coffee made of {beans} beans and {water}"
