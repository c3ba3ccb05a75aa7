"""Runner body profile models."""

from abc import abstractmethod

from pydantic import BaseModel, Field

from .units import UnitSystem

# lb/in^2 -> kg/m^2
IMPERIAL_BMI_FACTOR = 703.0


class Runner(BaseModel):
    """Body measurements of a runner, in the units of the concrete subclass."""

    weight: float = Field(description="Body weight", gt=0)
    height: float = Field(description="Body height", gt=0)
    age: int = Field(description="Age in years", ge=0)

    model_config = {"frozen": True}

    @abstractmethod
    def bmi(self) -> float:
        """Calculate body mass index."""


class MetricRunner(Runner):
    """Runner measured in kilograms and meters."""

    def bmi(self) -> float:
        """Calculate body mass index from kilograms and meters."""
        return self.weight / (self.height * self.height)


class ImperialRunner(Runner):
    """Runner measured in pounds and inches."""

    def bmi(self) -> float:
        """Calculate body mass index from pounds and inches."""
        return self.weight / (self.height * self.height) * IMPERIAL_BMI_FACTOR


def make_runner(
    weight: float, height: float, age: int, unit_system: UnitSystem | str = UnitSystem.METRIC
) -> Runner:
    """Create a runner whose measurements are in the given unit system."""
    if UnitSystem(unit_system) == UnitSystem.IMPERIAL:
        return ImperialRunner(weight=weight, height=height, age=age)
    return MetricRunner(weight=weight, height=height, age=age)
