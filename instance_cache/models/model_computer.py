"""Computer models: shared flyweight specs and per-unit computers."""

from pydantic import BaseModel, ConfigDict, Field


class ComputerSpec(BaseModel):
    """Shared, immutable attributes common to every unit of a computer line."""

    model_config = ConfigDict(frozen=True)

    make: str = Field(description="Manufacturer, e.g. 'Dell'")
    model: str = Field(description="Product line, e.g. 'Studio XPS'")
    processor: str = Field(description="Processor family, e.g. 'Intel'")


class Computer(BaseModel):
    """A single computer unit referencing a shared ComputerSpec."""

    spec: ComputerSpec
    memory: str = Field(description="Installed memory, e.g. '4G'")
    tag: str = Field(description="Unique asset tag")

    @property
    def make(self) -> str:
        return self.spec.make

    @property
    def model(self) -> str:
        return self.spec.model

    @property
    def processor(self) -> str:
        return self.spec.processor
