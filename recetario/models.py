from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class Recipe:
    name: str = ""
    ingredients: str = ""
    instructions: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "Name": self.name,
            "Ingredients": self.ingredients,
            "Recipe": self.instructions,
        }


EMPTY_RECIPE = Recipe()

# Legacy failure value. Callers check `name` to tell it apart.
ERROR_RECIPE = Recipe(name="Error")


class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    difficulty: str = Field(default="", alias="dif")
    time_minutes: int = Field(default=0, alias="time")
    ingredients: str = Field(default="", alias="ings")
    diet: str = ""
    allergies: str = Field(default="", alias="all")
    cuisine: str = Field(default="", alias="cuis")


class ModificationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    add: str = ""
    remove: str = Field(default="", alias="rm")
