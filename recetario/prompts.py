"""Spanish instructions sent to the model."""

from typing import Iterable

from recetario.models import GenerationRequest, ModificationRequest


FORMAT_INSTRUCTION = (
    "Imprime el nombre de la receta, un símbolo $, lista los ingredientes, "
    "separando los ingredientes solicitados y los agregados, imprime otro "
    "símbolo $ y después muestra la receta. "
    "El formato es Nombre$Ingredientes$Receta. "
    "No imprimas más de lo indicado."
)

FORMAT_EXAMPLE = (
    "Ejemplo: Tortilla de patatas$Solicitados: huevos, patatas. "
    "Agregados: aceite de oliva, sal$1. Pela y corta las patatas. "
    "2. Fríelas en el aceite. 3. Bate los huevos, mézclalos con las patatas "
    "y cuaja la tortilla por ambos lados."
)

GENERATION_PROMPT = "Imprime una receta de cocina"

BRAND_PROMPT = "Usa ingredientes de la marca {brand} cuando puedas."

REMOVE_PROMPT = "Modifica la siguiente receta quitando {remove}."
ADD_PROMPT = "Modifica la siguiente receta agregando {add}."
REMOVE_AND_ADD_PROMPT = "Modifica la siguiente receta quitando {remove} y agregando {add}."

SIMILAR_PROMPT = "Muéstrame una receta similar a estas: {names}."


def generation_prompt(request: GenerationRequest, *, brand: str | None = None) -> str:
    parts = [
        GENERATION_PROMPT,
        request.cuisine.strip(),
        request.diet.strip(),
        f"de dificultad {request.difficulty}",
        f"que se prepare en {request.time_minutes} minutos",
    ]
    s = " ".join(p for p in parts if p)
    if request.ingredients:
        s += f" que contenga {request.ingredients}"
    if request.allergies:
        s += f" y que no contenga {request.allergies}"
    s += ". "
    if brand:
        s += BRAND_PROMPT.format(brand=brand) + " "
    return s + FORMAT_INSTRUCTION


def modification_prompt(changes: ModificationRequest, instructions: str) -> str:
    if not changes.add:
        s = REMOVE_PROMPT.format(remove=changes.remove)
    elif not changes.remove:
        s = ADD_PROMPT.format(add=changes.add)
    else:
        s = REMOVE_AND_ADD_PROMPT.format(remove=changes.remove, add=changes.add)
    return f"{s} Receta: {instructions}\n{FORMAT_INSTRUCTION} {FORMAT_EXAMPLE}"


def similar_prompt(names: Iterable[str]) -> str:
    return f"{SIMILAR_PROMPT.format(names=','.join(names))} {FORMAT_INSTRUCTION}"
