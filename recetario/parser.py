"""Turn completion content into a `Recipe`.

The model is asked for `Name$Ingredients$Instructions`. It does not always
comply, so:

- fewer than two `$`: the whole text becomes the instructions, name and
  ingredients are `-`.
- exactly two: three fields.
- more than two: the first three fields, the rest is dropped.
"""

from recetario.models import Recipe


DELIMITER = "$"
PLACEHOLDER = "-"


def fallback_recipe(content: str) -> Recipe:
    return Recipe(name=PLACEHOLDER, ingredients=PLACEHOLDER, instructions=content)


def parse_recipe(content: str) -> Recipe:
    if content.count(DELIMITER) < 2:
        return fallback_recipe(content)

    # maxsplit keeps anything after the third field out of the way.
    name, ingredients, instructions, *_ = content.split(DELIMITER, 3)
    return Recipe(name=name, ingredients=ingredients, instructions=instructions)
