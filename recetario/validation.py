import re

from recetario.errors import InvalidRequest
from recetario.models import GenerationRequest


# Letters only, accents included. Multi-word items ("aceite de oliva") are fine.
_WORD = r"[^\W\d_]+(?: +[^\W\d_]+)*"
LIST_PATTERN = re.compile(rf"{_WORD}(?:\s*,\s*{_WORD})*\s*,?", re.IGNORECASE)

DIFFICULTIES = ("baja", "mediana", "alta")
DIFFICULTY_ALIASES = {"low": "baja", "medium": "mediana", "high": "alta"}


def is_valid_list(s: str) -> bool:
    s = s.strip()
    if not s:
        return True
    return LIST_PATTERN.fullmatch(s) is not None


def normalise_difficulty(difficulty: str) -> str:
    dif = difficulty.strip().lower()
    dif = DIFFICULTY_ALIASES.get(dif, dif)
    if dif not in DIFFICULTIES:
        raise InvalidRequest("Invalid difficulty")
    return dif


def validate_generation(
    request: GenerationRequest,
    *,
    validate_lists: bool = True,
) -> GenerationRequest:
    """Check a generation request, returning it with the difficulty normalised.

    Raises `InvalidRequest` with the message to show the user.
    """
    if validate_lists:
        if not is_valid_list(request.ingredients):
            raise InvalidRequest("Invalid ingredients list")
        if not is_valid_list(request.allergies):
            raise InvalidRequest("Invalid allergies list")

    difficulty = normalise_difficulty(request.difficulty)
    return request.model_copy(update={"difficulty": difficulty})
