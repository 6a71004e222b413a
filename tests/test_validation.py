import pytest

from recetario.errors import InvalidRequest
from recetario.models import GenerationRequest
from recetario.validation import is_valid_list, normalise_difficulty, validate_generation


@pytest.mark.parametrize(
    "s",
    (
        "",
        "pollo",
        "Pollo,Arroz",
        "pollo, arroz, ",
        "aceite de oliva, ajo",
        "piñones, limón",
    ),
)
def test_valid_list(s: str) -> None:
    assert is_valid_list(s)


@pytest.mark.parametrize(
    "s",
    (
        "123",
        "pollo; arroz",
        "pollo,,arroz",
        "<script>",
        "2 huevos",
    ),
)
def test_invalid_list(s: str) -> None:
    assert not is_valid_list(s)


@pytest.mark.parametrize(
    "given,expected",
    (
        ("baja", "baja"),
        ("Mediana", "mediana"),
        ("ALTA", "alta"),
        ("low", "baja"),
        ("medium", "mediana"),
        ("High", "alta"),
    ),
)
def test_normalise_difficulty(given: str, expected: str) -> None:
    assert normalise_difficulty(given) == expected


@pytest.mark.parametrize("given", ("extreme", "", "media"))
def test_normalise_difficulty_rejects(given: str) -> None:
    with pytest.raises(InvalidRequest, match="Invalid difficulty"):
        normalise_difficulty(given)


def test_validate_generation_ingredients() -> None:
    request = GenerationRequest(difficulty="baja", ingredients="1 kg")
    with pytest.raises(InvalidRequest, match="Invalid ingredients list"):
        validate_generation(request)


def test_validate_generation_allergies() -> None:
    request = GenerationRequest(difficulty="baja", allergies="nueces; leche")
    with pytest.raises(InvalidRequest, match="Invalid allergies list"):
        validate_generation(request)


def test_validate_generation_lenient_lists() -> None:
    request = GenerationRequest(difficulty="baja", ingredients="1 kg", allergies="#")
    got = validate_generation(request, validate_lists=False)
    assert got.ingredients == "1 kg"


def test_validate_generation_difficulty_checked_when_lenient() -> None:
    request = GenerationRequest(difficulty="extreme")
    with pytest.raises(InvalidRequest):
        validate_generation(request, validate_lists=False)


def test_validate_generation_normalises_difficulty() -> None:
    request = GenerationRequest(difficulty="High", ingredients="pollo")
    got = validate_generation(request)
    assert got.difficulty == "alta"
    assert request.difficulty == "High"
