"""Functionality behind the routes."""

import logging

from recetario.completions import CompletionClient
from recetario.errors import CompletionError
from recetario.models import (
    EMPTY_RECIPE,
    ERROR_RECIPE,
    GenerationRequest,
    ModificationRequest,
    Recipe,
)
from recetario.prompts import generation_prompt, modification_prompt, similar_prompt
from recetario.session import Session
from recetario.validation import validate_generation


logger = logging.getLogger(__name__)


SIMILAR_THRESHOLD = 3


async def ask(
    prompt: str,
    *,
    client: CompletionClient,
    error_sentinel: bool = True,
) -> Recipe:
    try:
        return await client.recipe(prompt)
    except CompletionError as e:
        logger.error("%s", e)
        if not error_sentinel:
            raise
        return ERROR_RECIPE


async def generate_recipe(
    request: GenerationRequest,
    *,
    session: Session,
    client: CompletionClient,
    validate_lists: bool = True,
    error_sentinel: bool = True,
    brand: str | None = None,
) -> Recipe:
    request = validate_generation(request, validate_lists=validate_lists)
    prompt = generation_prompt(request, brand=brand)
    recipe = await ask(prompt, client=client, error_sentinel=error_sentinel)
    await session.record(recipe)
    return recipe


async def modify_recipe(
    changes: ModificationRequest,
    *,
    session: Session,
    client: CompletionClient,
    error_sentinel: bool = True,
) -> Recipe:
    prompt = modification_prompt(changes, session.latest.instructions)
    recipe = await ask(prompt, client=client, error_sentinel=error_sentinel)
    await session.record(recipe)
    return recipe


async def recipe_history(
    *,
    session: Session,
    client: CompletionClient,
    error_sentinel: bool = True,
    promote_similar: bool = False,
) -> tuple[tuple[Recipe, ...], Recipe]:
    """History plus, once there is enough of it, one recipe in the same vein."""
    _, history = await session.snapshot()
    if len(history) < SIMILAR_THRESHOLD:
        return history, EMPTY_RECIPE

    prompt = similar_prompt(r.name for r in history)
    extra = await ask(prompt, client=client, error_sentinel=error_sentinel)
    if promote_similar:
        await session.record(extra)
    return history, extra
