import contextlib
import logging
from typing import AsyncIterator, TypeVar

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import (
    HTMLResponse,
    JSONResponse,
    PlainTextResponse,
    RedirectResponse,
    Response,
)
from starlette.routing import Route
from starlette.types import ASGIApp, Receive, Scope, Send

from app import config
from recetario import services
from recetario.completions import CompletionClient
from recetario.errors import CompletionError, InvalidRequest
from recetario.models import GenerationRequest, ModificationRequest
from recetario.session import Session


logger = logging.getLogger(__name__)


FORM_TEMPLATE = "forms.html"


Body = TypeVar("Body", bound=BaseModel)


async def decode(request: Request, model: type[Body]) -> Body:
    try:
        data = await request.json()
        return model.model_validate(data)
    except ValueError as e:
        raise InvalidRequest(str(e)) from e


class AnswerOptions:
    """Any OPTIONS request gets a bare 200, preflight or not."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            await PlainTextResponse("OK")(scope, receive, send)
            return
        await self.app(scope, receive, send)


async def invalid_request(request: Request, exc: Exception) -> Response:
    return PlainTextResponse(str(exc), status_code=400)


async def completion_failed(request: Request, exc: Exception) -> Response:
    return JSONResponse({"error": str(exc)}, status_code=502)


async def index(request: Request) -> RedirectResponse:
    return RedirectResponse("/form", status_code=303)


async def form(request: Request) -> Response:
    cfg: config.Config = request.app.state.config
    match request.method.lower():
        case "get":
            templates: Environment = request.app.state.templates
            return HTMLResponse(templates.get_template(FORM_TEMPLATE).render(success=False))
        case "post":
            details = await decode(request, GenerationRequest)
            recipe = await services.generate_recipe(
                details,
                session=request.app.state.session,
                client=request.app.state.client,
                validate_lists=cfg.validate_lists,
                error_sentinel=cfg.error_sentinel,
                brand=cfg.preferred_brand,
            )
            return JSONResponse({"recipe": recipe.to_dict()})
        case _:
            raise ValueError("Unsupported method.")


async def recipe(request: Request) -> JSONResponse:
    cfg: config.Config = request.app.state.config
    session: Session = request.app.state.session
    match request.method.lower():
        case "get":
            return JSONResponse({"recipe": session.latest.to_dict()})
        case "post":
            commands = await decode(request, ModificationRequest)
            modified = await services.modify_recipe(
                commands,
                session=session,
                client=request.app.state.client,
                error_sentinel=cfg.error_sentinel,
            )
            return JSONResponse({"recipe": modified.to_dict()})
        case _:
            raise ValueError("Unsupported method.")


async def history(request: Request) -> JSONResponse:
    cfg: config.Config = request.app.state.config
    recipes, extra = await services.recipe_history(
        session=request.app.state.session,
        client=request.app.state.client,
        error_sentinel=cfg.error_sentinel,
        promote_similar=cfg.promote_similar,
    )
    return JSONResponse(
        {
            "recipeHistory": [r.to_dict() for r in recipes],
            "extraRecipe": extra.to_dict(),
        }
    )


def completion_client(cfg: config.Config) -> CompletionClient:
    return CompletionClient(
        url=cfg.completion_url,
        token=cfg.openai_api_key,
        model=cfg.completion_model,
        max_tokens=cfg.max_tokens,
        timeout=cfg.completion_timeout,
    )


def create_app(
    cfg: config.Config | None = None,
    *,
    client: CompletionClient | None = None,
    session: Session | None = None,
) -> Starlette:
    cfg = config.Config() if cfg is None else cfg  # pyright: ignore[reportCallIssue]
    client = completion_client(cfg) if client is None else client

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        logger.info("Using %s at %s", cfg.completion_model, cfg.completion_url)
        yield
        await client.aclose()

    middleware: list[Middleware] = []
    if cfg.cors_origin:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=[cfg.cors_origin],
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["Content-Type", "Authorization"],
            )
        )
        middleware.append(Middleware(AnswerOptions))

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/form", form, methods=["GET", "POST"]),
            Route("/recipe", recipe, methods=["GET", "POST"]),
            Route("/history", history, methods=["GET"]),
            Route("/", index),
            # Anything else goes back to the form.
            Route("/{path:path}", index),
        ],
        middleware=middleware,
        exception_handlers={
            InvalidRequest: invalid_request,
            CompletionError: completion_failed,
        },
        lifespan=lifespan,
    )

    app.state.config = cfg
    app.state.client = client
    app.state.session = Session() if session is None else session
    # Templates are looked up when a request needs them.
    app.state.templates = Environment(
        loader=FileSystemLoader(cfg.html_dir),
        autoescape=select_autoescape(),
    )
    return app
