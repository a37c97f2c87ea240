"""HTTP proxy that turns keyword searches into generated posts.

Run locally:
    sfm serve            (or: uvicorn sfm.api.server:create_app --factory --reload)

Environment variables:
    SFM_LLM_API_KEY / API_KEY   key for the language model provider
    SFM_LLM_PROVIDER            provider name (default gemini)
    SFM_LLM_MODEL               model name (default gemini-2.5-flash)
"""

import logging
from collections.abc import Callable
from json import JSONDecodeError

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from sfm.config import Config, load_config
from sfm.core.constants import GENERATE_POSTS_PATH, PACKAGE_VERSION, ErrorMessages
from sfm.exceptions import PostGenerationError
from sfm.llm.client import LLMClient
from sfm.models.api import ErrorResponse, GeneratePostsRequest
from sfm.services.post_generator import PostGenerationService

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[Config], PostGenerationService]


def default_service_factory(config: Config) -> PostGenerationService:
    """Build a generation service from configuration."""
    return PostGenerationService(LLMClient(config=config), min_posts=config.min_posts, max_posts=config.max_posts)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(config: Config | None = None, service_factory: ServiceFactory = default_service_factory) -> FastAPI:
    """Create the proxy application.

    Args:
        config: Application config (loaded from the environment if omitted)
        service_factory: Builds the generation service on first use
    """
    config = config or load_config()
    app = FastAPI(
        title="Social Feed Monitor – Post Generator",
        description="Generates synthetic social media posts for a keyword search.",
        version=PACKAGE_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST"],
        allow_headers=["*"],
    )
    services: list[PostGenerationService] = []

    def get_service() -> PostGenerationService:
        if not services:
            services.append(service_factory(config))
        return services[0]

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(GENERATE_POSTS_PATH)
    async def generate_posts(request: Request) -> JSONResponse:
        """Generate posts for the keywords and platforms in the request body."""
        if not config.llm_api_key:
            logger.error("LLM API key is not set on the server.")
            return _error(500, ErrorMessages.SERVER_CONFIGURATION)

        try:
            payload = await request.json()
        except (JSONDecodeError, UnicodeDecodeError):
            payload = None

        if not isinstance(payload, dict) or not isinstance(payload.get("keywords"), list):
            return _error(400, ErrorMessages.KEYWORDS_NOT_ARRAY)

        try:
            body = GeneratePostsRequest.model_validate(payload)
        except PydanticValidationError as e:
            return _error(400, f"Invalid request: {e.errors()[0]['msg']}")

        if not body.keywords or not body.platforms:
            return JSONResponse(content=[])

        try:
            posts = await run_in_threadpool(get_service().generate, body.keywords, body.platforms)
        except PostGenerationError as e:
            logger.error(f"Error calling language model: {e}")
            return _error(500, ErrorMessages.GENERATION_FAILED)

        return JSONResponse(content=[post.to_wire() for post in posts])

    return app

