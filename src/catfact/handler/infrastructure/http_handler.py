"""HttpFactHandler — serves GET /catfact on an explicitly supplied FastAPI router."""

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse

from catfact.fact.domain.provider import FactProvider
from catfact.fact.infrastructure.errors import FactFetchError

CATFACT_PATH = "/catfact"


class HttpFactHandler:
    """Network variant of the request handler.

    Routes are registered on the router passed in, never on a process-wide
    table, so independent handlers can coexist. A failed fetch becomes a 422
    response; it never stops the server.
    """

    def __init__(self, provider: FactProvider, router: APIRouter) -> None:
        self._provider = provider
        router.add_api_route(
            CATFACT_PATH,
            self.get_cat_fact,
            methods=["GET"],
            response_model=None,
        )

    async def get_cat_fact(self) -> JSONResponse:
        try:
            fact = await self._provider.fetch()
        except FactFetchError as exc:
            return JSONResponse(
                status_code=422,
                content={"error": str(exc)},
            )
        return JSONResponse(status_code=200, content=fact.model_dump())


def create_app(provider: FactProvider) -> FastAPI:
    """Create a FastAPI application exposing *provider* at GET /catfact."""
    router = APIRouter()
    HttpFactHandler(provider=provider, router=router)

    app = FastAPI(
        title="catfact", docs_url=None, redoc_url=None, openapi_url=None
    )
    app.include_router(router)
    return app
