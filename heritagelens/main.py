import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.routing import Mount

from heritagelens.config import get_settings
from heritagelens.logging_setup import setup_logging
from heritagelens.mcp_server import mcp
from heritagelens.routers.analyze import router as analyze_router


# --- FastAPI app ---

api = FastAPI(title="HeritageLens", version="0.1.0")
api.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
api.include_router(analyze_router)


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=mcp_app.lifespan,
)


def run():
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "heritagelens.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
