"""
Hazard Map — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from hazardmap import __version__
from hazardmap.config import DATA_SOURCE, STATIC_FOLDER
from hazardmap.controller import HazardMapController
from hazardmap.api.dependencies import set_controller
from hazardmap.api.router_meta import router as meta_router
from hazardmap.api.router_commands import router as commands_router


def create_app(data_source: str | Path | None = None) -> FastAPI:
    source = data_source or DATA_SOURCE

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the dataset once at startup."""
        controller = HazardMapController().load(source)
        set_controller(controller)

        store = controller.store
        if store.load_error:
            print("\nHazard Map ready — dataset failed to load; serving an empty map\n")
        else:
            print(f"\nHazard Map ready — {store.point_count():,} points, "
                  f"{store.rejected_count():,} rows rejected\n")
        yield
        set_controller(None)

    app = FastAPI(
        title="Hazard Map API",
        description="School-route hazard reports — filter, summarize, export GeoJSON",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(meta_router)
    app.include_router(commands_router)

    # Serve the map page with no-cache headers so browsers always get fresh JS
    static_dir = Path(STATIC_FOLDER)
    if static_dir.is_dir():
        index_html = static_dir / "index.html"

        @app.get("/", response_class=HTMLResponse)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(encoding="utf-8"),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")

    return app


app = create_app()
