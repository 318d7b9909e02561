"""PC Builder — storefront build compatibility backend

Responsibilities:
  1. Build compatibility evaluation and power estimation (stateless)
  2. Candidate filtering per slot (inline or from the hosted catalog)
  3. Catalog classification and search (read-only)
  4. Pricing and quotation export

Persistence of builds is the caller's concern.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pcbuilder.config import get_settings
from pcbuilder.db.session import init_db, close_db
from pcbuilder.routers import builder, catalog, pricing, quotation

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: check catalog DB. Shutdown: close DB pool."""
    await init_db()
    yield
    await close_db()


def create_app() -> FastAPI:
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        version=VERSION,
        description=(
            "PC build compatibility engine.\n\n"
            "Evaluates partial builds, estimates PSU wattage, filters "
            "catalog candidates per slot and prices quotations."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://localhost:8080",
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── Build compatibility (stateless) ───
    application.include_router(
        builder.router, prefix="/api/builder", tags=["Builder"]
    )

    # ─── Catalog (read-only) ───
    application.include_router(
        catalog.router, prefix="/api/catalog", tags=["Catalog"]
    )

    # ─── Pricing ───
    application.include_router(
        pricing.router, prefix="/api/pricing", tags=["Pricing"]
    )

    # ─── Quotation export ───
    application.include_router(
        quotation.router, prefix="/api/quotations", tags=["Quotations"]
    )

    return application


app = create_app()


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "pc-builder", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)
