import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import async_sessionmaker
from dinehub.core.config import settings
from dinehub.core.database import engine, init_models
from dinehub.core.exceptions import register_exception_handlers
from dinehub.core.logging import configure_logging
from dinehub.api.v1 import endpoints
from dinehub.services.seed_service import seed_demo_data

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    bind = app.state.engine
    await init_models(bind)
    if settings.SEED_DEMO_DATA:
        async with async_sessionmaker(bind, expire_on_commit=False)() as db:
            await seed_demo_data(db)
    logger.info("%s %s ready", settings.PROJECT_NAME, settings.VERSION)
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)
app.state.engine = engine

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Health check
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.VERSION}

app.include_router(endpoints.router, prefix=settings.API_PREFIX)
app.include_router(endpoints.page_router)
