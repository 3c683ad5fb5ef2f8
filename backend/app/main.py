from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import settings
from .core.logging import configure_logging
from .db.session import init_db
from .api.v1 import health, entries

configure_logging()

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health.router,  prefix=settings.API_PREFIX)
app.include_router(entries.router, prefix=settings.API_PREFIX)

@app.on_event("startup")
def on_startup():
    init_db()
