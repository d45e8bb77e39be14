# photo_api/main.py
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from photo_api.core.config import Settings, settings as default_settings
from photo_api.core.errors import register_error_handlers
from photo_api.core.json import UTF8JSONResponse
from photo_api.core.security import TokenVerifier
from photo_api.db.init_db import init_models
from photo_api.db.session import Database

# routers
from photo_api.users.router import router as users_router
from photo_api.photos.router import router as photos_router

log = logging.getLogger("uvicorn")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Photo API",
        default_response_class=UTF8JSONResponse,
    )

    # 👇 todo lo compartido se inyecta vía app.state
    app.state.settings = settings
    app.state.db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    app.state.token_verifier = TokenVerifier(
        settings.JWT_SECRET_KEY, settings.JWT_ALGORITHM
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        log.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.3f}s)"
        )
        return response

    register_error_handlers(app)

    @app.on_event("startup")
    async def on_startup():
        log.info("🚀 Iniciando servicio…")
        if not settings.JWT_SECRET_KEY:
            log.warning("⚠️ JWT_SECRET_KEY vacío: /photo (POST/PUT/DELETE) va a responder 500")
        # si la DB no conecta o no se puede crear el esquema, no arrancamos
        await init_models(app.state.db)
        log.info("✅ Startup listo.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.db.dispose()

    @app.get("/health")
    async def health():
        return {"ok": True, "service": "photo-api"}

    app.include_router(users_router)   # /user/...
    app.include_router(photos_router)  # /photo/...

    return app


app = create_app()
