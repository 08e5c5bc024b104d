from concurrent.futures import ThreadPoolExecutor

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from glbcatalog.access.models import ModelAccess
from glbcatalog.access.users import UserAccess
from glbcatalog.auth.routes import router as auth_router
from glbcatalog.auth.session_store import SessionStore
from glbcatalog.catalog.live import LiveCatalog
from glbcatalog.catalog.routes import router as models_router
from glbcatalog.catalog.workflow import ModelWorkflow
from glbcatalog.config import Settings, settings as default_settings
from glbcatalog.core.exceptions import AppException
from glbcatalog.db.seed import seed_default_users
from glbcatalog.db.session import Database
from glbcatalog.logging_config import configure_logging, get_logger
from glbcatalog.middleware.auth import auth_middleware
from glbcatalog.web.routes_ui import router as ui_router

logger = get_logger(__name__)

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.json_logs)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings

    database = Database(settings.database_url)
    app.state.database = database
    app.state.users = UserAccess(database)
    app.state.models = ModelAccess(database)
    app.state.sessions = SessionStore(settings.session_file)
    app.state.workflow = ModelWorkflow(
        app.state.models,
        settings.storage_dir,
        buffer_size=settings.copy_buffer_size,
    )
    app.state.executor = None
    app.state.catalog = None

    app.middleware("http")(auth_middleware)

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        logger.warning(
            "request_failed",
            error_code=exc.error_code,
            error_message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
            method=request.method,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(auth_router)
    app.include_router(models_router)
    app.include_router(ui_router)

    @app.on_event("startup")
    def on_startup():
        database.create_all()
        seed_default_users(app.state.users)
        app.state.executor = ThreadPoolExecutor(
            max_workers=settings.worker_pool_size, thread_name_prefix="store"
        )
        app.state.catalog = LiveCatalog(app.state.models)
        logger.info("app_started", env=settings.app_env, database=database.url,
                    storage_dir=settings.storage_dir)

    @app.on_event("shutdown")
    def on_shutdown():
        if app.state.catalog is not None:
            app.state.catalog.close()
        if app.state.executor is not None:
            app.state.executor.shutdown(wait=True)
        database.dispose()

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

app = create_app()
