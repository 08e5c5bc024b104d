import asyncio
from functools import partial

from fastapi import Request

from glbcatalog.access.models import ModelAccess
from glbcatalog.access.users import UserAccess
from glbcatalog.auth.session_store import SessionStore
from glbcatalog.catalog.live import LiveCatalog
from glbcatalog.catalog.workflow import ModelWorkflow
from glbcatalog.core.exceptions import NotAuthenticatedException, PermissionDeniedException


def get_users(request: Request) -> UserAccess:
    return request.app.state.users

def get_models(request: Request) -> ModelAccess:
    return request.app.state.models

def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions

def get_workflow(request: Request) -> ModelWorkflow:
    return request.app.state.workflow

def get_catalog(request: Request) -> LiveCatalog:
    return request.app.state.catalog

def require_login(request: Request) -> SessionStore:
    sessions = get_sessions(request)
    if not sessions.is_logged_in():
        raise NotAuthenticatedException()
    return sessions

def require_admin(request: Request) -> SessionStore:
    sessions = require_login(request)
    if not sessions.is_admin():
        raise PermissionDeniedException()
    return sessions

async def run_in_pool(request: Request, fn, *args, **kwargs):
    """Run store-mutating work on the app's fixed worker pool."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(request.app.state.executor, partial(fn, *args, **kwargs))
