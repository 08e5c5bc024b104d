from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse

from glbcatalog.core.exceptions import NotAuthenticatedException

PUBLIC_PATHS = [
    "/ui", "/auth/login", "/auth/logout", "/auth/session",
    "/static", "/favicon.ico", "/docs", "/openapi.json",
]

UI_PREFIX = "/ui"

def _is_public(path: str) -> bool:
    if path == "/":
        return True
    # /ui itself is the login page; pages below it need a session
    if path.startswith(UI_PREFIX + "/"):
        return False
    return any(path == p or path.startswith(p) for p in PUBLIC_PATHS)

async def auth_middleware(request: Request, call_next):
    path = request.url.path

    if _is_public(path):
        return await call_next(request)

    if not request.app.state.sessions.is_logged_in():
        if path.startswith(UI_PREFIX):
            return RedirectResponse(url=UI_PREFIX, status_code=307)
        exc = NotAuthenticatedException()
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    return await call_next(request)
