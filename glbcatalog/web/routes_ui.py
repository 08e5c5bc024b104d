from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from glbcatalog.auth.deps import get_catalog, get_sessions
from glbcatalog.auth.service import DASHBOARDS
from glbcatalog.auth.session_store import SessionStore
from glbcatalog.catalog.live import LiveCatalog
from glbcatalog.schemas.model import ModelOut

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
router = APIRouter(prefix="/ui", tags=["ui"])

@router.get("", response_class=HTMLResponse)
async def ui_home(request: Request, sessions: SessionStore = Depends(get_sessions)):
    # an existing session skips the login form
    if sessions.role() in DASHBOARDS and sessions.is_logged_in():
        return RedirectResponse(url="/ui/models", status_code=303)
    return templates.TemplateResponse(request, "login.html", {})

@router.get("/models", response_class=HTMLResponse)
async def ui_models(request: Request, sessions: SessionStore = Depends(get_sessions),
                    catalog: LiveCatalog = Depends(get_catalog)):
    models = [ModelOut.model_validate(m) for m in catalog.snapshot]
    return templates.TemplateResponse(request, "models.html", {
        "username": sessions.username(),
        "is_admin": sessions.is_admin(),
        "models": models,
    })
