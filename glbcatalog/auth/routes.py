from fastapi import APIRouter, Depends, Request

from glbcatalog.auth.deps import get_sessions, get_users, run_in_pool
from glbcatalog.auth.service import authenticate, start_session, validate_credentials
from glbcatalog.auth.session_store import SessionStore
from glbcatalog.schemas.auth import LoginIn, LoginOut, SessionOut

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=LoginOut)
async def login(body: LoginIn, request: Request):
    username, password = validate_credentials(body.username, body.password)
    user = await run_in_pool(request, authenticate, get_users(request), username, password)
    dashboard = await run_in_pool(request, start_session, get_sessions(request), user)
    return LoginOut(
        message=f"Welcome, {user.username}!",
        user_id=user.id,
        username=user.username,
        role=user.role,
        dashboard=dashboard,
    )

@router.post("/logout")
def logout(sessions: SessionStore = Depends(get_sessions)):
    sessions.clear()
    return {"ok": True}

@router.get("/session", response_model=SessionOut)
def current_session(sessions: SessionStore = Depends(get_sessions)):
    return SessionOut(
        logged_in=sessions.is_logged_in(),
        user_id=sessions.user_id(),
        username=sessions.username(),
        role=sessions.role(),
    )
