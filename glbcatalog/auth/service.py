from glbcatalog.access.users import UserAccess
from glbcatalog.auth.session_store import SessionStore
from glbcatalog.core.exceptions import NotFoundException, ValidationException
from glbcatalog.logging_config import get_logger
from glbcatalog.models.user import Role, User

logger = get_logger(__name__)

DASHBOARDS = {
    Role.ADMIN.value: "admin",
    Role.USER.value: "user",
}

def validate_credentials(username: str, password: str) -> tuple[str, str]:
    username = (username or "").strip()
    password = (password or "").strip()
    if not username:
        raise ValidationException("Please enter username", error_code="USERNAME_REQUIRED")
    if not password:
        raise ValidationException("Please enter password", error_code="PASSWORD_REQUIRED")
    return username, password

def authenticate(users: UserAccess, username: str, password: str) -> User:
    user = users.login(username, password)
    if user is None:
        logger.info("login_failed", username=username)
        raise NotFoundException("Invalid username or password", error_code="INVALID_CREDENTIALS")
    return user

def dashboard_for(role: str | None) -> str:
    try:
        return DASHBOARDS[role]
    except KeyError:
        raise ValidationException("Invalid user role", error_code="INVALID_ROLE")

def start_session(sessions: SessionStore, user: User) -> str:
    dashboard = dashboard_for(user.role)
    sessions.save(user.id, user.username, user.role)
    logger.info("login_succeeded", user_id=user.id, role=user.role)
    return dashboard
