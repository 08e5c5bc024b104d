from glbcatalog.access.users import UserAccess
from glbcatalog.logging_config import get_logger
from glbcatalog.models.user import Role, User

logger = get_logger(__name__)

DEFAULT_USERS = (
    ("admin", "admin123", Role.ADMIN),
    ("user", "user123", Role.USER),
)

def seed_default_users(users: UserAccess) -> int:
    """Insert the two built-in accounts into an empty store. Returns rows added."""
    if users.count() > 0:
        return 0
    for username, password, role in DEFAULT_USERS:
        users.insert(User(username=username, password=password, role=role.value))
    logger.info("default_users_seeded", count=len(DEFAULT_USERS))
    return len(DEFAULT_USERS)
