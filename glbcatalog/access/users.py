from sqlalchemy import func, select

from glbcatalog.db.session import Database
from glbcatalog.models.user import User


class UserAccess:
    """Reads and seeds the ``users`` table. Accounts are never updated or deleted."""

    def __init__(self, database: Database):
        self.database = database

    def login(self, username: str, password: str) -> User | None:
        """Exact, case-sensitive match on both columns; first row wins."""
        query = (
            select(User)
            .where(User.username == username, User.password == password)
            .order_by(User.id)
            .limit(1)
        )
        with self.database.session() as db:
            return db.execute(query).scalars().first()

    def insert(self, user: User) -> User:
        with self.database.session() as db:
            db.add(user)
            db.commit()
            db.refresh(user)
        return user

    def count(self) -> int:
        with self.database.session() as db:
            return db.execute(select(func.count()).select_from(User)).scalar_one()
