import enum

from sqlalchemy import Column, Integer, String
from glbcatalog.db.session import Base

class Role(str, enum.Enum):
    ADMIN = "Admin"
    USER = "User"

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(120), nullable=False)
    # stored as entered; lookups compare it verbatim
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=Role.USER.value)

    def __repr__(self):
        return f"<User id={self.id} username={self.username!r} role={self.role!r}>"
