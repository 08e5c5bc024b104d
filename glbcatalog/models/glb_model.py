from sqlalchemy import BigInteger, Column, Integer, String
from glbcatalog.db.session import Base

class GlbModel(Base):
    __tablename__ = "glb_models"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    file_name = Column("fileName", String(512), nullable=False)
    file_path = Column("filePath", String(1024), nullable=False)
    file_size = Column("fileSize", BigInteger, nullable=False, default=0)
    added_date = Column("addedDate", BigInteger, nullable=False, index=True)

    def __repr__(self):
        return f"<GlbModel id={self.id} name={self.name!r} file_name={self.file_name!r}>"
