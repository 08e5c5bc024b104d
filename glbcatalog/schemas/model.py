from pydantic import BaseModel, computed_field

from glbcatalog.catalog.formatting import format_added_date, format_file_size

class ModelOut(BaseModel):
    id: int
    name: str
    file_name: str
    file_path: str
    file_size: int
    added_date: int

    @computed_field
    @property
    def size_label(self) -> str:
        return format_file_size(self.file_size)

    @computed_field
    @property
    def added_label(self) -> str:
        return format_added_date(self.added_date)

    class Config:
        from_attributes = True
