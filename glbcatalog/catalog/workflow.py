"""
Import and removal of GLB files.

The catalog row and the file on disk live in two stores with no shared
transaction. Import writes the file first and inserts the row only once
the copy finished; removal deletes the file, then the row, and reports
any failure after both steps were attempted. Nothing is rolled back and
orphaned files are not cleaned up.
"""

import shutil
import time
from pathlib import Path
from typing import BinaryIO, Callable

from glbcatalog.access.models import ModelAccess
from glbcatalog.core.exceptions import NotFoundException, StorageException, ValidationException
from glbcatalog.logging_config import get_logger
from glbcatalog.models.glb_model import GlbModel

logger = get_logger(__name__)

GLB_EXTENSION = ".glb"
DEFAULT_BUFFER_SIZE = 64 * 1024


def current_millis() -> int:
    return int(time.time() * 1000)


def is_glb_filename(filename: str) -> bool:
    return bool(filename) and filename.lower().endswith(GLB_EXTENSION)


def display_name(filename: str) -> str:
    """``Statue.glb`` -> ``Statue``."""
    if filename.lower().endswith(GLB_EXTENSION):
        return filename[: -len(GLB_EXTENSION)]
    return filename


def disk_file_name(timestamp: int, filename: str) -> str:
    # two imports of the same name inside one millisecond collide; not detected
    return f"{timestamp}_{filename}"


class ModelWorkflow:
    def __init__(
        self,
        models: ModelAccess,
        storage_dir: str | Path,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        clock: Callable[[], int] = current_millis,
    ):
        self.models = models
        self.storage_dir = Path(storage_dir)
        self.buffer_size = buffer_size
        self.clock = clock

    def import_model(self, source: BinaryIO, original_filename: str) -> GlbModel:
        filename = Path(original_filename or "").name
        if not is_glb_filename(filename):
            raise ValidationException("Please select a .glb file", error_code="INVALID_EXTENSION",
                                      details={"filename": original_filename})

        timestamp = self.clock()
        unique_name = disk_file_name(timestamp, filename)

        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            dest = (self.storage_dir / unique_name).resolve()
            with open(dest, "wb") as out:
                shutil.copyfileobj(source, out, self.buffer_size)
            size = dest.stat().st_size
        except OSError as e:
            logger.error("model_copy_failed", file_name=unique_name, error=str(e))
            raise StorageException(f"Error adding model: {e}", error_code="COPY_FAILED")

        model = GlbModel(
            name=display_name(filename),
            file_name=unique_name,
            file_path=str(dest),
            file_size=size,
            added_date=timestamp,
        )
        try:
            self.models.insert(model)
        except Exception as e:
            # the copied file stays behind as an orphan
            logger.error("model_insert_failed", file_name=unique_name, error=str(e))
            raise StorageException(f"Error adding model: {e}", error_code="INSERT_FAILED")
        logger.info("model_imported", model_id=model.id, file_name=unique_name, file_size=size)
        return model

    def remove_model(self, model: GlbModel) -> None:
        errors = []

        try:
            Path(model.file_path).unlink(missing_ok=True)
        except OSError as e:
            logger.error("model_file_delete_failed", model_id=model.id, error=str(e))
            errors.append(str(e))

        try:
            self.models.delete(model)
        except Exception as e:
            logger.error("model_row_delete_failed", model_id=model.id, error=str(e))
            errors.append(str(e))

        if errors:
            raise StorageException(f"Error deleting model: {'; '.join(errors)}",
                                   error_code="DELETE_FAILED", details={"model_id": model.id})
        logger.info("model_removed", model_id=model.id)

    def open_model(self, model: GlbModel) -> Path:
        """Path handed to an external viewer; the file must still exist."""
        path = Path(model.file_path)
        if not path.is_file():
            raise NotFoundException("Model file not found", error_code="MODEL_FILE_NOT_FOUND",
                                    details={"model_id": model.id})
        return path
