import uvicorn

from glbcatalog.config import settings
from glbcatalog.main import app

uvicorn.run(app, host=settings.host, port=settings.port)
