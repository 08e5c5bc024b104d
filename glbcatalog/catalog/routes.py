from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import FileResponse

from glbcatalog.access.models import ModelAccess
from glbcatalog.auth.deps import get_catalog, get_models, get_workflow, require_admin, require_login, run_in_pool
from glbcatalog.catalog.live import LiveCatalog
from glbcatalog.catalog.workflow import ModelWorkflow
from glbcatalog.core.exceptions import NotFoundException
from glbcatalog.models.glb_model import GlbModel
from glbcatalog.schemas.model import ModelOut

router = APIRouter(prefix="/models", tags=["models"])

GLB_MEDIA_TYPE = "model/gltf-binary"

def _get_model_or_404(models: ModelAccess, model_id: int) -> GlbModel:
    model = models.get_by_id(model_id)
    if model is None:
        raise NotFoundException("Model not found", error_code="MODEL_NOT_FOUND",
                                details={"model_id": model_id})
    return model

@router.get("", response_model=list[ModelOut], dependencies=[Depends(require_login)])
def list_models(catalog: LiveCatalog = Depends(get_catalog)):
    return catalog.snapshot

@router.post("", response_model=ModelOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
async def add_model(request: Request, file: UploadFile = File(...)):
    workflow: ModelWorkflow = get_workflow(request)
    return await run_in_pool(request, workflow.import_model, file.file, file.filename)

@router.get("/{model_id}", response_model=ModelOut, dependencies=[Depends(require_login)])
def get_model(model_id: int, models: ModelAccess = Depends(get_models)):
    return _get_model_or_404(models, model_id)

@router.delete("/{model_id}", dependencies=[Depends(require_admin)])
async def delete_model(model_id: int, request: Request):
    model = await run_in_pool(request, _get_model_or_404, get_models(request), model_id)
    await run_in_pool(request, get_workflow(request).remove_model, model)
    return {"ok": True, "message": "Model deleted successfully"}

@router.get("/{model_id}/file", dependencies=[Depends(require_login)])
def model_file(model_id: int, models: ModelAccess = Depends(get_models),
               workflow: ModelWorkflow = Depends(get_workflow)):
    model = _get_model_or_404(models, model_id)
    path = workflow.open_model(model)
    return FileResponse(path, media_type=GLB_MEDIA_TYPE, filename=f"{model.name}.glb")
