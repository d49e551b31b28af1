"""
Gestao de Template API - Resource Router Factory
Monta as rotas CRUD de um ResourceSpec: GET lista, GET item, POST, PATCH e DELETE
"""
from typing import Any, Dict, Tuple

from fastapi import APIRouter, Depends, Path, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from app.api.auth import Principal, get_store_principal
from app.core.errors import ValidationFailed
from app.core.validation import MAX_RECORD_ID
from app.core.storage import PublicStorage, get_storage
from app.database import get_db
from app.services.scoped_crud import ResourceSpec, Scope, ScopedCrudService
from app.services.serialization import serialize_record

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def _blank_to_none(value: Any) -> Any:
    return None if value == "" else value


async def read_payload(request: Request) -> Tuple[Dict[str, Any], Dict[str, UploadFile]]:
    """
    Le o corpo da requisicao (form, multipart ou JSON).
    Retorna (campos, arquivos). Strings vazias viram null.
    """
    content_type = request.headers.get("content-type", "")
    data: Dict[str, Any] = {}
    uploads: Dict[str, UploadFile] = {}

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                # input de arquivo vazio chega sem nome
                if value.filename:
                    uploads[key] = value
                continue
            data[key] = _blank_to_none(value)
        return data, uploads

    body = await request.body()
    if not body:
        return data, uploads

    try:
        payload = await request.json()
    except ValueError:
        raise ValidationFailed({"payload": ["O corpo da requisição deve ser um JSON válido."]})

    if not isinstance(payload, dict):
        raise ValidationFailed({"payload": ["O corpo da requisição deve ser um objeto JSON."]})

    return {key: _blank_to_none(value) for key, value in payload.items()}, uploads


def build_resource_router(resource: ResourceSpec) -> APIRouter:
    """Cria o router de um recurso restrito a loja (e ao template, quando aplicavel)"""
    router = APIRouter(prefix=f"/{resource.slug}", tags=[resource.tag or resource.slug])

    if resource.template_scoped:
        base_path = "/{template_id}"

        async def get_scope(
            template_id: int = Path(..., le=MAX_RECORD_ID),
            principal: Principal = Depends(get_store_principal)
        ) -> Scope:
            return Scope(store_id=principal.store_id, template_id=template_id)
    else:
        base_path = ""

        async def get_scope(principal: Principal = Depends(get_store_principal)) -> Scope:
            return Scope(store_id=principal.store_id)

    item_path = base_path + "/{record_id}"

    def get_service(
        db: AsyncSession = Depends(get_db),
        storage: PublicStorage = Depends(get_storage)
    ) -> ScopedCrudService:
        return ScopedCrudService(resource, db, storage)

    def present(request: Request, service: ScopedCrudService, record: Any) -> dict:
        return serialize_record(record, resource.files, service.storage, str(request.base_url))

    @router.get(base_path)
    async def list_records(
        request: Request,
        scope: Scope = Depends(get_scope),
        service: ScopedCrudService = Depends(get_service)
    ):
        records = await service.list(scope)
        return [present(request, service, record) for record in records]

    @router.get(item_path)
    async def get_record(
        request: Request,
        record_id: int = Path(..., le=MAX_RECORD_ID),
        scope: Scope = Depends(get_scope),
        service: ScopedCrudService = Depends(get_service)
    ):
        record = await service.get(scope, record_id)
        return present(request, service, record)

    @router.post(base_path, status_code=status.HTTP_201_CREATED)
    async def create_record(
        request: Request,
        scope: Scope = Depends(get_scope),
        service: ScopedCrudService = Depends(get_service)
    ):
        data, uploads = await read_payload(request)
        record = await service.create(scope, data, uploads)
        return present(request, service, record)

    @router.patch(item_path)
    async def update_record(
        request: Request,
        record_id: int = Path(..., le=MAX_RECORD_ID),
        scope: Scope = Depends(get_scope),
        service: ScopedCrudService = Depends(get_service)
    ):
        data, uploads = await read_payload(request)
        record = await service.update(scope, record_id, data, uploads)
        return present(request, service, record)

    @router.delete(item_path)
    async def delete_record(
        record_id: int = Path(..., le=MAX_RECORD_ID),
        scope: Scope = Depends(get_scope),
        service: ScopedCrudService = Depends(get_service)
    ):
        message = await service.delete(scope, record_id)
        return {"message": message}

    return router
