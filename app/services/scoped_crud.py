"""
Gestao de Template API - Scoped CRUD Service
CRUD generico de um recurso restrito a loja (e ao template) do usuario.
Cada entidade e descrita por um ResourceSpec; a logica e a mesma para todas.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from app.core.config import settings
from app.core.errors import NotFound, ValidationFailed, internal_error_on_failure
from app.core.storage import PublicStorage
from app.core.validation import PreparedUpload, UploadRule, prepare_uploads, validate_payload
from app.models import Loja, Template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceMessages:
    """Mensagens de retorno de um recurso"""
    not_found: str
    list_error: str
    show_error: str
    create_error: str
    update_error: str
    delete_error: str
    deleted: str

    @classmethod
    def for_label(cls, singular: str, plural: str, feminine: bool = False) -> "ResourceMessages":
        suffix = "a" if feminine else "o"
        lower = singular[0].lower() + singular[1:]
        return cls(
            not_found=f"{singular} não encontrad{suffix}",
            list_error=f"Erro ao listar {plural}",
            show_error=f"Erro ao buscar {lower}",
            create_error=f"Erro ao criar {lower}",
            update_error=f"Erro ao atualizar {lower}",
            delete_error=f"Erro ao deletar {lower}",
            deleted=f"{singular} deletad{suffix} com sucesso",
        )


@dataclass(frozen=True)
class ResourceSpec:
    """Descricao declarativa de um recurso CRUD"""
    slug: str
    model: Type[Any]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    messages: ResourceMessages
    folder: Optional[str] = None
    files: Tuple[UploadRule, ...] = ()
    template_scoped: bool = True
    # campo -> model do catalogo que precisa pertencer a loja
    references: Mapping[str, Type[Any]] = field(default_factory=dict)
    unique_fields: Tuple[str, ...] = ()
    tag: Optional[str] = None


@dataclass(frozen=True)
class Scope:
    """Escopo da requisicao: loja do usuario e, se houver, o template"""
    store_id: int
    template_id: Optional[int] = None


class ScopedCrudService:
    def __init__(self, resource: ResourceSpec, db: AsyncSession, storage: PublicStorage):
        self.resource = resource
        self.model = resource.model
        self.messages = resource.messages
        self.db = db
        self.storage = storage

    def _scoped_query(self, scope: Scope):
        query = select(self.model).where(self.model.loja_id == scope.store_id)
        if self.resource.template_scoped:
            query = query.where(self.model.template_id == scope.template_id)
        return query

    async def list(self, scope: Scope) -> List[Any]:
        with internal_error_on_failure(self.messages.list_error):
            result = await self.db.execute(self._scoped_query(scope).order_by(self.model.id))
            return list(result.scalars().all())

    async def get(self, scope: Scope, record_id: int) -> Any:
        with internal_error_on_failure(self.messages.show_error):
            result = await self.db.execute(
                self._scoped_query(scope).where(self.model.id == record_id)
            )
            record = result.scalar_one_or_none()

        if not record:
            raise NotFound(self.messages.not_found)
        return record

    async def create(self, scope: Scope, data: Mapping[str, Any], uploads: Mapping[str, UploadFile]) -> Any:
        with internal_error_on_failure(self.messages.create_error):
            values, prepared = await self._validate(scope, data, uploads, partial=False)

            if self.resource.template_scoped:
                template = await self.db.get(Template, scope.template_id)
                if not template:
                    raise NotFound("Template não encontrado")

            record = self.model(**values)
            record.loja_id = scope.store_id
            if self.resource.template_scoped:
                record.template_id = scope.template_id

            written: Dict[str, str] = {}
            try:
                await self._store_uploads(scope, record, prepared, written)
                self.db.add(record)
                await self.db.commit()
            except Exception:
                await self.db.rollback()
                self.storage.delete_many(written.values())
                raise

            await self.db.refresh(record)

        logger.info(f"{self.model.__name__} criado: id={record.id} loja={scope.store_id}")
        return record

    async def update(self, scope: Scope, record_id: int, data: Mapping[str, Any],
                     uploads: Mapping[str, UploadFile]) -> Any:
        record = await self.get(scope, record_id)

        with internal_error_on_failure(self.messages.update_error):
            values, prepared = await self._validate(
                scope, data, uploads, partial=True, exclude_id=record.id
            )
            previous = [getattr(record, self._rule(name).path_attr) for name in prepared]

            for key, value in values.items():
                setattr(record, key, value)

            written: Dict[str, str] = {}
            try:
                await self._store_uploads(scope, record, prepared, written)
                await self.db.commit()
            except Exception:
                await self.db.rollback()
                self.storage.delete_many(written.values())
                raise

            # Arquivo antigo so sai depois que o novo foi persistido
            self.storage.delete_many(previous)
            await self.db.refresh(record)

        logger.info(f"{self.model.__name__} atualizado: id={record.id} loja={scope.store_id}")
        return record

    async def delete(self, scope: Scope, record_id: int) -> str:
        record = await self.get(scope, record_id)

        with internal_error_on_failure(self.messages.delete_error):
            paths = [getattr(record, rule.path_attr) for rule in self.resource.files]
            await self.db.delete(record)
            await self.db.commit()

        self.storage.delete_many(paths)
        logger.info(f"{self.model.__name__} removido: id={record_id} loja={scope.store_id}")
        return self.messages.deleted

    async def _validate(self, scope: Scope, data: Mapping[str, Any], uploads: Mapping[str, UploadFile],
                        partial: bool, exclude_id: Optional[int] = None
                        ) -> Tuple[dict, Dict[str, PreparedUpload]]:
        """Valida campos e arquivos juntos; nada e gravado antes daqui"""
        schema = self.resource.update_schema if partial else self.resource.create_schema
        values, errors = validate_payload(schema, data)
        prepared, file_errors = await prepare_uploads(
            self.resource.files, uploads, partial=partial, max_kb=settings.MAX_UPLOAD_KB
        )
        errors.update(file_errors)
        if errors:
            raise ValidationFailed(errors)

        errors = await self._check_references(scope, values)
        errors.update(await self._check_unique(scope, values, exclude_id))
        if errors:
            raise ValidationFailed(errors)

        return values, prepared

    async def _check_references(self, scope: Scope, values: Mapping[str, Any]) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        for name, model in self.resource.references.items():
            if name not in values:
                continue
            result = await self.db.execute(
                select(model.id).where(model.id == values[name], model.loja_id == scope.store_id)
            )
            if result.scalar_one_or_none() is None:
                errors[name] = [f"O campo {name} selecionado é inválido."]
        return errors

    async def _check_unique(self, scope: Scope, values: Mapping[str, Any],
                            exclude_id: Optional[int]) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        for name in self.resource.unique_fields:
            if values.get(name) is None:
                continue
            column = getattr(self.model, name)
            query = select(func.count()).select_from(self.model).where(
                self.model.loja_id == scope.store_id,
                func.lower(column) == str(values[name]).lower(),
            )
            if exclude_id is not None:
                query = query.where(self.model.id != exclude_id)
            if (await self.db.execute(query)).scalar():
                errors[name] = [f"O campo {name} já está sendo utilizado."]
        return errors

    async def _store_folder(self, store_id: int) -> str:
        loja = await self.db.get(Loja, store_id)
        if loja and loja.pasta:
            return loja.pasta
        return f"loja-{store_id}"

    async def _store_uploads(self, scope: Scope, record: Any, prepared: Mapping[str, PreparedUpload],
                             written: Dict[str, str]) -> None:
        """Grava os uploads e aponta as colunas F / F_path do registro"""
        if not prepared:
            return
        store_folder = await self._store_folder(scope.store_id)
        for name, upload in prepared.items():
            path = self.storage.save(upload, store_folder, self.resource.folder)
            written[name] = path
            setattr(record, name, os.path.basename(path))
            setattr(record, self._rule(name).path_attr, path)

    def _rule(self, name: str) -> UploadRule:
        for rule in self.resource.files:
            if rule.name == name:
                return rule
        raise KeyError(name)
