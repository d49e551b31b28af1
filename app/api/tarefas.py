"""
Gestao de Template API - Tarefas API
Lista de tarefas (to-do), sem autenticacao nem escopo de loja
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.database import get_db
from app.models import Tarefa, TarefaStatus
from app.schemas import TarefaCreate, TarefaUpdate, TarefaResponse
from app.core.errors import NotFound, internal_error_on_failure
from app.core.validation import MAX_RECORD_ID

router = APIRouter(prefix="/tarefas", tags=["Tarefas"])


async def _get_tarefa(db: AsyncSession, tarefa_id: int) -> Tarefa:
    with internal_error_on_failure("Erro ao buscar tarefa"):
        tarefa = await db.get(Tarefa, tarefa_id)
    if not tarefa:
        raise NotFound("Tarefa não encontrada")
    return tarefa


@router.get("", response_model=List[TarefaResponse])
async def list_tarefas(db: AsyncSession = Depends(get_db)):
    """Lista todas as tarefas"""
    with internal_error_on_failure("Erro ao listar tarefas"):
        result = await db.execute(select(Tarefa).order_by(Tarefa.id))
        return result.scalars().all()


@router.get("/filtrar", response_model=List[TarefaResponse])
async def filter_tarefas(
    status_filter: TarefaStatus = Query(..., alias="status"),
    db: AsyncSession = Depends(get_db)
):
    """Filtra tarefas por status"""
    with internal_error_on_failure("Erro ao filtrar tarefas"):
        result = await db.execute(
            select(Tarefa).where(Tarefa.status == status_filter.value).order_by(Tarefa.id)
        )
        return result.scalars().all()


@router.post("/criar", response_model=TarefaResponse, status_code=status.HTTP_201_CREATED)
async def create_tarefa(data: TarefaCreate, db: AsyncSession = Depends(get_db)):
    """Cria uma nova tarefa"""
    values = data.model_dump(exclude_unset=True)
    if values.get("status") is None:
        values.pop("status", None)
    else:
        values["status"] = values["status"].value

    with internal_error_on_failure("Erro ao criar tarefa"):
        tarefa = Tarefa(**values)
        db.add(tarefa)
        await db.commit()
        await db.refresh(tarefa)

    return tarefa


@router.patch("/atualizar/{tarefa_id}", response_model=TarefaResponse)
async def update_tarefa(
    data: TarefaUpdate,
    tarefa_id: int = Path(..., le=MAX_RECORD_ID),
    db: AsyncSession = Depends(get_db)
):
    """Atualiza titulo, descricao ou status"""
    tarefa = await _get_tarefa(db, tarefa_id)

    with internal_error_on_failure("Erro ao atualizar tarefa"):
        for key, value in data.model_dump(exclude_unset=True).items():
            if key == "status":
                value = value.value
            setattr(tarefa, key, value)
        await db.commit()
        await db.refresh(tarefa)

    return tarefa


@router.delete("/deletar/{tarefa_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tarefa(
    tarefa_id: int = Path(..., le=MAX_RECORD_ID),
    db: AsyncSession = Depends(get_db)
):
    """Remove uma tarefa"""
    tarefa = await _get_tarefa(db, tarefa_id)

    with internal_error_on_failure("Erro ao deletar tarefa"):
        await db.delete(tarefa)
        await db.commit()

    return Response(status_code=status.HTTP_204_NO_CONTENT)
