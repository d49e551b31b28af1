"""
Gestao de Template API - Tarefa Schemas
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.models.tarefa import TarefaStatus


class TarefaCreate(BaseModel):
    titulo: str = Field(..., max_length=255)
    descricao: Optional[str] = None
    status: Optional[TarefaStatus] = None


class TarefaUpdate(BaseModel):
    titulo: str = Field(None, max_length=255)
    descricao: Optional[str] = None
    status: TarefaStatus = None


class TarefaResponse(BaseModel):
    id: int
    titulo: str
    descricao: Optional[str] = None
    status: TarefaStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
