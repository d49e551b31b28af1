"""
Gestao de Template API - Tarefa Model
Lista de tarefas simples, sem escopo de loja
"""
import enum
from sqlalchemy import Column, Integer, String, Text

from app.database import Base
from app.models.mixins import SerializableMixin, TimestampMixin


class TarefaStatus(str, enum.Enum):
    """Status da tarefa"""
    PENDENTE = "pendente"
    EM_ANDAMENTO = "em_andamento"
    CONCLUIDA = "concluida"


class Tarefa(SerializableMixin, TimestampMixin, Base):
    __tablename__ = "tarefas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(255), nullable=False)
    descricao = Column(Text)
    status = Column(String(20), default=TarefaStatus.PENDENTE.value, nullable=False, index=True)
