"""
Gestao de Template API - Model Mixins
Colunas comuns (id, loja, template, timestamps) e serializacao basica
"""
from datetime import date, datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import declared_attr


class SerializableMixin:
    """to_dict() generico a partir das colunas da tabela"""

    def to_dict(self) -> dict:
        data = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            data[column.key] = value
        return data


class TimestampMixin:
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class StoreScopedMixin(SerializableMixin, TimestampMixin):
    """Registro que pertence a uma loja"""
    id = Column(Integer, primary_key=True, autoincrement=True)

    @declared_attr
    def loja_id(cls):
        return Column(Integer, ForeignKey("lojas.id", ondelete="CASCADE"), nullable=False, index=True)


class TemplateScopedMixin(StoreScopedMixin):
    """Registro que pertence a uma loja e a um template"""

    @declared_attr
    def template_id(cls):
        return Column(Integer, ForeignKey("templates.id", ondelete="CASCADE"), nullable=False, index=True)
