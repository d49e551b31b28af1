"""
Gestao de Template API - Idioma Model
"""
from sqlalchemy import Column, String, UniqueConstraint

from app.database import Base
from app.models.mixins import StoreScopedMixin


class Idioma(StoreScopedMixin, Base):
    """Idioma habilitado na vitrine de uma loja"""
    __tablename__ = "idiomas"
    __table_args__ = (
        UniqueConstraint('loja_id', 'codigo_idioma', name='uq_idiomas_loja_codigo'),
    )

    codigo_idioma = Column(String(10), nullable=False)
