"""
Gestao de Template API - Catalog Models
Categorias e produtos referenciados pelos banners
"""
from sqlalchemy import Column, String

from app.database import Base
from app.models.mixins import StoreScopedMixin


class Categoria(StoreScopedMixin, Base):
    __tablename__ = "categorias"

    nome = Column(String(255), nullable=False)
    slug = Column(String(255))


class Produto(StoreScopedMixin, Base):
    __tablename__ = "produtos"

    nome = Column(String(255), nullable=False)
