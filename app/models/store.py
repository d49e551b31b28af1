"""
Gestao de Template API - Store Models
Lojas (tenants), templates e usuarios
"""
from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey

from app.database import Base
from app.models.mixins import SerializableMixin, TimestampMixin


class Loja(SerializableMixin, TimestampMixin, Base):
    """Loja (tenant) do construtor de sites"""
    __tablename__ = "lojas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    # Pasta da loja no disco publico
    pasta = Column(String(255))
    email = Column(String(255))
    url_loja = Column(Text)


class Template(SerializableMixin, TimestampMixin, Base):
    """Template de vitrine"""
    __tablename__ = "templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome_template = Column(String(255), nullable=False)
    descricao = Column(Text)
    capa = Column(String(255))


class User(TimestampMixin, Base):
    """Usuario do painel; loja_id nulo significa sem loja associada"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255))
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    loja_id = Column(Integer, ForeignKey("lojas.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, default=True)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "loja_id": self.loja_id,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
