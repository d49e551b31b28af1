import os
import shutil
import tempfile
from types import SimpleNamespace

_tmp_dir = tempfile.mkdtemp(prefix="gestao-template-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp_dir}/test.db"
os.environ["STORAGE_ROOT"] = os.path.join(_tmp_dir, "storage")
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["OPENWEATHERMAP_API_KEY"] = "test-weather-key"
os.environ.pop("PUBLIC_URL", None)

import pytest
from httpx import ASGITransport, AsyncClient

from app.core import create_access_token, get_password_hash
from app.core.storage import storage
from app.database import AsyncSessionLocal, Base, engine
from app.main import app
from app.models import Categoria, Loja, Produto, Template, User

PASSWORD = "secret123"
PASSWORD_HASH = get_password_hash(PASSWORD)

# Assinaturas minimas aceitas pela validacao de upload
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 256
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 256


@pytest.fixture
def anyio_backend():
    return 'asyncio'


@pytest.fixture
async def database():
    shutil.rmtree(storage.root, ignore_errors=True)
    storage.root.mkdir(parents=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    # Conexoes do pool ficam presas ao loop do teste
    await engine.dispose()


@pytest.fixture
async def seed(database):
    async with AsyncSessionLocal() as db:
        loja = Loja(nome="Loja A", pasta="loja-a")
        outra_loja = Loja(nome="Loja B")
        template = Template(nome_template="Vitrine Padrao")
        db.add_all([loja, outra_loja, template])
        await db.flush()

        categoria = Categoria(loja_id=loja.id, nome="Roupas", slug="roupas")
        outra_categoria = Categoria(loja_id=outra_loja.id, nome="Calcados", slug="calcados")
        produto = Produto(loja_id=loja.id, nome="Camiseta")
        owner = User(name="Dona A", email="owner@loja-a.com", hashed_password=PASSWORD_HASH, loja_id=loja.id)
        other = User(name="Dono B", email="owner@loja-b.com", hashed_password=PASSWORD_HASH, loja_id=outra_loja.id)
        orphan = User(name="Sem Loja", email="orphan@example.com", hashed_password=PASSWORD_HASH)
        db.add_all([categoria, outra_categoria, produto, owner, other, orphan])
        await db.commit()

        return SimpleNamespace(
            loja_id=loja.id,
            outra_loja_id=outra_loja.id,
            template_id=template.id,
            categoria_id=categoria.id,
            outra_categoria_id=outra_categoria.id,
            produto_id=produto.id,
            owner_id=owner.id,
            owner_token=create_access_token({"sub": str(owner.id)}),
            other_token=create_access_token({"sub": str(other.id)}),
            orphan_token=create_access_token({"sub": str(orphan.id)}),
        )


@pytest.fixture
async def client(database):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def stored_path(public_url: str) -> str:
    """Caminho relativo ao disco a partir da URL publica"""
    return public_url.split("/storage/", 1)[1]


def stored_file_exists(public_url: str) -> bool:
    return storage.exists(stored_path(public_url))
