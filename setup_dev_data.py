"""
Script para criar dados de desenvolvimento da Gestao de Template API
Cria uma loja, um template, uma categoria, um produto e um usuario do painel.
Execute: python setup_dev_data.py
"""
import asyncio

from sqlalchemy import select

from app.core import get_password_hash, create_access_token
from app.database import AsyncSessionLocal, init_db
from app.models import Categoria, Loja, Produto, Template, User

DEV_EMAIL = "admin@loja-demo.com"
DEV_PASSWORD = "admin123"


async def main():
    print("=== Setup de Dados de Desenvolvimento ===\n")

    print("1. Criando tabelas...")
    await init_db()

    async with AsyncSessionLocal() as db:
        result = await db.execute(select(User).where(User.email == DEV_EMAIL))
        user = result.scalar_one_or_none()
        if user:
            print(f"   Usuario {DEV_EMAIL} ja existe (loja {user.loja_id}), nada a fazer.")
            token = create_access_token(data={"sub": str(user.id), "email": user.email})
            print(f"\nToken: {token}")
            return

        print("2. Criando loja e template...")
        loja = Loja(nome="Loja Demo", pasta="loja-demo", email="contato@loja-demo.com")
        template = Template(nome_template="Vitrine Padrao", descricao="Template inicial")
        db.add_all([loja, template])
        await db.flush()

        print("3. Criando catalogo...")
        db.add_all([
            Categoria(loja_id=loja.id, nome="Roupas", slug="roupas"),
            Produto(loja_id=loja.id, nome="Camiseta Basica"),
        ])

        print("4. Criando usuario do painel...")
        user = User(
            name="Administrador",
            email=DEV_EMAIL,
            hashed_password=get_password_hash(DEV_PASSWORD),
            loja_id=loja.id
        )
        db.add(user)
        await db.commit()
        await db.refresh(user)

        token = create_access_token(data={"sub": str(user.id), "email": user.email})

    print("\n=== Setup concluido! ===")
    print(f"Loja:     {loja.nome} (ID: {loja.id})")
    print(f"Template: {template.nome_template} (ID: {template.id})")
    print(f"Login:    {DEV_EMAIL} / {DEV_PASSWORD}")
    print(f"\nToken: {token}")
    print(f"\nExemplo: GET /api/gestao-template/banners-estaticos/{template.id}")


if __name__ == "__main__":
    asyncio.run(main())
