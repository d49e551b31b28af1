"""
Gestao de Template API - Template Configuration API
Registro das secoes configuraveis do template: uma entrada por recurso
"""
from fastapi import APIRouter

from app.api.resources import build_resource_router
from app.core.validation import UploadRule
from app.models import (
    Anuncio, BannerEstatico, BannerPromocional, BannerRotativo, BannersCategoriasGt,
    BannersNovidades, Cabecalho, CarrinhoGt, Categoria, CheckoutGt, Depoimento,
    FavoritosGt, ImagensGt, InfoFretePagamento, MarcaGt, MensagemInstitucional,
    MostrarProduto, Newsletter, PopupPromocional, Produto, ProdutosEmDestaque,
    ProdutosEmOferta, ProdutosNovos, TextosGt, Video,
)
from app.schemas import template_config as schemas
from app.services.scoped_crud import ResourceMessages, ResourceSpec

# Imagem desktop obrigatoria + mobile opcional
DESKTOP_MOBILE = (UploadRule("imagem_desktop", required=True), UploadRule("imagem_mobile"))
IMAGEM = (UploadRule("imagem", required=True),)

TEMPLATE_RESOURCES = (
    ResourceSpec(
        slug="anuncios",
        model=Anuncio,
        create_schema=schemas.AnuncioCreate,
        update_schema=schemas.AnuncioUpdate,
        messages=ResourceMessages.for_label("Anúncio", "anúncios"),
        folder="anuncios",
        files=DESKTOP_MOBILE,
        tag="Anúncios",
    ),
    ResourceSpec(
        slug="banners-estaticos",
        model=BannerEstatico,
        create_schema=schemas.BannerEstaticoCreate,
        update_schema=schemas.BannerEstaticoUpdate,
        messages=ResourceMessages.for_label("Banner estático", "banners estáticos"),
        folder="banner_estatico",
        files=IMAGEM,
        tag="Banners",
    ),
    ResourceSpec(
        slug="banners-promocionais",
        model=BannerPromocional,
        create_schema=schemas.BannerPromocionalCreate,
        update_schema=schemas.BannerPromocionalUpdate,
        messages=ResourceMessages.for_label("Banner promocional", "banners promocionais"),
        folder="banner_promocional",
        files=DESKTOP_MOBILE,
        tag="Banners",
    ),
    ResourceSpec(
        slug="banners-rotativos",
        model=BannerRotativo,
        create_schema=schemas.BannerRotativoCreate,
        update_schema=schemas.BannerRotativoUpdate,
        messages=ResourceMessages.for_label("Banner rotativo", "banners rotativos"),
        folder="banner_rotativo",
        files=DESKTOP_MOBILE,
        tag="Banners",
    ),
    ResourceSpec(
        slug="banners-categorias",
        model=BannersCategoriasGt,
        create_schema=schemas.BannersCategoriasCreate,
        update_schema=schemas.BannersCategoriasUpdate,
        messages=ResourceMessages.for_label("Banner de categoria", "banners de categorias"),
        folder="banners_categorias",
        files=DESKTOP_MOBILE,
        references={"categoria_id": Categoria},
        tag="Banners",
    ),
    ResourceSpec(
        slug="banners-novidades",
        model=BannersNovidades,
        create_schema=schemas.BannersNovidadesCreate,
        update_schema=schemas.BannersNovidadesUpdate,
        messages=ResourceMessages.for_label("Banner de novidades", "banners de novidades"),
        folder="banners_novidades",
        files=DESKTOP_MOBILE,
        references={"produto_id": Produto},
        tag="Banners",
    ),
    ResourceSpec(
        slug="cabecalhos",
        model=Cabecalho,
        create_schema=schemas.CabecalhoCreate,
        update_schema=schemas.CabecalhoUpdate,
        messages=ResourceMessages.for_label("Cabeçalho", "cabeçalhos"),
        tag="Layout",
    ),
    ResourceSpec(
        slug="carrinhos",
        model=CarrinhoGt,
        create_schema=schemas.CarrinhoCreate,
        update_schema=schemas.CarrinhoUpdate,
        messages=ResourceMessages.for_label("Carrinho", "carrinhos"),
        tag="Compra",
    ),
    ResourceSpec(
        slug="checkouts",
        model=CheckoutGt,
        create_schema=schemas.CheckoutCreate,
        update_schema=schemas.CheckoutUpdate,
        messages=ResourceMessages.for_label("Checkout", "checkouts"),
        tag="Compra",
    ),
    ResourceSpec(
        slug="depoimentos",
        model=Depoimento,
        create_schema=schemas.DepoimentoCreate,
        update_schema=schemas.DepoimentoUpdate,
        messages=ResourceMessages.for_label("Depoimento", "depoimentos"),
        folder="depoimentos",
        files=IMAGEM,
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="favoritos",
        model=FavoritosGt,
        create_schema=schemas.FavoritosCreate,
        update_schema=schemas.FavoritosUpdate,
        messages=ResourceMessages.for_label("Favorito", "favoritos"),
        tag="Compra",
    ),
    ResourceSpec(
        slug="imagens",
        model=ImagensGt,
        create_schema=schemas.ImagensCreate,
        update_schema=schemas.ImagensUpdate,
        messages=ResourceMessages.for_label("Imagem", "imagens", feminine=True),
        folder="imagens_gt",
        files=IMAGEM,
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="info-frete-pagamento",
        model=InfoFretePagamento,
        create_schema=schemas.InfoFretePagamentoCreate,
        update_schema=schemas.InfoFretePagamentoUpdate,
        messages=ResourceMessages.for_label(
            "Informação de frete e pagamento", "informações de frete e pagamento", feminine=True
        ),
        folder="info_frete_pagamento",
        files=(UploadRule("imagem", required=True), UploadRule("icone", required=True)),
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="marcas",
        model=MarcaGt,
        create_schema=schemas.MarcaCreate,
        update_schema=schemas.MarcaUpdate,
        messages=ResourceMessages.for_label("Marca", "marcas", feminine=True),
        folder="marcas_gt",
        files=IMAGEM,
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="mensagens-institucionais",
        model=MensagemInstitucional,
        create_schema=schemas.MensagemInstitucionalCreate,
        update_schema=schemas.MensagemInstitucionalUpdate,
        messages=ResourceMessages.for_label(
            "Mensagem institucional", "mensagens institucionais", feminine=True
        ),
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="mostrar-produto",
        model=MostrarProduto,
        create_schema=schemas.MostrarProdutoCreate,
        update_schema=schemas.MostrarProdutoUpdate,
        messages=ResourceMessages.for_label(
            "Configuração de produto", "configurações de produto", feminine=True
        ),
        tag="Produtos",
    ),
    ResourceSpec(
        slug="newsletters",
        model=Newsletter,
        create_schema=schemas.NewsletterCreate,
        update_schema=schemas.NewsletterUpdate,
        messages=ResourceMessages.for_label("Newsletter", "newsletters", feminine=True),
        folder="newsletters",
        files=IMAGEM,
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="popups-promocionais",
        model=PopupPromocional,
        create_schema=schemas.PopupPromocionalCreate,
        update_schema=schemas.PopupPromocionalUpdate,
        messages=ResourceMessages.for_label("Pop-up promocional", "pop-ups promocionais"),
        folder="popups_promocionais",
        files=IMAGEM,
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="produtos-em-destaque",
        model=ProdutosEmDestaque,
        create_schema=schemas.ProdutosEmDestaqueCreate,
        update_schema=schemas.ProdutosEmDestaqueUpdate,
        messages=ResourceMessages.for_label("Produto em destaque", "produtos em destaque"),
        tag="Produtos",
    ),
    ResourceSpec(
        slug="produtos-em-oferta",
        model=ProdutosEmOferta,
        create_schema=schemas.ProdutosEmOfertaCreate,
        update_schema=schemas.ProdutosEmOfertaUpdate,
        messages=ResourceMessages.for_label("Produto em oferta", "produtos em oferta"),
        tag="Produtos",
    ),
    ResourceSpec(
        slug="produtos-novos",
        model=ProdutosNovos,
        # mesmas regras da vitrine de destaque
        create_schema=schemas.ProdutosEmDestaqueCreate,
        update_schema=schemas.ProdutosEmDestaqueUpdate,
        messages=ResourceMessages.for_label("Produto novo", "produtos novos"),
        tag="Produtos",
    ),
    ResourceSpec(
        slug="textos",
        model=TextosGt,
        create_schema=schemas.TextosCreate,
        update_schema=schemas.TextosUpdate,
        messages=ResourceMessages.for_label("Texto", "textos"),
        tag="Conteúdo",
    ),
    ResourceSpec(
        slug="videos",
        model=Video,
        create_schema=schemas.VideoCreate,
        update_schema=schemas.VideoUpdate,
        messages=ResourceMessages.for_label("Vídeo", "vídeos"),
        folder="videos",
        files=IMAGEM,
        tag="Conteúdo",
    ),
)

RESOURCES_BY_SLUG = {resource.slug: resource for resource in TEMPLATE_RESOURCES}

router = APIRouter(prefix="/gestao-template")

for _resource in TEMPLATE_RESOURCES:
    router.include_router(build_resource_router(_resource))
