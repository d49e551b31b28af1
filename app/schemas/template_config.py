"""
Gestao de Template API - Template Configuration Schemas
Create: campos obrigatorios exigidos. Update: tudo opcional, so o que for
enviado e validado; campo nao anulavel enviado como null e rejeitado.
Imagens nao aparecem aqui: sao validadas como upload.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from app.schemas.common import (
    ColorCode, HexColor, HttpUrlStr, LayoutConfig, Money, PerRow, RecordId,
    Str255, Str1000, required_if,
)

Visualizacao = Literal["Carrossel", "Grade", "Lista"]
VisualizacaoGrade = Literal["Grade", "Lista"]
TipoTexto = Literal["Cabecalho", "Rodape", "Banner", "Titulo", "Descricao"]
TipoReproducao = Literal["automatico_sem_som", "manual_com_som"]


# Anuncio
class AnuncioCreate(BaseModel):
    titulo: Str255
    texto: Str1000
    link: Optional[Str255] = None
    carregar_imagens_mobile: bool


class AnuncioUpdate(BaseModel):
    titulo: Str255 = None
    texto: Str1000 = None
    link: Optional[Str255] = None
    carregar_imagens_mobile: bool = None


# Banner estatico
class BannerEstaticoCreate(BaseModel):
    titulo: Optional[Str255] = None
    link: Optional[HttpUrlStr] = None
    exibir: bool


class BannerEstaticoUpdate(BaseModel):
    titulo: Optional[Str255] = None
    link: Optional[HttpUrlStr] = None
    exibir: bool = None


# Banner promocional
class BannerPromocionalCreate(BaseModel):
    titulo: Optional[Str255] = None
    texto_fora_imagem: bool
    banners_carrossel: bool
    mesma_altura: bool
    remover_espacos: bool
    banners_por_linha_desktop: PerRow
    carregar_imagens_mobile: bool


class BannerPromocionalUpdate(BaseModel):
    titulo: Optional[Str255] = None
    texto_fora_imagem: bool = None
    banners_carrossel: bool = None
    mesma_altura: bool = None
    remover_espacos: bool = None
    banners_por_linha_desktop: PerRow = None
    carregar_imagens_mobile: bool = None


# Banner rotativo
class BannerRotativoCreate(BaseModel):
    largura_tela: bool
    efeito_movimento: bool


class BannerRotativoUpdate(BaseModel):
    largura_tela: bool = None
    efeito_movimento: bool = None


# Banners de categorias / novidades
class _BannerVitrineCreate(BaseModel):
    titulo: Optional[Str255] = None
    mostrar_texto_fora_imagem: bool
    mostrar_banners_carrossel: bool
    mesma_altura_banners: bool
    remover_espacos_banners: bool
    banners_por_linha: PerRow
    carregar_imagens_celular: bool


class _BannerVitrineUpdate(BaseModel):
    titulo: Optional[Str255] = None
    mostrar_texto_fora_imagem: bool = None
    mostrar_banners_carrossel: bool = None
    mesma_altura_banners: bool = None
    remover_espacos_banners: bool = None
    banners_por_linha: PerRow = None
    carregar_imagens_celular: bool = None


class BannersCategoriasCreate(_BannerVitrineCreate):
    categoria_id: RecordId


class BannersCategoriasUpdate(_BannerVitrineUpdate):
    categoria_id: RecordId = None


class BannersNovidadesCreate(_BannerVitrineCreate):
    produto_id: RecordId


class BannersNovidadesUpdate(_BannerVitrineUpdate):
    produto_id: RecordId = None


# Cabecalho
class CabecalhoCreate(BaseModel):
    cor_fundo: ColorCode
    cor_texto_icones: ColorCode
    tamanho_logo: Str255
    mostrar_idiomas: bool
    cabecalho_em_celulares: LayoutConfig = None
    cabecalho_em_computadores: LayoutConfig = None
    barra_anuncio: LayoutConfig = None


class CabecalhoUpdate(BaseModel):
    cor_fundo: ColorCode = None
    cor_texto_icones: ColorCode = None
    tamanho_logo: Str255 = None
    mostrar_idiomas: bool = None
    cabecalho_em_celulares: LayoutConfig = None
    cabecalho_em_computadores: LayoutConfig = None
    barra_anuncio: LayoutConfig = None


# Carrinho
class CarrinhoCreate(BaseModel):
    mostrar_botao_ver_mais: bool
    valor_minimo_compra: Money
    carrinho_rapido: bool
    sugerir_produtos_complementares: bool
    mostrar_calculadora_frete: bool


class CarrinhoUpdate(BaseModel):
    mostrar_botao_ver_mais: bool = None
    valor_minimo_compra: Money = None
    carrinho_rapido: bool = None
    sugerir_produtos_complementares: bool = None
    mostrar_calculadora_frete: bool = None


# Checkout
class CheckoutCreate(BaseModel):
    exibir_opcoes_entrega: bool
    exibir_opcoes_pagamento: bool
    exibir_resumo_pedido: bool


class CheckoutUpdate(BaseModel):
    exibir_opcoes_entrega: bool = None
    exibir_opcoes_pagamento: bool = None
    exibir_resumo_pedido: bool = None


# Depoimento
class DepoimentoCreate(BaseModel):
    titulo: Str255
    descricao_italico: bool
    nome: Str255
    descricao: Str1000


class DepoimentoUpdate(BaseModel):
    titulo: Str255 = None
    descricao_italico: bool = None
    nome: Str255 = None
    descricao: Str1000 = None


# Favoritos
class FavoritosCreate(BaseModel):
    favoritado: bool


class FavoritosUpdate(BaseModel):
    favoritado: bool = None


# Imagens
class ImagensCreate(BaseModel):
    titulo: Optional[Str255] = None


class ImagensUpdate(BaseModel):
    titulo: Optional[Str255] = None


# Info frete e pagamento
class InfoFretePagamentoCreate(BaseModel):
    usar_cores_secao: bool
    cor_fundo: Optional[HexColor] = None
    cor_texto: Optional[HexColor] = None
    mostrar_banners_home: bool
    titulo: Str255
    descricao: Str1000
    link: HttpUrlStr


class InfoFretePagamentoUpdate(BaseModel):
    usar_cores_secao: bool = None
    cor_fundo: Optional[HexColor] = None
    cor_texto: Optional[HexColor] = None
    mostrar_banners_home: bool = None
    titulo: Str255 = None
    descricao: Str1000 = None
    link: HttpUrlStr = None


# Marcas
class MarcaCreate(BaseModel):
    tipo_visualizacao: Visualizacao
    titulo: Str255


class MarcaUpdate(BaseModel):
    tipo_visualizacao: Visualizacao = None
    titulo: Str255 = None


# Mensagem institucional
class MensagemInstitucionalCreate(BaseModel):
    subtitulo: Optional[Str255] = None
    titulo: Str255
    titulo_italico: bool
    link: Optional[Str255] = None
    botao: Optional[Str255] = None


class MensagemInstitucionalUpdate(BaseModel):
    subtitulo: Optional[Str255] = None
    titulo: Str255 = None
    titulo_italico: bool = None
    link: Optional[Str255] = None
    botao: Optional[Str255] = None


# Mostrar produto
class MostrarProdutoCreate(BaseModel):
    mostrar_calculadora_frete: bool
    mostrar_parcelas: bool
    mostrar_preco_desconto: bool
    variacoes_como_botoes: bool
    variacoes_cor_como_foto: bool
    link_guia_medidas: Optional[HttpUrlStr] = None
    mostrar_estoque: bool
    mostrar_mensagem_ultima_unidade: bool
    # validate_default: o required_if tambem vale quando o campo e omitido
    mensagem_ultima_unidade: Optional[Str255] = Field(None, validate_default=True)
    descricao_largura_total: bool
    permitir_comentarios_facebook: bool
    facebook_perfil_id: Optional[Str255] = Field(None, validate_default=True)
    titulo_produtos_alternativos: Str255
    titulo_produtos_complementares: Str255

    @field_validator("mensagem_ultima_unidade", mode="after")
    @classmethod
    def _mensagem_obrigatoria(cls, value, info: ValidationInfo):
        return required_if(value, info.data, "mostrar_mensagem_ultima_unidade")

    @field_validator("facebook_perfil_id", mode="after")
    @classmethod
    def _perfil_obrigatorio(cls, value, info: ValidationInfo):
        return required_if(value, info.data, "permitir_comentarios_facebook")


class MostrarProdutoUpdate(BaseModel):
    mostrar_calculadora_frete: bool = None
    mostrar_parcelas: bool = None
    mostrar_preco_desconto: bool = None
    variacoes_como_botoes: bool = None
    variacoes_cor_como_foto: bool = None
    link_guia_medidas: Optional[HttpUrlStr] = None
    mostrar_estoque: bool = None
    mostrar_mensagem_ultima_unidade: bool = None
    mensagem_ultima_unidade: Optional[Str255] = None
    descricao_largura_total: bool = None
    permitir_comentarios_facebook: bool = None
    facebook_perfil_id: Optional[Str255] = None
    titulo_produtos_alternativos: Str255 = None
    titulo_produtos_complementares: Str255 = None

    @field_validator("mensagem_ultima_unidade", mode="after")
    @classmethod
    def _mensagem_obrigatoria(cls, value, info: ValidationInfo):
        return required_if(value, info.data, "mostrar_mensagem_ultima_unidade")

    @field_validator("facebook_perfil_id", mode="after")
    @classmethod
    def _perfil_obrigatorio(cls, value, info: ValidationInfo):
        return required_if(value, info.data, "permitir_comentarios_facebook")


# Newsletter
class NewsletterCreate(BaseModel):
    aumentar_largura_tela: bool
    usar_cores_newsletter: bool
    cor_fundo: Optional[HexColor] = None
    cor_texto: Optional[HexColor] = None
    titulo: Str255
    descricao: Str1000


class NewsletterUpdate(BaseModel):
    aumentar_largura_tela: bool = None
    usar_cores_newsletter: bool = None
    cor_fundo: Optional[HexColor] = None
    cor_texto: Optional[HexColor] = None
    titulo: Str255 = None
    descricao: Str1000 = None


# Popup promocional
class PopupPromocionalCreate(BaseModel):
    mostrar_popup: bool
    titulo: Str255
    descricao: Str1000
    texto_botao: Str255
    link_botao: HttpUrlStr
    permitir_inscricao_newsletter: bool


class PopupPromocionalUpdate(BaseModel):
    mostrar_popup: bool = None
    titulo: Str255 = None
    descricao: Str1000 = None
    texto_botao: Str255 = None
    link_botao: HttpUrlStr = None
    permitir_inscricao_newsletter: bool = None


# Vitrines de produtos
class ProdutosEmDestaqueCreate(BaseModel):
    titulo: Str255
    tipo_visualizacao: VisualizacaoGrade
    produtos_por_linha_celulares: PerRow
    produtos_por_linha_computadores: PerRow


class ProdutosEmDestaqueUpdate(BaseModel):
    titulo: Str255 = None
    tipo_visualizacao: VisualizacaoGrade = None
    produtos_por_linha_celulares: PerRow = None
    produtos_por_linha_computadores: PerRow = None


class ProdutosEmOfertaCreate(ProdutosEmDestaqueCreate):
    tipo_visualizacao: Visualizacao


class ProdutosEmOfertaUpdate(ProdutosEmDestaqueUpdate):
    tipo_visualizacao: Visualizacao = None


# Textos
class TextosCreate(BaseModel):
    titulo: Str255
    conteudo: Str1000
    tipo_texto: TipoTexto


class TextosUpdate(BaseModel):
    titulo: Str255 = None
    conteudo: Str1000 = None
    tipo_texto: TipoTexto = None


# Video
class VideoCreate(BaseModel):
    aumentar_largura_tela: bool
    tipo_reproducao: TipoReproducao
    link_youtube: HttpUrlStr
    titulo: Str255
    descricao: Str1000
    texto_botao: Optional[Str255] = None
    link_botao: Optional[HttpUrlStr] = None


class VideoUpdate(BaseModel):
    aumentar_largura_tela: bool = None
    tipo_reproducao: TipoReproducao = None
    link_youtube: HttpUrlStr = None
    titulo: Str255 = None
    descricao: Str1000 = None
    texto_botao: Optional[Str255] = None
    link_botao: Optional[HttpUrlStr] = None
