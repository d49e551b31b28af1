"""
Gestao de Template API - Template Configuration Models
Uma tabela por secao configuravel da vitrine. Cada imagem F e gravada em
duas colunas: F (nome do arquivo) e F_path (caminho no disco publico).
"""
from sqlalchemy import Column, Integer, String, Boolean, Text, Numeric, ForeignKey, JSON

from app.database import Base
from app.models.mixins import TemplateScopedMixin


class Anuncio(TemplateScopedMixin, Base):
    __tablename__ = "anuncios"

    titulo = Column(String(255), nullable=False)
    texto = Column(String(1000), nullable=False)
    link = Column(String(255))
    imagem_desktop = Column(String(255), nullable=False)
    imagem_desktop_path = Column(String(500), nullable=False)
    imagem_mobile = Column(String(255))
    imagem_mobile_path = Column(String(500))
    carregar_imagens_mobile = Column(Boolean, default=False)


class BannerEstatico(TemplateScopedMixin, Base):
    __tablename__ = "banners_estaticos"

    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    titulo = Column(String(255))
    link = Column(String(255))
    exibir = Column(Boolean, default=True)


class BannerPromocional(TemplateScopedMixin, Base):
    __tablename__ = "banners_promocionais"

    titulo = Column(String(255))
    texto_fora_imagem = Column(Boolean, default=False)
    banners_carrossel = Column(Boolean, default=False)
    mesma_altura = Column(Boolean, default=False)
    remover_espacos = Column(Boolean, default=False)
    banners_por_linha_desktop = Column(Integer, default=4)
    imagem_desktop = Column(String(255), nullable=False)
    imagem_desktop_path = Column(String(500), nullable=False)
    imagem_mobile = Column(String(255))
    imagem_mobile_path = Column(String(500))
    carregar_imagens_mobile = Column(Boolean, default=False)


class BannerRotativo(TemplateScopedMixin, Base):
    __tablename__ = "banner_rotativos"

    imagem_desktop = Column(String(255), nullable=False)
    imagem_desktop_path = Column(String(500), nullable=False)
    imagem_mobile = Column(String(255))
    imagem_mobile_path = Column(String(500))
    largura_tela = Column(Boolean, default=False)
    efeito_movimento = Column(Boolean, default=False)


class BannersCategoriasGt(TemplateScopedMixin, Base):
    __tablename__ = "banners_categorias_gts"

    categoria_id = Column(Integer, ForeignKey("categorias.id", ondelete="CASCADE"), nullable=False)
    titulo = Column(String(255))
    mostrar_texto_fora_imagem = Column(Boolean, default=False)
    mostrar_banners_carrossel = Column(Boolean, default=False)
    mesma_altura_banners = Column(Boolean, default=False)
    remover_espacos_banners = Column(Boolean, default=False)
    banners_por_linha = Column(Integer, default=4)
    imagem_desktop = Column(String(255), nullable=False)
    imagem_desktop_path = Column(String(500), nullable=False)
    imagem_mobile = Column(String(255))
    imagem_mobile_path = Column(String(500))
    carregar_imagens_celular = Column(Boolean, default=False)


class BannersNovidades(TemplateScopedMixin, Base):
    __tablename__ = "banners_novidades"

    produto_id = Column(Integer, ForeignKey("produtos.id", ondelete="CASCADE"), nullable=False)
    titulo = Column(String(255))
    mostrar_texto_fora_imagem = Column(Boolean, default=False)
    mostrar_banners_carrossel = Column(Boolean, default=False)
    mesma_altura_banners = Column(Boolean, default=False)
    remover_espacos_banners = Column(Boolean, default=False)
    banners_por_linha = Column(Integer, default=4)
    imagem_desktop = Column(String(255), nullable=False)
    imagem_desktop_path = Column(String(500), nullable=False)
    imagem_mobile = Column(String(255))
    imagem_mobile_path = Column(String(500))
    carregar_imagens_celular = Column(Boolean, default=False)


class Cabecalho(TemplateScopedMixin, Base):
    __tablename__ = "cabecalhos_gt"

    cor_fundo = Column(String(7), default="#ffffff")
    cor_texto_icones = Column(String(7), default="#000000")
    tamanho_logo = Column(String(255), default="pre-definido")
    mostrar_idiomas = Column(Boolean, default=False)
    # Configuracoes de layout livres (JSON)
    cabecalho_em_celulares = Column(JSON)
    cabecalho_em_computadores = Column(JSON)
    barra_anuncio = Column(JSON)


class CarrinhoGt(TemplateScopedMixin, Base):
    __tablename__ = "carrinhos_gts"

    mostrar_botao_ver_mais = Column(Boolean, default=True)
    valor_minimo_compra = Column(Numeric(10, 2), default=3000)
    carrinho_rapido = Column(Boolean, default=True)
    sugerir_produtos_complementares = Column(Boolean, default=True)
    mostrar_calculadora_frete = Column(Boolean, default=True)


class CheckoutGt(TemplateScopedMixin, Base):
    __tablename__ = "checkouts_gts"

    exibir_opcoes_entrega = Column(Boolean, default=True)
    exibir_opcoes_pagamento = Column(Boolean, default=True)
    exibir_resumo_pedido = Column(Boolean, default=True)


class Depoimento(TemplateScopedMixin, Base):
    __tablename__ = "depoimentos"

    titulo = Column(String(255), nullable=False)
    descricao_italico = Column(Boolean, default=False)
    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    nome = Column(String(255), nullable=False)
    descricao = Column(String(1000), nullable=False)


class FavoritosGt(TemplateScopedMixin, Base):
    __tablename__ = "favoritos_gts"

    favoritado = Column(Boolean, default=True)


class ImagensGt(TemplateScopedMixin, Base):
    __tablename__ = "imagens_gts"

    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    titulo = Column(String(255))


class InfoFretePagamento(TemplateScopedMixin, Base):
    __tablename__ = "info_frete_pagamentos"

    usar_cores_secao = Column(Boolean, default=False)
    cor_fundo = Column(String(7))
    cor_texto = Column(String(7))
    mostrar_banners_home = Column(Boolean, default=False)
    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    icone = Column(String(255), nullable=False)
    icone_path = Column(String(500), nullable=False)
    titulo = Column(String(255), nullable=False)
    descricao = Column(String(1000), nullable=False)
    link = Column(String(255), nullable=False)


class MarcaGt(TemplateScopedMixin, Base):
    __tablename__ = "marca_gts"

    tipo_visualizacao = Column(String(20), default="Carrossel")
    titulo = Column(String(255), default="Nossas marcas")
    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)


class MensagemInstitucional(TemplateScopedMixin, Base):
    __tablename__ = "mensagens_institucionais"

    subtitulo = Column(String(255))
    titulo = Column(String(255), nullable=False)
    titulo_italico = Column(Boolean, default=False)
    link = Column(String(255))
    botao = Column(String(255))


class MostrarProduto(TemplateScopedMixin, Base):
    __tablename__ = "mostrar_produtos"

    mostrar_calculadora_frete = Column(Boolean, default=False)
    mostrar_parcelas = Column(Boolean, default=False)
    mostrar_preco_desconto = Column(Boolean, default=False)
    variacoes_como_botoes = Column(Boolean, default=False)
    variacoes_cor_como_foto = Column(Boolean, default=False)
    link_guia_medidas = Column(String(255))
    mostrar_estoque = Column(Boolean, default=False)
    mostrar_mensagem_ultima_unidade = Column(Boolean, default=False)
    mensagem_ultima_unidade = Column(String(255), default="Atenção, última peça!")
    descricao_largura_total = Column(Boolean, default=False)
    permitir_comentarios_facebook = Column(Boolean, default=False)
    facebook_perfil_id = Column(String(255))
    titulo_produtos_alternativos = Column(String(255), default="Produtos similares")
    titulo_produtos_complementares = Column(String(255), default="Para comprar com esse produto")


class Newsletter(TemplateScopedMixin, Base):
    __tablename__ = "newsletters"

    aumentar_largura_tela = Column(Boolean, default=False)
    usar_cores_newsletter = Column(Boolean, default=False)
    cor_fundo = Column(String(7))
    cor_texto = Column(String(7))
    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    titulo = Column(String(255), default="Newsletter")
    descricao = Column(String(1000), default="Cadastre-se e receba nossas ofertas.")


class PopupPromocional(TemplateScopedMixin, Base):
    __tablename__ = "popups_promocionais"

    mostrar_popup = Column(Boolean, default=False)
    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    titulo = Column(String(255), nullable=False)
    descricao = Column(String(1000), nullable=False)
    texto_botao = Column(String(255), nullable=False)
    link_botao = Column(String(255), nullable=False)
    permitir_inscricao_newsletter = Column(Boolean, default=False)


class ProdutosEmDestaque(TemplateScopedMixin, Base):
    __tablename__ = "produtos_em_destaque"

    titulo = Column(String(255), default="Destaques")
    tipo_visualizacao = Column(String(20), default="Grade")
    produtos_por_linha_celulares = Column(Integer, default=2)
    produtos_por_linha_computadores = Column(Integer, default=4)


class ProdutosEmOferta(TemplateScopedMixin, Base):
    __tablename__ = "produtos_em_oferta"

    titulo = Column(String(255), default="Ofertas")
    tipo_visualizacao = Column(String(20), default="Carrossel")
    produtos_por_linha_celulares = Column(Integer, default=2)
    produtos_por_linha_computadores = Column(Integer, default=4)


class ProdutosNovos(TemplateScopedMixin, Base):
    __tablename__ = "produtos_novos"

    titulo = Column(String(255), default="Novidades")
    tipo_visualizacao = Column(String(20), default="Grade")
    produtos_por_linha_celulares = Column(Integer, default=2)
    produtos_por_linha_computadores = Column(Integer, default=3)


class TextosGt(TemplateScopedMixin, Base):
    __tablename__ = "textos_gts"

    titulo = Column(String(255), nullable=False)
    conteudo = Column(Text, nullable=False)
    tipo_texto = Column(String(20), nullable=False)


class Video(TemplateScopedMixin, Base):
    __tablename__ = "videos"

    aumentar_largura_tela = Column(Boolean, default=False)
    tipo_reproducao = Column(String(30), default="automatico_sem_som")
    link_youtube = Column(String(255), nullable=False)
    imagem = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    titulo = Column(String(255), nullable=False)
    descricao = Column(String(1000), nullable=False)
    texto_botao = Column(String(255))
    link_botao = Column(String(255))
