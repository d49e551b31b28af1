from .store import Loja, Template, User
from .catalog import Categoria, Produto
from .idioma import Idioma
from .tarefa import Tarefa, TarefaStatus
from .template_config import (
    Anuncio,
    BannerEstatico,
    BannerPromocional,
    BannerRotativo,
    BannersCategoriasGt,
    BannersNovidades,
    Cabecalho,
    CarrinhoGt,
    CheckoutGt,
    Depoimento,
    FavoritosGt,
    ImagensGt,
    InfoFretePagamento,
    MarcaGt,
    MensagemInstitucional,
    MostrarProduto,
    Newsletter,
    PopupPromocional,
    ProdutosEmDestaque,
    ProdutosEmOferta,
    ProdutosNovos,
    TextosGt,
    Video,
)

__all__ = [
    "Loja",
    "Template",
    "User",
    "Categoria",
    "Produto",
    "Idioma",
    "Tarefa",
    "TarefaStatus",
    "Anuncio",
    "BannerEstatico",
    "BannerPromocional",
    "BannerRotativo",
    "BannersCategoriasGt",
    "BannersNovidades",
    "Cabecalho",
    "CarrinhoGt",
    "CheckoutGt",
    "Depoimento",
    "FavoritosGt",
    "ImagensGt",
    "InfoFretePagamento",
    "MarcaGt",
    "MensagemInstitucional",
    "MostrarProduto",
    "Newsletter",
    "PopupPromocional",
    "ProdutosEmDestaque",
    "ProdutosEmOferta",
    "ProdutosNovos",
    "TextosGt",
    "Video",
]
