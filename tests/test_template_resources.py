import re

import pytest

from app.api.template_config import RESOURCES_BY_SLUG, TEMPLATE_RESOURCES
from app.core.storage import storage
from tests.conftest import JPEG_BYTES, PNG_BYTES, auth, stored_file_exists, stored_path

pytestmark = pytest.mark.anyio

SLUGS = [resource.slug for resource in TEMPLATE_RESOURCES]


def url(slug: str, template_id: int, record_id: int = None) -> str:
    path = f"/api/gestao-template/{slug}/{template_id}"
    return f"{path}/{record_id}" if record_id is not None else path


async def create_banner_estatico(client, seed, titulo="Summer Sale", filename="summer-sale.jpg"):
    return await client.post(
        url("banners-estaticos", seed.template_id),
        data={"titulo": titulo, "exibir": "true"},
        files={"imagem": (filename, JPEG_BYTES, "image/jpeg")},
        headers=auth(seed.owner_token),
    )


@pytest.mark.parametrize("slug", SLUGS)
async def test_listing_without_store_is_forbidden(client, seed, slug):
    response = await client.get(url(slug, seed.template_id), headers=auth(seed.orphan_token))

    assert response.status_code == 403
    assert response.json() == {"error": "Usuário não possui loja associada"}


@pytest.mark.parametrize("slug", SLUGS)
async def test_listing_without_token_is_unauthorized(client, seed, slug):
    response = await client.get(url(slug, seed.template_id))

    assert response.status_code == 401
    assert response.json() == {"error": "Não autorizado."}


@pytest.mark.parametrize("slug", SLUGS)
async def test_create_reports_every_missing_required_field(client, seed, slug):
    resource = RESOURCES_BY_SLUG[slug]
    required = {name for name, info in resource.create_schema.model_fields.items() if info.is_required()}
    required |= {rule.name for rule in resource.files if rule.required}

    response = await client.post(url(slug, seed.template_id), json={}, headers=auth(seed.owner_token))

    assert response.status_code == 422
    errors = response.json()["error"]
    assert required <= set(errors)
    for name in required:
        assert errors[name] == [f"O campo {name} é obrigatório."]


@pytest.mark.parametrize("slug", SLUGS)
async def test_empty_list_for_new_template(client, seed, slug):
    response = await client.get(url(slug, seed.template_id), headers=auth(seed.owner_token))

    assert response.status_code == 200
    assert response.json() == []


async def test_summer_sale_banner_is_created_with_public_url(client, seed):
    response = await create_banner_estatico(client, seed)

    assert response.status_code == 201
    body = response.json()
    assert body["titulo"] == "Summer Sale"
    assert body["exibir"] is True
    assert body["loja_id"] == seed.loja_id
    assert body["template_id"] == seed.template_id
    assert re.fullmatch(r"summer-sale-[A-Za-z0-9]{10}\.jpg", body["imagem"])
    assert body["imagem_path"] == (
        f"http://test/storage/loja-a/assets/gestaoTemplate/banner_estatico/{body['imagem']}"
    )
    assert stored_file_exists(body["imagem_path"])


async def test_summer_sale_banner_without_image_is_rejected(client, seed):
    response = await client.post(
        url("banners-estaticos", seed.template_id),
        data={"titulo": "Summer Sale", "exibir": "true"},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert response.json()["error"] == {"imagem": ["O campo imagem é obrigatório."]}


async def test_created_record_reads_back(client, seed):
    response = await client.post(
        url("banners-rotativos", seed.template_id),
        data={"largura_tela": "1", "efeito_movimento": "0"},
        files={
            "imagem_desktop": ("Vitrine Principal.png", PNG_BYTES, "image/png"),
            "imagem_mobile": ("vitrine-mobile.jpg", JPEG_BYTES, "image/jpeg"),
        },
        headers=auth(seed.owner_token),
    )
    assert response.status_code == 201
    created = response.json()

    response = await client.get(url("banners-rotativos", seed.template_id, created["id"]),
                                headers=auth(seed.owner_token))

    assert response.status_code == 200
    record = response.json()
    assert record == created
    assert record["largura_tela"] is True
    assert record["efeito_movimento"] is False
    assert record["imagem_desktop"].startswith("vitrine-principal-")
    assert record["imagem_mobile"].startswith("vitrine-mobile-")
    assert stored_file_exists(record["imagem_desktop_path"])
    assert stored_file_exists(record["imagem_mobile_path"])

    listing = await client.get(url("banners-rotativos", seed.template_id), headers=auth(seed.owner_token))
    assert [item["id"] for item in listing.json()] == [created["id"]]


async def test_optional_image_may_be_omitted(client, seed):
    response = await client.post(
        url("banners-rotativos", seed.template_id),
        data={"largura_tela": "true", "efeito_movimento": "true"},
        files={"imagem_desktop": ("desktop.jpg", JPEG_BYTES, "image/jpeg")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 201
    assert response.json()["imagem_mobile"] is None
    assert response.json()["imagem_mobile_path"] is None


async def test_partial_update_changes_only_supplied_fields(client, seed):
    created = await client.post(
        url("textos", seed.template_id),
        json={"titulo": "Boas vindas", "conteudo": "Texto do rodape", "tipo_texto": "Rodape"},
        headers=auth(seed.owner_token),
    )
    assert created.status_code == 201
    record_id = created.json()["id"]

    response = await client.patch(
        url("textos", seed.template_id, record_id),
        json={"titulo": "Bem-vindo"},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["titulo"] == "Bem-vindo"
    assert body["conteudo"] == "Texto do rodape"
    assert body["tipo_texto"] == "Rodape"


async def test_update_rejects_null_for_required_field(client, seed):
    created = await client.post(
        url("textos", seed.template_id),
        json={"titulo": "Titulo", "conteudo": "Conteudo", "tipo_texto": "Banner"},
        headers=auth(seed.owner_token),
    )

    response = await client.patch(
        url("textos", seed.template_id, created.json()["id"]),
        json={"titulo": None},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert response.json()["error"] == {"titulo": ["O campo titulo é obrigatório."]}


async def test_update_rejects_value_outside_enum(client, seed):
    created = await client.post(
        url("textos", seed.template_id),
        json={"titulo": "Titulo", "conteudo": "Conteudo", "tipo_texto": "Banner"},
        headers=auth(seed.owner_token),
    )

    response = await client.patch(
        url("textos", seed.template_id, created.json()["id"]),
        json={"tipo_texto": "Rodapé gigante"},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert "tipo_texto" in response.json()["error"]


async def test_update_replaces_stored_image(client, seed):
    created = (await create_banner_estatico(client, seed)).json()

    response = await client.patch(
        url("banners-estaticos", seed.template_id, created["id"]),
        files={"imagem": ("inverno.png", PNG_BYTES, "image/png")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["titulo"] == "Summer Sale"
    assert body["imagem"].startswith("inverno-")
    assert stored_file_exists(body["imagem_path"])
    assert not stored_file_exists(created["imagem_path"])


async def test_delete_removes_row_and_files(client, seed):
    created = (await create_banner_estatico(client, seed)).json()
    assert stored_file_exists(created["imagem_path"])

    response = await client.delete(url("banners-estaticos", seed.template_id, created["id"]),
                                   headers=auth(seed.owner_token))

    assert response.status_code == 200
    assert response.json() == {"message": "Banner estático deletado com sucesso"}
    assert not stored_file_exists(created["imagem_path"])

    response = await client.get(url("banners-estaticos", seed.template_id, created["id"]),
                                headers=auth(seed.owner_token))
    assert response.status_code == 404
    assert response.json() == {"error": "Banner estático não encontrado"}


async def test_missing_record_uses_feminine_message(client, seed):
    response = await client.get(url("marcas", seed.template_id, 999), headers=auth(seed.owner_token))

    assert response.status_code == 404
    assert response.json() == {"error": "Marca não encontrada"}


@pytest.mark.parametrize(
    "filename, content, expected",
    [
        ("notas.txt", b"apenas texto", "O campo imagem deve ser um arquivo do tipo: jpg, jpeg, png, webp."),
        ("falsa.jpg", b"GIF89a" + b"\x00" * 64, "O campo imagem deve ser um arquivo do tipo: jpg, jpeg, png, webp."),
        ("enorme.jpg", JPEG_BYTES + b"\x00" * (2049 * 1024), "O campo imagem não pode ser maior que 2048 kilobytes."),
    ],
)
async def test_invalid_upload_creates_nothing(client, seed, filename, content, expected):
    response = await client.post(
        url("banners-estaticos", seed.template_id),
        data={"titulo": "Summer Sale", "exibir": "true"},
        files={"imagem": (filename, content, "application/octet-stream")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert response.json()["error"] == {"imagem": [expected]}

    listing = await client.get(url("banners-estaticos", seed.template_id), headers=auth(seed.owner_token))
    assert listing.json() == []
    assert not (storage.root / "loja-a" / "assets" / "gestaoTemplate" / "banner_estatico").exists()


async def test_field_and_file_errors_are_reported_together(client, seed):
    response = await client.post(
        url("banners-estaticos", seed.template_id),
        data={"link": "nao-e-url", "exibir": "talvez"},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    errors = response.json()["error"]
    assert errors["link"] == ["O campo link deve ser uma URL válida."]
    assert errors["exibir"] == ["O campo exibir deve ser verdadeiro ou falso."]
    assert errors["imagem"] == ["O campo imagem é obrigatório."]


async def test_records_are_isolated_between_stores(client, seed):
    created = (await create_banner_estatico(client, seed)).json()
    record_url = url("banners-estaticos", seed.template_id, created["id"])

    assert (await client.get(record_url, headers=auth(seed.other_token))).status_code == 404
    assert (await client.patch(record_url, json={"titulo": "Invadido"},
                               headers=auth(seed.other_token))).status_code == 404
    assert (await client.delete(record_url, headers=auth(seed.other_token))).status_code == 404

    listing = await client.get(url("banners-estaticos", seed.template_id), headers=auth(seed.other_token))
    assert listing.json() == []

    own = await client.get(record_url, headers=auth(seed.owner_token))
    assert own.status_code == 200
    assert own.json()["titulo"] == "Summer Sale"
    assert stored_file_exists(created["imagem_path"])


async def test_records_are_isolated_between_templates(client, seed):
    created = (await create_banner_estatico(client, seed)).json()

    response = await client.get(url("banners-estaticos", seed.template_id + 1, created["id"]),
                                headers=auth(seed.owner_token))

    assert response.status_code == 404


async def test_create_for_unknown_template_is_not_found(client, seed):
    response = await client.post(
        url("checkouts", 999),
        json={"exibir_opcoes_entrega": True, "exibir_opcoes_pagamento": True, "exibir_resumo_pedido": False},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Template não encontrado"}


async def test_store_without_folder_uses_store_id(client, seed):
    response = await client.post(
        url("imagens", seed.template_id),
        files={"imagem": ("foto.webp", b"RIFF\x00\x00\x00\x00WEBPVP8 " + b"\x00" * 64, "image/webp")},
        headers=auth(seed.other_token),
    )

    assert response.status_code == 201
    path = stored_path(response.json()["imagem_path"])
    assert path.startswith(f"loja-{seed.outra_loja_id}/assets/gestaoTemplate/imagens_gt/foto-")
    assert path.endswith(".webp")


async def test_cabecalho_accepts_json_layout(client, seed):
    payload = {
        "cor_fundo": "#112233",
        "cor_texto_icones": "#ffffff",
        "tamanho_logo": "grande",
        "mostrar_idiomas": True,
        "barra_anuncio": {"texto": "Frete grátis", "ativo": True},
        "cabecalho_em_celulares": ["logo", "menu"],
    }

    response = await client.post(url("cabecalhos", seed.template_id), json=payload,
                                 headers=auth(seed.owner_token))

    assert response.status_code == 201
    body = response.json()
    assert body["barra_anuncio"] == {"texto": "Frete grátis", "ativo": True}
    assert body["cabecalho_em_celulares"] == ["logo", "menu"]
    assert body["cabecalho_em_computadores"] is None


async def test_cabecalho_form_parses_json_strings(client, seed):
    data = {
        "cor_fundo": "#000000",
        "cor_texto_icones": "#ffffff",
        "tamanho_logo": "pequeno",
        "mostrar_idiomas": "false",
        "barra_anuncio": '{"texto": "Promo"}',
    }

    invalid = await client.post(
        url("cabecalhos", seed.template_id),
        data={**data, "cabecalho_em_computadores": "{invalido"},
        headers=auth(seed.owner_token),
    )
    assert invalid.status_code == 422
    assert invalid.json()["error"] == {
        "cabecalho_em_computadores": ["O campo cabecalho_em_computadores deve ser um JSON válido."]
    }

    response = await client.post(url("cabecalhos", seed.template_id), data=data,
                                 headers=auth(seed.owner_token))
    assert response.status_code == 201
    assert response.json()["barra_anuncio"] == {"texto": "Promo"}
    assert response.json()["mostrar_idiomas"] is False


async def test_banner_categoria_must_reference_own_category(client, seed):
    data = {
        "mostrar_texto_fora_imagem": "true",
        "mostrar_banners_carrossel": "false",
        "mesma_altura_banners": "false",
        "remover_espacos_banners": "false",
        "banners_por_linha": "3",
        "carregar_imagens_celular": "false",
    }
    files = {"imagem_desktop": ("categoria.jpg", JPEG_BYTES, "image/jpeg")}

    foreign = await client.post(
        url("banners-categorias", seed.template_id),
        data={**data, "categoria_id": str(seed.outra_categoria_id)},
        files=files,
        headers=auth(seed.owner_token),
    )
    assert foreign.status_code == 422
    assert foreign.json()["error"] == {"categoria_id": ["O campo categoria_id selecionado é inválido."]}

    own = await client.post(
        url("banners-categorias", seed.template_id),
        data={**data, "categoria_id": str(seed.categoria_id)},
        files=files,
        headers=auth(seed.owner_token),
    )
    assert own.status_code == 201
    assert own.json()["categoria_id"] == seed.categoria_id
    assert own.json()["banners_por_linha"] == 3


async def test_banners_por_linha_is_bounded(client, seed):
    response = await client.post(
        url("banners-novidades", seed.template_id),
        data={
            "produto_id": str(seed.produto_id),
            "mostrar_texto_fora_imagem": "true",
            "mostrar_banners_carrossel": "true",
            "mesma_altura_banners": "true",
            "remover_espacos_banners": "true",
            "banners_por_linha": "11",
            "carregar_imagens_celular": "true",
        },
        files={"imagem_desktop": ("novidade.jpg", JPEG_BYTES, "image/jpeg")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert response.json()["error"] == {"banners_por_linha": ["O campo banners_por_linha não pode ser maior que 10."]}


async def test_carrinho_stores_decimal_value(client, seed):
    payload = {
        "mostrar_botao_ver_mais": True,
        "valor_minimo_compra": "150.50",
        "carrinho_rapido": False,
        "sugerir_produtos_complementares": True,
        "mostrar_calculadora_frete": True,
    }

    response = await client.post(url("carrinhos", seed.template_id), json=payload,
                                 headers=auth(seed.owner_token))
    assert response.status_code == 201
    assert response.json()["valor_minimo_compra"] == 150.5

    negative = await client.post(url("carrinhos", seed.template_id),
                                 json={**payload, "valor_minimo_compra": "-1"},
                                 headers=auth(seed.owner_token))
    assert negative.status_code == 422
    assert "valor_minimo_compra" in negative.json()["error"]


async def test_mostrar_produto_requires_message_when_flag_is_set(client, seed):
    payload = {
        "mostrar_calculadora_frete": True,
        "mostrar_parcelas": True,
        "mostrar_preco_desconto": False,
        "variacoes_como_botoes": False,
        "variacoes_cor_como_foto": False,
        "mostrar_estoque": True,
        "mostrar_mensagem_ultima_unidade": True,
        "descricao_largura_total": False,
        "permitir_comentarios_facebook": False,
        "titulo_produtos_alternativos": "Similares",
        "titulo_produtos_complementares": "Compre junto",
    }

    response = await client.post(url("mostrar-produto", seed.template_id), json=payload,
                                 headers=auth(seed.owner_token))
    assert response.status_code == 422
    assert response.json()["error"] == {
        "mensagem_ultima_unidade": [
            "O campo mensagem_ultima_unidade é obrigatório quando mostrar_mensagem_ultima_unidade é verdadeiro."
        ]
    }

    response = await client.post(url("mostrar-produto", seed.template_id),
                                 json={**payload, "mensagem_ultima_unidade": "Última peça!"},
                                 headers=auth(seed.owner_token))
    assert response.status_code == 201
    assert response.json()["mensagem_ultima_unidade"] == "Última peça!"
    assert response.json()["facebook_perfil_id"] is None


async def test_info_frete_requires_both_images(client, seed):
    response = await client.post(
        url("info-frete-pagamento", seed.template_id),
        data={
            "usar_cores_secao": "true",
            "cor_fundo": "#ABCDEF",
            "mostrar_banners_home": "false",
            "titulo": "Frete grátis",
            "descricao": "Acima de R$ 200",
            "link": "https://loja.example.com/frete",
        },
        files={"imagem": ("frete.jpg", JPEG_BYTES, "image/jpeg")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert response.json()["error"] == {"icone": ["O campo icone é obrigatório."]}


async def test_hex_color_is_validated(client, seed):
    response = await client.post(
        url("newsletters", seed.template_id),
        data={
            "aumentar_largura_tela": "false",
            "usar_cores_newsletter": "true",
            "cor_fundo": "vermelho",
            "titulo": "Newsletter",
            "descricao": "Receba ofertas",
        },
        files={"imagem": ("news.png", PNG_BYTES, "image/png")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert "cor_fundo" in response.json()["error"]


async def test_rejected_upload_keeps_record_and_file(client, seed):
    created = (await create_banner_estatico(client, seed)).json()

    response = await client.patch(
        url("banners-estaticos", seed.template_id, created["id"]),
        data={"titulo": "Winter Sale"},
        files={"imagem": ("notas.txt", b"apenas texto", "text/plain")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert "imagem" in response.json()["error"]
    assert stored_file_exists(created["imagem_path"])

    current = await client.get(url("banners-estaticos", seed.template_id, created["id"]),
                               headers=auth(seed.owner_token))
    assert current.json()["titulo"] == "Summer Sale"
    assert current.json()["imagem_path"] == created["imagem_path"]


async def test_delete_removes_every_image_of_the_record(client, seed):
    created = await client.post(
        url("info-frete-pagamento", seed.template_id),
        data={
            "usar_cores_secao": "true",
            "cor_fundo": "#ABCDEF",
            "mostrar_banners_home": "false",
            "titulo": "Frete grátis",
            "descricao": "Acima de R$ 200",
            "link": "https://loja.example.com/frete",
        },
        files={
            "imagem": ("frete.jpg", JPEG_BYTES, "image/jpeg"),
            "icone": ("caminhao.png", PNG_BYTES, "image/png"),
        },
        headers=auth(seed.owner_token),
    )
    assert created.status_code == 201
    body = created.json()
    assert stored_file_exists(body["imagem_path"])
    assert stored_file_exists(body["icone_path"])

    response = await client.delete(url("info-frete-pagamento", seed.template_id, body["id"]),
                                   headers=auth(seed.owner_token))

    assert response.status_code == 200
    assert response.json() == {"message": "Informação de frete e pagamento deletada com sucesso"}
    assert not stored_file_exists(body["imagem_path"])
    assert not stored_file_exists(body["icone_path"])


@pytest.mark.parametrize("method", ["get", "patch", "delete"])
async def test_record_id_beyond_integer_range(client, seed, method):
    response = await client.request(method.upper(), url("checkouts", seed.template_id, 10**20),
                                    headers=auth(seed.owner_token))

    assert response.status_code == 422
    assert "record_id" in response.json()["error"]


async def test_template_id_beyond_integer_range(client, seed):
    response = await client.post(url("checkouts", 10**20), json={}, headers=auth(seed.owner_token))

    assert response.status_code == 422
    assert "template_id" in response.json()["error"]


async def test_reference_beyond_integer_range(client, seed):
    response = await client.post(
        url("banners-categorias", seed.template_id),
        data={
            "categoria_id": str(10**20),
            "mostrar_texto_fora_imagem": "true",
            "mostrar_banners_carrossel": "false",
            "mesma_altura_banners": "false",
            "remover_espacos_banners": "false",
            "banners_por_linha": "3",
            "carregar_imagens_celular": "false",
        },
        files={"imagem_desktop": ("categoria.jpg", JPEG_BYTES, "image/jpeg")},
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert list(response.json()["error"]) == ["categoria_id"]


async def test_decimal_whole_digits_message(client, seed):
    response = await client.post(
        url("carrinhos", seed.template_id),
        json={
            "mostrar_botao_ver_mais": True,
            "valor_minimo_compra": "123456789.5",
            "carrinho_rapido": False,
            "sugerir_produtos_complementares": True,
            "mostrar_calculadora_frete": True,
        },
        headers=auth(seed.owner_token),
    )

    assert response.status_code == 422
    assert response.json()["error"] == {
        "valor_minimo_compra": ["O campo valor_minimo_compra deve ter no máximo 8 dígitos antes da vírgula."]
    }
