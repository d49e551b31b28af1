"""
Gestao de Template API - Validation
Converte erros do pydantic para o mapa campo -> mensagens e valida uploads de imagem
"""
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError
from starlette.datastructures import UploadFile

ALLOWED_IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "webp")

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xFF\xD8\xFF"
RIFF_SIGNATURE = b"RIFF"
WEBP_SIGNATURE = b"WEBP"

# maior id aceito pela coluna INTEGER do SQLite
MAX_RECORD_ID = 2**63 - 1

# Mensagens por tipo de erro do pydantic
ERROR_MESSAGES = {
    "missing": "O campo {field} é obrigatório.",
    "string_type": "O campo {field} deve ser um texto.",
    "string_too_short": "O campo {field} deve ter pelo menos {min_length} caracteres.",
    "string_too_long": "O campo {field} não pode ter mais de {max_length} caracteres.",
    "string_pattern_mismatch": "O formato do campo {field} é inválido.",
    "bool_type": "O campo {field} deve ser verdadeiro ou falso.",
    "bool_parsing": "O campo {field} deve ser verdadeiro ou falso.",
    "int_type": "O campo {field} deve ser um número inteiro.",
    "int_parsing": "O campo {field} deve ser um número inteiro.",
    "int_from_float": "O campo {field} deve ser um número inteiro.",
    "decimal_type": "O campo {field} deve ser um número.",
    "decimal_parsing": "O campo {field} deve ser um número.",
    "decimal_max_digits": "O campo {field} deve ter no máximo {max_digits} dígitos.",
    "decimal_max_places": "O campo {field} deve ter no máximo {decimal_places} casas decimais.",
    "decimal_whole_digits": "O campo {field} deve ter no máximo {whole_digits} dígitos antes da vírgula.",
    "greater_than_equal": "O campo {field} deve ser pelo menos {ge}.",
    "less_than_equal": "O campo {field} não pode ser maior que {le}.",
    "literal_error": "O valor selecionado para {field} é inválido.",
    "enum": "O valor selecionado para {field} é inválido.",
    "dict_type": "O campo {field} deve ser uma lista ou objeto.",
    "list_type": "O campo {field} deve ser uma lista ou objeto.",
    "url_invalid": "O campo {field} deve ser uma URL válida.",
    "json_invalid_field": "O campo {field} deve ser um JSON válido.",
    "required_if": "O campo {field} é obrigatório quando {other} é verdadeiro.",
    "value_error": "{error}",
}

_LOCATION_PREFIXES = ("body", "query", "path", "form", "header")


def _field_name(loc: Iterable[Any]) -> str:
    for part in loc:
        if isinstance(part, str) and part not in _LOCATION_PREFIXES:
            return part
    return "payload"


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, List[str]]:
    """Agrupa erros do pydantic por campo, com mensagens em portugues"""
    formatted: Dict[str, List[str]] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        error_type = error.get("type", "")
        # null explicito em campo obrigatorio conta como ausente
        if error_type.endswith("_type") and error.get("input", "") is None:
            error_type = "missing"
        template = ERROR_MESSAGES.get(error_type)
        if template:
            message = template.format(field=field, **(error.get("ctx") or {}))
        else:
            message = error.get("msg", "Valor inválido.")
        messages = formatted.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return formatted


def validate_payload(schema: Type[BaseModel], data: Mapping[str, Any]) -> Tuple[dict, Dict[str, List[str]]]:
    """
    Valida o payload contra o schema.
    Retorna (valores enviados, erros). Campos nao enviados ficam de fora
    para que os defaults do banco e a semantica "sometimes" sejam preservados.
    """
    try:
        model = schema.model_validate(dict(data))
    except ValidationError as exc:
        return {}, format_validation_errors(exc.errors())
    return model.model_dump(exclude_unset=True), {}


@dataclass(frozen=True)
class UploadRule:
    """Campo de imagem de um recurso"""
    name: str
    required: bool = False

    @property
    def path_attr(self) -> str:
        return f"{self.name}_path"


@dataclass
class PreparedUpload:
    """Upload ja validado e lido em memoria"""
    field: str
    original_name: str
    extension: str
    content: bytes


def matches_image_signature(content: bytes) -> bool:
    if content.startswith(PNG_SIGNATURE) or content.startswith(JPEG_SIGNATURE):
        return True
    return content[:4] == RIFF_SIGNATURE and content[8:12] == WEBP_SIGNATURE


def _extension(filename: str) -> str:
    return os.path.splitext(filename)[1].lstrip(".").lower()


async def prepare_uploads(
    rules: Iterable[UploadRule],
    uploads: Mapping[str, UploadFile],
    partial: bool,
    max_kb: int,
) -> Tuple[Dict[str, PreparedUpload], Dict[str, List[str]]]:
    """
    Valida os arquivos enviados (tipo, assinatura e tamanho).
    Nada e gravado aqui: a gravacao so acontece depois de toda a validacao.
    """
    prepared: Dict[str, PreparedUpload] = {}
    errors: Dict[str, List[str]] = {}
    allowed = ", ".join(ALLOWED_IMAGE_EXTENSIONS)

    for rule in rules:
        upload: Optional[UploadFile] = uploads.get(rule.name)
        if upload is None:
            if rule.required and not partial:
                errors[rule.name] = [f"O campo {rule.name} é obrigatório."]
            continue

        content = await upload.read()
        extension = _extension(upload.filename or "")
        field_errors = []

        if extension not in ALLOWED_IMAGE_EXTENSIONS or not matches_image_signature(content):
            field_errors.append(f"O campo {rule.name} deve ser um arquivo do tipo: {allowed}.")
        if len(content) > max_kb * 1024:
            field_errors.append(f"O campo {rule.name} não pode ser maior que {max_kb} kilobytes.")

        if field_errors:
            errors[rule.name] = field_errors
            continue

        prepared[rule.name] = PreparedUpload(
            field=rule.name,
            original_name=upload.filename,
            extension=extension,
            content=content,
        )

    return prepared, errors
