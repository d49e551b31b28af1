"""
Gestao de Template API - Common Schema Types
Tipos reutilizados pelos schemas de configuracao do template
"""
import json
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import AfterValidator, AnyHttpUrl, BeforeValidator, Field, StringConstraints, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from app.core.validation import MAX_RECORD_ID

_http_url = TypeAdapter(AnyHttpUrl)


def _check_http_url(value: str) -> str:
    # Valida como URL mas persiste o texto original
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_invalid", "Invalid URL")
    return value


def _parse_json(value: Any) -> Any:
    # Formularios enviam o JSON como texto
    if isinstance(value, (str, bytes)):
        try:
            return json.loads(value)
        except ValueError:
            raise PydanticCustomError("json_invalid_field", "Invalid JSON")
    return value


Str10 = Annotated[str, StringConstraints(max_length=10)]
Str255 = Annotated[str, StringConstraints(max_length=255)]
Str1000 = Annotated[str, StringConstraints(max_length=1000)]

HexColor = Annotated[str, StringConstraints(max_length=7, pattern=r"^#[0-9A-Fa-f]{6}$")]
ColorCode = Annotated[str, StringConstraints(max_length=7)]

HttpUrlStr = Annotated[str, StringConstraints(max_length=255), AfterValidator(_check_http_url)]

RecordId = Annotated[int, Field(le=MAX_RECORD_ID)]

PerRow = Annotated[int, Field(ge=1, le=10)]

Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]

LayoutConfig = Annotated[Optional[Union[Dict[str, Any], List[Any]]], BeforeValidator(_parse_json)]


def required_if(value: Any, data: Dict[str, Any], flag: str) -> Any:
    """Exige o valor quando o campo booleano `flag` for verdadeiro"""
    if data.get(flag) is True and (value is None or value == ""):
        raise PydanticCustomError("required_if", "Field required", {"other": flag})
    return value
