"""
Gestao de Template API - Idioma Schemas
"""
from typing import Annotated

from pydantic import BaseModel, StringConstraints

# pt, en, pt-BR, en-US...
CodigoIdioma = Annotated[str, StringConstraints(max_length=10, pattern=r"(?i)^[a-z]{2}(-[a-z]{2})?$")]


class IdiomaCreate(BaseModel):
    codigo_idioma: CodigoIdioma


class IdiomaUpdate(BaseModel):
    codigo_idioma: CodigoIdioma = None
