"""
Gestao de Template API - Idiomas API
Idiomas da loja: mesmo CRUD dos recursos do template, sem o segmento de template
"""
from app.api.resources import build_resource_router
from app.models import Idioma
from app.schemas import IdiomaCreate, IdiomaUpdate
from app.services.scoped_crud import ResourceMessages, ResourceSpec

IDIOMA_RESOURCE = ResourceSpec(
    slug="idiomas",
    model=Idioma,
    create_schema=IdiomaCreate,
    update_schema=IdiomaUpdate,
    messages=ResourceMessages.for_label("Idioma", "idiomas"),
    template_scoped=False,
    unique_fields=("codigo_idioma",),
    tag="Idiomas",
)

router = build_resource_router(IDIOMA_RESOURCE)
