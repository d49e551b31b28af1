from .auth import router as auth_router
from .template_config import router as template_config_router
from .idiomas import router as idiomas_router
from .tarefas import router as tarefas_router
from .clima import router as clima_router

__all__ = [
    "auth_router",
    "template_config_router",
    "idiomas_router",
    "tarefas_router",
    "clima_router"
]
