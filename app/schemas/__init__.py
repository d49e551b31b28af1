from .auth import LoginRequest, LoginResponse, UserResponse
from .idioma import IdiomaCreate, IdiomaUpdate
from .tarefa import TarefaCreate, TarefaUpdate, TarefaResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    "IdiomaCreate",
    "IdiomaUpdate",
    "TarefaCreate",
    "TarefaUpdate",
    "TarefaResponse",
]
