"""API routes module."""
from mototrack.api.routes.agendamentos import router as agendamentos_router
from mototrack.api.routes.eventos import router as eventos_router
from mototrack.api.routes.filiais import router as filiais_router
from mototrack.api.routes.health import router as health_router
from mototrack.api.routes.motos import router as motos_router
from mototrack.api.routes.usuarios import router as usuarios_router

__all__ = [
    "agendamentos_router",
    "eventos_router",
    "filiais_router",
    "health_router",
    "motos_router",
    "usuarios_router",
]
