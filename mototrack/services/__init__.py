"""Service layer: one service per resource, built per request."""
from mototrack.services.agendamento import AgendamentoService
from mototrack.services.evento import EventoService
from mototrack.services.filial import FilialService
from mototrack.services.moto import MotoService
from mototrack.services.usuario import UsuarioService

__all__ = [
    "AgendamentoService",
    "EventoService",
    "FilialService",
    "MotoService",
    "UsuarioService",
]
