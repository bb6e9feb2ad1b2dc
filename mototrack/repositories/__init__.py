"""Repositories package."""
from mototrack.repositories.base import Repository, SqlAlchemyRepository
from mototrack.repositories.agendamento_repository import AgendamentoRepository
from mototrack.repositories.evento_repository import EventoRepository
from mototrack.repositories.filial_repository import FilialRepository
from mototrack.repositories.moto_repository import MotoRepository
from mototrack.repositories.usuario_repository import UsuarioRepository

__all__ = [
    "Repository",
    "SqlAlchemyRepository",
    "AgendamentoRepository",
    "EventoRepository",
    "FilialRepository",
    "MotoRepository",
    "UsuarioRepository",
]
