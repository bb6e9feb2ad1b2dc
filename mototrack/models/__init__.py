"""Database models."""
from mototrack.models.filial import Filial
from mototrack.models.moto import Moto
from mototrack.models.usuario import Usuario
from mototrack.models.evento import Evento
from mototrack.models.agendamento import Agendamento

__all__ = [
    "Filial",
    "Moto",
    "Usuario",
    "Evento",
    "Agendamento",
]
