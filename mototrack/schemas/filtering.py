"""Filter objects for the ``/filtro`` endpoints.

Every field is optional; ``None`` (or a blank string) leaves the field
unconstrained. Instances are immutable and live for a single request.
"""
from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseFilter(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def applied(self) -> dict:
        """Fields that actually carry a value, keyed by their public names."""
        return {
            to_camel(k): v.isoformat() if isinstance(v, date) else v
            for k, v in self.model_dump().items()
            if v is not None and not (isinstance(v, str) and not v.strip())
        }


class MotoFilter(BaseFilter):
    id: int | None = None
    placa: str | None = None
    modelo: str | None = None
    marca: str | None = None
    status: str | None = None
    ano_min: int | None = None
    ano_max: int | None = None
    filial_id: int | None = None
    data_criacao_inicio: date | None = None
    data_criacao_fim: date | None = None


class FilialFilter(BaseFilter):
    id: int | None = None
    nome: str | None = None
    bairro: str | None = None
    cidade: str | None = None
    estado: str | None = None
    cep: str | None = None


class UsuarioFilter(BaseFilter):
    id: int | None = None
    filial_id: int | None = None
    nome: str | None = None
    email: str | None = None
    perfil: str | None = None


class EventoFilter(BaseFilter):
    id: int | None = None
    moto_id: int | None = None
    tipo: str | None = None
    motivo: str | None = None
    localizacao: str | None = None
    data_inicio: date | None = None
    data_fim: date | None = None


class AgendamentoFilter(BaseFilter):
    id: int | None = None
    moto_id: int | None = None
    descricao: str | None = None
    data_inicio: date | None = None
    data_fim: date | None = None
