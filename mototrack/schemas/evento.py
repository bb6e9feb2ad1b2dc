from pydantic import Field

from mototrack.schemas.base import CamelModel
from mototrack.schemas.datetime import RequestDateTime, ResponseDateTime
from mototrack.schemas.validation import future_or_present, not_blank, not_null


class EventoRequest(CamelModel):
    moto_id: int | None = Field(default=None, examples=[1])
    tipo: str | None = Field(default=None, description="Entrada, Saída, Manutenção...", examples=["Saída"])
    motivo: str | None = Field(default=None, examples=["Entrega programada para zona sul"])
    data_hora: RequestDateTime = Field(
        default=None,
        description="dd/MM/yyyy HH:mm:ss; defaults to now",
        examples=["01/06/2025 14:00:00"],
    )
    localizacao: str | None = Field(default=None, examples=["Pátio Lapa - São Paulo"])


EVENTO_REQUEST_RULES = (
    not_null("moto_id", "O ID da moto é obrigatório."),
    not_blank("tipo", "O tipo do evento é obrigatório."),
    not_blank("motivo", "O motivo do evento é obrigatório."),
    future_or_present("data_hora", "A data do evento não pode estar no passado."),
)


class EventoResponse(CamelModel):
    id: int
    moto_id: int
    tipo: str
    motivo: str
    data_hora: ResponseDateTime = None
    localizacao: str | None = None
