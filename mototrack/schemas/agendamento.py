from pydantic import Field

from mototrack.schemas.base import CamelModel
from mototrack.schemas.datetime import RequestDateTime, ResponseDateTime
from mototrack.schemas.validation import future_or_present, not_blank, not_null


class AgendamentoRequest(CamelModel):
    moto_id: int | None = Field(default=None, examples=[1])
    data_agendada: RequestDateTime = Field(
        default=None,
        description="dd/MM/yyyy HH:mm:ss, not in the past",
        examples=["01/06/2030 14:00:00"],
    )
    descricao: str | None = Field(default=None, examples=["Troca de óleo e revisão geral"])


AGENDAMENTO_REQUEST_RULES = (
    not_null("moto_id", "O ID da moto é obrigatório."),
    not_null("data_agendada", "A data agendada é obrigatória."),
    future_or_present("data_agendada", "A data agendada não pode estar no passado."),
    not_blank("descricao", "A descrição é obrigatória."),
)


class AgendamentoResponse(CamelModel):
    id: int
    moto_id: int
    data_agendada: ResponseDateTime = None
    descricao: str
