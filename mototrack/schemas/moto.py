from pydantic import Field

from mototrack.schemas.base import CamelModel
from mototrack.schemas.validation import minimum, not_blank


class MotoRequest(CamelModel):
    placa: str | None = Field(default=None, description="Placa da moto (única)", examples=["ABC1234"])
    modelo: str | None = Field(default=None, examples=["CG 160"])
    marca: str | None = Field(default=None, examples=["Honda"])
    ano: int | None = Field(default=None, description="Ano de fabricação (mínimo 2000)", examples=[2022])
    status: str | None = Field(default=None, examples=["Disponível"])
    filial_id: int | None = Field(default=None, description="ID da filial vinculada", examples=[1])
    latitude: float | None = Field(default=None, examples=[-23.567890])
    longitude: float | None = Field(default=None, examples=[-46.654321])


MOTO_REQUEST_RULES = (
    not_blank("placa", "A placa é obrigatória."),
    not_blank("modelo", "O modelo é obrigatório."),
    not_blank("marca", "A marca é obrigatória."),
    minimum("ano", 2000, "O ano deve ser no mínimo 2000."),
    not_blank("status", "O status é obrigatório."),
)


class MotoResponse(CamelModel):
    id: int
    placa: str
    modelo: str
    marca: str
    ano: int
    status: str
    filial_id: int | None = None
    latitude: float | None = None
    longitude: float | None = None
