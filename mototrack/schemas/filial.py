from pydantic import Field

from mototrack.schemas.base import CamelModel
from mototrack.schemas.validation import not_blank


class FilialRequest(CamelModel):
    nome: str | None = Field(default=None, examples=["Filial Lapa"])
    endereco: str | None = Field(default=None, examples=["Rua Clélia, 1000"])
    bairro: str | None = Field(default=None, examples=["Lapa"])
    cidade: str | None = Field(default=None, examples=["São Paulo"])
    estado: str | None = Field(default=None, description="UF", examples=["SP"])
    cep: str | None = Field(default=None, examples=["05042-000"])
    latitude: float | None = Field(default=None, examples=[-23.530123])
    longitude: float | None = Field(default=None, examples=[-46.678456])
    raio_geofence_metros: float | None = Field(
        default=None,
        description="Raio de geofencing em metros",
        examples=[100.0],
    )


FILIAL_REQUEST_RULES = (
    not_blank("nome", "O nome da filial é obrigatório."),
)


class FilialResponse(CamelModel):
    id: int
    nome: str
    endereco: str | None = None
    bairro: str | None = None
    cidade: str | None = None
    estado: str | None = None
    cep: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    raio_geofence_metros: float | None = None
