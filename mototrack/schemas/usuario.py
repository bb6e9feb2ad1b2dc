from pydantic import Field

from mototrack.schemas.base import CamelModel
from mototrack.schemas.validation import email, not_blank


class UsuarioRequest(CamelModel):
    nome: str | None = Field(default=None, examples=["João da Silva"])
    email: str | None = Field(default=None, examples=["joao.silva@example.com"])
    senha: str | None = Field(default=None, examples=["SenhaForte123!"])
    perfil: str | None = Field(
        default=None,
        description="Perfil de acesso (OPERADOR, GESTOR, ADMINISTRADOR)",
        examples=["ADMINISTRADOR"],
    )
    filial_id: int | None = Field(default=None, examples=[1])


USUARIO_REQUEST_RULES = (
    not_blank("nome", "O nome é obrigatório."),
    not_blank("email", "O email é obrigatório."),
    email("email", "Email inválido."),
    not_blank("senha", "A senha é obrigatória."),
    not_blank("perfil", "O perfil é obrigatório."),
)


class UsuarioResponse(CamelModel):
    """The password hash is never part of a response."""

    id: int
    nome: str
    email: str
    perfil: str
    filial_id: int | None = None
