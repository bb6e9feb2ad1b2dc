"""Shared dependencies for API routes.

Services are built per request from the request's database session. Filter
and paging parameters are read from the query string under their public
camelCase names.
"""
from datetime import date
from typing import Callable

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.config.settings import get_settings
from mototrack.core.pagination import parse_sort
from mototrack.db.database import get_db
from mototrack.repositories import (
    AgendamentoRepository,
    EventoRepository,
    FilialRepository,
    MotoRepository,
    SqlAlchemyRepository,
    UsuarioRepository,
)
from mototrack.schemas.filtering import (
    AgendamentoFilter,
    EventoFilter,
    FilialFilter,
    MotoFilter,
    UsuarioFilter,
)
from mototrack.schemas.pagination import PageRequest
from mototrack.services import (
    AgendamentoService,
    EventoService,
    FilialService,
    MotoService,
    UsuarioService,
)

settings = get_settings()


async def get_moto_service(db: AsyncSession = Depends(get_db)) -> MotoService:
    return MotoService(db)


async def get_filial_service(db: AsyncSession = Depends(get_db)) -> FilialService:
    return FilialService(db)


async def get_usuario_service(db: AsyncSession = Depends(get_db)) -> UsuarioService:
    return UsuarioService(db)


async def get_evento_service(db: AsyncSession = Depends(get_db)) -> EventoService:
    return EventoService(db)


async def get_agendamento_service(db: AsyncSession = Depends(get_db)) -> AgendamentoService:
    return AgendamentoService(db)


def page_request_for(repository: type[SqlAlchemyRepository]) -> Callable[..., PageRequest]:
    """Build a dependency that reads ``page``/``size``/``sort`` for one resource."""
    allowed = tuple(repository.sortable)

    async def get_page_request(
        page: int = Query(0, ge=0, description="Page number (0-based)"),
        size: int = Query(
            settings.default_page_size,
            ge=1,
            le=settings.max_page_size,
            description="Number of items per page",
        ),
        sort: list[str] | None = Query(
            None,
            description=f"field[,asc|desc]; one of: {', '.join(allowed)}",
        ),
    ) -> PageRequest:
        return PageRequest(page=page, size=size, sort=parse_sort(sort, allowed))

    return get_page_request


async def get_moto_filter(
    id: int | None = Query(None, description="Filter by ID"),
    placa: str | None = Query(None, description="Plate contains (case-insensitive)"),
    modelo: str | None = Query(None, description="Model contains (case-insensitive)"),
    marca: str | None = Query(None, description="Brand contains (case-insensitive)"),
    status: str | None = Query(None, description="Status equals (case-insensitive)"),
    ano_min: int | None = Query(None, alias="anoMin", description="Minimum year"),
    ano_max: int | None = Query(None, alias="anoMax", description="Maximum year"),
    filial_id: int | None = Query(None, alias="filialId", description="Filter by filial ID"),
    data_criacao_inicio: date | None = Query(None, alias="dataCriacaoInicio"),
    data_criacao_fim: date | None = Query(None, alias="dataCriacaoFim"),
) -> MotoFilter:
    return MotoFilter(
        id=id,
        placa=placa,
        modelo=modelo,
        marca=marca,
        status=status,
        ano_min=ano_min,
        ano_max=ano_max,
        filial_id=filial_id,
        data_criacao_inicio=data_criacao_inicio,
        data_criacao_fim=data_criacao_fim,
    )


async def get_filial_filter(
    id: int | None = Query(None, description="Filter by ID"),
    nome: str | None = Query(None),
    bairro: str | None = Query(None),
    cidade: str | None = Query(None),
    estado: str | None = Query(None, description="State equals (case-insensitive)"),
    cep: str | None = Query(None),
) -> FilialFilter:
    return FilialFilter(id=id, nome=nome, bairro=bairro, cidade=cidade, estado=estado, cep=cep)


async def get_usuario_filter(
    id: int | None = Query(None, description="Filter by ID"),
    filial_id: int | None = Query(None, alias="filialId"),
    nome: str | None = Query(None),
    email: str | None = Query(None),
    perfil: str | None = Query(None, description="Profile equals (case-insensitive)"),
) -> UsuarioFilter:
    return UsuarioFilter(id=id, filial_id=filial_id, nome=nome, email=email, perfil=perfil)


async def get_evento_filter(
    id: int | None = Query(None, description="Filter by ID"),
    moto_id: int | None = Query(None, alias="motoId"),
    tipo: str | None = Query(None, description="Type equals (case-insensitive)"),
    motivo: str | None = Query(None),
    localizacao: str | None = Query(None),
    data_inicio: date | None = Query(None, alias="dataInicio", description="YYYY-MM-DD, inclusive"),
    data_fim: date | None = Query(None, alias="dataFim", description="YYYY-MM-DD, inclusive"),
) -> EventoFilter:
    return EventoFilter(
        id=id,
        moto_id=moto_id,
        tipo=tipo,
        motivo=motivo,
        localizacao=localizacao,
        data_inicio=data_inicio,
        data_fim=data_fim,
    )


async def get_agendamento_filter(
    id: int | None = Query(None, description="Filter by ID"),
    moto_id: int | None = Query(None, alias="motoId"),
    descricao: str | None = Query(None),
    data_inicio: date | None = Query(None, alias="dataInicio", description="YYYY-MM-DD, inclusive"),
    data_fim: date | None = Query(None, alias="dataFim", description="YYYY-MM-DD, inclusive"),
) -> AgendamentoFilter:
    return AgendamentoFilter(
        id=id,
        moto_id=moto_id,
        descricao=descricao,
        data_inicio=data_inicio,
        data_fim=data_fim,
    )


moto_page_request = page_request_for(MotoRepository)
filial_page_request = page_request_for(FilialRepository)
usuario_page_request = page_request_for(UsuarioRepository)
evento_page_request = page_request_for(EventoRepository)
agendamento_page_request = page_request_for(AgendamentoRepository)
