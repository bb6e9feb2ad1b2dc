"""API routes for agendamentos."""
from fastapi import APIRouter, Depends, Response, status

from mototrack.api.routes.dependencies import get_agendamento_filter, get_agendamento_service, agendamento_page_request
from mototrack.schemas.filtering import AgendamentoFilter
from mototrack.schemas.agendamento import AgendamentoRequest, AgendamentoResponse
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.services import AgendamentoService

router = APIRouter()


@router.post("", response_model=AgendamentoResponse, status_code=status.HTTP_201_CREATED)
async def create_agendamento(request: AgendamentoRequest, service: AgendamentoService = Depends(get_agendamento_service)):
    return await service.create(request)


@router.get("", response_model=list[AgendamentoResponse])
async def list_agendamentos(service: AgendamentoService = Depends(get_agendamento_service)):
    return await service.list_all()


@router.get("/filtro", response_model=Page[AgendamentoResponse])
async def filter_agendamentos(
    filter: AgendamentoFilter = Depends(get_agendamento_filter),
    page_request: PageRequest = Depends(agendamento_page_request),
    service: AgendamentoService = Depends(get_agendamento_service),
):
    """Paged agendamento search, ordered by ``dataAgendada`` by default."""
    return await service.search(filter, page_request)


@router.get("/{id}", response_model=AgendamentoResponse)
async def get_agendamento(id: int, service: AgendamentoService = Depends(get_agendamento_service)):
    return await service.get(id)


@router.put("/{id}", response_model=AgendamentoResponse)
async def update_agendamento(id: int, request: AgendamentoRequest, service: AgendamentoService = Depends(get_agendamento_service)):
    return await service.update(id, request)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_agendamento(id: int, service: AgendamentoService = Depends(get_agendamento_service)):
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
