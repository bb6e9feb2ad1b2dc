"""API routes for eventos."""
from fastapi import APIRouter, Depends, Response, status

from mototrack.api.routes.dependencies import get_evento_filter, get_evento_service, evento_page_request
from mototrack.schemas.filtering import EventoFilter
from mototrack.schemas.evento import EventoRequest, EventoResponse
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.services import EventoService

router = APIRouter()


@router.post("", response_model=EventoResponse, status_code=status.HTTP_201_CREATED)
async def create_evento(request: EventoRequest, service: EventoService = Depends(get_evento_service)):
    """Record an evento for an existing moto; ``dataHora`` defaults to now."""
    return await service.create(request)


@router.get("", response_model=list[EventoResponse])
async def list_eventos(service: EventoService = Depends(get_evento_service)):
    return await service.list_all()


@router.get("/filtro", response_model=Page[EventoResponse])
async def filter_eventos(
    filter: EventoFilter = Depends(get_evento_filter),
    page_request: PageRequest = Depends(evento_page_request),
    service: EventoService = Depends(get_evento_service),
):
    """Paged evento search; newest first unless ``sort`` says otherwise."""
    return await service.search(filter, page_request)


@router.get("/{id}", response_model=EventoResponse)
async def get_evento(id: int, service: EventoService = Depends(get_evento_service)):
    return await service.get(id)


@router.put("/{id}", response_model=EventoResponse)
async def update_evento(id: int, request: EventoRequest, service: EventoService = Depends(get_evento_service)):
    return await service.update(id, request)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_evento(id: int, service: EventoService = Depends(get_evento_service)):
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
