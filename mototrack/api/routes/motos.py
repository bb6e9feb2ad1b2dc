"""API routes for motos."""
from fastapi import APIRouter, Depends, Response, status

from mototrack.api.routes.dependencies import get_moto_filter, get_moto_service, moto_page_request
from mototrack.schemas.filtering import MotoFilter
from mototrack.schemas.moto import MotoRequest, MotoResponse
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.services import MotoService

router = APIRouter()


@router.post("", response_model=MotoResponse, status_code=status.HTTP_201_CREATED)
async def create_moto(request: MotoRequest, service: MotoService = Depends(get_moto_service)):
    """Register a moto, optionally linked to a filial."""
    return await service.create(request)


@router.get("", response_model=list[MotoResponse])
async def list_motos(service: MotoService = Depends(get_moto_service)):
    return await service.list_all()


@router.get("/filtro", response_model=Page[MotoResponse])
async def filter_motos(
    filter: MotoFilter = Depends(get_moto_filter),
    page_request: PageRequest = Depends(moto_page_request),
    service: MotoService = Depends(get_moto_service),
):
    """Search motos by any combination of filter fields, one page at a time."""
    return await service.search(filter, page_request)


@router.get("/{id}", response_model=MotoResponse)
async def get_moto(id: int, service: MotoService = Depends(get_moto_service)):
    return await service.get(id)


@router.put("/{id}", response_model=MotoResponse)
async def update_moto(id: int, request: MotoRequest, service: MotoService = Depends(get_moto_service)):
    return await service.update(id, request)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_moto(id: int, service: MotoService = Depends(get_moto_service)):
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
