"""API routes for filiais."""
from fastapi import APIRouter, Depends, Response, status

from mototrack.api.routes.dependencies import get_filial_filter, get_filial_service, filial_page_request
from mototrack.schemas.filtering import FilialFilter
from mototrack.schemas.filial import FilialRequest, FilialResponse
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.services import FilialService

router = APIRouter()


@router.post("", response_model=FilialResponse, status_code=status.HTTP_201_CREATED)
async def create_filial(request: FilialRequest, service: FilialService = Depends(get_filial_service)):
    """Register a filial (branch yard)."""
    return await service.create(request)


@router.get("", response_model=list[FilialResponse])
async def list_filiais(service: FilialService = Depends(get_filial_service)):
    return await service.list_all()


@router.get("/filtro", response_model=Page[FilialResponse])
async def filter_filiais(
    filter: FilialFilter = Depends(get_filial_filter),
    page_request: PageRequest = Depends(filial_page_request),
    service: FilialService = Depends(get_filial_service),
):
    return await service.search(filter, page_request)


@router.get("/{id}", response_model=FilialResponse)
async def get_filial(id: int, service: FilialService = Depends(get_filial_service)):
    return await service.get(id)


@router.put("/{id}", response_model=FilialResponse)
async def update_filial(id: int, request: FilialRequest, service: FilialService = Depends(get_filial_service)):
    return await service.update(id, request)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_filial(id: int, service: FilialService = Depends(get_filial_service)):
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
