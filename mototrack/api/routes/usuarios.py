"""API routes for usuarios."""
from fastapi import APIRouter, Depends, Response, status

from mototrack.api.routes.dependencies import get_usuario_filter, get_usuario_service, usuario_page_request
from mototrack.schemas.filtering import UsuarioFilter
from mototrack.schemas.usuario import UsuarioRequest, UsuarioResponse
from mototrack.schemas.pagination import Page, PageRequest
from mototrack.services import UsuarioService

router = APIRouter()


@router.post("", response_model=UsuarioResponse, status_code=status.HTTP_201_CREATED)
async def create_usuario(request: UsuarioRequest, service: UsuarioService = Depends(get_usuario_service)):
    """Create a usuario. The password is stored hashed and never returned."""
    return await service.create(request)


@router.get("", response_model=list[UsuarioResponse])
async def list_usuarios(service: UsuarioService = Depends(get_usuario_service)):
    return await service.list_all()


@router.get("/filtro", response_model=Page[UsuarioResponse])
async def filter_usuarios(
    filter: UsuarioFilter = Depends(get_usuario_filter),
    page_request: PageRequest = Depends(usuario_page_request),
    service: UsuarioService = Depends(get_usuario_service),
):
    return await service.search(filter, page_request)


@router.get("/{id}", response_model=UsuarioResponse)
async def get_usuario(id: int, service: UsuarioService = Depends(get_usuario_service)):
    return await service.get(id)


@router.put("/{id}", response_model=UsuarioResponse)
async def update_usuario(id: int, request: UsuarioRequest, service: UsuarioService = Depends(get_usuario_service)):
    return await service.update(id, request)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_usuario(id: int, service: UsuarioService = Depends(get_usuario_service)):
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
