# controller/namespace_controller.py
from typing import Any, Optional
from fastapi import APIRouter, Depends, Query
from controller.controller_dependencies import get_credentials, get_namespace_service
from model.session import Credentials
from service.namespace_service import NamespaceService
from util.constants import InternalURIs

namespace_router = APIRouter()


@namespace_router.get(InternalURIs.NAMESPACES)
async def list_namespaces(
    credentials: Credentials = Depends(get_credentials),
    service: NamespaceService = Depends(get_namespace_service),
) -> list[dict[str, Any]]:
    namespaces = await service.list_namespaces(credentials)
    return [ns.model_dump(by_alias=True, exclude_unset=True) for ns in namespaces]


@namespace_router.get(InternalURIs.OBJECTS)
async def list_objects(
    namespaceId: Optional[str] = Query(default=None),
    credentials: Credentials = Depends(get_credentials),
    service: NamespaceService = Depends(get_namespace_service),
) -> list[dict[str, Any]]:
    objects = await service.list_objects(credentials, namespaceId)
    return [obj.model_dump() for obj in objects]
