"""
API routes for contacts
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_contact_service, get_field_projector
from app.api.responses import envelope_response
from app.components.contracts import ApiResponse, ContactRecord
from app.components.field_projection import FieldProjector
from app.services.contact_service import ContactService

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.get("/", response_model=List[Dict[str, Any]])
async def list_contacts(
    q: Optional[str] = Query(None, description="Text searched in name, contact and professional id"),
    fields: Optional[List[str]] = Query(None, description="Fields to include in each item"),
    service: ContactService = Depends(get_contact_service),
    projector: FieldProjector = Depends(get_field_projector),
):
    """List contacts of professionals that are not deleted"""
    return projector.project_many(service.list(q), fields)


@router.get("/{contact_id}", response_model=Dict[str, Any])
async def get_contact(
    contact_id: int,
    fields: Optional[List[str]] = Query(None, description="Fields to include"),
    service: ContactService = Depends(get_contact_service),
    projector: FieldProjector = Depends(get_field_projector),
):
    """Get an active contact by ID"""
    contact = service.get_active(contact_id)
    if fields:
        return projector.project_subset(contact, fields)
    return projector.project_all(contact)


@router.post("/", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    request: ContactRecord,
    service: ContactService = Depends(get_contact_service),
):
    """Create a contact for an active professional"""
    return envelope_response(service.create(request.model_copy(update={"id": None})), status.HTTP_201_CREATED)


@router.put("/{contact_id}", response_model=ApiResponse)
async def update_contact(
    contact_id: int,
    request: ContactRecord,
    service: ContactService = Depends(get_contact_service),
):
    """Update an active contact"""
    return envelope_response(service.update(request.model_copy(update={"id": contact_id})), status.HTTP_200_OK)


@router.delete("/{contact_id}", response_model=ApiResponse)
async def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
):
    """Remove a contact permanently"""
    return service.hard_delete(contact_id)
