"""
API routes for professionals
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_field_projector, get_professional_service
from app.api.responses import envelope_response
from app.components.contracts import ApiResponse, ProfessionalRecord
from app.components.field_projection import FieldProjector
from app.services.professional_service import ProfessionalService

router = APIRouter(prefix="/api/professionals", tags=["professionals"])


@router.get("/", response_model=List[Dict[str, Any]])
async def list_professionals(
    q: Optional[str] = Query(None, description="Text searched in name, role and birth date"),
    fields: Optional[List[str]] = Query(None, description="Fields to include in each item"),
    service: ProfessionalService = Depends(get_professional_service),
    projector: FieldProjector = Depends(get_field_projector),
):
    """List professionals that are not deleted"""
    return projector.project_many(service.list(q), fields)


@router.get("/{professional_id}", response_model=Dict[str, Any])
async def get_professional(
    professional_id: int,
    fields: Optional[List[str]] = Query(None, description="Fields to include"),
    service: ProfessionalService = Depends(get_professional_service),
    projector: FieldProjector = Depends(get_field_projector),
):
    """Get an active professional by ID"""
    professional = service.get_active(professional_id)
    if fields:
        return projector.project_subset(professional, fields)
    return projector.project_all(professional)


@router.post("/", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def create_professional(
    request: ProfessionalRecord,
    service: ProfessionalService = Depends(get_professional_service),
):
    """Create a professional; the creation date is assigned by the server"""
    return envelope_response(service.create(request.model_copy(update={"id": None})), status.HTTP_201_CREATED)


@router.put("/{professional_id}", response_model=ApiResponse)
async def update_professional(
    professional_id: int,
    request: ProfessionalRecord,
    service: ProfessionalService = Depends(get_professional_service),
):
    """Update an active professional"""
    return envelope_response(service.update(request.model_copy(update={"id": professional_id})), status.HTTP_200_OK)


@router.delete("/{professional_id}", response_model=ApiResponse)
async def delete_professional(
    professional_id: int,
    service: ProfessionalService = Depends(get_professional_service),
):
    """Soft-delete a professional and flag its contacts"""
    return service.soft_delete(professional_id)
