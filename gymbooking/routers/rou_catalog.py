from fastapi import APIRouter, HTTPException, Depends
from sqlmodel import Session
from gymbooking.models.mod_catalog import Trainer
from gymbooking.schemas.sch_catalog import FitnessCenterResponse, ServiceResponse, TrainerResponse
from gymbooking.services.svc_catalog import CatalogService
from gymbooking.configuration.database import get_session
from typing import List

router = APIRouter(
    tags=["Catalog"],
    responses={404: {"description": "Not found"}},
)

def _trainer_response(trainer: Trainer) -> TrainerResponse:
    return TrainerResponse(full_name=trainer.full_name, **trainer.dict())

@router.get("/trainers/", response_model=List[TrainerResponse])
def get_trainers(session: Session = Depends(get_session)):
    return [_trainer_response(trainer) for trainer in CatalogService.get_trainers(session)]

@router.get("/trainers/{trainer_id}", response_model=TrainerResponse)
def get_trainer(trainer_id: str, session: Session = Depends(get_session)):
    trainer = CatalogService.get_trainer(session, trainer_id)
    if not trainer:
        raise HTTPException(status_code=404, detail="Trainer not found")
    return _trainer_response(trainer)

@router.get("/services/", response_model=List[ServiceResponse])
def get_services(session: Session = Depends(get_session)):
    return CatalogService.get_services(session)

@router.get("/services/{service_id}", response_model=ServiceResponse)
def get_service(service_id: str, session: Session = Depends(get_session)):
    service = CatalogService.get_service(session, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service

@router.get("/centers/", response_model=List[FitnessCenterResponse])
def get_centers(session: Session = Depends(get_session)):
    return CatalogService.get_centers(session)

@router.get("/centers/{center_id}", response_model=FitnessCenterResponse)
def get_center(center_id: str, session: Session = Depends(get_session)):
    center = CatalogService.get_center(session, center_id)
    if not center:
        raise HTTPException(status_code=404, detail="Fitness center not found")
    return center
