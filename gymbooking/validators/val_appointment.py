from typing import List
from fastapi import HTTPException
from gymbooking.models.mod_appointment import AppointmentStatus
from gymbooking.models.mod_catalog import Trainer

class AppointmentValidationError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)

class ServiceNotFoundError(HTTPException):
    def __init__(self, detail: str = "Service not found"):
        super().__init__(status_code=404, detail=detail)

class TrainerNotQualifiedError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)

class TrainerNotAvailableError(HTTPException):
    def __init__(self, detail: str = "The selected trainer is not available at this time."):
        super().__init__(status_code=409, detail=detail)

# Allowed status transitions; completed is terminal, cancelling again is a no-op
_TRANSITIONS = {
    AppointmentStatus.PENDING: {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED},
    AppointmentStatus.CONFIRMED: {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED},
    AppointmentStatus.COMPLETED: set(),
    AppointmentStatus.CANCELLED: {AppointmentStatus.CANCELLED},
}

class AppointmentValidator:
    @staticmethod
    def validate_trainer_qualified(trainer_id: str, qualified_trainers: List[Trainer]):
        """Validate that the trainer is among those declaring expertise for the service"""
        if not any(trainer.id == trainer_id for trainer in qualified_trainers):
            raise TrainerNotQualifiedError(
                "The selected trainer is not qualified for this service"
            )

    @staticmethod
    def validate_status_transition(current: AppointmentStatus, target: AppointmentStatus):
        """Validate a status change against the appointment lifecycle"""
        if target in _TRANSITIONS[current]:
            return
        if current == AppointmentStatus.COMPLETED and target == AppointmentStatus.CANCELLED:
            raise AppointmentValidationError("Cannot cancel a completed appointment")
        if current == AppointmentStatus.CANCELLED and target == AppointmentStatus.CONFIRMED:
            raise AppointmentValidationError("Cannot approve a cancelled appointment")
        raise AppointmentValidationError(
            f"Cannot change appointment status from {current.value} to {target.value}"
        )
