from sqlmodel import Session, select
from typing import List, Optional
from gymbooking.models.mod_catalog import FitnessCenter, Service, Trainer
from gymbooking.models.mod_tables import FitnessCenterRecord, ServiceRecord, TrainerRecord
from gymbooking.scheduling.trainer_finder import trainer_sort_key
from gymbooking.services.svc_records import center_from_record, service_from_record, trainer_from_record
from gymbooking.configuration.monitor import log_event, log_exception, start_span

class CatalogService:
    @staticmethod
    def get_trainers(session: Session) -> List[Trainer]:
        try:
            with start_span("get_trainers"):
                records = session.exec(select(TrainerRecord)).all()
                trainers = sorted((trainer_from_record(record) for record in records), key=trainer_sort_key)
                log_event("Trainers retrieved", {"count": len(trainers)})
                return trainers
        except Exception as e:
            log_exception(e, {"operation": "get_trainers"})
            raise

    @staticmethod
    def get_trainer(session: Session, trainer_id: str) -> Optional[Trainer]:
        try:
            with start_span("get_trainer", attributes={"trainer_id": trainer_id}):
                record = session.get(TrainerRecord, trainer_id)
                if record:
                    return trainer_from_record(record)

                log_event("Trainer not found", {"trainer_id": trainer_id})
                return None
        except Exception as e:
            log_exception(e, {"operation": "get_trainer", "trainer_id": trainer_id})
            raise

    @staticmethod
    def get_services(session: Session) -> List[Service]:
        try:
            with start_span("get_services"):
                records = session.exec(select(ServiceRecord).order_by(ServiceRecord.name)).all()
                services = [service_from_record(record) for record in records]
                log_event("Services retrieved", {"count": len(services)})
                return services
        except Exception as e:
            log_exception(e, {"operation": "get_services"})
            raise

    @staticmethod
    def get_service(session: Session, service_id: str) -> Optional[Service]:
        try:
            with start_span("get_service", attributes={"service_id": service_id}):
                record = session.get(ServiceRecord, service_id)
                if record:
                    return service_from_record(record)

                log_event("Service not found", {"service_id": service_id})
                return None
        except Exception as e:
            log_exception(e, {"operation": "get_service", "service_id": service_id})
            raise

    @staticmethod
    def get_centers(session: Session) -> List[FitnessCenter]:
        try:
            with start_span("get_centers"):
                records = session.exec(select(FitnessCenterRecord).order_by(FitnessCenterRecord.name)).all()
                return [center_from_record(record) for record in records]
        except Exception as e:
            log_exception(e, {"operation": "get_centers"})
            raise

    @staticmethod
    def get_center(session: Session, center_id: str) -> Optional[FitnessCenter]:
        try:
            with start_span("get_center", attributes={"center_id": center_id}):
                record = session.get(FitnessCenterRecord, center_id)
                if record:
                    return center_from_record(record)

                log_event("Fitness center not found", {"center_id": center_id})
                return None
        except Exception as e:
            log_exception(e, {"operation": "get_center", "center_id": center_id})
            raise
