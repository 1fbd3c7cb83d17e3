from datetime import datetime
from typing import List, Optional
from gymbooking.models.mod_catalog import Trainer
from gymbooking.scheduling.availability import AvailabilityEvaluator
from gymbooking.scheduling.ports import ScheduleReader

def trainer_sort_key(trainer: Trainer):
    # Ordinal, case-sensitive: last name, then first name, then id
    return (trainer.last_name, trainer.first_name, trainer.id)

class TrainerFinder:
    def __init__(self, reader: ScheduleReader, evaluator: Optional[AvailabilityEvaluator] = None):
        self._reader = reader
        self._evaluator = evaluator or AvailabilityEvaluator(reader)

    def available_trainers(self, date_time: datetime, service_id: str) -> List[Trainer]:
        """
        Trainers qualified for the service who can take it at date_time,
        ordered by name. An unknown service yields an empty list.
        """
        service = self._reader.get_service_by_id(service_id)
        if service is None:
            return []

        available = [
            trainer for trainer in self._reader.get_trainers_qualified_for(service_id)
            if trainer.is_qualified_for(service_id)
            and self._evaluator.is_available(trainer.id, date_time, service.duration_minutes)
        ]
        return sorted(available, key=trainer_sort_key)
