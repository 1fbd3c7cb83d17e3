from fastapi import HTTPException

class InvalidInputError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)

class InputValidator:
    @staticmethod
    def validate_duration(duration_minutes: int):
        """Validate that a requested duration is a positive number of minutes"""
        if duration_minutes is None or duration_minutes <= 0:
            raise InvalidInputError(
                "duration_minutes must be greater than zero"
            )

    @staticmethod
    def validate_day_of_week(day_of_week: int):
        if not (0 <= day_of_week <= 6):
            raise InvalidInputError(
                "day_of_week must be between 0 (Sunday) and 6 (Saturday)"
            )
