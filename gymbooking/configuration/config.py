import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    # Database Configuration
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./gymbooking.db")
    DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # OpenTelemetry Configuration
    OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "gymbookingbackend")
    # Base URL of the collector; /v1/traces is appended when missing
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")

    # Scheduling
    # Wall-clock zone of working hours and appointment times
    CENTER_TIMEZONE = os.getenv("CENTER_TIMEZONE", "UTC")
    SLOT_GRANULARITY_MINUTES = int(os.getenv("SLOT_GRANULARITY_MINUTES", "30"))
    SLOT_LEAD_MINUTES = int(os.getenv("SLOT_LEAD_MINUTES", "0"))
    BOOKING_COMMIT_ATTEMPTS = int(os.getenv("BOOKING_COMMIT_ATTEMPTS", "3"))
