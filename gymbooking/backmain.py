from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from gymbooking.routers import rou_appointment, rou_availability, rou_catalog, rou_working_hours
from gymbooking.configuration.database import create_db_and_tables
from gymbooking.configuration.monitor import instrument_fastapi, log_event

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the booking tables on startup"""
    create_db_and_tables()
    log_event("GymBooking API started")
    yield

app = FastAPI(
    title="GymBooking API",
    description="Trainer availability and appointment scheduling for fitness centers",
    version="1.0.0",
    lifespan=lifespan
)

# Include all routers
app.include_router(rou_availability.router)
app.include_router(rou_appointment.router)
app.include_router(rou_working_hours.router)
app.include_router(rou_catalog.router)

def _error_summary(exc: RequestValidationError):
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg")}
        for error in exc.errors()
    ]

@app.exception_handler(RequestValidationError)
async def invalid_input_handler(request: Request, exc: RequestValidationError):
    """Malformed input (unparsable dates, wrong types) is rejected as a 400"""
    log_event("Invalid input rejected", {"path": request.url.path, "errors": len(exc.errors())})
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid input", "errors": _error_summary(exc)}
    )

# Instrument app with OpenTelemetry
instrument_fastapi(app)

if __name__ == '__main__':
    import uvicorn
    uvicorn.run(app, host='0.0.0.0', port=8000)
