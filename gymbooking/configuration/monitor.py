import logging
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from gymbooking.configuration.config import Config

# Configure logger
logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
logger.addHandler(handler)
logger.setLevel(logging.INFO)

# Resource to identify this service
resource = Resource(attributes={
    SERVICE_NAME: Config.OTEL_SERVICE_NAME
})

def _traces_endpoint(base_endpoint: str) -> str:
    base_endpoint = base_endpoint.rstrip("/")
    if base_endpoint.endswith("/v1/traces"):
        return base_endpoint
    return f"{base_endpoint}/v1/traces"

def setup_tracing():
    """Set up OpenTelemetry tracing with an OTLP exporter when a collector is configured."""
    try:
        trace_provider = TracerProvider(resource=resource)
        trace.set_tracer_provider(trace_provider)

        if not Config.OTEL_EXPORTER_OTLP_ENDPOINT:
            logger.info("OTLP endpoint not configured, spans stay local")
            return trace.get_tracer(__name__)

        exporter = OTLPSpanExporter(
            endpoint=_traces_endpoint(Config.OTEL_EXPORTER_OTLP_ENDPOINT)
        )
        trace_provider.add_span_processor(
            BatchSpanProcessor(exporter)
        )

        tracer = trace.get_tracer(__name__)

        logger.info("OpenTelemetry tracing setup completed successfully")
        return tracer
    except Exception as e:
        logger.error(f"Failed to set up tracing: {str(e)}")
        # Return a no-op tracer if setup fails
        return trace.get_tracer(__name__)

# Initialize tracer
tracer = setup_tracing()

def instrument_fastapi(app):
    """Instrument a FastAPI application for monitoring."""
    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI app instrumented successfully")
    except Exception as e:
        logger.error(f"Failed to instrument FastAPI app: {str(e)}")

def start_span(name, context=None, kind=None, attributes=None):
    """Start a new trace span with the specified name and attributes."""
    return tracer.start_as_current_span(name, context=context, kind=kind, attributes=attributes)

def _span_with_properties(span_name, properties, **attributes):
    """Emit a short span carrying the given properties as string attributes."""
    with tracer.start_as_current_span(span_name) as span:
        for key, value in attributes.items():
            span.set_attribute(key, value)
        for key, value in (properties or {}).items():
            span.set_attribute(key, str(value))

def log_event(event_name, properties=None):
    """Record a business event as a span and an INFO line."""
    try:
        _span_with_properties(event_name, properties)
        logger.info(f"Event: {event_name}", extra={"custom_properties": properties})
    except Exception as e:
        logger.error(f"Failed to log event '{event_name}': {str(e)}")

def log_warning(event_name, properties=None):
    """Record a data anomaly that must not interrupt the request."""
    try:
        _span_with_properties(f"warning:{event_name}", properties)
        logger.warning(f"Warning: {event_name}", extra={"custom_properties": properties})
    except Exception as e:
        logger.error(f"Failed to log warning '{event_name}': {str(e)}")

def log_exception(exception, properties=None):
    """Record a failure on an ERROR span and log it with its traceback."""
    try:
        with tracer.start_as_current_span("exception") as span:
            span.record_exception(exception)
            for key, value in (properties or {}).items():
                span.set_attribute(key, str(value))
            span.set_status(trace.StatusCode.ERROR, str(exception))
        logger.exception(f"Exception: {str(exception)}", exc_info=exception,
                        extra={"custom_properties": properties})
    except Exception as e:
        logger.error(f"Failed to log exception: {str(e)}")

def log_metric(metric_name, value, properties=None):
    """Record a measured value, e.g. how many slots a search returned."""
    try:
        _span_with_properties(f"metric:{metric_name}", properties, **{"metric.value": value})
        logger.info(f"Metric: {metric_name}={value}", extra={"custom_properties": properties})
    except Exception as e:
        logger.error(f"Failed to log metric '{metric_name}': {str(e)}")
