from fastapi import FastAPI
from opentelemetry import trace, metrics
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from loguru import logger

from eventhub.core.config import Settings

# Routes left out of traces
EXCLUDED_URLS = "/health"


def build_resource(settings: Settings) -> Resource:
    """
    Describe this service to the OpenTelemetry collector.

    Traces, metrics and logs all share this resource so they are grouped
    under the same service and environment.

    Returns:
        Resource: `service.name` from PROJECT_NAME and `deployment.environment` from ENVIRONMENT.
    """
    return Resource.create(
        {
            "service.name": settings.PROJECT_NAME,
            "deployment.environment": settings.ENVIRONMENT,
        }
    )


def setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """
    Export request traces and metrics to the configured OTLP collector.

    Does nothing but warn when `OTEL_EXPORTER_OTLP_ENDPOINT` is unset. The app
    is instrumented at most once per process, so a second lifespan (tests,
    reloads) does not wrap it twice. Failures are logged, never raised.

    Parameters:
        app (FastAPI): Application whose requests are traced.
        settings (Settings): Source of the endpoint, the TLS flag and the resource attributes.
    """
    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
    if not endpoint:
        logger.warning("No OTLP endpoint configured. Telemetry disabled.")
        return
    try:
        resource = build_resource(settings)
        insecure = settings.OTEL_EXPORTER_OTLP_INSECURE

        tracer_provider = TracerProvider(resource=resource)
        tracer_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=insecure))
        )
        trace.set_tracer_provider(tracer_provider)

        metric_reader = PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=endpoint, insecure=insecure)
        )
        metrics.set_meter_provider(
            MeterProvider(resource=resource, metric_readers=[metric_reader])
        )

        if not getattr(app.state, "otel_instrumented", False):
            FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)
            app.state.otel_instrumented = True

        logger.info(f"Exporting traces and metrics to {endpoint}.")

    except Exception as e:
        logger.error(f"Telemetry setup failed: {e}")
