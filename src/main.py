import os

from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.requests import RequestsInstrumentor

from src.configs.settings import settings
from src.api.main import api_router
from src.exceptions.error_handler import register_exception_handlers
from lib.logger import Logger


logger = Logger.get_logger(os.path.basename(__file__))


def custom_generate_unique_id(route: APIRoute) -> str:
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return f"default-{route.name}"


def configure_tracing(application: FastAPI) -> None:
    """Instrument FastAPI and outbound requests when tracing is enabled."""
    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
    if not (endpoint and settings.OTEL_TRACING_ENABLED):
        return

    resource = Resource.create({"service.name": settings.PROJECT_NAME})
    tracer_provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=endpoint, insecure=True)
    tracer_provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(tracer_provider)
    RequestsInstrumentor().instrument()
    FastAPIInstrumentor.instrument_app(application, tracer_provider=tracer_provider)
    logger.info("OpenTelemetry tracing enabled", otlp_endpoint=endpoint)


def get_application() -> FastAPI:
    fastapi_kwargs = {
        **settings.fastapi_kwargs,
        "title": "Web Extraction Client",
        "description": "Extracts answers to questions from web pages through an extraction API",
        "generate_unique_id_function": custom_generate_unique_id,
        "swagger_ui_parameters": {"syntaxHighlight.theme": "obsidian"},
    }
    application = FastAPI(**fastapi_kwargs)

    configure_tracing(application)

    # Add middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_hosts,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(GZipMiddleware, minimum_size=1000)

    register_exception_handlers(application)
    application.include_router(api_router, prefix=settings.API_V1_STR)
    return application


app = get_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info", server_header=False)
