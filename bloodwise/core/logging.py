import sys
import structlog
import logging
from bloodwise.core.config import settings

def add_service_info(logger, method_name, event_dict):
    """Adds the service name and version to every event."""
    event_dict.setdefault("service", settings.PROJECT_NAME)
    event_dict.setdefault("version", settings.PROJECT_VERSION)
    return event_dict

def setup_logging():
    """
    Configures structlog to output JSON in Production and
    colored strings in Development.
    """

    # Shared processors (add timestamp, log level, stack info)
    shared_processors = [
        structlog.contextvars.merge_contextvars, # Carries request_id into every event
        structlog.processors.add_log_level,
        add_service_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
    ]

    if settings.ENVIRONMENT == "production":
        # PROD: Flat JSON for log shippers
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # DEV: Human readable
        processors = shared_processors + [
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(),
        ]

    level = logging.DEBUG if settings.DEBUG else logging.INFO

    structlog.configure(
        processors=processors,
        logger_factory=structlog.PrintLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    # Uvicorn and other stdlib loggers
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    def handle_exception(exc_type, exc_value, exc_traceback):
        """
        Global exception handler so crashes go through structlog too.
        """
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        root_logger = structlog.get_logger()
        root_logger.critical(
            "uncaught_exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception
