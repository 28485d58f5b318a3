"""Engine factory — logging setup and procedure registration."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from dotenv import load_dotenv

from s52engine.config import settings
from s52engine.engine.registry import ProcedureRegistry, get_registry

PROCEDURES_PACKAGE = "s52engine.engine.procedures"


def configure_logging() -> None:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.s52_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_engine() -> ProcedureRegistry:
    """Configure logging and return the registry with every procedure loaded."""
    configure_logging()
    registry = register_procedures()
    logging.getLogger(__name__).info(
        "S-52 engine ready (%s): %d procedures", settings.s52_env, registry.count
    )
    return registry


def register_procedures() -> ProcedureRegistry:
    """Import all procedure modules so @procedure decorators fire."""
    package = importlib.import_module(PROCEDURES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{PROCEDURES_PACKAGE}.{module_name}")
    return get_registry()
