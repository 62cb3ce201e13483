from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from mongoengine.errors import FieldDoesNotExist, InvalidDocumentError, OperationError, ValidationError
from pymongo.errors import PyMongoError

from app.utils.base import ServiceError, InvalidInput, DataStoreFailure


logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_params(**params: Any) -> None:
    """Raise InvalidInput naming every parameter that is None or blank.

    Empty lists count as present.
    """
    missing = [name for name, value in params.items() if _is_missing(value)]
    if missing:
        raise InvalidInput(f"Missing required parameters: {', '.join(missing)}")


def _describe(context: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v!r}" for k, v in context.items())


@contextmanager
def store_operation(operation: str, **context: Any) -> Iterator[None]:
    """Translate database errors raised inside the block into service errors.

    Service errors pass through untouched so handlers can raise NotFound etc.
    from within the block. Request bodies are validated before they get here,
    so a document that fails to load or validate means bad stored data.
    """
    try:
        yield
    except ServiceError:
        raise
    except (PyMongoError, OperationError, ValidationError, FieldDoesNotExist, InvalidDocumentError) as exc:
        logger.exception("%s failed (%s)", operation, _describe(context))
        raise DataStoreFailure("Internal server error", detail=str(exc)) from exc
