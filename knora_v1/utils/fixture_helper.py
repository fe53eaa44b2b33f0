import logging
from typing import Type, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from knora_v1.fixtures import FixtureNotFound, FixtureStore
from knora_v1.models.basic_components import BasicResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BasicResponse)


def load_response(store: FixtureStore, kind: str, key: str, model: Type[ResponseT]) -> ResponseT:
    """Load a captured payload and validate it against its response shape."""
    try:
        payload = store.load(kind, key)
    except FixtureNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No {kind} found for {key}"
        )

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.warning("Fixture %s/%s is not a valid %s: %s", kind, key, model.__name__, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Stored {kind} for {key} does not match {model.__name__}"
        )
