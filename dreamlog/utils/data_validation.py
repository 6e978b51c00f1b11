# dreamlog/utils/data_validation.py

from pydantic import ValidationError
import logging

from dreamlog.core.exceptions import MalformedInputError
from dreamlog.utils.constants import default_values

logger = logging.getLogger(__name__)


def validate_records(items, model_class, key_field='id'):
    """
    Validate raw record dictionaries against a Pydantic model.

    Args:
        items: Iterable of dictionaries loaded by the store
        model_class: Pydantic model class to validate against
        key_field: Field used to identify a record in error messages

    Returns:
        tuple: Validated model instances in input order

    Raises:
        MalformedInputError: On the first record that fails validation
    """
    records = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedInputError(f"#{i}", f"expected an object, got {type(item).__name__}")
        try:
            records.append(model_class(**item))
        except ValidationError as e:
            key = item.get(key_field, f"#{i}")
            logger.error(f"Validation error in {model_class.__name__} {key}: {e}")
            raise MalformedInputError(key, str(e)) from e
    return tuple(records)


def validate_snapshot(snapshot):
    """
    Check the cross-record invariants of a journal snapshot.

    Field-level constraints are enforced when the models are built, but
    records created with ``model_construct`` skip them, so ranges are
    checked again here.

    Raises:
        MalformedInputError: Naming the first dream id or log date at fault
    """
    seen_ids = set()
    for dream in snapshot.dreams:
        if dream.id in seen_ids:
            raise MalformedInputError(f"dream {dream.id}", "duplicate dream id")
        seen_ids.add(dream.id)

        if dream.is_lucid and dream.dream_sign is None:
            raise MalformedInputError(f"dream {dream.id}", "lucid dream has no dream sign")
        if not dream.is_lucid and dream.dream_sign is not None:
            raise MalformedInputError(f"dream {dream.id}", "dream sign recorded on a non-lucid dream")

    min_quality = default_values['min_quality']
    max_quality = default_values['max_quality']
    seen_dates = set()
    for log in snapshot.daily_logs:
        if log.date in seen_dates:
            raise MalformedInputError(f"log {log.date.isoformat()}", "duplicate daily log date")
        seen_dates.add(log.date)

        if not min_quality <= log.quality <= max_quality:
            raise MalformedInputError(
                f"log {log.date.isoformat()}",
                f"sleep quality {log.quality} outside [{min_quality}, {max_quality}]"
            )
        if log.reality_checks < 0:
            raise MalformedInputError(
                f"log {log.date.isoformat()}",
                f"negative reality check count {log.reality_checks}"
            )

    logger.debug(f"Snapshot valid: {len(snapshot.dreams)} dreams, {len(snapshot.daily_logs)} daily logs")
    return snapshot
