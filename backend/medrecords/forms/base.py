"""
Form workflow shared by every entity form.

    editing -> submitting -> success
                          -> failed (values kept, form stays open and editable)

Field values are held as the raw text the user typed. Nothing is validated
until submit; then the create schema coerces types (blank -> None, text ->
int/float/date) and enforces required fields and ranges before the store is
ever called.
"""

import inspect
import logging
from datetime import date
from enum import Enum
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ValidationError as SchemaError

from medrecords.exceptions import PersistenceError, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "This field is required"


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


def today() -> str:
    return date.today().isoformat()


def field_errors(exc: SchemaError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        name = ".".join(str(part) for part in err["loc"]) or "__root__"
        if err["type"] == "missing" or err.get("input") is None:
            message = REQUIRED_MESSAGE
        else:
            message = err["msg"]
        errors.setdefault(name, message)
    return errors


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class FormWorkflow:
    """Collects raw field values for one create schema and submits them once valid.

    Subclasses set ``schema`` and may override ``defaults`` and ``before_create``.
    """

    schema: type[BaseModel]
    title: str = ""
    # Fields the user never types: foreign keys and derived values
    excluded_fields: frozenset[str] = frozenset({"patient_id"})

    def __init__(
        self,
        repository,
        on_save: Optional[Callable[[Any], Any]] = None,
        on_close: Optional[Callable[[], Any]] = None,
    ):
        self.repository = repository
        self.on_save = on_save
        self.on_close = on_close
        self.values: dict[str, str] = {name: "" for name in self.field_names()}
        self.values.update(self.defaults())
        self.state = FormState.EDITING
        self.errors: dict[str, str] = {}
        self.error: Optional[str] = None
        self.saved: Optional[BaseModel] = None
        self.is_open = True

    @classmethod
    def field_names(cls) -> list[str]:
        return [name for name in cls.schema.model_fields if name not in cls.excluded_fields]

    @classmethod
    def fields(cls) -> type[Enum]:
        """Closed enum of the identifiers ``update`` accepts."""
        if "_fields_enum" not in cls.__dict__:
            cls._fields_enum = Enum(
                f"{cls.__name__}Field",
                {name.upper(): name for name in cls.field_names()},
                type=str,
            )
        return cls._fields_enum

    def defaults(self) -> dict[str, str]:
        return {}

    @property
    def required_fields(self) -> list[str]:
        return [
            name for name, info in self.schema.model_fields.items()
            if info.is_required() and name not in self.excluded_fields
        ]

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    def update(self, field: Union[Enum, str], value: Any) -> None:
        try:
            member = self.fields()(field)
        except ValueError:
            raise ValidationError({str(field): "Unknown field"}) from None
        self.values[member.value] = "" if value is None else str(value)
        if self.state is FormState.FAILED:
            self.state = FormState.EDITING

    def payload(self) -> dict[str, Any]:
        return dict(self.values)

    def validate(self) -> BaseModel:
        try:
            return self.schema.model_validate(self.payload())
        except SchemaError as e:
            raise ValidationError(field_errors(e)) from e

    async def before_create(self, record: BaseModel) -> BaseModel:
        return record

    async def create(self, record: BaseModel) -> BaseModel:
        return await self.repository.create(record)

    async def submit(self) -> Optional[BaseModel]:
        """Validate, persist, then notify ``on_save``.

        Returns the persisted record, or None when validation or the store
        rejected the submission. In both cases ``values`` are left as typed.
        """
        if self.is_submitting:
            return None
        self.state = FormState.SUBMITTING
        self.errors = {}
        self.error = None

        try:
            record = self.validate()
            record = await self.before_create(record)
            saved = await self.create(record)
        except ValidationError as e:
            self.errors = e.errors
            self.error = e.message
            self.state = FormState.EDITING
            return None
        except PersistenceError as e:
            logger.error("Error saving %s: %s", self.title or type(self).__name__, e)
            self.error = f"Could not save: {e.reason}"
            self.state = FormState.FAILED
            return None
        except BaseException:
            # Propagates, but the form must not stay locked in SUBMITTING
            self.error = "Could not save"
            self.state = FormState.FAILED
            raise

        self.saved = saved
        self.state = FormState.SUCCESS
        self.is_open = False
        if self.on_save is not None:
            await _maybe_await(self.on_save(saved))
        return saved

    async def close(self) -> None:
        self.is_open = False
        if self.on_close is not None:
            await _maybe_await(self.on_close())


class ChildRecordForm(FormWorkflow):
    """Form for a record that belongs to one patient."""

    def __init__(self, repository, patient_id: str, **kwargs):
        self.patient_id = patient_id
        super().__init__(repository, **kwargs)

    def payload(self) -> dict[str, Any]:
        data = super().payload()
        data["patient_id"] = self.patient_id
        return data
