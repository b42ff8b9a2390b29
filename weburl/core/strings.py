import logging

from pydantic import (
    BaseModel,
    ModelWrapValidatorHandler,
    model_serializer,
    model_validator,
)
from pydantic.annotated_handlers import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing import Any, Self

from weburl.config import UrlConfig

logger = logging.getLogger(__name__)


class StructStr(BaseModel, frozen=True):
    """
    A frozen model whose canonical form is a string: `decode` builds it, and
    `str()` renders it back.  As a Pydantic field, it is validated from that
    string and dumped as that string.
    """

    def __hash__(self) -> int:
        return hash(self._serialize())

    def __str__(self) -> str:
        return self._serialize()

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        # Advertise the string form rather than the fields.
        return {
            "type": "string",
            "title": cls.__name__,
            "examples": cls._schema_examples(),
        }

    @model_validator(mode="wrap")
    @classmethod
    def deserialize_model(
        cls,
        data: Any,
        handler: ModelWrapValidatorHandler[Self],
    ) -> Self:
        return cls.decode(data) if isinstance(data, str) else handler(data)

    @model_serializer
    def serialize_model(self) -> str:
        return self._serialize()

    @classmethod
    def decode(cls, v: Any, /) -> Self:
        """
        Build the subclass from its string form.  Raises `TypeError` when `v` is
        not a string and `ValueError` (or a subclass) when it is rejected.
        """
        if not isinstance(v, str):
            raise TypeError(
                f"invalid {cls.__name__}: expected str, got {type(v).__name__}: {v}"
            )
        return cls._parse(v)

    @classmethod
    def try_decode(cls, v: Any) -> Self | None:
        try:
            return cls.decode(v)
        except (TypeError, ValueError) as exc:
            if UrlConfig.verbose:
                logger.debug("Rejected %s '%s': %s", cls.__name__, v, exc)
            return None

    @classmethod
    def _parse(cls, v: str) -> Self:
        raise NotImplementedError(f"{cls.__name__} must implement _parse")

    @classmethod
    def _schema_examples(cls) -> list[str]:
        return []

    def _serialize(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement _serialize")
