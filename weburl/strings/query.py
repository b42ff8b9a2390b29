from pydantic import (
    BaseModel,
    Field,
    ModelWrapValidatorHandler,
    model_serializer,
    model_validator,
)
from typing import Any, Self
from urllib.parse import quote, unquote


class QueryParameterBag(BaseModel):
    """
    The parameters of a query string, as an ordered mapping from key to value.

    A value of `None` means that the key is present without `=value`, as in
    `?flag`.  Keys are kept verbatim while values are percent-decoded when
    parsed and percent-encoded (RFC 3986, space as `%20`) when rendered.
    Bytes that are not valid UTF-8 survive both ways as surrogate escapes.

    NOTE: Unlike `Url`, the bag is mutable: `set` and `unset` modify it in place
    and return it for chaining.  Every `Url` owns its bag exclusively and copies
    it deeply in each `with_*` method, so only mutate a bag that you created.
    """

    parameters: dict[str, str | None] = Field(default_factory=dict)

    @classmethod
    def from_string(cls, query: str = "") -> Self:
        """
        Parse `query` (without the leading "?") into a bag.  When a key appears
        more than once, it keeps its first position and its last value.
        """
        bag = cls()
        if query == "":
            return bag

        for key_value in query.split("&"):
            key, sep, value = key_value.partition("=")
            bag.parameters[key] = (
                unquote(value, errors="surrogateescape") if sep else None
            )

        return bag

    @model_validator(mode="wrap")
    @classmethod
    def deserialize_model(
        cls,
        data: Any,
        handler: ModelWrapValidatorHandler[Self],
    ) -> Self:
        if isinstance(data, str):
            return cls.from_string(data)
        return handler(data)

    @model_serializer
    def serialize_model(self) -> str:
        return str(self)

    def __contains__(self, key: object) -> bool:
        return key in self.parameters

    def __str__(self) -> str:
        return "&".join(
            key
            if value is None
            else f"{key}={quote(value, safe='', errors='surrogateescape')}"
            for key, value in self.parameters.items()
        )

    ##
    ## Access
    ##

    def all(self) -> dict[str, str | None]:
        return dict(self.parameters)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return the value of `key`, which is `None` for a flag, or `default`
        when the key is missing altogether.
        """
        return self.parameters[key] if key in self.parameters else default

    def has(self, key: str) -> bool:
        return key in self.parameters

    ##
    ## Mutation
    ##

    def set(self, key: str, value: str | None) -> Self:
        self.parameters[key] = value
        return self

    def unset(self, key: str) -> Self:
        self.parameters.pop(key, None)
        return self
