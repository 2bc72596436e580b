"""
Response converters.

A converter turns a validated ``requests.Response`` into the value returned by
a service call.  The set of strategies is closed and picked per operation:

* :class:`ObjectConverter` – the whole JSON body is one model,
* :class:`FieldListConverter` – a named array inside a JSON envelope
  (``{"models": [...]}``) is a list of models,
* :class:`VoidConverter` – the body is discarded,
* :class:`BinaryConverter` – the raw body bytes (e.g. synthesized audio).

Any mismatch between the body and the expected shape raises
:class:`DeserializationError`.
"""

import abc
from typing import Any, Generic, List, Type, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from lang_services_lib.exceptions import DeserializationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ResponseConverter(abc.ABC, Generic[T]):
    @abc.abstractmethod
    def convert(self, response: requests.Response) -> T:
        pass

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DeserializationError(f"Invalid response format: {exc}") from exc


class ObjectConverter(ResponseConverter[M]):
    def __init__(self, model_cls: Type[M]) -> None:
        self.model_cls = model_cls

    def convert(self, response: requests.Response) -> M:
        body = self._json(response)
        try:
            return self.model_cls.model_validate(body)
        except PydanticValidationError as exc:
            raise DeserializationError(
                f"Response does not match {self.model_cls.__name__}: {exc}"
            ) from exc


class FieldListConverter(ResponseConverter[List[M]]):
    """
    Extract ``body[field]`` and validate it as ``List[model_cls]``.

    A missing field is a deserialization error, not an empty list.
    """

    def __init__(self, model_cls: Type[M], field: str) -> None:
        self.model_cls = model_cls
        self.field = field
        self._adapter = TypeAdapter(List[model_cls])

    def convert(self, response: requests.Response) -> List[M]:
        body = self._json(response)
        if not isinstance(body, dict) or self.field not in body:
            raise DeserializationError(
                f"Response has no '{self.field}' field: {str(body)[:200]}"
            )
        try:
            return self._adapter.validate_python(body[self.field])
        except PydanticValidationError as exc:
            raise DeserializationError(
                f"Field '{self.field}' does not match "
                f"List[{self.model_cls.__name__}]: {exc}"
            ) from exc


class VoidConverter(ResponseConverter[None]):
    def convert(self, response: requests.Response) -> None:
        return None


class BinaryConverter(ResponseConverter[bytes]):
    def convert(self, response: requests.Response) -> bytes:
        return response.content


# ---------------------------------------------------------------------- #
def get_object(model_cls: Type[M]) -> ObjectConverter[M]:
    return ObjectConverter(model_cls)


def get_generic_object(model_cls: Type[M], field: str) -> FieldListConverter[M]:
    return FieldListConverter(model_cls, field)


def get_void() -> VoidConverter:
    return VoidConverter()


def get_binary() -> BinaryConverter:
    return BinaryConverter()
