"""
Result objects and the pipeline that builds them from response trees.

Every write operation returns either a :class:`SuccessfulResult` or an
:class:`ErrorResult`::

    result = gateway.transaction.sale({"amount": "10.00", ...})
    if result.is_success:
        print(result.transaction.id)
    else:
        for error in result.errors.deep_errors:
            print(error.attribute, error.code, error.message)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .exceptions import UnexpectedError
from .resource import AttributeGetter

__all__ = [
    "CreditCardVerification",
    "ErrorResult",
    "Errors",
    "SuccessfulResult",
    "ValidationError",
    "ValidationErrorCollection",
    "expect_root",
    "parse_result",
]

logger = logging.getLogger(__name__)

ERROR_RESPONSE_KEY = "api_error_response"

ResourceFactory = Callable[[Any, Dict[str, Any]], Any]


class ValidationError(AttributeGetter):
    """
    A validation error returned from the gateway:

    * **attribute**: the field which had an error.
    * **code**: a numeric error code, see :class:`paygate.core.error_codes.ErrorCodes`.
    * **message**: a description of the error. Messages may change, codes will not.
    """


class ValidationErrorCollection:
    """
    The validation errors at one level of the error tree, plus access to the
    levels nested below it.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self.data: Mapping[str, Any] = data if data is not None else {"errors": []}

    @property
    def errors(self) -> List[ValidationError]:
        """The errors at this level, without nested errors."""
        raw = self.data.get("errors") or []
        if isinstance(raw, Mapping):
            # A lone <error> under a non-array <errors> element.
            raw = raw.get("error", [])
        if isinstance(raw, Mapping):
            raw = [raw]
        return [ValidationError(error) for error in raw]

    @property
    def size(self) -> int:
        return len(self.errors)

    @property
    def deep_size(self) -> int:
        """The number of errors at this level and every nested level."""
        size = len(self.errors)
        for nested in self._nested_errors.values():
            size += nested.deep_size
        return size

    @property
    def deep_errors(self) -> List[ValidationError]:
        result = list(self.errors)
        for nested in self._nested_errors.values():
            result.extend(nested.deep_errors)
        return result

    def on(self, attribute: str) -> List[ValidationError]:
        """Errors at this level restricted to ``attribute``."""
        return [error for error in self.errors if getattr(error, "attribute", None) == attribute]

    def for_object(self, nested_key: str) -> "ValidationErrorCollection":
        """
        The collection one level down, or an empty collection when the
        gateway reported nothing there::

            result.errors.for_object("transaction").for_object("credit_card").on("number")
        """
        return self._nested_errors.get(nested_key, ValidationErrorCollection())

    def for_index(self, index: int) -> "ValidationErrorCollection":
        return self.for_object("index_%s" % index)

    @property
    def _nested_errors(self) -> Dict[str, "ValidationErrorCollection"]:
        return {
            key: ValidationErrorCollection(value)
            for key, value in self.data.items()
            if key != "errors" and isinstance(value, Mapping)
        }

    def __getitem__(self, index: int) -> ValidationError:
        return self.errors[index]

    def __len__(self) -> int:
        return self.size


class Errors:
    """The root of an error tree; ``len()`` counts errors at every level."""

    def __init__(self, data: Optional[Mapping[str, Any]]) -> None:
        data = dict(data or {})
        # The root level never carries errors of its own.
        data["errors"] = []
        self.errors = ValidationErrorCollection(data)
        self.size = self.errors.deep_size

    @property
    def deep_errors(self) -> List[ValidationError]:
        return self.errors.deep_errors

    def for_object(self, key: str) -> ValidationErrorCollection:
        return self.errors.for_object(key)

    def __len__(self) -> int:
        return self.size


class CreditCardVerification(AttributeGetter):
    """The card verification attached to some failed results."""


class SuccessfulResult(AttributeGetter):
    """
    Returned when the gateway accepted the request. The resource is available
    under its own name, e.g. ``result.transaction``.
    """

    @property
    def is_success(self) -> bool:
        return True


class ErrorResult:
    """
    Returned when the gateway rejected the request with validation errors or
    a processor decline.

    ``resources`` maps keys that may appear in the error response (such as
    ``"transaction"`` for a declined sale) to the factory that builds them;
    keys that are absent from the response are set to ``None``.
    """

    def __init__(
        self,
        gateway: Any,
        attributes: Mapping[str, Any],
        resources: Optional[Mapping[str, ResourceFactory]] = None,
    ) -> None:
        self.params = attributes.get("params")
        self.errors = Errors(attributes.get("errors"))
        self.message = attributes.get("message")

        if "verification" in attributes:
            self.credit_card_verification = CreditCardVerification(attributes["verification"])
        else:
            self.credit_card_verification = None

        for key, factory in (resources or {}).items():
            value = attributes.get(key)
            setattr(self, key, factory(gateway, value) if value is not None else None)

    def __repr__(self) -> str:
        return "<%s '%s' at %x>" % (self.__class__.__name__, self.message, id(self))

    @property
    def is_success(self) -> bool:
        return False


def parse_result(
    gateway: Any,
    response: Mapping[str, Any],
    key: str,
    factory: ResourceFactory,
    resources: Optional[Mapping[str, ResourceFactory]] = None,
) -> SuccessfulResult | ErrorResult:
    """
    Turn a response tree into a result.

    ``key`` names the root element of a successful response and ``factory``
    builds the resource from it. An ``api_error_response`` root becomes an
    :class:`ErrorResult`; any other shape raises :class:`UnexpectedError`.
    """
    if key in response:
        return SuccessfulResult({key: factory(gateway, response[key])})
    if ERROR_RESPONSE_KEY in response:
        error_response = response[ERROR_RESPONSE_KEY]
        logger.debug("Gateway returned validation errors: %s", error_response.get("message"))
        return ErrorResult(gateway, error_response, resources)
    raise UnexpectedError(
        "Expected <%s> or <api-error-response>, got %s"
        % (key.replace("_", "-"), ", ".join(sorted(response)) or "an empty response")
    )


def expect_root(response: Mapping[str, Any], key: str) -> Any:
    """Return ``response[key]``, raising :class:`UnexpectedError` for any other shape."""
    if key in response:
        return response[key]
    raise UnexpectedError(
        "Expected <%s>, got %s"
        % (key.replace("_", "-"), ", ".join(sorted(response)) or "an empty response")
    )
