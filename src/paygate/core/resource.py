"""
Attribute-backed objects built from response trees.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Sequence

from .exceptions import InvalidParametersError

__all__ = ["AttributeGetter", "Resource"]

_ANY_KEY = "[__any_key__]"


class AttributeGetter:
    def __init__(self, attributes: Optional[Mapping[str, Any]] = None) -> None:
        self._setattrs: List[str] = []
        for key, val in (attributes or {}).items():
            setattr(self, key, val)
            self._setattrs.append(key)

    def __repr__(self, detail_list: Optional[Sequence[str]] = None) -> str:
        if detail_list is None:
            detail_list = self._setattrs

        details = ", ".join(
            "%s: %r" % (attr, getattr(self, attr))
            for attr in detail_list
            if hasattr(self, attr)
        )
        return "<%s {%s} at %d>" % (self.__class__.__name__, details, id(self))


class Resource(AttributeGetter):
    """
    An object owned by a gateway facade. ``signature`` lists describe which
    request keys a facade accepts, e.g.::

        ["amount", {"credit_card": ["number", "cvv"]}, {"custom_fields": ["__any_key__"]}]
    """

    @staticmethod
    def verify_keys(params: Mapping[str, Any], signature: Sequence[Any]) -> None:
        allowed_keys = Resource._flattened_signature(signature)
        params_keys = Resource._flattened_params_keys(params)

        invalid_keys = [key for key in params_keys if key not in allowed_keys]
        invalid_keys = Resource._remove_wildcard_keys(allowed_keys, invalid_keys)

        if invalid_keys:
            raise InvalidParametersError("Invalid keys: " + ", ".join(invalid_keys))

    @staticmethod
    def _flattened_params_keys(params: Any, parent: Optional[str] = None) -> List[str]:
        if isinstance(params, str):
            return ["%s[%s]" % (parent, params)]

        keys: List[str] = []
        for key, val in params.items():
            full_key = "%s[%s]" % (parent, key) if parent else key
            if isinstance(val, Mapping):
                keys += Resource._flattened_params_keys(val, full_key)
            elif isinstance(val, list):
                for item in val:
                    keys += Resource._flattened_params_keys(item, full_key)
            else:
                keys.append(full_key)
        return keys

    @staticmethod
    def _flattened_signature(signature: Sequence[Any], parent: Optional[str] = None) -> List[str]:
        flat_sig: List[str] = []
        for item in signature:
            if isinstance(item, Mapping):
                for key, val in item.items():
                    full_key = parent + "[" + key + "]" if parent else key
                    flat_sig += Resource._flattened_signature(val, full_key)
            else:
                full_key = parent + "[" + item + "]" if parent else item
                flat_sig.append(full_key)
        return flat_sig

    @staticmethod
    def _remove_wildcard_keys(allowed_keys: List[str], invalid_keys: List[str]) -> List[str]:
        wildcard_patterns = [
            re.compile(
                re.escape(key[: -len(_ANY_KEY)]) + r"\[[\w-]+\]"
            )
            for key in allowed_keys
            if key.endswith(_ANY_KEY)
        ]
        return [
            key
            for key in invalid_keys
            if not any(pattern.fullmatch(key) for pattern in wildcard_patterns)
        ]

    def __init__(self, gateway: Any, attributes: Mapping[str, Any]) -> None:
        super().__init__(attributes)
        self.gateway = gateway
