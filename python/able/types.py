"""Able type aliases, enums, and error classes."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

AbilitySet = List[str]
GroupDefinition = Dict[str, Union[List[str], str, None]]
ValueMap = Dict[str, Union[str, List[str]]]

ANNOTATION_PREFIX = "?"
ARRAY_SUFFIX = "[]"


class ValueKind(str, Enum):
    SCALAR = "scalar"
    ARRAY = "array"


class ErrorCode(str, Enum):
    DEFINITION_INVALID = "DEFINITION_INVALID"
    DEFINITION_FETCH_FAILED = "DEFINITION_FETCH_FAILED"
    ACCESS_DENIED = "ACCESS_DENIED"


class AbleError(Exception):
    """Able-specific error with an error code."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code


@dataclass
class ValueAnnotation:
    """A parsed `?key=value` or `?key[]=value` token.

    `value` is None when the token has no `=` at all.
    """

    key: str
    kind: ValueKind
    value: Optional[str] = None


@dataclass
class SsoConfig:
    base_url: str = "https://www.account.finsweet.com"
