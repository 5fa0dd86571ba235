"""Able: resolution of string-based abilities with groups, values, and templates."""

from .access import (
    can_access,
    get_missing_abilities,
    require_abilities,
    resolve,
)
from .definition import (
    fetch_group_definition,
    load_group_definition,
    save_group_definition,
    validate_group_definition,
)
from .group import flatten
from .sso import get_sign_in_url
from .types import (
    ANNOTATION_PREFIX,
    ARRAY_SUFFIX,
    AbilitySet,
    AbleError,
    ErrorCode,
    GroupDefinition,
    SsoConfig,
    ValueAnnotation,
    ValueKind,
    ValueMap,
)
from .values import (
    apply_values,
    encode_values,
    extract_values,
    find_placeholders,
    is_annotation,
    parse_annotation,
    to_list,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "AbilitySet",
    "GroupDefinition",
    "ValueMap",
    "ValueKind",
    "ValueAnnotation",
    "ANNOTATION_PREFIX",
    "ARRAY_SUFFIX",
    "ErrorCode",
    "AbleError",
    "SsoConfig",
    # Group
    "flatten",
    # Values
    "to_list",
    "is_annotation",
    "parse_annotation",
    "extract_values",
    "encode_values",
    "find_placeholders",
    "apply_values",
    # Access
    "resolve",
    "get_missing_abilities",
    "can_access",
    "require_abilities",
    # Definition
    "validate_group_definition",
    "load_group_definition",
    "save_group_definition",
    "fetch_group_definition",
    # SSO
    "get_sign_in_url",
]
