"""Group definition documents: loading, saving, validation, and fetching."""

import json
import logging

from .types import AbleError, ErrorCode, GroupDefinition

logger = logging.getLogger(__name__)


def validate_group_definition(doc: object) -> None:
    """Validate that a document maps alias strings to a member, members, or null.

    Raises:
        AbleError: on validation failure
    """
    if not isinstance(doc, dict):
        raise AbleError(ErrorCode.DEFINITION_INVALID, "Group definition must be a JSON object")

    for alias, members in doc.items():
        if not isinstance(alias, str):
            raise AbleError(ErrorCode.DEFINITION_INVALID, f"Alias {alias!r} must be a string")
        if members is None or isinstance(members, str):
            continue
        if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
            raise AbleError(
                ErrorCode.DEFINITION_INVALID,
                f"Members of '{alias}' must be a string, a list of strings, or null",
            )


def load_group_definition(path: str) -> GroupDefinition:
    """Load and validate a group definition from a JSON file."""
    with open(path, encoding="utf-8") as f:
        try:
            doc = json.load(f)
        except ValueError as e:
            raise AbleError(ErrorCode.DEFINITION_INVALID, f"Invalid JSON in {path}: {e}") from e

    validate_group_definition(doc)
    logger.debug("Loaded %d aliases from %s", len(doc), path)
    return doc


def save_group_definition(definition: GroupDefinition, path: str) -> None:
    """Save a group definition to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(definition, f, indent=2)


def fetch_group_definition(url: str, timeout: float = 10) -> GroupDefinition:
    """Fetch a group definition over HTTPS.

    Raises:
        AbleError: on redirects, HTTP errors, or an invalid document
    """
    import requests

    try:
        resp = requests.get(url, headers={"Accept": "application/json"}, allow_redirects=False, timeout=timeout)
    except requests.RequestException as e:
        raise AbleError(ErrorCode.DEFINITION_FETCH_FAILED, f"Request to {url} failed: {e}") from e

    if resp.is_redirect or resp.is_permanent_redirect:
        raise AbleError(
            ErrorCode.DEFINITION_FETCH_FAILED,
            f"Redirect detected fetching {url} (status {resp.status_code}). Redirects are not allowed.",
        )

    if not resp.ok:
        raise AbleError(ErrorCode.DEFINITION_FETCH_FAILED, f"HTTP {resp.status_code} fetching {url}")

    try:
        doc = resp.json()
    except ValueError as e:
        raise AbleError(ErrorCode.DEFINITION_FETCH_FAILED, f"Invalid JSON from {url}: {e}") from e

    validate_group_definition(doc)
    logger.debug("Fetched %d aliases from %s", len(doc), url)
    return doc
