# SPDX-License-Identifier: MIT

import json
from typing import Any

from worklog.errors import ParseError, StructureError
from worklog.model.taxonomy import Taxonomy


def taxonomy_to_json(taxonomy: Taxonomy) -> str:
    return json.dumps(taxonomy, indent=2, ensure_ascii=False)


def taxonomy_from_json(text: str) -> dict[str, Any]:
    """Parse an exported taxonomy. Merging with the defaults is up to the caller."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Malformed JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise StructureError("Taxonomy must be a JSON object keyed by category")

    return payload
