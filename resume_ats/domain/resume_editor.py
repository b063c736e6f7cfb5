"""Pure edit operations over resume documents.

Each operation takes a document and returns a new :class:`ResumeDocument`;
the input is never mutated.  Every successful edit refreshes
``metadata.lastUpdated``.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional

from .errors import EditError
from .resume_document import (
    ARRAY_SECTIONS,
    SECTION_KEYS,
    ResumeDocument,
    coerce_document,
    generate_id,
    sample_resume,
    utc_now_iso,
)

ID_PREFIXES: Dict[str, str] = {"experience": "exp", "education": "edu", "projects": "proj"}


def update_section(document: Any, section: str, payload: Any, now: Optional[str] = None) -> ResumeDocument:
    """Replace a whole section, e.g. ``basics`` or ``experience``."""
    _check_section(section, SECTION_KEYS)
    data = _editable(document)
    data[section] = copy.deepcopy(payload)
    return _finish(data, now)


def update_field(document: Any, path: str, value: Any, now: Optional[str] = None) -> ResumeDocument:
    """Set a nested field by dot path, e.g. ``basics.fullName`` or ``experience.0.role``."""
    keys = (path or "").split(".")
    if any(not key for key in keys):
        raise EditError(f"Invalid field path: {path!r}")
    _check_section(keys[0], SECTION_KEYS)

    data = _editable(document)
    current: Any = data
    for key in keys[:-1]:
        if isinstance(current, list):
            current = current[_list_index(current, key, path)]
        else:
            if current.get(key) is None:
                current[key] = {}
            current = current[key]
        if not isinstance(current, (dict, list)):
            raise EditError(f"Cannot descend into scalar at {key!r} in path {path!r}")

    last = keys[-1]
    if isinstance(current, list):
        current[_list_index(current, last, path)] = copy.deepcopy(value)
    else:
        current[last] = copy.deepcopy(value)
    return _finish(data, now)


def add_array_item(document: Any, section: str, item: Any, now: Optional[str] = None) -> ResumeDocument:
    """Append *item* to an array section; object items get an id if they lack one."""
    _check_section(section, ARRAY_SECTIONS)
    data = _editable(document)
    if section in ID_PREFIXES:
        if not isinstance(item, Mapping):
            raise EditError(f"Items in '{section}' must be objects")
        item = dict(copy.deepcopy(item))
        if not item.get("id"):
            item["id"] = generate_id(ID_PREFIXES[section])
    data[section].append(item)
    return _finish(data, now)


def remove_array_item(
    document: Any,
    section: str,
    item_id: Optional[str] = None,
    index: Optional[int] = None,
    now: Optional[str] = None,
) -> ResumeDocument:
    """Remove an item by id (object sections) or by position (any section).

    With neither *item_id* nor *index* the document is returned unchanged.
    """
    _check_section(section, ARRAY_SECTIONS)
    if item_id is None and index is None:
        return coerce_document(document)

    data = _editable(document)
    items: List[Any] = data[section]
    if item_id is not None:
        data[section] = [item for item in items if not (isinstance(item, dict) and item.get("id") == item_id)]
    else:
        data[section] = [item for i, item in enumerate(items) if i != index]
    return _finish(data, now)


def update_array_item(
    document: Any,
    section: str,
    item_id: str,
    updates: Mapping[str, Any],
    now: Optional[str] = None,
) -> ResumeDocument:
    """Merge *updates* into the item whose id is *item_id*."""
    _check_section(section, tuple(ID_PREFIXES))
    data = _editable(document)
    data[section] = [
        {**item, **copy.deepcopy(dict(updates)), "id": item["id"]} if item.get("id") == item_id else item
        for item in data[section]
    ]
    return _finish(data, now)


def set_resume(payload: Any, now: Optional[str] = None) -> ResumeDocument:
    """Replace the whole document, e.g. after an import."""
    return _finish(_editable(payload), now)


def reset_resume(now: Optional[str] = None) -> ResumeDocument:
    """Start over from the sample document."""
    return coerce_document(sample_resume(last_updated=now or utc_now_iso()))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _editable(document: Any) -> Dict[str, Any]:
    return coerce_document(document).to_dict()


def _finish(data: Dict[str, Any], now: Optional[str]) -> ResumeDocument:
    metadata = data.get("metadata")
    data["metadata"] = {**(metadata if isinstance(metadata, Mapping) else {}), "lastUpdated": now or utc_now_iso()}
    return coerce_document(data)


def _check_section(section: str, allowed) -> None:
    if section not in allowed:
        raise EditError(f"Unknown section '{section}'. Expected one of: {', '.join(allowed)}")


def _list_index(items: List[Any], key: str, path: str) -> int:
    try:
        index = int(key)
    except ValueError:
        raise EditError(f"Expected a list index at {key!r} in path {path!r}") from None
    if not 0 <= index < len(items):
        raise EditError(f"Index {index} out of range in path {path!r}")
    return index
