"""
Object helpers for POD services
Deep cloning, key extraction and whitespace trimming of request objects
"""

import copy
from typing import AbstractSet, Any, Dict, Iterable, Mapping, Optional

from ..config import get_utilities_config


def clone(obj: Any) -> Any:
    """Deep copy of any value"""
    return copy.deepcopy(obj)


def extract_keys(obj: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """
    Extract the given keys from a mapping into a new dict

    Args:
        obj: Source mapping, left untouched
        fields: Keys to keep, in output order

    Returns:
        New dict holding only the keys of ``fields`` present in ``obj``
    """
    if not isinstance(obj, Mapping):
        raise TypeError(f"obj must be a mapping, got {type(obj).__name__}")

    return {field: obj[field] for field in fields if field in obj}


def _exempt_fields(not_trim_fields: Optional[AbstractSet[str]]) -> AbstractSet[str]:
    if not_trim_fields is None:
        return get_utilities_config().not_trim_fields
    return not_trim_fields


def _copy_mapping(obj: Mapping[str, Any]) -> Dict[str, Any]:
    if not isinstance(obj, Mapping):
        raise TypeError(f"obj must be a mapping, got {type(obj).__name__}")
    return copy.deepcopy(obj if isinstance(obj, dict) else dict(obj))


def _trim_strings(items):
    trimmed = [item.strip() if isinstance(item, str) else item for item in items]
    return trimmed if isinstance(items, list) else tuple(trimmed)


def trim_object(obj: Mapping[str, Any],
                not_trim_fields: Optional[AbstractSet[str]] = None) -> Dict[str, Any]:
    """
    Trim the string fields of an object, one level deep

    String values are stripped and so are the string elements of list or
    tuple values. Nested mappings are returned unchanged. Fields named in
    ``not_trim_fields`` (default: config ``not_trim_fields``) are skipped.
    The input is never modified.
    """
    exempt = _exempt_fields(not_trim_fields)
    result = _copy_mapping(obj)

    for key, value in list(result.items()):
        if key in exempt:
            continue
        if isinstance(value, str):
            result[key] = value.strip()
        elif isinstance(value, (list, tuple)):
            result[key] = _trim_strings(value)

    return result


def trim_nested_object(obj: Mapping[str, Any],
                       not_trim_fields: Optional[AbstractSet[str]] = None) -> Dict[str, Any]:
    """
    Trim the string fields of an object and of all its inner objects

    Like :func:`trim_object`, but nested mappings and the mapping or
    sequence elements of lists are trimmed recursively. An exempt field
    keeps its whole subtree untouched, whatever its depth, even when the
    same inner object is also reachable through a trimmed field. A container
    shared between fields or reached through a cycle is copied once.
    """
    exempt = _exempt_fields(not_trim_fields)
    if not isinstance(obj, Mapping):
        raise TypeError(f"obj must be a mapping, got {type(obj).__name__}")
    root = obj if isinstance(obj, dict) else dict(obj)
    return _trim_node(root, exempt, {}, {})


def _trim_node(value: Any, exempt: AbstractSet[str],
               trimmed: Dict[int, Any], copies: Dict[int, Any]) -> Any:
    """Fresh trimmed copy of value; trimmed maps source container ids to their copies"""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (dict, list)):
        if id(value) in trimmed:
            return trimmed[id(value)]
        node = copy.copy(value)
        node.clear()
        trimmed[id(value)] = node
        if isinstance(value, dict):
            for key, item in value.items():
                if key in exempt:
                    node[key] = copy.deepcopy(item, copies)
                else:
                    node[key] = _trim_node(item, exempt, trimmed, copies)
        else:
            node.extend(_trim_node(item, exempt, trimmed, copies) for item in value)
        return node
    if isinstance(value, tuple):
        return tuple(_trim_node(item, exempt, trimmed, copies) for item in value)
    return copy.deepcopy(value, copies)
