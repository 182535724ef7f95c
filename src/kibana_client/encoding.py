"""
Encode option models into request bodies and query strings.

Only fields the caller actually set are encoded. A field set to a zero
value (empty string, empty list, False, 0) is kept; a field left unset or
set to None is dropped. Field aliases give the external names.
"""

import json
from typing import Any, Iterator, List, Mapping, Tuple, Union

import httpx
from pydantic import BaseModel

Options = Union[BaseModel, Mapping[str, Any]]


def dump_options(opt: Options) -> Any:
    """Return the JSON-compatible form of ``opt`` with absent fields removed."""
    if isinstance(opt, BaseModel):
        return opt.model_dump(
            mode="json",
            by_alias=True,
            exclude_unset=True,
            exclude_none=True,
        )
    return {key: value for key, value in opt.items() if value is not None}


def encode_json(opt: Options) -> bytes:
    """Serialize ``opt`` as a compact JSON document."""
    if isinstance(opt, BaseModel):
        return opt.model_dump_json(
            by_alias=True,
            exclude_unset=True,
            exclude_none=True,
        ).encode("utf-8")
    return json.dumps(dump_options(opt), separators=(",", ":")).encode("utf-8")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(key: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, dict):
        for sub_key, sub_value in value.items():
            yield from _flatten(f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten(key, item)
    else:
        yield key, _scalar(value)


def query_pairs(opt: Options) -> List[Tuple[str, str]]:
    """
    Flatten ``opt`` into ``(name, value)`` pairs.

    Lists repeat the name once per element, nested objects use
    ``parent[child]`` names. Pairs are ordered by name; repeated names keep
    their element order.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in dump_options(opt).items():
        pairs.extend(_flatten(key, value))
    return sorted(pairs, key=lambda pair: pair[0])


def encode_query(opt: Options) -> str:
    """URL-encode ``opt`` as a query string (without the leading ``?``)."""
    return str(httpx.QueryParams(query_pairs(opt)))
