from __future__ import annotations

"""JSON value types produced by the parser and consumed by the serializer.

These aliases avoid `object`/`Any` so the codec boundary states its value
space explicitly: whatever `json.loads` hands back, and nothing else.
"""

from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]
