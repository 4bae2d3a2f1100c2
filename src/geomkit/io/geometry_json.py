"""Geometry JSON serialization/deserialization helpers.

Every geomkit value type, and every transformation, is written as a
JSON object carrying the schema id and the entity type, with the raw
components in nested lists: ::

    {"schema": "geomkit-geometry-json-v0.1", "type": "Point3d",
     "components": [1.0, 2.0, 3.0]}

    {"schema": "geomkit-geometry-json-v0.1", "type": "Frame2d",
     "origin": [0.0, 0.0], "xDirection": [1.0, 0.0], "yDirection": [0.0, 1.0]}

Floats are written with ``repr`` precision, so ``loads(dumps(g)) == g``
holds exactly for every finite value.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Sequence

from geomkit.axis import Axis2d, Axis3d
from geomkit.bounding_box import BoundingBox2d, BoundingBox3d
from geomkit.direction import Direction2d, Direction3d
from geomkit.frame import Frame2d, Frame3d
from geomkit.plane import Plane3d
from geomkit.point import Point2d, Point3d
from geomkit.transformation import (
    Composition,
    Identity,
    Mirror,
    Rotation,
    Scaling,
    Translation,
)
from geomkit.vector import Vector2d, Vector3d

logger = logging.getLogger(__name__)

SCHEMA_ID = "geomkit-geometry-json-v0.1"

__all__ = [
    "SCHEMA_ID",
    "GeometryDecodeError",
    "to_json_dict",
    "from_json_dict",
    "dumps",
    "loads",
]


class GeometryDecodeError(ValueError):
    """Raised when a JSON document does not describe valid geometry."""


def _float_vec(vec: Sequence[float]) -> List[float]:
    return [float(c) for c in vec]


_COMPONENT_TYPES = (Vector2d, Vector3d, Direction2d, Direction3d,
                    Point2d, Point3d, BoundingBox2d, BoundingBox3d)

## field name in the document -> attribute name on the entity
_FIELDS: Dict[type, Sequence[tuple]] = {
    Axis2d: (("origin", "origin"), ("direction", "direction")),
    Axis3d: (("origin", "origin"), ("direction", "direction")),
    Frame2d: (("origin", "origin"), ("xDirection", "x_direction"), ("yDirection", "y_direction")),
    Frame3d: (("origin", "origin"), ("xDirection", "x_direction"),
              ("yDirection", "y_direction"), ("zDirection", "z_direction")),
    Plane3d: (("origin", "origin"), ("xDirection", "x_direction"), ("yDirection", "y_direction")),
}


def _serialize_transformation(t) -> Dict[str, Any]:
    if isinstance(t, Identity):
        return {}
    if isinstance(t, Translation):
        return {"vector": _float_vec(t.vector.components())}
    if isinstance(t, Rotation):
        return {"center": _float_vec(t.center.components()),
                "axis": _float_vec(t.axis.components()),
                "angle": float(t.angle)}
    if isinstance(t, Mirror):
        return {"origin": _float_vec(t.origin.components()),
                "normal": _float_vec(t.normal.components())}
    if isinstance(t, Scaling):
        return {"center": _float_vec(t.center.components()),
                "factors": _float_vec(t.factors)}
    if isinstance(t, Composition):
        return {"steps": [to_json_dict(s) for s in t.steps]}
    raise ValueError(f"unsupported transformation {t!r}")


_TRANSFORMATION_TYPES = (Identity, Translation, Rotation, Mirror, Scaling, Composition)


def to_json_dict(g) -> Dict[str, Any]:
    """Serialize a geomkit value or transformation to a JSON-compatible dict."""
    doc: Dict[str, Any] = {"schema": SCHEMA_ID, "type": type(g).__name__}
    if isinstance(g, _COMPONENT_TYPES):
        doc["components"] = _float_vec(g.components())
    elif type(g) in _FIELDS:
        for key, attr in _FIELDS[type(g)]:
            doc[key] = _float_vec(getattr(g, attr).components())
    elif isinstance(g, _TRANSFORMATION_TYPES):
        doc.update(_serialize_transformation(g))
    else:
        raise ValueError(f"don't know how to serialize {g!r}")
    return doc


def _require(doc: Dict[str, Any], key: str):
    if key not in doc:
        raise GeometryDecodeError(f"{doc.get('type')} document is missing {key!r}")
    return doc[key]


_COMPONENT_DECODERS: Dict[str, Callable] = {cls.__name__: cls.from_components for cls in _COMPONENT_TYPES}

_FIELD_DECODERS: Dict[str, Callable] = {
    "Axis2d": lambda d: Axis2d(Point2d.from_components(_require(d, "origin")),
                               Direction2d.from_components(_require(d, "direction"))),
    "Axis3d": lambda d: Axis3d(Point3d.from_components(_require(d, "origin")),
                               Direction3d.from_components(_require(d, "direction"))),
    "Frame2d": lambda d: Frame2d(Point2d.from_components(_require(d, "origin")),
                                 Direction2d.from_components(_require(d, "xDirection")),
                                 Direction2d.from_components(_require(d, "yDirection"))),
    "Frame3d": lambda d: Frame3d(Point3d.from_components(_require(d, "origin")),
                                 Direction3d.from_components(_require(d, "xDirection")),
                                 Direction3d.from_components(_require(d, "yDirection")),
                                 Direction3d.from_components(_require(d, "zDirection"))),
    "Plane3d": lambda d: Plane3d(Point3d.from_components(_require(d, "origin")),
                                 Direction3d.from_components(_require(d, "xDirection")),
                                 Direction3d.from_components(_require(d, "yDirection"))),
    "Identity": lambda d: Identity(),
    "Translation": lambda d: Translation(Vector3d.from_components(_require(d, "vector"))),
    "Rotation": lambda d: Rotation(Point3d.from_components(_require(d, "center")),
                                   Direction3d.from_components(_require(d, "axis")),
                                   float(_require(d, "angle"))),
    "Mirror": lambda d: Mirror(Point3d.from_components(_require(d, "origin")),
                               Direction3d.from_components(_require(d, "normal"))),
    "Scaling": lambda d: Scaling(Point3d.from_components(_require(d, "center")),
                                 tuple(float(f) for f in _require(d, "factors"))),
    "Composition": lambda d: Composition(tuple(from_json_dict(s) for s in _require(d, "steps"))),
}


def from_json_dict(doc: Dict[str, Any]):
    """Rebuild a geomkit value or transformation from ``to_json_dict`` output."""
    if not isinstance(doc, dict):
        raise GeometryDecodeError(f"expected a JSON object, got {doc!r}")
    schema = doc.get("schema")
    if schema != SCHEMA_ID:
        raise GeometryDecodeError(f"unsupported schema {schema!r}")
    kind = doc.get("type")
    logger.debug("decoding %s document", kind)
    try:
        if kind in _COMPONENT_DECODERS:
            return _COMPONENT_DECODERS[kind](_require(doc, "components"))
        if kind in _FIELD_DECODERS:
            return _FIELD_DECODERS[kind](doc)
    except GeometryDecodeError:
        raise
    except (ValueError, TypeError) as exc:
        raise GeometryDecodeError(f"invalid {kind} document: {exc}") from exc
    raise GeometryDecodeError(f"unknown geometry type {kind!r}")


def dumps(g, **kwargs) -> str:
    """Serialize ``g`` to a JSON string; keyword arguments go to ``json.dumps``."""
    return json.dumps(to_json_dict(g), **kwargs)


def loads(text: str):
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GeometryDecodeError(f"malformed JSON: {exc}") from exc
    return from_json_dict(doc)
