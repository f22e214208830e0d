"""Bounding volume hierarchy for fast ray queries."""

from __future__ import annotations

from collections.abc import Iterable

from raytracer.aabb import AABB, surrounding_box
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray

_Boxed = list[tuple[Hittable, AABB]]


def _extent(boxed: _Boxed, axis: int) -> float:
    low = min(box.minimum[axis] for _, box in boxed)
    high = max(box.maximum[axis] for _, box in boxed)
    return high - low


class BVH(Hittable):
    """A binary tree of bounding boxes split along the widest axis."""

    def __init__(self, objects: Iterable[Hittable], time0: float, time1: float) -> None:
        boxed: _Boxed = []
        for obj in objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                raise ValueError("no bounding box in bvh node")
            boxed.append((obj, box))
        if not boxed:
            raise ValueError("no object in the scene")
        self._build(boxed)

    @classmethod
    def _node(cls, boxed: _Boxed) -> BVH:
        node = cls.__new__(cls)
        node._build(boxed)
        return node

    def _build(self, boxed: _Boxed) -> None:
        if len(boxed) == 1:
            self._leaf, self.bbox = boxed[0]
            self._children = None
            return
        axis = max(range(3), key=lambda a: _extent(boxed, a))
        ordered = sorted(boxed, key=lambda item: item[1].minimum[axis] + item[1].maximum[axis])
        half = len(ordered) // 2
        left = self._node(ordered[:half])
        right = self._node(ordered[half:])
        self._leaf = None
        self._children = (left, right)
        self.bbox = surrounding_box(left.bbox, right.bbox)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        if not self.bbox.hit(r, t_min, t_max):
            return None
        if self._children is None:
            return self._leaf.hit(r, t_min, t_max)
        left, right = self._children
        left_hit = left.hit(r, t_min, t_max)
        if left_hit is not None:
            t_max = left_hit.t
        right_hit = right.hit(r, t_min, t_max)
        return right_hit if right_hit is not None else left_hit

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.bbox