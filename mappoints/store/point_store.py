from __future__ import annotations
from pathlib import Path
import numpy as np
from typing import List, Optional

from mappoints.api.frame_data import Point


class PointStore:
    def __init__(self, profile_name: str = "default", root: Optional[Path] = None):
        if root is None:
            root = Path(__file__).resolve(
            ).parents[2] / "runtime" / "cache" / "points"
        root = Path(root)
        root.mkdir(parents=True, exist_ok=True)
        self.path = root / f"{profile_name}.npz"

    def load(self) -> Optional[List[Point]]:
        """
        Returns the saved points in placement order, or None if nothing was saved.
        """
        if not self.path.exists():
            return None

        with np.load(self.path) as data:
            pts = data["points"]
        return [Point(float(x), float(y)) for x, y in pts.reshape(-1, 2).tolist()]

    def save(self, points: List[Point]) -> None:
        arr = np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)
        np.savez_compressed(self.path, points=arr)
