from .view_base import View
from .frame_data import FrameData, Point, DrawList, DrawCircle, DrawLine
from .config import AppConfig, CircleStyle, ViewConfig

__all__ = ["View", "FrameData", "Point", "DrawList", "DrawCircle", "DrawLine",
           "AppConfig", "CircleStyle", "ViewConfig"]
