from __future__ import annotations
import importlib.util
from pathlib import Path
import yaml
from typing import Dict, Any


def load_yaml(path: Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing config file {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_view_manifest(view_root: Path) -> Dict[str, Any]:
    manifest = view_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {view_root}")
    return load_yaml(manifest)


def load_view_module(view_root: Path):
    """
    Loads views/<id>/main.py module and returns the module object.
    The file must define a get_view() -> View factory.
    """
    main_py = view_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {view_root}")
    spec = importlib.util.spec_from_file_location(f"views.{view_root.name.replace('-', '_')}.main", main_py)
    module = importlib.util.module_from_spec(spec)
    assert spec and spec.loader
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    if not hasattr(module, "get_view"):
        raise AttributeError("View module must define get_view()")
    return module
