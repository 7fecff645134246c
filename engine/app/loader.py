from __future__ import annotations
import importlib
from pathlib import Path
import yaml
from typing import Dict, Any


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{manifest} must contain a mapping, got {type(data).__name__}")
    return data


def load_game_module(game_root: Path):
    """
    Imports games/<id>/main.py as games.<id>.main and returns the module object.
    The file must define a get_game() -> Game factory.
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")
    module = importlib.import_module(f"{game_root.parent.name}.{game_root.name}.main")
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    return module
