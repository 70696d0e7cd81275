from __future__ import annotations

from typing import Dict, List


class StaticSource:
    """Every asset exists and reads back the same HTML."""

    def __init__(self, html: str = "<html>test</html>") -> None:
        self.html = html
        self.exists_calls: List[str] = []
        self.read_calls: List[str] = []

    def exists(self, app_id: str) -> bool:
        self.exists_calls.append(app_id)
        return True

    def read(self, app_id: str) -> str:
        self.read_calls.append(app_id)
        return self.html


class AbsentSource:
    def __init__(self) -> None:
        self.read_calls: List[str] = []

    def exists(self, app_id: str) -> bool:
        return False

    def read(self, app_id: str) -> str:
        self.read_calls.append(app_id)
        raise AssertionError("read must not be called for absent assets")


class FailingSource:
    def exists(self, app_id: str) -> bool:
        return True

    def read(self, app_id: str) -> str:
        raise PermissionError("Permission denied")


class MappingSource:
    def __init__(self, assets: Dict[str, str]) -> None:
        self.assets = dict(assets)

    def exists(self, app_id: str) -> bool:
        return app_id in self.assets

    def read(self, app_id: str) -> str:
        return self.assets[app_id]


class BrokenCheckSource:
    """``exists`` itself fails, as ``Path.is_file`` does on EACCES."""

    def __init__(self) -> None:
        self.read_calls: List[str] = []

    def exists(self, app_id: str) -> bool:
        raise PermissionError("Permission denied")

    def read(self, app_id: str) -> str:
        self.read_calls.append(app_id)
        raise AssertionError("read must not be called when exists fails")


class EmptyMappingSource(dict):
    """Falsy source: an empty mapping that still answers the protocol."""

    def exists(self, app_id: str) -> bool:
        return app_id in self

    def read(self, app_id: str) -> str:
        return self[app_id]
