import os
from typing import Dict, List

import yaml
from fastapi import Request

from csvso.router import ACTIONS, route


class ConfigRequest(Request):
    """
    Minimal Request wrapper for config-driven execution.
    Provides headers for identity extraction in router.
    """

    def __init__(self, user_id: str = "config_executor"):
        scope = {"type": "http", "headers": []}
        super().__init__(scope)
        self._user_id = user_id

    @property
    def headers(self):
        return {"x-user-id": self._user_id}


class ConfigExecutor:
    """
    Runs Generate / Import / Export from a YAML configuration.

    source:
      csv_path: Data/Items.csv
      encoding: cp932
    output:
      folder: Assets/ScriptableObjects
      namespace: Game.Data
      implement_identifiable: true
    export:
      path: exports/Items.csv
    actions: [generate, import]
    """

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()

    # ------------------------------------------
    # Load YAML
    # ------------------------------------------
    def _load_config(self) -> Dict:
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    # ------------------------------------------
    # Build Router Payload
    # ------------------------------------------
    def _build_payload(self) -> Dict:
        cfg = self.config

        source_cfg = cfg.get("source", {}) or {}
        output_cfg = cfg.get("output", {}) or {}
        export_cfg = cfg.get("export", {}) or {}

        return {
            "csv_path": source_cfg.get("csv_path"),
            "csv_encoding": source_cfg.get("encoding"),
            "base_name": source_cfg.get("base_name"),
            "output_folder": output_cfg.get("folder"),
            "namespace": output_cfg.get("namespace", ""),
            "implement_identifiable": bool(output_cfg.get("implement_identifiable", False)),
            "export_path": export_cfg.get("path"),
            "user_id": cfg.get("user_id", "config_executor"),
        }

    def _actions(self) -> List[str]:
        actions = self.config.get("actions") or ["generate"]
        normalized = [str(a).upper() for a in actions]
        for action in normalized:
            if action not in ACTIONS:
                raise ValueError(
                    f"Invalid action in config: '{action}'. Allowed: {sorted(ACTIONS)}"
                )
        return normalized

    # ------------------------------------------
    # Execute
    # ------------------------------------------
    def execute(self) -> List[Dict]:
        payload = self._build_payload()
        actions = self._actions()
        request = ConfigRequest(user_id=payload.get("user_id", "config_executor"))
        return [route(action, payload, request) for action in actions]
