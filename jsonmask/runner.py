"""Batch runner that loads mask rules from a YAML file and masks JSON files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import yaml

from .engine import JsonMask
from .exceptions import ConfigurationError, JsonMaskError
from .models import EngineConfig, MaskRules

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Result of masking a single file."""
    source: str
    destination: Optional[str]
    success: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "source": self.source,
            "destination": self.destination,
            "success": self.success,
        }
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class RunReport:
    """Report across all files of a batch run."""
    total: int = 0
    masked: int = 0
    failed: int = 0
    files: list[FileResult] = field(default_factory=list)
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')

    def add(self, result: FileResult) -> None:
        self.files.append(result)
        self.total += 1
        if result.success:
            self.masked += 1
        else:
            self.failed += 1

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "total": self.total,
            "masked": self.masked,
            "failed": self.failed,
            "files": [f.to_dict() for f in self.files],
        }


class MaskRunner:
    """
    Masks JSON files with rules loaded from a YAML/JSON file.

    Rules file:

        fields:
          - password
          - /user/email
        string:
          mask: hash
        engine:
          max_depth: 200

    Usage:
        runner = MaskRunner("rules.yaml")
        report = runner.run("input/", "masked/")
    """

    def __init__(
        self,
        rules_path: str,
        engine_config: Optional[EngineConfig] = None
    ):
        """
        Initialize the runner.

        Args:
            rules_path: Path to YAML/JSON rules file
            engine_config: Overrides the rules file's ``engine`` section
        """
        self.rules_path = Path(rules_path)
        self._engine_config = engine_config
        self._rules: Optional[MaskRules] = None
        self._engine: Optional[JsonMask] = None

    @property
    def rules(self) -> MaskRules:
        """Load and cache the rules from file."""
        if self._rules is None:
            self._load()
        return self._rules

    @property
    def engine(self) -> JsonMask:
        if self._engine is None:
            self._load()
        return self._engine

    @property
    def engine_config(self) -> EngineConfig:
        return self.engine.config

    def _load(self) -> None:
        data = load_rules_file(self.rules_path)
        self._rules = MaskRules.from_dict(data)
        config = self._engine_config or EngineConfig.from_dict(data.get("engine"))
        self._engine = JsonMask.from_rules(self._rules, config)
        logger.debug("Loaded %d field(s) from %s", len(self._rules.fields), self.rules_path)

    def mask_text(self, text: str) -> str:
        return self.engine.mask(text)

    def mask_file(self, source: str | Path, destination: Optional[str | Path] = None) -> str:
        """
        Mask one JSON file.

        Args:
            source: Input JSON file
            destination: Output file; when omitted nothing is written

        Returns:
            The masked JSON text
        """
        source = Path(source)
        masked = self.mask_text(source.read_text(encoding="utf-8"))
        if destination is not None:
            destination = Path(destination)
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(masked, encoding="utf-8")
        return masked

    def run(self, input_folder: str, output_folder: str) -> RunReport:
        """
        Mask every ``*.json`` file of a folder into another folder.

        A file that fails to mask is recorded in the report and skipped.
        Errors in the rules file are raised.

        Returns:
            RunReport with per-file results
        """
        input_path = Path(input_folder)
        output_path = Path(output_folder)
        if not input_path.is_dir():
            raise FileNotFoundError(f"Input folder not found: {input_path}")

        # Fail on bad rules before touching any file
        if self._engine is None:
            self._load()

        report = RunReport()
        for source in sorted(input_path.glob("*.json")):
            destination = output_path / source.name
            try:
                self.mask_file(source, destination)
            except (JsonMaskError, OSError) as e:
                logger.warning("Failed to mask %s: %s", source, e)
                report.add(FileResult(str(source), None, False, str(e)))
                continue
            report.add(FileResult(str(source), str(destination), True))

        logger.info(
            "Masked %d/%d file(s) from %s", report.masked, report.total, input_path
        )
        return report


def load_rules_file(path: str | Path) -> dict:
    """Load rules from a YAML or JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    with open(path, 'r', encoding="utf-8") as f:
        content = f.read()

    # JSON is valid YAML
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse rules file: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Rules file must contain an object",
            {"type": type(data).__name__}
        )
    return data
