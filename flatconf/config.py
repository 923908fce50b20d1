"""Runtime settings model and loaders for flatconf.

Responsibilities:
- Define run settings as a typed dataclass.
- Provide loader entry points for YAML settings files and environment variables.
- Merge explicit CLI overrides on top of loaded settings.

Key types:
- `FlatconfSettings`: normalized settings for one validation run.
- `SettingsLoader`: static construction helpers for `FlatconfSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean
from .schema.validator import MISSING_KEY_POLICIES, MissingKeyPolicy

_DEFAULT_INDENT = 2
_DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class FlatconfSettings:
    """Runtime settings for one validation run.

    Attributes:
        missing_key_policy: `warn` keeps missing schema keys non-fatal; `error` fails the file.
        sort_keys: Whether JSON output sorts object keys.
        indent: JSON indentation width.
        encoding: Text encoding used for schema and config files.
        output_dir: Optional directory receiving one JSON artifact per valid file.
    """

    missing_key_policy: MissingKeyPolicy = "warn"
    sort_keys: bool = True
    indent: int = _DEFAULT_INDENT
    encoding: str = _DEFAULT_ENCODING
    output_dir: Path | None = None

    def validate(self) -> None:
        """Validate settings values before a run starts."""

        if self.missing_key_policy not in MISSING_KEY_POLICIES:
            supported = ", ".join(MISSING_KEY_POLICIES)
            raise ValueError(
                f"Unsupported `missing_key_policy` value `{self.missing_key_policy}`; "
                f"supported: {supported}."
            )
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent <= 0:
            raise ValueError("`indent` must be a positive integer.")
        if not isinstance(self.encoding, str) or not self.encoding.strip():
            raise ValueError("`encoding` must be a non-empty string.")

    def with_overrides(
        self,
        *,
        strict: bool | None = None,
        sort_keys: bool | None = None,
        indent: int | None = None,
        output_dir: Path | None = None,
    ) -> FlatconfSettings:
        """Return a copy with explicit CLI values applied over loaded values."""

        resolved = replace(
            self,
            missing_key_policy=(
                self.missing_key_policy if strict is None else ("error" if strict else "warn")
            ),
            sort_keys=self.sort_keys if sort_keys is None else sort_keys,
            indent=self.indent if indent is None else indent,
            output_dir=self.output_dir if output_dir is None else output_dir,
        )
        resolved.validate()
        return resolved


class SettingsLoader:
    """Factory methods for creating `FlatconfSettings` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"missing_key_policy", "sort_keys", "indent", "encoding", "output_dir"}
    )
    _ENV_KEYS = {
        "missing_key_policy": "FLATCONF_MISSING_KEY_POLICY",
        "sort_keys": "FLATCONF_SORT_KEYS",
        "indent": "FLATCONF_INDENT",
        "encoding": "FLATCONF_ENCODING",
        "output_dir": "FLATCONF_OUTPUT_DIR",
    }

    @staticmethod
    def from_yaml(path: Path, base: FlatconfSettings | None = None) -> FlatconfSettings:
        """Create validated settings from a YAML file layered over `base`."""

        payload = SettingsLoader._parse_yaml_payload(path.read_text(encoding="utf-8"), path)
        return SettingsLoader._build_from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            base=base or FlatconfSettings(),
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> FlatconfSettings:
        """Create validated settings from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            field_name: env_map[env_key]
            for field_name, env_key in SettingsLoader._ENV_KEYS.items()
            if normalize_optional_string(env_map.get(env_key)) is not None
        }
        return SettingsLoader._build_from_mapping(
            payload,
            source_label="environment",
            base=FlatconfSettings(),
        )

    @staticmethod
    def resolve(settings_path: Path | None, env: Mapping[str, str] | None = None) -> FlatconfSettings:
        """Resolve settings with `settings file > environment > defaults` precedence."""

        env_settings = SettingsLoader.from_env(env)
        if settings_path is None:
            return env_settings
        return SettingsLoader.from_yaml(settings_path, base=env_settings)

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML settings `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML settings `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_from_mapping(
        payload: Mapping[str, Any], source_label: str, base: FlatconfSettings
    ) -> FlatconfSettings:
        """Build validated settings from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(SettingsLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        policy = SettingsLoader._optional_string(payload, "missing_key_policy")
        encoding = SettingsLoader._optional_string(payload, "encoding")
        output_dir = SettingsLoader._optional_string(payload, "output_dir")

        settings = FlatconfSettings(
            missing_key_policy=(
                cast(MissingKeyPolicy, policy.lower()) if policy else base.missing_key_policy
            ),
            sort_keys=SettingsLoader._optional_boolean(
                payload, "sort_keys", source_label, default=base.sort_keys
            ),
            indent=SettingsLoader._optional_positive_int(
                payload, "indent", source_label, default=base.indent
            ),
            encoding=encoding or base.encoding,
            output_dir=Path(output_dir) if output_dir else base.output_dir,
        )
        try:
            settings.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return settings

    @staticmethod
    def _optional_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed
