"""Profile registry — built-in and custom YAML profiles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from linedrift.errors import ConfigError
from linedrift.profiles.models import Profile

log = logging.getLogger(__name__)

CUSTOM_PROFILE_DIR = ".linedrift-profiles"


class ProfileRegistry:
    """Central store for all profiles, keyed by id."""

    def __init__(self) -> None:
        self._profiles: Dict[str, Profile] = {}

    # ---- registration ----

    def register(self, profile: Profile) -> None:
        self._profiles[profile.id] = profile

    def register_many(self, profiles: list[Profile]) -> None:
        for p in profiles:
            self.register(p)

    # ---- queries ----

    @property
    def all_profiles(self) -> List[Profile]:
        return sorted(self._profiles.values(), key=lambda p: p.id)

    def get(self, profile_id: str) -> Optional[Profile]:
        return self._profiles.get(profile_id)

    def require(self, profile_id: str) -> Profile:
        profile = self.get(profile_id)
        if profile is None:
            known = ", ".join(p.id for p in self.all_profiles)
            raise ConfigError(f"Unknown profile {profile_id!r} (known: {known})")
        return profile

    # ---- custom profile loading ----

    def load_custom_profiles(self, directory: Path) -> int:
        """Load YAML profile files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_profiles(path)
        return count

    def _load_yaml_profiles(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to load profiles from {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            if not isinstance(entry, dict) or "id" not in entry:
                raise ConfigError(f"Profile entry in {path} needs an 'id'")
            self.register(Profile.from_dict(entry))
            count += 1
        log.debug("loaded %d profile(s) from %s", count, path)
        return count


def build_registry(root: Path) -> ProfileRegistry:
    """Create a registry with built-in profiles plus those under *root*."""
    from linedrift.profiles.builtin import ALL_BUILTIN_PROFILES

    registry = ProfileRegistry()
    registry.register_many(ALL_BUILTIN_PROFILES)
    registry.load_custom_profiles(root / CUSTOM_PROFILE_DIR)
    return registry
