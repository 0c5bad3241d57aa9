"""Named detection presets — models, registry, built-ins."""

from linedrift.profiles.models import Profile
from linedrift.profiles.registry import ProfileRegistry, build_registry

__all__ = ["Profile", "ProfileRegistry", "build_registry"]
