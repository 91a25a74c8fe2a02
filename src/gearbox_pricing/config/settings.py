"""
Centralized settings for the gearbox pricing catalog.
"""
from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Pricing settings with sensible defaults."""

    # Prefix lengths probed during discount resolution, longest first
    prefix_lengths: tuple = (6, 5, 4, 3, 2)

    # Reserved key in the prefix rule table holding the fallback rate
    default_rule_key: str = 'default'

    # Market price markup bounds (applied after series markup and factors)
    market_markup_floor: float = 1.05
    market_markup_ceiling: float = 1.30
    default_market_markup: float = 1.10

    # Used by scripts when they configure logging
    log_level: str = 'INFO'

    @classmethod
    def load(cls, **overrides) -> 'Settings':
        """Build settings from defaults, applying any keyword overrides."""
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

        if 'prefix_lengths' in overrides:
            # Always probe longest prefixes first
            overrides['prefix_lengths'] = tuple(
                sorted({int(n) for n in overrides['prefix_lengths']}, reverse=True)
            )

        return cls(**overrides)


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
