from __future__ import annotations

"""Theme and flavor definitions and the read-only catalog interface.

A catalog maps theme ids to immutable :class:`ThemeDefinition` objects and
resolves flavors either from the theme itself or from theme-independent
defaults. Lookups fail closed: an unknown id raises a
:class:`CatalogLookupError` subclass instead of substituting another theme.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Protocol

from .color_types import AccentSlot


class CatalogLookupError(KeyError):
    """Raised when a theme, flavor or slot identifier is not in the catalog."""

    def __str__(self) -> str:  # KeyError quotes its argument by default
        return str(self.args[0]) if self.args else ""


class ThemeNotFoundError(CatalogLookupError):
    """Unknown theme id."""


class FlavorNotFoundError(CatalogLookupError):
    """Unknown flavor id for the requested theme."""


@dataclass(frozen=True)
class FlavorDefinition:
    """Accent intensity preset.

    Attributes
    ----------
    accent_hue:
        Anchor adjustment in degrees (signed, not an absolute hue).
    accent_sat, accent_light:
        Accent saturation/lightness in [0, 100].
    comment_light:
        Comment (base03) lightness in [0, 100].
    """

    accent_hue: float
    accent_sat: float
    accent_light: float
    comment_light: float


@dataclass(frozen=True)
class ThemeDefinition:
    """Base theme identity: background defaults plus per-slot hue offsets."""

    id: str
    name: str
    bg_hue: float
    bg_sat: float
    bg_light: float
    tagline: str = ""
    inspirations: str = ""
    accent_offsets: Mapping[AccentSlot, float] = field(default_factory=dict)
    flavors: Mapping[str, FlavorDefinition] = field(default_factory=dict)

    def offset_for(self, slot: AccentSlot) -> float:
        """Theme offset for a slot; 0 when the theme does not define it."""
        return float(self.accent_offsets.get(slot, 0.0))


class ThemeCatalog(Protocol):
    """Read-only provider of theme and flavor definitions."""

    @property
    def default_theme(self) -> str: ...

    @property
    def default_flavor(self) -> str: ...

    def get_theme(self, theme_id: str) -> ThemeDefinition: ...

    def get_flavor(self, theme_id: str, flavor_id: str) -> FlavorDefinition: ...

    def theme_ids(self) -> list[str]: ...

    def flavor_ids(self, theme_id: Optional[str] = None) -> list[str]: ...


class StaticThemeCatalog:
    """In-memory catalog built from definitions known up front."""

    def __init__(
        self,
        themes: Iterable[ThemeDefinition],
        default_flavors: Optional[Mapping[str, FlavorDefinition]] = None,
        *,
        default_theme: Optional[str] = None,
        default_flavor: str = "balanced",
    ) -> None:
        self._themes: dict[str, ThemeDefinition] = {}
        for theme in themes:
            if theme.id in self._themes:
                raise ValueError(f"duplicate theme id: {theme.id!r}")
            self._themes[theme.id] = theme
        if not self._themes:
            raise ValueError("a catalog needs at least one theme")
        self._default_flavors: dict[str, FlavorDefinition] = dict(default_flavors or {})
        self._default_theme = default_theme or next(iter(self._themes))
        self._default_flavor = default_flavor
        # the canonical defaults must themselves resolve
        self.get_flavor(self.get_theme(self._default_theme).id, self._default_flavor)

    @property
    def default_theme(self) -> str:
        return self._default_theme

    @property
    def default_flavor(self) -> str:
        return self._default_flavor

    def get_theme(self, theme_id: str) -> ThemeDefinition:
        theme = self._themes.get(theme_id)
        if theme is None:
            raise ThemeNotFoundError(f"theme not found: {theme_id!r}")
        return theme

    def get_flavor(self, theme_id: str, flavor_id: str) -> FlavorDefinition:
        """Theme-specific flavor first, theme-independent default second."""
        theme = self.get_theme(theme_id)
        flavor = theme.flavors.get(flavor_id) or self._default_flavors.get(flavor_id)
        if flavor is None:
            raise FlavorNotFoundError(f"flavor not found: {flavor_id!r} (theme {theme_id!r})")
        return flavor

    def theme_ids(self) -> list[str]:
        return list(self._themes)

    def flavor_ids(self, theme_id: Optional[str] = None) -> list[str]:
        """Flavor ids in definition order (theme flavors, then remaining defaults)."""
        ids: list[str] = []
        if theme_id is not None:
            ids.extend(self.get_theme(theme_id).flavors)
        for key in self._default_flavors:
            if key not in ids:
                ids.append(key)
        return ids


def _offsets(**values: float) -> dict[AccentSlot, float]:
    return {AccentSlot(name): float(v) for name, v in values.items()}


def _flavors(
    muted: tuple[float, float, float, float],
    balanced: tuple[float, float, float, float],
    bold: tuple[float, float, float, float],
) -> dict[str, FlavorDefinition]:
    return {
        "muted": FlavorDefinition(*muted),
        "balanced": FlavorDefinition(*balanced),
        "bold": FlavorDefinition(*bold),
    }


DEFAULT_FLAVORS: dict[str, FlavorDefinition] = {
    "muted": FlavorDefinition(accent_hue=0, accent_sat=50, accent_light=65, comment_light=45),
    "balanced": FlavorDefinition(accent_hue=0, accent_sat=70, accent_light=60, comment_light=40),
    "bold": FlavorDefinition(accent_hue=0, accent_sat=85, accent_light=55, comment_light=35),
}

_NEON = _flavors((0, 85, 75, 55), (0, 95, 60, 55), (0, 100, 50, 60))

BUILTIN_THEMES: tuple[ThemeDefinition, ...] = (
    ThemeDefinition(
        id="midnight",
        name="Lumina Midnight",
        tagline="Deep darkness with electric neon accents",
        inspirations="City lights, dark nights, energy, excitement, neon signs, nightlife",
        bg_hue=270,
        bg_sat=25,
        bg_light=6,
        accent_offsets=_offsets(
            red=0, orange=0, yellow=0, green=0, cyan=0, blue=10, purple=-5, pink=0
        ),
        flavors=_NEON,
    ),
    ThemeDefinition(
        id="twilight",
        name="Lumina Twilight",
        tagline="The deep blue of the last light of the day",
        inspirations="Fading light, peaceful evenings, blue hour, tranquility, rest",
        bg_hue=242,
        bg_sat=40,
        bg_light=12,
        accent_offsets=_offsets(
            red=-5, orange=0, yellow=-5, green=10, cyan=-10, blue=5, purple=5, pink=0
        ),
        flavors=_NEON,
    ),
    ThemeDefinition(
        id="dawn",
        name="Lumina Dawn",
        tagline="The warm pink and gold of sunrise",
        inspirations="Sunrise, new beginnings, opportunity, hope, fresh starts, awakening",
        bg_hue=345,
        bg_sat=45,
        bg_light=15,
        accent_offsets=_offsets(
            red=10, orange=5, yellow=-5, green=0, cyan=0, blue=-10, purple=0, pink=-10
        ),
        flavors=_flavors((15, 85, 75, 55), (15, 95, 60, 55), (15, 100, 50, 60)),
    ),
    ThemeDefinition(
        id="noon",
        name="Lumina Noon",
        tagline="Golden sunshine and natural warmth",
        inspirations="Golden hour, warm days, contentment, beach afternoons, lazy picnics, comfort",
        bg_hue=50,
        bg_sat=100,
        bg_light=98,
        accent_offsets=_offsets(
            red=0, orange=-5, yellow=-10, green=-15, cyan=0, blue=0, purple=5, pink=0
        ),
        flavors=_flavors((-15, 80, 55, 50), (-15, 90, 45, 40), (-35, 100, 35, 30)),
    ),
)


def builtin_catalog(
    *, default_theme: str = "midnight", default_flavor: str = "balanced"
) -> StaticThemeCatalog:
    """Catalog of the four built-in Lumina themes."""
    return StaticThemeCatalog(
        BUILTIN_THEMES,
        DEFAULT_FLAVORS,
        default_theme=default_theme,
        default_flavor=default_flavor,
    )


__all__ = [
    "CatalogLookupError",
    "ThemeNotFoundError",
    "FlavorNotFoundError",
    "FlavorDefinition",
    "ThemeDefinition",
    "ThemeCatalog",
    "StaticThemeCatalog",
    "DEFAULT_FLAVORS",
    "BUILTIN_THEMES",
    "builtin_catalog",
]
