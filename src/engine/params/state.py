"""
どこで: `engine.params` の状態層（純粋関数）。
何を: テーマ/フレーバーのカスタマイズ層（ThemeOverrides/FlavorOverrides）と
    ParameterState、各操作に対応するアクション型、`apply_action()` による遷移、
    `resolve_params()` による実効パラメータ解決を提供する。
なぜ: 状態を値として扱い遷移を純粋関数にすることで、永続化・テスト・購読通知を
    薄いシェル（`store.ParameterStore`）へ分離するため。

補足:
- 実効値は常に `defaults ← overrides` をその場で解決する（キャッシュしない）。
- 未知の theme/flavor は `CatalogLookupError` を送出し、状態は変更しない。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Literal, Mapping, Union

from palette.catalog import ThemeCatalog
from palette.color_types import AccentSlot
from palette.engine import clamp_percent, normalize_hue
from palette.harmony import clamp_offset, normalize_signed, rotate_adjustments_with_anchor
from palette.palette import ThemeParams


Layer = Literal["theme", "flavor"]


class ParamField(Enum):
    """更新可能なスカラー値。値は永続化時のキー名。"""

    BG_HUE = "bgHue"
    BG_SAT = "bgSat"
    BG_LIGHT = "bgLight"
    ACCENT_HUE = "accentHue"
    ACCENT_SAT = "accentSat"
    ACCENT_LIGHT = "accentLight"
    COMMENT_LIGHT = "commentLight"

    @property
    def layer(self) -> Layer:
        """書き込み先の層（背景系はテーマ層、それ以外はフレーバー層）。"""
        return "theme" if self in _THEME_FIELDS else "flavor"

    @property
    def attr(self) -> str:
        """ThemeParams / *Overrides 上の属性名。"""
        return _ATTRS[self]

    @classmethod
    def from_name(cls, name: str) -> "ParamField":
        """`bgHue` / `bg_hue` / `BG_HUE` のいずれでも引けるようにする。"""
        key = str(name).strip()
        for f in cls:
            if key in (f.value, f.attr, f.name):
                return f
        raise KeyError(f"unknown parameter: {name!r}")


_THEME_FIELDS = frozenset({ParamField.BG_HUE, ParamField.BG_SAT, ParamField.BG_LIGHT})
_ATTRS: dict[ParamField, str] = {
    ParamField.BG_HUE: "bg_hue",
    ParamField.BG_SAT: "bg_sat",
    ParamField.BG_LIGHT: "bg_light",
    ParamField.ACCENT_HUE: "accent_hue",
    ParamField.ACCENT_SAT: "accent_sat",
    ParamField.ACCENT_LIGHT: "accent_light",
    ParamField.COMMENT_LIGHT: "comment_light",
}


# --- カスタマイズ層 ---
@dataclass(frozen=True)
class FlavorOverrides:
    """(theme, flavor) 単位の上書き。None は未設定（既定値を使う）。"""

    accent_hue: float | None = None
    accent_sat: float | None = None
    accent_light: float | None = None
    comment_light: float | None = None

    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (self.accent_hue, self.accent_sat, self.accent_light, self.comment_light)
        )


@dataclass(frozen=True)
class ThemeOverrides:
    """テーマ単位の上書き（背景 + スロット別オフセット + フレーバー層）。"""

    bg_hue: float | None = None
    bg_sat: float | None = None
    bg_light: float | None = None
    accent_offsets: Mapping[AccentSlot, float] = field(default_factory=dict)
    flavors: Mapping[str, FlavorOverrides] = field(default_factory=dict)

    def flavor(self, flavor_id: str) -> FlavorOverrides:
        return self.flavors.get(flavor_id) or FlavorOverrides()

    def has_background(self) -> bool:
        return any(v is not None for v in (self.bg_hue, self.bg_sat, self.bg_light))

    def is_empty(self) -> bool:
        return (
            not self.has_background()
            and not self.accent_offsets
            and all(f.is_empty() for f in self.flavors.values())
        )


@dataclass(frozen=True)
class ParameterState:
    """アクティブな theme/flavor とテーマ別カスタマイズ層。"""

    active_theme: str
    active_flavor: str
    customizations: Mapping[str, ThemeOverrides] = field(default_factory=dict)

    @classmethod
    def initial(cls, catalog: ThemeCatalog) -> "ParameterState":
        """カタログ既定の theme/flavor、上書きなし。"""
        return cls(catalog.default_theme, catalog.default_flavor, {})

    def overrides(self, theme_id: str | None = None) -> ThemeOverrides:
        tid = self.active_theme if theme_id is None else theme_id
        return self.customizations.get(tid) or ThemeOverrides()

    def active_flavor_overrides(self) -> FlavorOverrides:
        return self.overrides().flavor(self.active_flavor)


# --- アクション ---
@dataclass(frozen=True)
class SwitchTheme:
    theme_id: str


@dataclass(frozen=True)
class SwitchFlavor:
    flavor_id: str


@dataclass(frozen=True)
class UpdateParam:
    field: ParamField
    value: float


@dataclass(frozen=True)
class UpdateColorAdjustment:
    slot: AccentSlot
    hue_offset: float


@dataclass(frozen=True)
class ResetColorAdjustment:
    slot: AccentSlot


@dataclass(frozen=True)
class ResetFlavor:
    pass


@dataclass(frozen=True)
class ResetTheme:
    pass


Action = Union[
    SwitchTheme,
    SwitchFlavor,
    UpdateParam,
    UpdateColorAdjustment,
    ResetColorAdjustment,
    ResetFlavor,
    ResetTheme,
]


def _finite(value: float, what: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{what} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be a number, got {value!r}") from None
    if not math.isfinite(v):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return v


def normalize_field_value(param: ParamField, value: float) -> float:
    """フィールドごとの正規化（色相は巻き戻し、その他はクランプ）。"""
    v = _finite(value, param.value)
    if param is ParamField.BG_HUE:
        return normalize_hue(v)
    if param is ParamField.ACCENT_HUE:
        return normalize_signed(v)
    return clamp_percent(v)


def _with_theme(state: ParameterState, theme: ThemeOverrides) -> ParameterState:
    customizations = dict(state.customizations)
    if theme.is_empty():
        customizations.pop(state.active_theme, None)
    else:
        customizations[state.active_theme] = theme
    return replace(state, customizations=customizations)


def _with_flavor(theme: ThemeOverrides, flavor_id: str, flavor: FlavorOverrides) -> ThemeOverrides:
    flavors = dict(theme.flavors)
    if flavor.is_empty():
        flavors.pop(flavor_id, None)
    else:
        flavors[flavor_id] = flavor
    return replace(theme, flavors=flavors)


def _update_param(state: ParameterState, action: UpdateParam, catalog: ThemeCatalog) -> ParameterState:
    param = action.field
    value = normalize_field_value(param, action.value)
    theme = state.overrides()

    if param.layer == "theme":
        return _with_theme(state, replace(theme, **{param.attr: value}))

    flavor = theme.flavor(state.active_flavor)
    if param is ParamField.ACCENT_HUE and theme.accent_offsets:
        old_anchor = resolve_params(state, catalog).accent_hue
        rotated = rotate_adjustments_with_anchor(old_anchor, value, theme.accent_offsets)
        theme = replace(theme, accent_offsets=rotated)
    flavor = replace(flavor, **{param.attr: value})
    return _with_theme(state, _with_flavor(theme, state.active_flavor, flavor))


def apply_action(state: ParameterState, action: Action, catalog: ThemeCatalog) -> ParameterState:
    """アクションを適用した新しい状態を返す（入力 state は変更しない）。

    例外:
        CatalogLookupError: 未知の theme/flavor。
        ValueError: 非有限値。
        TypeError: 未知のアクション型。
    """
    if isinstance(action, SwitchTheme):
        catalog.get_flavor(action.theme_id, state.active_flavor)
        return replace(state, active_theme=action.theme_id)

    if isinstance(action, SwitchFlavor):
        catalog.get_flavor(state.active_theme, action.flavor_id)
        return replace(state, active_flavor=action.flavor_id)

    if isinstance(action, UpdateParam):
        if not isinstance(action.field, ParamField):
            raise TypeError(f"UpdateParam.field must be ParamField, got {type(action.field).__name__}")
        return _update_param(state, action, catalog)

    if isinstance(action, UpdateColorAdjustment):
        offset = clamp_offset(_finite(action.hue_offset, "hueOffset"))
        theme = state.overrides()
        offsets = dict(theme.accent_offsets)
        offsets[action.slot] = offset
        return _with_theme(state, replace(theme, accent_offsets=offsets))

    if isinstance(action, ResetColorAdjustment):
        theme = state.overrides()
        if action.slot not in theme.accent_offsets:
            return state
        offsets = {s: v for s, v in theme.accent_offsets.items() if s is not action.slot}
        return _with_theme(state, replace(theme, accent_offsets=offsets))

    if isinstance(action, ResetFlavor):
        theme = state.overrides()
        theme = _with_flavor(theme, state.active_flavor, FlavorOverrides())
        return _with_theme(state, replace(theme, accent_offsets={}))

    if isinstance(action, ResetTheme):
        customizations = {k: v for k, v in state.customizations.items() if k != state.active_theme}
        flavor_id = catalog.default_flavor
        catalog.get_flavor(state.active_theme, flavor_id)
        return ParameterState(state.active_theme, flavor_id, customizations)

    raise TypeError(f"unknown action: {type(action).__name__}")


def resolve_params(state: ParameterState, catalog: ThemeCatalog) -> ThemeParams:
    """カタログ既定値に上書き層を重ねた実効パラメータを返す。"""
    theme_def = catalog.get_theme(state.active_theme)
    flavor_def = catalog.get_flavor(state.active_theme, state.active_flavor)
    theme = state.overrides()
    flavor = theme.flavor(state.active_flavor)

    def pick(override: float | None, default: float) -> float:
        return float(default) if override is None else float(override)

    return ThemeParams(
        bg_hue=pick(theme.bg_hue, theme_def.bg_hue),
        bg_sat=pick(theme.bg_sat, theme_def.bg_sat),
        bg_light=pick(theme.bg_light, theme_def.bg_light),
        accent_hue=pick(flavor.accent_hue, flavor_def.accent_hue),
        accent_sat=pick(flavor.accent_sat, flavor_def.accent_sat),
        accent_light=pick(flavor.accent_light, flavor_def.accent_light),
        comment_light=pick(flavor.comment_light, flavor_def.comment_light),
        color_adjustments=dict(theme.accent_offsets),
    )


def is_customized(state: ParameterState) -> bool:
    """アクティブな theme/flavor に上書きがあるか（Default/Customized 判定）。"""
    theme = state.overrides()
    return (
        theme.has_background()
        or bool(theme.accent_offsets)
        or not theme.flavor(state.active_flavor).is_empty()
    )


__all__ = [
    "ParamField",
    "FlavorOverrides",
    "ThemeOverrides",
    "ParameterState",
    "SwitchTheme",
    "SwitchFlavor",
    "UpdateParam",
    "UpdateColorAdjustment",
    "ResetColorAdjustment",
    "ResetFlavor",
    "ResetTheme",
    "Action",
    "apply_action",
    "normalize_field_value",
    "resolve_params",
    "is_customized",
]
