"""
どこで: `engine.params` の永続化ヘルパ。
何を: ParameterState をバージョン付きスナップショット（dict/JSON）へ変換・復元し、
    セッションファイルへ保存/読込する。
なぜ: 次回起動時に前回のテーマ選択とカスタマイズを復元し、作業を継続できるようにするため。

仕様（要点）:
- 保存先: 既定 `data/session/lumina.json`。設定 `palette_session.state_dir` /
  `palette_session.file_name`、環境変数 `LUMINA_STATE_DIR` で上書き可。
- 復元は全か無か: バージョン不一致・未知 ID・非有限/範囲外の数値が一つでもあれば
  スナップショット全体を破棄し None（既定値を使う）を返す。
- 保存/読込はフェイルソフト（例外を投げず None を返し、WARNING を記録）。
"""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from palette.catalog import ThemeCatalog
from palette.color_types import AccentSlot
from palette.engine import normalize_hue
from palette.harmony import normalize_signed
from util.paths import ensure_parent_dir, resolve_session_file

from .state import FlavorOverrides, ParameterState, ThemeOverrides

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "2"

_BG_KEYS = (("bgHue", "bg_hue"), ("bgSat", "bg_sat"), ("bgLight", "bg_light"))
_FLAVOR_KEYS = (
    ("accentHue", "accent_hue"),
    ("accentSat", "accent_sat"),
    ("accentLight", "accent_light"),
    ("commentLight", "comment_light"),
)
# 復元時に許容する範囲（保存値は正規化済みのはず）。色相は受理後に正規化し直す。
_RANGES: dict[str, tuple[float, float]] = {
    "bgHue": (0.0, 360.0),
    "bgSat": (0.0, 100.0),
    "bgLight": (0.0, 100.0),
    "accentHue": (-180.0, 180.0),
    "accentSat": (0.0, 100.0),
    "accentLight": (0.0, 100.0),
    "commentLight": (0.0, 100.0),
    "hue": (-180.0, 180.0),
}


class SnapshotError(ValueError):
    """スナップショット検証失敗（restore_state 内部でのみ使用）。"""


# 色相キーは書き込み経路と同じ正規化を通す（360 -> 0, -180 -> 180）。
# スロット別オフセット "hue" は更新時もクランプのみなのでそのまま。
_HUE_NORMALIZERS = {"bgHue": normalize_hue, "accentHue": normalize_signed}


# --- serialize ---
def _serialize_theme(theme: ThemeOverrides) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, attr in _BG_KEYS:
        v = getattr(theme, attr)
        if v is not None:
            out[key] = v
    if theme.accent_offsets:
        out["accentOffsets"] = {
            slot.value: {"hue": offset} for slot, offset in theme.accent_offsets.items()
        }
    flavors: dict[str, Any] = {}
    for flavor_id, flavor in theme.flavors.items():
        entry = {key: getattr(flavor, attr) for key, attr in _FLAVOR_KEYS if getattr(flavor, attr) is not None}
        if entry:
            flavors[flavor_id] = entry
    if flavors:
        out["flavors"] = flavors
    return out


def serialize_state(state: ParameterState) -> dict[str, Any]:
    """ParameterState を JSON 化可能な dict へ変換する。"""
    return {
        "activeTheme": state.active_theme,
        "activeFlavor": state.active_flavor,
        "themeCustomizations": {
            theme_id: _serialize_theme(theme)
            for theme_id, theme in state.customizations.items()
        },
        "version": SNAPSHOT_VERSION,
    }


# --- restore ---
def _number(value: Any, key: str) -> float:
    # bool は int のサブクラスだが数値としては受け付けない
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SnapshotError(f"{key}: not a number ({value!r})")
    v = float(value)
    if not math.isfinite(v):
        raise SnapshotError(f"{key}: not finite ({value!r})")
    lo, hi = _RANGES[key]
    if not lo <= v <= hi:
        raise SnapshotError(f"{key}: out of range ({v})")
    normalize = _HUE_NORMALIZERS.get(key)
    return normalize(v) if normalize is not None else v


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SnapshotError(f"{what}: expected an object")
    return value


def _restore_flavor(raw: Any, what: str) -> FlavorOverrides:
    data = _mapping(raw, what)
    values = {attr: _number(data[key], key) for key, attr in _FLAVOR_KEYS if key in data}
    return FlavorOverrides(**values)


def _restore_theme(theme_id: str, raw: Any, catalog: ThemeCatalog) -> ThemeOverrides:
    data = _mapping(raw, f"themeCustomizations[{theme_id!r}]")
    bg = {attr: _number(data[key], key) for key, attr in _BG_KEYS if key in data}

    offsets: dict[AccentSlot, float] = {}
    for slot_name, entry in _mapping(data.get("accentOffsets", {}), "accentOffsets").items():
        try:
            slot = AccentSlot(slot_name)
        except ValueError:
            raise SnapshotError(f"unknown slot: {slot_name!r}") from None
        offsets[slot] = _number(_mapping(entry, slot_name).get("hue"), "hue")

    flavors: dict[str, FlavorOverrides] = {}
    for flavor_id, entry in _mapping(data.get("flavors", {}), "flavors").items():
        catalog.get_flavor(theme_id, flavor_id)
        flavors[flavor_id] = _restore_flavor(entry, f"flavors[{flavor_id!r}]")

    return ThemeOverrides(accent_offsets=offsets, flavors=flavors, **bg)


def restore_state(snapshot: Any, catalog: ThemeCatalog) -> ParameterState | None:
    """スナップショットを検証して ParameterState を返す。

    一部でも不正なら None（既定値を使う）。`savedAt` 等の追加キーは無視する。
    """
    try:
        data = _mapping(snapshot, "snapshot")
        version = data.get("version")
        if version != SNAPSHOT_VERSION:
            raise SnapshotError(f"version mismatch: {version!r} != {SNAPSHOT_VERSION!r}")
        active_theme = data.get("activeTheme")
        active_flavor = data.get("activeFlavor")
        if not isinstance(active_theme, str) or not isinstance(active_flavor, str):
            raise SnapshotError("activeTheme/activeFlavor must be strings")
        catalog.get_flavor(active_theme, active_flavor)

        customizations: dict[str, ThemeOverrides] = {}
        for theme_id, raw in _mapping(data.get("themeCustomizations", {}), "themeCustomizations").items():
            catalog.get_theme(theme_id)
            theme = _restore_theme(theme_id, raw, catalog)
            if not theme.is_empty():
                customizations[theme_id] = theme
    except (SnapshotError, KeyError) as e:
        # KeyError は CatalogLookupError を含む
        logger.warning("discarding session snapshot: %s", e)
        return None
    return ParameterState(active_theme, active_flavor, customizations)


# --- file I/O ---
def save_session(state: ParameterState, path: Path | str | None = None) -> Path | None:
    """状態を JSON で保存する。失敗時は None を返す（フェイルソフト）。"""
    target = Path(path) if path is not None else resolve_session_file()
    try:
        ensure_parent_dir(target)
        data = serialize_state(state)
        data["savedAt"] = datetime.now(timezone.utc).isoformat()
        tmp = target.with_suffix(target.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp.replace(target)
        return target
    except (OSError, TypeError, ValueError) as e:
        logger.warning("failed to save session to %s: %s", target, e)
        return None


def load_session(catalog: ThemeCatalog, path: Path | str | None = None) -> ParameterState | None:
    """保存済みセッションを読み込む。ファイル無し/破損/検証失敗は None。"""
    target = Path(path) if path is not None else resolve_session_file()
    if not target.exists():
        logger.debug("no session file at %s", target)
        return None
    try:
        with target.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("failed to read session from %s: %s", target, e)
        return None
    return restore_state(data, catalog)


__all__ = [
    "SNAPSHOT_VERSION",
    "serialize_state",
    "restore_state",
    "save_session",
    "load_session",
]
