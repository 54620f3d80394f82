"""
どこで: `engine.params` のストア層。
何を: ParameterState を保持する薄いシェル。操作メソッドをアクションへ変換して
    `apply_action()` に委譲し、変更時に購読者通知と永続化フックを呼ぶ。
    エディタ向けの読み取りヘルパ（スロット別オフセット/色相、テーマ情報）も提供する。
なぜ: 遷移ロジックを純粋関数に閉じ込め、副作用（通知・保存）をここに集約するため。

補足:
- 状態は遷移完了後に一度だけ差し替える（呼び出し側からは原子的）。
- 変化のない操作（未設定スロットのリセット等）は通知も保存もしない。
- 永続化の失敗は記録のみで、遷移を妨げない。
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from palette.api import PaletteBuilder
from palette.catalog import ThemeCatalog, ThemeDefinition
from palette.color_types import AccentSlot
from palette.palette import Base24Palette, ThemeParams

from .state import (
    Action,
    ParameterState,
    ParamField,
    ResetColorAdjustment,
    ResetFlavor,
    ResetTheme,
    SwitchFlavor,
    SwitchTheme,
    UpdateColorAdjustment,
    UpdateParam,
    apply_action,
    is_customized,
    resolve_params,
)

logger = logging.getLogger(__name__)

Subscriber = Callable[[ParameterState], None]
PersistHook = Callable[[ParameterState], object]


class ParameterStore:
    """テーマ/フレーバー選択とカスタマイズ層を管理する。"""

    def __init__(
        self,
        catalog: ThemeCatalog,
        state: Optional[ParameterState] = None,
        persist: Optional[PersistHook] = None,
    ) -> None:
        self._catalog = catalog
        self._state = state if state is not None else ParameterState.initial(catalog)
        # 初期状態が解決できることを確認（未知 ID はここで失敗させる）
        resolve_params(self._state, catalog)
        self._persist = persist
        self._builder = PaletteBuilder(catalog)
        self._listeners: list[Subscriber] = []

    # --- 状態 ---
    @property
    def catalog(self) -> ThemeCatalog:
        return self._catalog

    @property
    def state(self) -> ParameterState:
        return self._state

    @property
    def active_theme(self) -> str:
        return self._state.active_theme

    @property
    def active_flavor(self) -> str:
        return self._state.active_flavor

    def dispatch(self, action: Action) -> bool:
        """アクションを適用する。状態が変化した場合 True。"""
        new_state = apply_action(self._state, action, self._catalog)
        if new_state == self._state:
            logger.debug("no-op action: %r", action)
            return False
        self._state = new_state
        logger.debug("applied %r", action)
        self._save()
        self._notify()
        return True

    # --- 操作 ---
    def switch_theme(self, theme_id: str) -> bool:
        return self.dispatch(SwitchTheme(theme_id))

    def switch_flavor(self, flavor_id: str) -> bool:
        return self.dispatch(SwitchFlavor(flavor_id))

    def update_param(self, param: ParamField | str, value: float) -> bool:
        if not isinstance(param, ParamField):
            param = ParamField.from_name(param)
        return self.dispatch(UpdateParam(param, value))

    def update_color_adjustment(self, slot: AccentSlot | str, hue_offset: float) -> bool:
        return self.dispatch(UpdateColorAdjustment(_slot(slot), hue_offset))

    def reset_color_adjustment(self, slot: AccentSlot | str) -> bool:
        return self.dispatch(ResetColorAdjustment(_slot(slot)))

    def reset_flavor(self) -> bool:
        return self.dispatch(ResetFlavor())

    def reset_theme(self) -> bool:
        return self.dispatch(ResetTheme())

    # --- 読み取り ---
    def current_params(self) -> ThemeParams:
        """実効パラメータ（毎回層から解決する）。"""
        return resolve_params(self._state, self._catalog)

    def current_colors(self) -> Base24Palette:
        return self._builder.build(self.current_params(), self._state.active_theme)

    def color_adjustment(self, slot: AccentSlot | str) -> float:
        """ユーザーオフセット（未設定は 0）。"""
        return float(self._state.overrides().accent_offsets.get(_slot(slot), 0.0))

    def theme_offset(self, slot: AccentSlot | str) -> float:
        return self._builder.compositor.theme_offset(self._state.active_theme, _slot(slot))

    def combined_offset(self, slot: AccentSlot | str) -> float:
        s = _slot(slot)
        return self._builder.compositor.combined_offset(
            self._state.active_theme, s, self.color_adjustment(s)
        )

    def slot_hue(self, slot: AccentSlot | str) -> float:
        """現在の合成済み色相（プレビュー/エクスポートと同じ経路）。"""
        s = _slot(slot)
        params = self.current_params()
        return self._builder.compositor.resolve_hue(
            params.accent_hue, s, self._state.active_theme, params.adjustment(s)
        )

    def theme_info(self) -> ThemeDefinition:
        return self._catalog.get_theme(self._state.active_theme)

    def theme_ids(self) -> list[str]:
        return self._catalog.theme_ids()

    def flavor_ids(self) -> list[str]:
        return self._catalog.flavor_ids(self._state.active_theme)

    def is_customized(self) -> bool:
        return is_customized(self._state)

    # --- リスナー ---
    def subscribe(self, listener: Subscriber) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Subscriber) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("parameter listener failed")

    def _save(self) -> None:
        if self._persist is None:
            return
        try:
            self._persist(self._state)
        except Exception as e:
            logger.warning("session persistence failed: %s", e)


def _slot(slot: AccentSlot | str) -> AccentSlot:
    return slot if isinstance(slot, AccentSlot) else AccentSlot.from_name(slot)


__all__ = ["ParameterStore", "Subscriber", "PersistHook"]
