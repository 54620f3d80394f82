"""
どこで: `util.color`。
何を: Hex 色文字列の検証と RGB(0–255) への変換を一元化。
なぜ: パレット検証/エクスポート/CLI 表示で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

import re

_HEX6 = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_hex_color(value: object) -> bool:
    """`#RRGGBB` 形式の文字列なら True。"""
    return isinstance(value, str) and _HEX6.match(value) is not None


def parse_hex_color_str(s: str) -> tuple[int, int, int]:
    """Hex 文字列から RGB(0–255) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB"。大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b)


def hex_to_rgb01(s: str) -> tuple[float, float, float]:
    """Hex 文字列から RGB(0–1) を返す。"""
    r, g, b = parse_hex_color_str(s)
    return (r / 255.0, g / 255.0, b / 255.0)


def rgb01_to_hex(r: float, g: float, b: float) -> str:
    """RGB(0–1) を小文字の `#rrggbb` へ変換する（範囲外はクランプ）。"""
    r_i = int(round(max(0.0, min(1.0, r)) * 255))
    g_i = int(round(max(0.0, min(1.0, g)) * 255))
    b_i = int(round(max(0.0, min(1.0, b)) * 255))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


__all__ = [
    "is_hex_color",
    "parse_hex_color_str",
    "hex_to_rgb01",
    "rgb01_to_hex",
]
