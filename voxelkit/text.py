"""Bitmap fonts described in JSON, and text laid out as quads from them."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from voxelkit.files import read_file
from voxelkit.mesh import Mesh

__all__ = ["CharacterData", "Font", "Text"]

_FONT_SCALE = 2
_SPACE_WIDTH = 4
_QUAD_ORDER = (0, 1, 3, 0, 3, 2)


@dataclass(frozen=True)
class CharacterData:
    """Position of a glyph in the font image and its size, in pixels."""

    uv_pos: tuple[int, int] = (0, 0)
    size: tuple[int, int] = (0, 0)


def _unsigned(data: dict, key: str) -> int:
    if key not in data:
        raise ValueError(f"font description lacks '{key}'")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"font field '{key}' must be a number")
    return int(value)


@dataclass
class Font:
    """Glyph table of a font image with fixed-height lines."""

    characters: dict[str, CharacterData] = field(default_factory=dict)
    line_height: int = 11
    width: int = 512
    height: int = 512
    texture_path: str | None = None

    @classmethod
    def from_json(cls, text: str) -> Font:
        """Parse a description with line height, image size and glyph widths.

        Each entry of "lines" maps characters to widths; glyphs of a line
        lie side by side in key order, one line of the image per entry.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("font description must be a JSON object")
        line_height = _unsigned(data, "line-height")
        width = _unsigned(data, "image-width")
        height = _unsigned(data, "image-height")

        characters: dict[str, CharacterData] = {}
        for line_number, line in enumerate(data.get("lines") or []):
            offset = 0
            for key in sorted(line):
                glyph_width = _unsigned(line, key)
                char = key[0] if key else "\0"
                characters[char] = CharacterData(
                    (offset, line_number * line_height), (glyph_width, line_height)
                )
                offset += glyph_width
        return cls(characters, line_height, width, height)

    @classmethod
    def load(cls, path: str | os.PathLike) -> Font:
        """Load font.json from a font directory that also holds font.png."""
        directory = Path(path)
        font = cls.from_json(read_file(directory / "font.json"))
        font.texture_path = str(directory / "font.png")
        return font

    def character(self, c: str) -> CharacterData:
        """Glyph data of a character; an empty glyph if the font lacks it."""
        return self.characters.get(c, CharacterData())


class Text:
    """A string laid out as textured quads (x, y, u, v per vertex)."""

    def __init__(self, text: str, font: Font) -> None:
        self.font = font
        self.update(text)

    def update(self, text: str) -> None:
        """Replace the text and rebuild its geometry."""
        self.text = text
        self._vertices: list[float] = []
        self._indices: list[int] = []
        self._offset = [0, 0]
        for c in text:
            self._add_character(c)

    def mesh(self) -> Mesh:
        """The laid-out quads as a mesh."""
        return Mesh(list(self._vertices), list(self._indices))

    def _add_character(self, c: str) -> None:
        if c == " ":
            self._offset[0] += _SPACE_WIDTH * _FONT_SCALE
            return
        line_height = self.font.line_height
        if c == "\n":
            self._offset[0] = 0
            self._offset[1] += line_height * _FONT_SCALE
            return

        glyph = self.font.character(c)
        glyph_width = glyph.size[0]
        pos_u = glyph.uv_pos[0] / self.font.width
        pos_v = glyph.uv_pos[1] / self.font.height * -1
        w = glyph_width / self.font.width
        h = line_height / self.font.height
        quad_w = glyph_width * _FONT_SCALE
        quad_h = line_height * _FONT_SCALE

        base = len(self._vertices) // 4
        ox, oy = self._offset
        for x, y, u, v in (
            (0.0, 0.0, pos_u, 1.0 - h + pos_v),
            (quad_w, 0.0, w + pos_u, 1.0 - h + pos_v),
            (0.0, quad_h, pos_u, 1.0 + pos_v),
            (quad_w, quad_h, w + pos_u, 1.0 + pos_v),
        ):
            self._vertices.extend((ox + x, oy + y, u, v))
        self._indices.extend(base + i for i in _QUAD_ORDER)
        self._offset[0] += quad_w