# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


from __future__ import annotations

import codecs
import re
import warnings
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from typing import Optional


BOM_TO_ENCODING_NAME: Final = (
    (4, codecs.BOM_UTF32_LE, "utf-32"),
    (4, codecs.BOM_UTF32_BE, "utf-32"),
    (3, codecs.BOM_UTF8, "utf-8-sig"),
    (2, codecs.BOM_UTF16_LE, "utf-16"),
    (2, codecs.BOM_UTF16_BE, "utf-16"),
)


match_encoding: Final = re.compile(
    rb"""\s*<\?\s*xml\s[^>]*?encoding\s*=\s*["']([A-Za-z0-9_.-]+)["']"""
).match


def detect_encoding(data: bytes) -> str | None:
    for bom_size, bom, name in BOM_TO_ENCODING_NAME:
        if data[:bom_size] == bom:
            return name

    if (match := match_encoding(data)) is not None:
        return match.group(1).decode("ascii")
    else:
        return None


def decode(data: bytes, encoding: Optional[str] = None) -> str:
    """
    Decodes ``data`` with the given ``encoding`` or the one that is indicated by a
    byte order mark or noted in the XML declaration.
    """
    if encoding is None:
        encoding = detect_encoding(data[:128])

    if encoding is None:
        warnings.warn(
            "No encoding known for parsing an XML stream. Defaulting to UTF-8.",
            category=UserWarning,
        )
        encoding = "utf-8"

    return data.decode(encoding)


__all__ = (decode.__name__, detect_encoding.__name__)
