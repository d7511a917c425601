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

from typing import Final


# constants

# the supported subset of XML names; these are case-insensitive ASCII letters and
# hyphens, no digits, periods or underscores
identifier_pattern: Final = r"[A-Za-z-]+"

# https://www.w3.org/TR/REC-xml/#NT-S
optional_whitespace_pattern: Final = r"[ \t\r\n]*"

# character data extends up to the next markup delimiter, there are no entities,
# comments or CDATA sections
text_pattern: Final = r"[^<]+"

QUOTES: Final = ("'", '"')
