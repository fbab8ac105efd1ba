"""
spdexer license registry.

A static table of license bodies keyed by identifier. Bodies are
``string.Template`` texts written as Go line comments, with ``${name}``,
``${author}`` and ``${year}`` placeholders. Adding a license means adding
an entry here; the detector picks up its fragments automatically.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from string import Template
from typing import Iterable, Mapping

from spdexer.constants import COMMENT_PREFIX
from spdexer.exceptions import TemplateRenderError, UnknownLicenseError
from spdexer.types import TemplateData

logger = logging.getLogger("spdexer.licenses")

GPL30ORLATER = """\
// This file is part of ${name}.
//
// Copyright (C) ${year} ${author}.
// SPDX-License-Identifier: GPL-3.0-or-later
//
// This program is free software: you can redistribute it and/or modify
// it under the terms of the GNU General Public License as published by
// the Free Software Foundation, either version 3 of the License, or
// (at your option) any later version.
//
// This program is distributed in the hope that it will be useful,
// but WITHOUT ANY WARRANTY; without even the implied warranty of
// MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
// GNU General Public License for more details.
//
// You should have received a copy of the GNU General Public License
// along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

GPL30 = """\
// This file is part of ${name}.
//
// Copyright (C) ${year} ${author}.
// SPDX-License-Identifier: GPL-3.0-only
//
// This program is free software: you can redistribute it and/or modify
// it under the terms of the GNU General Public License as published by
// the Free Software Foundation, version 3 of the License.
//
// This program is distributed in the hope that it will be useful,
// but WITHOUT ANY WARRANTY; without even the implied warranty of
// MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
// GNU General Public License for more details.
//
// You should have received a copy of the GNU General Public License
// along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

LGPL30ORLATER = """\
// This file is part of ${name}.
//
// Copyright (C) ${year} ${author}.
// SPDX-License-Identifier: LGPL-3.0-or-later
//
// This program is free software: you can redistribute it and/or modify
// it under the terms of the GNU Lesser General Public License as published
// by the Free Software Foundation, either version 3 of the License, or
// (at your option) any later version.
//
// This program is distributed in the hope that it will be useful,
// but WITHOUT ANY WARRANTY; without even the implied warranty of
// MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
// GNU Lesser General Public License for more details.
//
// You should have received a copy of the GNU Lesser General Public License
// along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

MIT = """\
// This file is part of ${name}.
//
// Copyright (c) ${year} ${author}.
// SPDX-License-Identifier: MIT
//
// Permission is hereby granted, free of charge, to any person obtaining a copy
// of this software and associated documentation files (the "Software"), to deal
// in the Software without restriction, including without limitation the rights
// to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
// copies of the Software, and to permit persons to whom the Software is
// furnished to do so, subject to the following conditions:
//
// The above copyright notice and this permission notice shall be included in all
// copies or substantial portions of the Software.
//
// THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
// IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
// FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
// AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
// LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
// OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
// SOFTWARE.
"""

APACHE20 = """\
// This file is part of ${name}.
//
// Copyright ${year} ${author}.
// SPDX-License-Identifier: Apache-2.0
//
// Licensed under the Apache License, Version 2.0 (the "License");
// you may not use this file except in compliance with the License.
// You may obtain a copy of the License at
//
//     http://www.apache.org/licenses/LICENSE-2.0
//
// Unless required by applicable law or agreed to in writing, software
// distributed under the License is distributed on an "AS IS" BASIS,
// WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
// See the License for the specific language governing permissions and
// limitations under the License.
"""

LICENSES: dict[str, str] = {
    "GPL30ORLATER": GPL30ORLATER,
    "GPL30": GPL30,
    "LGPL30ORLATER": LGPL30ORLATER,
    "MIT": MIT,
    "APACHE20": APACHE20,
}


def get_license(identifier: str, registry: Mapping[str, str] | None = None) -> str:
    """Return the template body registered under ``identifier``."""
    registry = LICENSES if registry is None else registry
    try:
        return registry[identifier]
    except KeyError:
        raise UnknownLicenseError(identifier) from None


def render_template(body: str, data: TemplateData) -> str:
    """Substitute project metadata into a template body.

    Any placeholder other than name, author and year is an error, as is a
    stray ``$`` that does not form a valid placeholder.
    """
    try:
        text = Template(body).substitute(data.as_mapping())
    except KeyError as exc:
        raise TemplateRenderError(f"Undefined placeholder {exc.args[0]!r} in license template") from exc
    except ValueError as exc:
        raise TemplateRenderError(f"Malformed license template: {exc}") from exc
    if text and not text.endswith("\n"):
        text += "\n"
    return text


def render_license(
    identifier: str,
    data: TemplateData,
    registry: Mapping[str, str] | None = None,
) -> bytes:
    """Render the header for ``identifier`` as UTF-8 bytes."""
    text = render_template(get_license(identifier, registry), data)
    logger.debug("Rendered %s header (%d lines)", identifier, text.count("\n"))
    return text.encode("utf-8")


def _fragment(line: str) -> str:
    stripped = line.strip()
    if stripped.startswith(COMMENT_PREFIX):
        stripped = stripped[len(COMMENT_PREFIX):].strip()
    return stripped


def license_fragments(bodies: Iterable[str] | None = None) -> tuple[str, ...]:
    """
    Extract the literal fragments used to recognize an existing header.

    Each template line yields one fragment: the line with its comment
    marker and surrounding whitespace removed. Blank lines and lines that
    carry a placeholder are skipped, since their rendered text varies
    from project to project.
    """
    if bodies is None:
        return _registry_fragments()

    seen: dict[str, None] = {}
    for body in bodies:
        for line in body.splitlines():
            fragment = _fragment(line)
            if not fragment or Template.pattern.search(line):
                continue
            seen.setdefault(fragment, None)
    return tuple(seen)


@lru_cache(maxsize=1)
def _registry_fragments() -> tuple[str, ...]:
    return license_fragments(LICENSES.values())
