"""Import extraction strategies.

The default extractor is a line-oriented regex heuristic, not a parser. It
recognises ``import X from 'pkg'`` and bare ``import 'pkg'`` when the
statement starts its line. An import statement split across lines
(``import {\\n  A,\\n} from 'pkg'``) is not detected, and neither is the word
"import" inside prose, JSX text or string literals. Subclass
``ImportExtractor`` to plug in a syntax-aware implementation without touching
the classifier or aggregator.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod


class ImportExtractor(ABC):
    """Return the module-path literals imported by a source text."""

    @abstractmethod
    def extract(self, text: str) -> list[str]:
        """Return imported module paths in order of appearance."""


class RegexImportExtractor(ImportExtractor):
    """Line-local regex extractor for ES module imports."""

    # statement-initial `import`, then either the module literal directly or
    # a binding clause ending in `from`
    _IMPORT_RE = re.compile(
        r"""^\s*import\s+(?:[^'"`;]*?\bfrom\s+)?['"`]([^'"`]+)['"`]"""
    )

    def extract(self, text: str) -> list[str]:
        targets: list[str] = []
        for line in text.splitlines():
            match = self._IMPORT_RE.search(line)
            if match:
                targets.append(match.group(1))
        return targets


DEFAULT_EXTRACTOR: ImportExtractor = RegexImportExtractor()


def extract_import_targets(text: str) -> list[str]:
    """Extract import targets with the default regex extractor."""
    return DEFAULT_EXTRACTOR.extract(text)
