"""Query-mode validator.

Checks that source and target run in the same query-execution mode.  Mixed
DirectQuery / import models cannot be compared.
"""

from __future__ import annotations

from modelcompare.errors import DirectQueryMismatchError
from modelcompare.schema.context import ValidationContext


class DirectQueryValidator:
    """Validates DirectQuery parity between source and target.

    Args:
        ctx: Validation context (config + policy).
    """

    def __init__(self, ctx: ValidationContext) -> None:
        self._ctx = ctx

    def validate_parity(self) -> None:
        """Raise if source and target DirectQuery settings differ.

        Raises:
            DirectQueryMismatchError: Carrying both settings.
        """
        source = self._ctx.config.source.direct_query
        target = self._ctx.config.target.direct_query
        if source != target:
            raise DirectQueryMismatchError(source, target)
