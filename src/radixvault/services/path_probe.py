"""Path probing over ordered file-name candidates.

Repositories do not agree on where a component lives (``button.tsx``,
``button/index.tsx``, ...). The probe tries each candidate in order and
returns the first one that resolves.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from radixvault.services.context import ResolverContext
from radixvault.shared.errors import (
    ApplicationError,
    ErrorCode,
    ErrorContext,
    RadixVaultNetworkError,
    create_not_found_error,
)
from radixvault.shared.logging import log_operation_error, log_operation_success

logger = logging.getLogger(__name__)


class PathProbe:
    """Resolve an identifier against ordered path candidates.

    Args:
        context: Resolver context providing throttled fetches
    """

    def __init__(self, context: ResolverContext) -> None:
        self.context = context

    async def resolve_text(
        self,
        identifier: str,
        base_path: str,
        candidates: Sequence[str],
    ) -> str:
        """Return the text of the first candidate that can be fetched.

        Candidates are tried strictly in order and no candidate after the
        first success is requested. Per-candidate failures are not
        reported individually.

        Args:
            identifier: Name reported if nothing resolves
            base_path: URL prefix every candidate suffix is appended to
            candidates: Ordered path suffixes

        Returns:
            Body of the first successful candidate

        Raises:
            ApplicationError: If ``candidates`` is empty
            NotFoundError: If every candidate failed
        """
        if not candidates:
            raise ApplicationError(
                ErrorCode.VALIDATION_ERROR,
                f"No path candidates given for {identifier}",
                ErrorContext(operation="resolve_text", identifier=identifier),
            )

        start_time = time.perf_counter()
        last_error: RadixVaultNetworkError | None = None

        for index, suffix in enumerate(candidates):
            url = f"{base_path}{suffix}"
            try:
                text = await self.context.fetch_text(url)
            except RadixVaultNetworkError as e:
                logger.debug("Candidate %s failed: %s", url, e)
                last_error = e
                continue

            log_operation_success(
                logger=logger,
                operation="resolve_text",
                duration_ms=(time.perf_counter() - start_time) * 1000,
                result_info={"candidate": suffix, "attempts": index + 1},
                context={"identifier": identifier},
            )
            return text

        error = create_not_found_error(
            identifier,
            message=f'"{identifier}" not found in repository',
            operation="resolve_text",
            original_error=last_error,
        )
        log_operation_error(
            logger=logger,
            error=error,
            additional_context={"candidates": len(candidates)},
            level=logging.WARNING,
        )
        raise error


__all__ = ["PathProbe"]
