"""Concurrent status aggregation.

This module checks that the working directory is inside a work tree, then
runs the branch resolver and the five file counters as independent units on
a thread pool. Each unit's outcome is collapsed to a default at this
boundary, so a failing or crashing unit only ever degrades its own fields.
"""

import concurrent.futures
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from gitline._branch import resolve_branch
from gitline._counter import count_files
from gitline._models import BranchInfo, StatusRecord, UnitResult
from gitline.enums import FileClass
from gitline.exceptions import GitQueryError, NotAWorkTreeError
from gitline.utils import null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitline.backend import GitBackendProtocol

BRANCH_UNIT: str = "branch"
THREAD_NAME_PREFIX: str = "gitline"


def ensure_work_tree(backend: "GitBackendProtocol") -> None:  # noqa: UP037
    """Check that the backend's directory is inside a git work tree.

    Args:
        backend: Backend used to run the check.

    Raises:
        NotAWorkTreeError: If git fails or reports that the directory is not
            inside a work tree (for example inside ``.git`` itself).
    """
    if backend.query("rev-parse", "--is-inside-work-tree") != "true":
        msg = "Not inside a git work tree"
        raise NotAWorkTreeError(msg, cwd=getattr(backend, "cwd", None))


def run_unit[T](
    name: str, func: Callable[..., T], *args: Any  # noqa: ANN401
) -> UnitResult[T]:
    """Run one unit of work and capture its outcome.

    Args:
        name: Unit name used in error messages.
        func: The unit's callable.
        *args: Positional arguments passed to ``func``.

    Returns:
        UnitResult holding the value, or the error and its classification.
    """
    try:
        return UnitResult(success=True, value=func(*args))
    except GitQueryError as e:
        return UnitResult(
            success=False,
            error=f"{name}: {e}",
            error_type="query_failed",
        )
    except Exception as e:  # noqa: BLE001
        return UnitResult(
            success=False,
            error=f"{name}: {type(e).__name__}: {e}",
            error_type="crashed",
        )


def _timed[T](func: Callable[..., T], *args: Any) -> tuple[T, float]:  # noqa: ANN401
    start = time.perf_counter()
    value = func(*args)
    return value, (time.perf_counter() - start) * 1000.0


def collect_status(
    backend: "GitBackendProtocol",  # noqa: UP037
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> StatusRecord:
    """Collect the status record for the backend's work tree.

    The six units share nothing but the backend. Results are dispatched to
    named fields as they complete, so completion order never affects the
    record. All units are awaited; there is no cancellation.

    Args:
        backend: Backend used to run all git queries.
        logger: Structured logger for unit completion and failure events.

    Returns:
        The assembled StatusRecord.

    Raises:
        NotAWorkTreeError: If the directory is not inside a work tree. No
            unit is started in that case.

    Exceptions that are not ``Exception`` subclasses (``KeyboardInterrupt``,
    ``SystemExit``) are not captured by run_unit. They propagate once every
    worker has finished.
    """
    log = logger if logger is not None else null_logger()
    ensure_work_tree(backend)

    branch_result: UnitResult[BranchInfo] = UnitResult(success=False)
    count_results: dict[FileClass, UnitResult[int]] = {}

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=len(FileClass) + 1, thread_name_prefix=THREAD_NAME_PREFIX
    ) as executor:
        futures: dict[concurrent.futures.Future[Any], str] = {
            executor.submit(
                _timed, run_unit, BRANCH_UNIT, resolve_branch, backend
            ): BRANCH_UNIT
        }
        for file_class in FileClass:
            future = executor.submit(
                _timed, run_unit, file_class.value, count_files, backend, file_class
            )
            futures[future] = file_class.value

        for future in concurrent.futures.as_completed(futures):
            name = futures[future]
            result, elapsed_ms = future.result()

            if result.success:
                log.debug("unit_completed", unit=name, elapsed_ms=elapsed_ms)
            else:
                log.warning(
                    "unit_failed",
                    unit=name,
                    error=result.error,
                    error_type=result.error_type,
                    elapsed_ms=elapsed_ms,
                )

            if name == BRANCH_UNIT:
                branch_result = result
            else:
                count_results[FileClass(name)] = result

    branch = branch_result.value_or(BranchInfo.default())
    counts = {
        file_class.value: count_results[file_class].value_or(0)
        for file_class in FileClass
    }
    return StatusRecord(branch.branch, branch.ahead, branch.behind, **counts)
