"""Batch translation with a selectable concurrency strategy."""

import logging
import multiprocessing
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from .engine import TextInput, TranslationBackend

logger = logging.getLogger(__name__)

# Placeholder for an item whose translation failed
MISSING = None


class Strategy(str, Enum):
    """How per-item work is spread out."""
    SEQUENTIAL = "sequential"
    MULTICORE = "multicore"
    CLUSTER = "cluster"


PARALLELIZATION_STRATEGIES = tuple(s.value for s in Strategy)


def resolve_strategy(strategy) -> Strategy:
    """Turn a strategy name into a Strategy.

    Raises:
        ValueError: If the name is not one of PARALLELIZATION_STRATEGIES.
    """
    try:
        return Strategy(strategy)
    except ValueError:
        raise ValueError(
            f"Unknown parallelization strategy '{strategy}'. "
            f"Choose one of: {', '.join(PARALLELIZATION_STRATEGIES)}"
        ) from None


@dataclass
class ItemResult:
    """Result of translating a single item.

    Attributes:
        index: Position of the item in the input.
        text: Translated text, None if translation failed.
        error: Error message if translation failed.
    """
    index: int
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Result of batch translation.

    Attributes:
        results: Per-item results, in input order.
        total: Number of items submitted.
        successful: Number of successful translations.
        failed: Number of failed translations.
    """
    results: list[ItemResult]
    total: int
    successful: int
    failed: int

    @classmethod
    def from_results(cls, results: list[ItemResult]) -> "BatchResult":
        successful = sum(1 for r in results if r.ok)
        return cls(
            results=results,
            total=len(results),
            successful=successful,
            failed=len(results) - successful
        )

    def translations(self) -> list[Optional[str]]:
        """Translated texts in input order, MISSING where an item failed."""
        return [r.text if r.ok else MISSING for r in self.results]


def as_items(items: Union[str, Mapping[Any, TextInput], Sequence[TextInput]]) -> list[TextInput]:
    """Normalize the texts argument of a batch call to a list of items.

    A bare string is one item, and a mapping contributes its values, so
    TRANSLATION_QUOTES can be passed directly.
    """
    if isinstance(items, str):
        return [items]
    if isinstance(items, Mapping):
        return list(items.values())
    return list(items)


def call_item(fn: Callable[..., str], index: int, *args) -> ItemResult:
    """Run fn(*args) for one item, capturing any failure in the result."""
    try:
        return ItemResult(index=index, text=fn(*args))
    except Exception as e:
        logger.warning("Item %d failed: %s", index, e)
        return ItemResult(index=index, error=f"{type(e).__name__}: {e}")


def _make_executor(strategy: Strategy, max_workers: Optional[int]) -> Executor:
    if strategy is Strategy.MULTICORE:
        return ThreadPoolExecutor(max_workers=max_workers)
    # Fresh interpreters, so workers share nothing with this process
    return ProcessPoolExecutor(
        max_workers=max_workers,
        mp_context=multiprocessing.get_context("spawn")
    )


def run_tasks(
    worker: Callable[[int, Any], ItemResult],
    items: Sequence[Any],
    strategy=Strategy.SEQUENTIAL,
    max_workers: Optional[int] = None
) -> list[ItemResult]:
    """Call worker(index, item) for every item under the given strategy.

    The pool, if any, lives only for this call. Results come back in input
    order whatever order the workers finish in. For the cluster strategy the
    worker and items must be picklable.

    Args:
        worker: Callable producing an ItemResult for one item.
        items: Items to process.
        strategy: Strategy or strategy name.
        max_workers: Pool size for the parallel strategies.

    Returns:
        One ItemResult per item, in input order.
    """
    strategy = resolve_strategy(strategy)
    indices = range(len(items))

    if strategy is Strategy.SEQUENTIAL:
        return [worker(i, item) for i, item in zip(indices, items)]

    with _make_executor(strategy, max_workers) as executor:
        return list(executor.map(worker, indices, items))


def _translate_item(
    backend: TranslationBackend,
    session: Any,
    lang_to: str,
    lang_from: str,
    index: int,
    text: TextInput
) -> ItemResult:
    # Token refresh stays outside the per-item boundary: an auth failure
    # aborts the batch instead of becoming a missing item.
    credential = backend.credential_for(session)
    return call_item(backend.translate, index, text, lang_to, lang_from, credential)


class BatchTranslator:
    """Fans a list of texts out to a backend, one request per text."""

    def __init__(
        self,
        backend: TranslationBackend,
        strategy=Strategy.SEQUENTIAL,
        max_workers: Optional[int] = None
    ):
        """Initialize the batch translator.

        Args:
            backend: Translation backend to use.
            strategy: Concurrency strategy or its name.
            max_workers: Pool size for the parallel strategies. Falls back
                to the backend's configured value.
        """
        self.backend = backend
        self.strategy = resolve_strategy(strategy)
        self.max_workers = max_workers or backend.config.max_workers

    def translate_items(
        self,
        items: Sequence[TextInput],
        lang_to: str,
        lang_from: Optional[str] = None,
        api_key: Optional[str] = None
    ) -> BatchResult:
        """Translate every item, keeping failures as per-item errors.

        Args:
            items: Texts to translate. A list/tuple item is one multi-line
                text; a bare string is one item and a mapping contributes
                its values.
            lang_to: Target language code.
            lang_from: Source language code. Uses config default if not provided.
            api_key: Engine key. Read from the environment if not provided.

        Returns:
            BatchResult with one entry per item, in input order.

        Raises:
            requests.HTTPError: If the engine's credential cannot be obtained.
        """
        items = as_items(items)
        if not items:
            return BatchResult(results=[], total=0, successful=0, failed=0)

        lang_from = lang_from or self.backend.config.source_language
        start_time = time.time()
        logger.info(
            "Translating %d items with %s (%s -> %s, %s)",
            len(items), self.backend.name, lang_from, lang_to, self.strategy.value
        )

        session = self.backend.open_session(api_key)
        worker = partial(_translate_item, self.backend, session, lang_to, lang_from)
        result = BatchResult.from_results(
            run_tasks(worker, items, self.strategy, self.max_workers)
        )

        logger.info(
            "Translation complete: %d succeeded, %d failed in %.1fs",
            result.successful, result.failed, time.time() - start_time
        )
        return result

    def translate(
        self,
        items: Sequence[TextInput],
        lang_to: str,
        lang_from: Optional[str] = None,
        api_key: Optional[str] = None
    ) -> list[Optional[str]]:
        """Translate items and return texts in input order, MISSING on failure."""
        return self.translate_items(items, lang_to, lang_from, api_key).translations()
