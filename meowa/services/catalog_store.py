"""
Breed catalog state: the fetched breed list, the loading flag and the last error.

The store is the only writer of the catalog. The UI reads it through
`snapshot()` and changes it only through `ensure_loaded()` / `reload()`.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from meowa.domain.breed import Breed
from meowa.domain.search import filter_breeds
from meowa.infrastructure.cat_api_client import CatApiClient, FetchError, FetchResult
from meowa.utils.logger import get_logger

logger = get_logger()

IDLE = "idle"
LOADING = "loading"
LOADED = "loaded"
FAILED = "failed"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only view of the store handed to the rendering layer."""

    breeds: tuple[Breed, ...] = ()
    status: str = IDLE
    error: FetchError | None = None
    loaded_once: bool = False

    @property
    def is_loading(self) -> bool:
        """True until the first fetch settles, and while any fetch is running."""
        return self.status in (IDLE, LOADING)

    @property
    def failed(self) -> bool:
        return self.status == FAILED


class BreedCatalogStore:
    def __init__(self, client: CatApiClient | None = None) -> None:
        self._client = client or CatApiClient()
        self._lock = threading.Lock()
        self._snapshot = CatalogSnapshot()
        self._executor: ThreadPoolExecutor | None = None

    def __getstate__(self) -> dict[str, Any]:
        """Pickle only the data; the lock and worker thread are recreated on load."""
        return {"client": self._client, "snapshot": self._snapshot}

    def __setstate__(self, state: dict[str, Any]) -> None:
        self._client = state["client"]
        self._snapshot = state["snapshot"]
        self._lock = threading.Lock()
        self._executor = None

    def snapshot(self) -> CatalogSnapshot:
        with self._lock:
            return self._snapshot

    @property
    def breeds(self) -> tuple[Breed, ...]:
        return self.snapshot().breeds

    def _set_loading(self) -> None:
        with self._lock:
            s = self._snapshot
            self._snapshot = CatalogSnapshot(
                breeds=s.breeds, status=LOADING, error=None, loaded_once=s.loaded_once
            )

    def _apply(self, result: FetchResult) -> None:
        with self._lock:
            s = self._snapshot
            if result.ok:
                # Whole-list replace; the previous catalog is dropped, never merged.
                self._snapshot = CatalogSnapshot(breeds=result.breeds, status=LOADED, loaded_once=True)
            else:
                self._snapshot = CatalogSnapshot(
                    breeds=s.breeds, status=FAILED, error=result.error, loaded_once=True
                )

    def load(self) -> FetchResult:
        """
        Fetch the catalog once and publish the outcome.

        On success the catalog is replaced; on failure it keeps its previous
        value (empty on first load) and the error is recorded on the snapshot.
        Never raises for fetch failures.
        """
        self._set_loading()
        try:
            result = self._client.fetch_breeds()
        except Exception as e:
            # A client bug must not leave the UI spinning forever.
            logger.exception("Unexpected error while fetching breeds: %s", e)
            result = FetchResult.failure(FetchError(f"Unexpected error: {e}", original=e))

        if result.ok:
            logger.info("Breed catalog loaded: %d breeds", len(result.breeds))
        else:
            err = result.error
            logger.warning("Breed catalog fetch failed (%s): %s", getattr(err, "kind", "error"), err)
        self._apply(result)
        return result

    def load_async(self) -> Future[FetchResult]:
        """
        Run `load()` on a background worker.

        The returned future can be cancelled while it is still queued; a
        cancelled load never touches the store.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="meowa-fetch")
        return self._executor.submit(self.load)

    def ensure_loaded(self) -> CatalogSnapshot:
        """Run the initial load if it has not happened yet; return the snapshot."""
        if not self.snapshot().loaded_once:
            self.load()
        return self.snapshot()

    def reload(self) -> FetchResult:
        """Explicit refresh. Same semantics as `load()`."""
        logger.info("Reloading breed catalog")
        return self.load()

    def search(self, query: str) -> list[Breed]:
        """Breeds matching `query` in the current catalog."""
        return filter_breeds(self.breeds, query)

    def get(self, breed_id: str) -> Breed | None:
        for b in self.breeds:
            if b.id == breed_id:
                return b
        return None

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
