"""Async client for the crates.io sparse index.

Used as a self-check that the crate versions pinned in
``cargo_casper.scaffolder.dependency`` match the latest published releases.
It is never called while generating a project.

Typical usage::

    python -m cargo_casper.index_client

or from code::

    reports = await check_versions(DEPENDENCIES)
    stale = [r for r in reports if not r.up_to_date]
"""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Iterable

import httpx
from pydantic import BaseModel, Field

from cargo_casper.config import IndexConfig
from cargo_casper.scaffolder.dependency import DEPENDENCIES, Dependency
from cargo_casper.utils import print_error, print_success, print_summary_table

VERSION_FIELD_NAME = "vers"


class CrateIndexError(Exception):
    """Raised when a crate's index entry cannot be fetched or parsed."""


class VersionReport(BaseModel):
    """Outcome of comparing one pinned crate version against the index."""

    name: str
    pinned: str
    published: str | None = Field(default=None, description="Latest version in the index")
    error: str | None = Field(default=None, description="Fetch or parse failure, if any")

    @property
    def up_to_date(self) -> bool:
        return self.error is None and self.published == self.pinned


def index_path(crate_name: str) -> str:
    """Return the sparse-index path of *crate_name*.

    Names of one or two characters live under ``1/`` and ``2/``, three
    characters under ``3/<first char>/``, and longer names under
    ``<first two>/<next two>/``.
    """
    name = crate_name.lower()
    if len(name) <= 2:
        return f"{len(name)}/{name}"
    if len(name) == 3:
        return f"3/{name[0]}/{name}"
    return f"{name[:2]}/{name[2:4]}/{name}"


class CratesIndexClient:
    """Async client for the crates.io sparse index."""

    def __init__(
        self,
        config: IndexConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or IndexConfig()
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with the index URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.config.url.rstrip("/"),
            timeout=httpx.Timeout(self.config.timeout, connect=10.0),
            transport=self.transport,
        )

    async def latest_published_version(self, crate_name: str) -> str:
        """Return the version of the newest entry in the crate's index file.

        The index file holds one JSON object per published version, oldest
        first, so the last non-empty line is the latest release.

        Raises:
            CrateIndexError: On HTTP failure or a malformed index file.
        """
        async with self._client() as client:
            try:
                response = await client.get(f"/{index_path(crate_name)}")
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise CrateIndexError(
                    f"should get index file for {crate_name}: {exc}"
                ) from exc

        lines = [line for line in response.text.splitlines() if line.strip()]
        if not lines:
            raise CrateIndexError(f"index file for {crate_name} contains no entries")

        try:
            latest_entry = json.loads(lines[-1])
            return str(latest_entry[VERSION_FIELD_NAME])
        except (json.JSONDecodeError, KeyError, TypeError) as exc:
            raise CrateIndexError(
                f"latest entry for {crate_name} should parse as JSON with a "
                f"'{VERSION_FIELD_NAME}' field: {exc}"
            ) from exc

    async def check(self, dep: Dependency) -> VersionReport:
        """Compare *dep*'s pinned version against the index."""
        try:
            published = await self.latest_published_version(dep.name)
        except CrateIndexError as exc:
            return VersionReport(name=dep.name, pinned=dep.version, error=str(exc))
        return VersionReport(name=dep.name, pinned=dep.version, published=published)


async def check_versions(
    deps: Iterable[Dependency] = DEPENDENCIES,
    client: CratesIndexClient | None = None,
) -> list[VersionReport]:
    """Check every dependency concurrently, preserving input order."""
    client = client or CratesIndexClient(IndexConfig.from_env())
    return list(await asyncio.gather(*(client.check(dep) for dep in deps)))


def _status(report: VersionReport) -> str:
    if report.error is not None:
        return f"error: {report.error}"
    return "ok" if report.up_to_date else "outdated"


def main() -> None:
    """Entry point for ``python -m cargo_casper.index_client``."""
    reports = asyncio.run(check_versions())

    print_summary_table(
        [(r.name, r.pinned, r.published or "-", _status(r)) for r in reports],
        columns=["Crate", "Pinned", "Published", "Status"],
        title="Casper crate versions",
    )

    stale = [r for r in reports if not r.up_to_date]
    if stale:
        for report in stale:
            print_error(
                f"update {report.name} in cargo_casper/scaffolder/dependency.py "
                f"(pinned {report.pinned}, published {report.published or 'unknown'})"
            )
        sys.exit(1)
    print_success("All pinned Casper crate versions are current.")


if __name__ == "__main__":
    main()
