"""Person aggregation orchestration.

Fetches a person, then its homeworld and every film concurrently, and folds
the responses into one `PersonInfo` record.

The same flow is available in three concurrency idioms (`AggregationStrategy`):

- `gather`: future combinator, all fan-out tasks joined by `asyncio.gather`.
- `sequential`: fan-out tasks are spawned up front and their results are
  awaited one after another, in reference order.
- `task_group`: structured concurrency with `asyncio.TaskGroup`.

They are observably equivalent: same requests, same result, and the first
failure aborts the whole aggregation with outstanding siblings cancelled.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Coroutine, Iterable, Sequence
from enum import Enum
from typing import Any, TypeVar

import httpx

from adapters.http_client import HttpResourceFetcher, build_async_client
from core.config import AppSettings
from core.domain.models import Film, FilmSummary, Person, PersonInfo, Planet
from core.interfaces.fetcher import ResourceFetcher

T = TypeVar("T")

TaskFactory = Callable[[Coroutine[Any, Any, T]], asyncio.Task[T]]

logger = logging.getLogger(__name__)


class AggregationStrategy(str, Enum):
    """Concurrency idiom used to join the fan-out requests."""

    GATHER = "gather"
    SEQUENTIAL = "sequential"
    TASK_GROUP = "task_group"

    @classmethod
    def default(cls) -> "AggregationStrategy":
        return cls.GATHER


def build_person_info(person: Person, planet: Planet, films: Sequence[Film]) -> PersonInfo:
    """Fold the fetched entities into the aggregated record."""

    if len(films) != len(person.films):
        raise ValueError(f"expected {len(person.films)} films, got {len(films)}")
    return PersonInfo(
        name=person.name,
        height=person.height,
        gender=person.gender,
        homeworld=planet.name,
        films=tuple(FilmSummary.from_film(film) for film in films),
    )


async def _cancel_pending(tasks: Sequence[asyncio.Task[Any]]) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()
    # Settles the cancellations and retrieves every sibling error, so no
    # request outlives the aggregation.
    await asyncio.gather(*tasks, return_exceptions=True)


def _raise_first_failure(tasks: Iterable[asyncio.Task[Any]]) -> None:
    for task in tasks:
        if task.done() and not task.cancelled():
            error = task.exception()
            if error is not None:
                raise error


async def _await_in_turn(task: asyncio.Task[T], siblings: Sequence[asyncio.Task[Any]]) -> T:
    """Await `task`, but fail as soon as any sibling fails."""

    while not task.done():
        running = [t for t in siblings if not t.done()]
        await asyncio.wait(running, return_when=asyncio.FIRST_COMPLETED)
        _raise_first_failure(siblings)
    return task.result()


class PersonAggregator:
    """Resolves a person's homeworld and films into a `PersonInfo`.

    Side effects: exactly `2 + len(person.films)` requests per call. Nothing
    is cached; a film referenced twice is fetched twice.
    """

    def __init__(self, fetcher: ResourceFetcher, *, settings: AppSettings | None = None) -> None:
        self._fetcher = fetcher
        self._settings = settings or AppSettings()

    async def aggregate(
        self,
        url: str | None = None,
        *,
        strategy: AggregationStrategy | str = AggregationStrategy.GATHER,
    ) -> PersonInfo:
        url = url or self._settings.person_url
        strategy = AggregationStrategy(strategy)
        runners: dict[AggregationStrategy, Callable[[str], Awaitable[PersonInfo]]] = {
            AggregationStrategy.GATHER: self.aggregate_gather,
            AggregationStrategy.SEQUENTIAL: self.aggregate_sequential,
            AggregationStrategy.TASK_GROUP: self.aggregate_task_group,
        }

        logger.info("Aggregating %s (strategy=%s)", url, strategy.value)
        info = await runners[strategy](url)
        logger.info("Aggregated %s: homeworld=%s, %d films", info.name, info.homeworld, len(info.films))
        return info

    async def aggregate_gather(self, url: str) -> PersonInfo:
        person = await self._fetch_person(url)
        homeworld_task, film_tasks = self._spawn_fan_out(person, asyncio.create_task)
        tasks = [homeworld_task, *film_tasks]
        try:
            planet, *films = await asyncio.gather(*tasks)
        except BaseException:
            await _cancel_pending(tasks)
            raise
        return build_person_info(person, planet, films)

    async def aggregate_sequential(self, url: str) -> PersonInfo:
        person = await self._fetch_person(url)
        homeworld_task, film_tasks = self._spawn_fan_out(person, asyncio.create_task)
        tasks = [homeworld_task, *film_tasks]
        try:
            planet = await _await_in_turn(homeworld_task, tasks)
            films = [await _await_in_turn(task, tasks) for task in film_tasks]
        except BaseException:
            await _cancel_pending(tasks)
            raise
        return build_person_info(person, planet, films)

    async def aggregate_task_group(self, url: str) -> PersonInfo:
        person = await self._fetch_person(url)
        try:
            async with asyncio.TaskGroup() as group:
                homeworld_task, film_tasks = self._spawn_fan_out(person, group.create_task)
        except BaseExceptionGroup as errors:
            # The group cancels the siblings; surface the first failure alone.
            raise errors.exceptions[0]
        return build_person_info(
            person,
            homeworld_task.result(),
            [task.result() for task in film_tasks],
        )

    async def _fetch_person(self, url: str) -> Person:
        return await self._fetcher.fetch(url, Person)

    def _spawn_fan_out(
        self,
        person: Person,
        create_task: TaskFactory[Any],
    ) -> tuple[asyncio.Task[Planet], list[asyncio.Task[Film]]]:
        # Every request is scheduled before any of them is awaited.
        homeworld_task = create_task(self._fetcher.fetch(person.homeworld, Planet))
        film_tasks = [create_task(self._fetcher.fetch(film_url, Film)) for film_url in person.films]
        return homeworld_task, film_tasks


async def get_person_info(
    *,
    settings: AppSettings | None = None,
    url: str | None = None,
    strategy: AggregationStrategy | str = AggregationStrategy.GATHER,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PersonInfo:
    """Open an HTTP client, aggregate one person and close the client."""

    settings = settings or AppSettings()
    async with build_async_client(settings, transport=transport) as client:
        aggregator = PersonAggregator(HttpResourceFetcher(client), settings=settings)
        return await aggregator.aggregate(url, strategy=strategy)
