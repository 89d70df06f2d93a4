"""Use case: build and publish the champion-select lobby report."""
from __future__ import annotations

import asyncio
import logging
import uuid
from typing import List, Optional, Sequence, Tuple

from application.services.display_options import DisplayOptions
from application.services.report_formatter import build_multisearch_link, build_player_report
from application.services.statistics import derive_stats
from config import settings
from core.logging import context as log_context
from core.logging import get_logger, timed
from domain.entities import (
    UNRANKED,
    ChatConversation,
    LobbyReport,
    LobbyRosterEntry,
    MatchHistoryBundle,
)
from domain.interfaces import (
    IChatRepository,
    ILobbyRepository,
    IMatchHistoryRepository,
    IRankedStatsRepository,
    PresentationSink,
)
from infrastructure import (
    ChatRepository,
    LCUClient,
    LobbyRepository,
    MatchHistoryRepository,
    RankedStatsRepository,
)


class AggregateLobbyUseCase:
    """
    One run per entry into champion select.

    Order of work:
    ─────────────────────────────────────────────────────────────────
    settle delay → chat conversation (abort when missing)
                 → roster + region
                 → match history × ranked stats for every player, all
                   in flight at once, joined before going on
                 → one line per player in roster order
                 → chat posts one by one, then the lookup link
                 → overlay
    ─────────────────────────────────────────────────────────────────
    A failed lookup only degrades that player's fields ("N/A",
    "Unranked"); the batch always produces one line per player.
    """

    def __init__(
        self,
        api_client: LCUClient,
        *,
        overlay: Optional[PresentationSink] = None,
        options: Optional[DisplayOptions] = None,
        settle_delay_s: Optional[float] = None,
        match_window: Optional[Tuple[int, int]] = None,
        stats_queue_id: Optional[int] = None,
        lookup_host: Optional[str] = None,
        match_repo: Optional[IMatchHistoryRepository] = None,
        ranked_repo: Optional[IRankedStatsRepository] = None,
        lobby_repo: Optional[ILobbyRepository] = None,
        chat_repo: Optional[IChatRepository] = None,
    ):
        self.api_client  = api_client
        self.match_repo  = match_repo or MatchHistoryRepository(api_client)
        self.ranked_repo = ranked_repo or RankedStatsRepository(api_client)
        self.lobby_repo  = lobby_repo or LobbyRepository(api_client)
        self.chat_repo   = chat_repo or ChatRepository(api_client)
        self.overlay     = overlay
        self.options     = options or DisplayOptions()

        self.settle_delay_s = settings.SETTLE_DELAY_S if settle_delay_s is None else settle_delay_s
        self.match_window   = match_window or (settings.MATCH_BEG_INDEX, settings.MATCH_END_INDEX)
        self.stats_queue_id = settings.STATS_QUEUE_ID if stats_queue_id is None else (stats_queue_id or None)
        self.lookup_host    = lookup_host or settings.LOOKUP_HOST

        self._log = get_logger(__name__, service="pipeline")

    @timed
    async def execute(self) -> Optional[LobbyReport]:
        """Run the pipeline once; None when there is no chat to report into."""
        with log_context(run=uuid.uuid4().hex[:8]):
            if self.settle_delay_s > 0:
                await asyncio.sleep(self.settle_delay_s)

            conversation = await self.chat_repo.find_champion_select_conversation()
            if conversation is None:
                self._log.info("no champion-select conversation, nothing to report")
                return None

            roster, region = await asyncio.gather(
                self.lobby_repo.get_roster(),
                self.lobby_repo.get_region(),
            )
            if not roster:
                self._log.warning("champion-select roster is empty")
                return LobbyReport()
            if region is None:
                self._log.warning("client region unknown, lookup link skipped")

            histories, ranks = await self._collect(roster)

            players = [
                build_player_report(entry, rank, derive_stats(self._restrict(history)))
                for entry, history, rank in zip(roster, histories, ranks)
            ]
            report = LobbyReport(
                players=players,
                link=build_multisearch_link(self.lookup_host, region, roster),
            )
            self._log.success(lambda: f"lobby report ready players={len(players)}")

            if self.options.textchat:
                await self._post_to_chat(conversation, report)
            if self.options.popup and self.overlay is not None:
                report.overlay = self.overlay.render(report.lines, report.link)

            return report

    # ------------------------------------------------------------------ #
    # Fan-out
    # ------------------------------------------------------------------ #

    async def _collect(
        self, roster: Sequence[LobbyRosterEntry]
    ) -> Tuple[List[Optional[MatchHistoryBundle]], List[str]]:
        """Every lookup for every player at once; results in roster order."""
        count = len(roster)
        lookups = [self._history_for(entry) for entry in roster]
        lookups += [self._rank_for(entry) for entry in roster]
        results = await asyncio.gather(*lookups, return_exceptions=True)

        histories: List[Optional[MatchHistoryBundle]] = []
        for entry, res in zip(roster, results[:count]):
            histories.append(self._settled(res, entry, "match history", None))
        ranks: List[str] = []
        for entry, res in zip(roster, results[count:]):
            ranks.append(self._settled(res, entry, "ranked stats", UNRANKED))
        return histories, ranks

    def _settled(self, result, entry: LobbyRosterEntry, what: str, fallback):
        if isinstance(result, Exception):
            self._log.error(
                lambda: f"{what} lookup for {entry.game_name} raised {result!r}",
                exc_info=result,
            )
            return fallback
        if isinstance(result, BaseException):
            raise result
        return result

    async def _history_for(self, entry: LobbyRosterEntry) -> Optional[MatchHistoryBundle]:
        with log_context(puuid=entry.puuid):
            beg, end = self.match_window
            return await self.match_repo.fetch_for_player(entry.puuid, beg, end)

    async def _rank_for(self, entry: LobbyRosterEntry) -> str:
        with log_context(puuid=entry.puuid):
            return await self.ranked_repo.fetch_for_player(entry.puuid)

    def _restrict(self, bundle: Optional[MatchHistoryBundle]) -> Optional[MatchHistoryBundle]:
        if bundle is None or self.stats_queue_id is None:
            return bundle
        return bundle.only_queue(self.stats_queue_id)

    # ------------------------------------------------------------------ #
    # Sinks
    # ------------------------------------------------------------------ #

    async def _post_to_chat(self, conversation: ChatConversation, report: LobbyReport) -> None:
        # one post at a time: the chat shows messages in arrival order
        for line in report.lines:
            await self.chat_repo.post_message(conversation.id, line)
        if report.link:
            await self.chat_repo.post_message(conversation.id, report.link)

        if self._log.is_enabled_for(logging.DEBUG):
            transcript = await self.chat_repo.get_message_bodies(conversation.id)
            self._log.debug(lambda: f"chat transcript now holds {len(transcript)} messages")
