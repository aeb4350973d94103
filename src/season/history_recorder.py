"""
History Recorder

Archives the season that just ended: champion, MVP and the draft order
derived from the final records.
"""

from dataclasses import replace
from typing import Dict

from league.league_state import GameState, SeasonSummary
from league.standings import draft_order
from league.state_step import GameStateStep
from league.team import Team


class HistoryRecorder(GameStateStep):
    """Step 1: append a SeasonSummary for the finished year."""

    name = "history_recorder"

    def apply(self, state: GameState) -> GameState:
        champion_id = self.champion_id(state)
        summary = SeasonSummary(
            year=state.current_year,
            champion_team_id=champion_id,
            mvp_player_id=self.mvp_player_id(state, champion_id),
            draft_order=draft_order(state.teams.values()),
        )

        teams: Dict[str, Team] = state.teams
        if champion_id in state.teams:
            champion = state.teams[champion_id]
            teams = dict(state.teams)
            teams[champion_id] = replace(champion, championships=champion.championships + 1)

        league = replace(
            state.league,
            season_history=state.league.season_history + (summary,),
        )

        self.logger.info(
            f"Recorded {summary.year} season: champion {champion_id or 'none'}, "
            f"first pick {summary.draft_order[0] if summary.draft_order else 'none'}"
        )
        return replace(state, league=league, teams=teams)

    @staticmethod
    def champion_id(state: GameState) -> str:
        """Super Bowl winner, or "" when the bracket is missing or undecided."""
        bracket = state.league.playoff_bracket
        if bracket is None:
            return ""
        return bracket.champion_id or ""

    @staticmethod
    def mvp_player_id(state: GameState, champion_id: str) -> str:
        """
        First rostered player of the champion.

        Falls back to the first player in the league, then to "".
        """
        champion = state.teams.get(champion_id) if champion_id else None
        if champion is not None and champion.roster_player_ids:
            return champion.roster_player_ids[0]
        return next(iter(state.players), "")
