"""
NFL Schedule Generator

Generates a complete regular season from the NFL's five-component formula:
- A: Divisional games, home and away vs each rival (6 per team)
- B: Intraconference rotation, one whole division (4 per team, 3-year cycle)
- C: Interconference rotation, one whole division (4 per team, 4-year cycle)
- D: Intraconference standings games vs same-finish teams of the two
     remaining divisions (2 per team)
- E: 17th game vs the same-finish team of the interconference division
     played two years earlier (1 per team; AFC hosts in odd years)

A 32-team league gets 272 games, distributed over 18 weeks so that no
team plays twice in a week. Each team has one bye, placed inside a
mid-season window (weeks 5-14 by default).
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
import logging
import random

from league.league_state import CONFERENCES, DIVISIONS, Standings
from league.schedule import ScheduledGame, SeasonSchedule
from league.team import Team

from .config import ScheduleConfig


# Division index order used by the rotation tables: East=0, North=1, South=2, West=3
DIVISION_INDICES = {division: index for index, division in enumerate(DIVISIONS)}

# Same-conference division each division plays, by year % 3
INTRA_ROTATION = (
    (2, 1, 3),  # East  plays South, North, West
    (3, 0, 2),  # North plays West, East, South
    (0, 3, 1),  # South plays East, West, North
    (1, 2, 0),  # West  plays North, South, East
)

# NFC division each AFC division plays, by year % 4
INTER_ROTATION_AFC = (
    (3, 2, 1, 0),  # AFC East
    (2, 1, 0, 3),  # AFC North
    (1, 0, 3, 2),  # AFC South
    (0, 3, 2, 1),  # AFC West
)


def intraconference_opponent(division_index: int, year: int) -> int:
    """Division index a division plays in its own conference this year."""
    return INTRA_ROTATION[division_index][year % 3]


def interconference_opponent(conference: str, division_index: int, year: int) -> Tuple[str, int]:
    """
    Opposite-conference division a division plays this year.

    Returns:
        (conference, division index) of the opponent division
    """
    if conference == "AFC":
        return "NFC", INTER_ROTATION_AFC[division_index][year % 4]

    for afc_index in range(4):
        if INTER_ROTATION_AFC[afc_index][year % 4] == division_index:
            return "AFC", afc_index
    raise ValueError(f"Interconference rotation lookup failed for NFC division {division_index}")


def seventeenth_game_home_conference(year: int) -> str:
    """AFC hosts the 17th game in odd years, NFC in even years."""
    return "AFC" if year % 2 == 1 else "NFC"


@dataclass(frozen=True)
class _Matchup:
    home: Team
    away: Team
    component: str

    @property
    def is_divisional(self) -> bool:
        return self.home.conference == self.away.conference and self.home.division == self.away.division

    @property
    def is_conference(self) -> bool:
        return self.home.conference == self.away.conference


class ScheduleGenerator(ABC):
    """Builds a season schedule for every team in the league."""

    @abstractmethod
    def generate(self, teams: Sequence[Team], previous_standings: Standings, year: int) -> SeasonSchedule:
        """
        Generate the regular season.

        Args:
            teams: Every team in the league
            previous_standings: Last season's finishing order per division
            year: Season being scheduled

        Returns:
            SeasonSchedule covering every team
        """


class NFLScheduleGenerator(ScheduleGenerator):
    """
    Deterministic five-component NFL schedule generator.

    The same teams, standings and year always produce the same schedule.
    """

    def __init__(self, config: Optional[ScheduleConfig] = None, logger: logging.Logger = None):
        """
        Initialize schedule generator.

        Args:
            config: Season shape and distribution settings
            logger: Optional logger for tracking generation progress

        Raises:
            ValueError: config fails validation
        """
        self.config = config or ScheduleConfig()
        self.logger = logger or logging.getLogger(__name__)

        is_valid, errors = self.config.validate()
        if not is_valid:
            raise ValueError(f"Invalid schedule config: {'; '.join(errors)}")

    def generate(self, teams: Sequence[Team], previous_standings: Standings, year: int) -> SeasonSchedule:
        divisions = self._group_divisions(teams)
        by_id = {team.id: team for team in teams}
        team_ids = [team.id for team in teams]

        matchups = (
            self._divisional_games(divisions)
            + self._intraconference_rotation(divisions, year)
            + self._interconference_rotation(divisions, year)
            + self._standings_games(by_id, previous_standings, year)
            + self._seventeenth_games(teams, by_id, previous_standings, year)
        )

        weeks = self._distribute_across_weeks(matchups, team_ids)

        games = tuple(
            ScheduledGame(
                game_id=f"game-{year}-w{week}-{index}",
                week=week,
                home_team_id=matchup.home.id,
                away_team_id=matchup.away.id,
                is_divisional=matchup.is_divisional,
                is_conference=matchup.is_conference,
            )
            for index, (matchup, week) in enumerate(zip(matchups, weeks))
        )

        schedule = SeasonSchedule(
            year=year,
            regular_season=games,
            bye_weeks=self._bye_weeks(teams, games),
            playoffs=None,
        )

        if self.config.strict_validation:
            valid, errors = validate_schedule(schedule, team_ids, self.config.games_per_team)
            if not valid:
                raise ValueError(f"Generated schedule for {year} failed validation: {'; '.join(errors)}")
            self.logger.debug("Schedule validation passed")

        for week in range(1, schedule.total_weeks + 1):
            self.logger.debug(f"Week {week}: {len(schedule.games_in_week(week))} games")

        self.logger.info(
            f"Generated {year} schedule: {len(games)} games over {schedule.total_weeks} weeks"
        )
        return schedule

    # ==================== Components ====================

    def _divisional_games(self, divisions: Dict[Tuple[str, str], List[Team]]) -> List[_Matchup]:
        games = []
        for members in divisions.values():
            for team in members:
                for rival in members:
                    if rival.id != team.id:
                        games.append(_Matchup(home=team, away=rival, component="A"))
        return games

    def _intraconference_rotation(self, divisions, year: int) -> List[_Matchup]:
        games = []
        for conference in CONFERENCES:
            processed = set()
            for division_index in range(4):
                opponent_index = intraconference_opponent(division_index, year)
                pair = tuple(sorted((division_index, opponent_index)))
                if pair in processed:
                    continue
                processed.add(pair)

                games.extend(self._checkerboard(
                    divisions[(conference, DIVISIONS[division_index])],
                    divisions[(conference, DIVISIONS[opponent_index])],
                    year,
                    component="B",
                ))
        return games

    def _interconference_rotation(self, divisions, year: int) -> List[_Matchup]:
        games = []
        for afc_index in range(4):
            _, nfc_index = interconference_opponent("AFC", afc_index, year)
            games.extend(self._checkerboard(
                divisions[("AFC", DIVISIONS[afc_index])],
                divisions[("NFC", DIVISIONS[nfc_index])],
                year,
                component="C",
            ))
        return games

    def _standings_games(self, by_id: Dict[str, Team], previous_standings: Standings, year: int) -> List[_Matchup]:
        """Component D: same-finish teams of the two non-rotation divisions, 1 home and 1 away each."""
        games = []
        for conference in CONFERENCES:
            first_pair = sorted((0, intraconference_opponent(0, year)))
            second_pair = [index for index in range(4) if index not in first_pair]

            for finish in range(self.config.teams_per_division):
                group1 = self._teams_at_finish(by_id, previous_standings, conference, first_pair, finish)
                group2 = self._teams_at_finish(by_id, previous_standings, conference, second_pair, finish)
                if len(group1) != 2 or len(group2) != 2:
                    self.logger.warning(
                        f"Incomplete {conference} standings at finish {finish + 1}, skipping standings games"
                    )
                    continue

                home_pattern = (year + finish) % 2
                for i in range(2):
                    for j in range(2):
                        if (i + j) % 2 == home_pattern:
                            games.append(_Matchup(home=group1[i], away=group2[j], component="D"))
                        else:
                            games.append(_Matchup(home=group2[j], away=group1[i], component="D"))
        return games

    def _seventeenth_games(self, teams, by_id, previous_standings: Standings, year: int) -> List[_Matchup]:
        """Component E: interconference division from two years earlier, same finish."""
        games = []
        processed = set()
        home_conference = seventeenth_game_home_conference(year)

        for team in teams:
            finish = self._finish_position(team, previous_standings)
            opponent_conference, opponent_index = interconference_opponent(
                team.conference, DIVISION_INDICES[team.division], year - 2
            )
            opponent_division = previous_standings.get(opponent_conference, {}).get(DIVISIONS[opponent_index], ())
            if finish >= len(opponent_division):
                continue
            opponent = by_id.get(opponent_division[finish])
            if opponent is None:
                continue

            pair = tuple(sorted((team.id, opponent.id)))
            if pair in processed:
                continue
            processed.add(pair)

            if team.conference == home_conference:
                games.append(_Matchup(home=team, away=opponent, component="E"))
            else:
                games.append(_Matchup(home=opponent, away=team, component="E"))
        return games

    # ==================== Week Distribution ====================

    def _distribute_across_weeks(self, matchups: List[_Matchup], team_ids: List[str]) -> List[int]:
        """
        Assign every matchup a week with both teams free.

        When the season has a spare week, the games are first packed into
        games_per_team full rounds, then one game per team is moved into a
        new final week so each team's bye opens inside the bye window. If the
        games cannot be packed that way they are spread over all of the
        season's weeks and each team's bye is wherever it is idle. If even
        that fails and extra weeks are allowed, the games that do not fit are
        placed after the last regular week rather than dropped.

        Returns:
            Week per matchup, in matchup order
        """
        orderings = self._orderings(matchups)

        if self.config.total_weeks > self.config.games_per_team:
            rounds = self._first_fit(matchups, orderings, self.config.games_per_team)
            weeks = self._open_bye_weeks(matchups, rounds, team_ids) if rounds is not None else None
            if weeks is not None:
                return weeks
            self.logger.warning("Could not open byes inside the bye window, spreading games over every week")

        weeks = self._first_fit(matchups, orderings, self.config.total_weeks)
        if weeks is not None:
            return weeks

        if not self.config.allow_extra_weeks:
            raise ValueError(
                f"Could not fit {len(matchups)} games into {self.config.total_weeks} weeks"
            )

        self.logger.warning(
            f"Could not fit {len(matchups)} games into {self.config.total_weeks} weeks, using extra weeks"
        )
        return self._assign_weeks(matchups, orderings[0], self.config.total_weeks, allow_overflow=True)

    def _orderings(self, matchups: List[_Matchup]) -> List[List[int]]:
        """Divisional-first, divisional-last, then seeded shuffles."""
        indices = list(range(len(matchups)))
        orderings = [
            sorted(indices, key=lambda i: not matchups[i].is_divisional),
            sorted(indices, key=lambda i: matchups[i].is_divisional),
        ]
        for seed in range(self.config.shuffle_attempts):
            shuffled = list(indices)
            random.Random(seed * 7919 + 12345).shuffle(shuffled)
            orderings.append(shuffled)
        return orderings

    def _first_fit(self, matchups: List[_Matchup], orderings: List[List[int]], max_weeks: int) -> Optional[List[int]]:
        for attempt, ordering in enumerate(orderings, start=1):
            weeks = self._assign_weeks(matchups, ordering, max_weeks, allow_overflow=False)
            if weeks is not None:
                self.logger.debug(f"Fit {len(matchups)} games into {max_weeks} weeks on ordering {attempt}")
                return weeks
        return None

    def _open_bye_weeks(self, matchups: List[_Matchup], rounds: List[int], team_ids: List[str]) -> Optional[List[int]]:
        """
        Move one game per team into a new final week.

        Every team plays once in each week of ``rounds``. The moved games form
        a perfect matching, so every team plays once in the new week and sits
        out the week its moved game came from. That week is its bye.

        The matching starts as the first window week's round. For each later
        window week, the matching and that week's round split into
        alternating cycles; switching a cycle to the later week's games moves
        its teams' byes there and keeps the matching perfect. Cycles are
        switched while the week stays within an even share of the league or
        below the busiest week it draws from.

        Returns:
            Week per matchup, or None when a window week is not a full round
        """
        final_week = max(rounds, default=0) + 1
        window = [
            week for week in range(self.config.bye_window_start, self.config.bye_window_end + 1)
            if week < final_week
        ]
        if not window:
            return None

        by_week: Dict[int, Dict[str, int]] = {week: {} for week in window}  # week -> team -> matchup index
        for index, week in enumerate(rounds):
            if week in by_week:
                by_week[week][matchups[index].home.id] = index
                by_week[week][matchups[index].away.id] = index
        if any(len(games) != len(team_ids) for games in by_week.values()):
            return None

        def opponent(index: int, team_id: str) -> str:
            matchup = matchups[index]
            return matchup.away.id if matchup.home.id == team_id else matchup.home.id

        moved = dict(by_week[window[0]])  # team -> matchup index moving to the final week
        bye_of = {team_id: window[0] for team_id in team_ids}
        counts: Dict[int, int] = defaultdict(int, {window[0]: len(team_ids)})
        share = -(-len(team_ids) // len(window))

        for week in window[1:]:
            current = by_week[week]
            seen = set()
            for start in sorted(team_ids):
                if start in seen:
                    continue

                cycle = []
                team_id = start
                while True:
                    partner = opponent(current[team_id], team_id)
                    cycle.extend((team_id, partner))
                    team_id = opponent(moved[partner], partner)
                    if team_id == start:
                        break
                seen.update(cycle)

                donors: Dict[int, int] = defaultdict(int)
                for member in cycle:
                    donors[bye_of[member]] += 1
                heaviest_donor = max(counts[donor] - moving for donor, moving in donors.items())
                new_count = counts[week] + len(cycle)
                if new_count > share and new_count > heaviest_donor:
                    continue

                for member in cycle:
                    counts[bye_of[member]] -= 1
                    moved[member] = current[member]
                    bye_of[member] = week
                counts[week] += len(cycle)

        weeks = list(rounds)
        for index in set(moved.values()):
            weeks[index] = final_week

        self.logger.debug(f"Bye teams per week: {dict(sorted((w, n) for w, n in counts.items() if n))}")
        return weeks

    @staticmethod
    def _assign_weeks(
        matchups: List[_Matchup],
        ordering: List[int],
        max_weeks: int,
        allow_overflow: bool
    ) -> Optional[List[int]]:
        """
        Greedy week assignment with alternating-chain swaps.

        When no week in 1..max_weeks is free for both teams, picks a week a
        free for the home team and b free for the away team and swaps a/b
        along the chain of games starting at the away team. Afterwards a is
        free for both.

        Returns:
            Week per matchup, or None when a game cannot be placed and
            overflow is not allowed
        """
        slots: Dict[str, Dict[int, int]] = defaultdict(dict)  # team -> week -> matchup index
        weeks: List[int] = [0] * len(matchups)
        all_weeks = range(1, max_weeks + 1)

        def place(index: int, week: int) -> None:
            weeks[index] = week
            slots[matchups[index].home.id][week] = index
            slots[matchups[index].away.id][week] = index

        def unplace(index: int) -> None:
            del slots[matchups[index].home.id][weeks[index]]
            del slots[matchups[index].away.id][weeks[index]]

        def chain_from(team_id: str, first: int, second: int) -> Tuple[List[int], str]:
            path = []
            current, week = team_id, first
            while week in slots[current]:
                index = slots[current][week]
                path.append(index)
                matchup = matchups[index]
                current = matchup.away.id if matchup.home.id == current else matchup.home.id
                week = second if week == first else first
            return path, current

        for index in ordering:
            home = matchups[index].home.id
            away = matchups[index].away.id

            home_free = [week for week in all_weeks if week not in slots[home]]
            away_free = [week for week in all_weeks if week not in slots[away]]
            common = [week for week in home_free if week not in slots[away]]
            if common:
                place(index, common[0])
                continue

            swapped = False
            for a in home_free:
                for b in away_free:
                    path, end = chain_from(away, a, b)
                    if end == home:
                        continue
                    for chained in path:
                        unplace(chained)
                    for chained in path:
                        place(chained, b if weeks[chained] == a else a)
                    place(index, a)
                    swapped = True
                    break
                if swapped:
                    break
            if swapped:
                continue

            if not allow_overflow:
                return None

            week = max_weeks + 1
            while week in slots[home] or week in slots[away]:
                week += 1
            place(index, week)

        return weeks

    # ==================== Helpers ====================

    def _group_divisions(self, teams: Sequence[Team]) -> Dict[Tuple[str, str], List[Team]]:
        divisions: Dict[Tuple[str, str], List[Team]] = {
            (conference, division): [] for conference in CONFERENCES for division in DIVISIONS
        }
        for team in teams:
            key = (team.conference, team.division)
            if key not in divisions:
                raise ValueError(f"Team {team.id} has unknown division {team.conference} {team.division}")
            divisions[key].append(team)

        for key, members in divisions.items():
            if len(members) != self.config.teams_per_division:
                raise ValueError(
                    f"{key[0]} {key[1]} has {len(members)} teams, expected {self.config.teams_per_division}"
                )
            members.sort(key=lambda team: team.id)
        return divisions

    @staticmethod
    def _checkerboard(group_a: List[Team], group_b: List[Team], year: int, component: str) -> List[_Matchup]:
        """All 16 games between two divisions, 2 home and 2 away per team."""
        games = []
        offset = year % 2
        for i, team_a in enumerate(group_a):
            for j, team_b in enumerate(group_b):
                if (i + j + offset) % 2 == 0:
                    games.append(_Matchup(home=team_a, away=team_b, component=component))
                else:
                    games.append(_Matchup(home=team_b, away=team_a, component=component))
        return games

    @staticmethod
    def _teams_at_finish(by_id, previous_standings, conference, division_indices, finish) -> List[Team]:
        found = []
        for division_index in division_indices:
            order = previous_standings.get(conference, {}).get(DIVISIONS[division_index], ())
            if finish < len(order) and order[finish] in by_id:
                found.append(by_id[order[finish]])
        return found

    @staticmethod
    def _finish_position(team: Team, previous_standings: Standings) -> int:
        order = previous_standings.get(team.conference, {}).get(team.division, ())
        return order.index(team.id) if team.id in order else 0

    @staticmethod
    def _bye_weeks(teams: Sequence[Team], games: Tuple[ScheduledGame, ...]) -> Dict[str, int]:
        """First week each team sits out before its last game."""
        played: Dict[str, set] = defaultdict(set)
        for game in games:
            played[game.home_team_id].add(game.week)
            played[game.away_team_id].add(game.week)

        byes = {}
        for team in teams:
            weeks = played[team.id]
            idle = [week for week in range(1, max(weeks, default=0)) if week not in weeks]
            if idle:
                byes[team.id] = idle[0]
        return byes


# ==================== Validation Gates ====================

def validate_schedule(
    schedule: SeasonSchedule,
    team_ids: Sequence[str],
    games_per_team: int = 17
) -> Tuple[bool, List[str]]:
    """
    Run every validation gate over a schedule.

    Gates:
        1. Every team plays exactly games_per_team games
        2. Total games equals teams × games_per_team / 2
        3. No team plays twice in the same week
        4. No home/away pairing appears twice

    Returns:
        (is_valid, list of error messages)
    """
    errors = []
    games = schedule.regular_season

    counts: Dict[str, int] = defaultdict(int)
    for game in games:
        counts[game.home_team_id] += 1
        counts[game.away_team_id] += 1
    for team_id in team_ids:
        if counts[team_id] != games_per_team:
            errors.append(f"Team {team_id} plays {counts[team_id]} games, expected {games_per_team}")

    expected_total = len(team_ids) * games_per_team // 2
    if len(games) != expected_total:
        errors.append(f"Invalid total games: {len(games)}, expected {expected_total}")

    weekly: Dict[Tuple[str, int], int] = defaultdict(int)
    for game in games:
        weekly[(game.home_team_id, game.week)] += 1
        weekly[(game.away_team_id, game.week)] += 1
    for (team_id, week), count in sorted(weekly.items()):
        if count > 1:
            errors.append(f"Team {team_id} plays {count} games in week {week}")

    pairings: Dict[Tuple[str, str], int] = defaultdict(int)
    for game in games:
        pairings[(game.home_team_id, game.away_team_id)] += 1
    for (home, away), count in sorted(pairings.items()):
        if count > 1:
            errors.append(f"{away} @ {home} scheduled {count} times")

    return len(errors) == 0, errors
