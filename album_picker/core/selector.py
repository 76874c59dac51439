# album_picker/core/selector.py
import enum
import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from album_picker.core.candidates import NamedEntry
from album_picker.core.matcher import EmptyCandidateSetError, resolve_query
from album_picker.core.randomizer import draw_index
from album_picker.ui import keys
from album_picker.ui.cli_interface import Colors, colorize
from album_picker.ui.keys import Key


class SelectionStatus(enum.Enum):
    CONFIRMED = "confirmed"       # Accepted a random draw
    QUERIED = "queried"           # Typed a directory name
    FILE_QUERIED = "file_queried" # Typed a playlist file name
    ABORTED = "aborted"


@dataclass(frozen=True)
class Selection:
    status: SelectionStatus
    candidate: Optional[NamedEntry] = None

    @property
    def aborted(self) -> bool:
        return self.status is SelectionStatus.ABORTED


class InteractiveSelector:
    """
    Offers random candidates one at a time until the user accepts one, types a
    query instead, or aborts. A rejected candidate is never offered again
    immediately after its rejection.
    """

    def __init__(self,
                 read_key: Callable[[], str] = keys.read_key,
                 read_line: Callable[[str], Optional[str]] = keys.read_line,
                 rng: Optional[random.Random] = None,
                 out: Callable[..., None] = print):
        self.read_key = read_key
        self.read_line = read_line
        self.rng = rng if rng is not None else random.Random()
        self.out = out

    def select(self, candidates: Sequence[NamedEntry],
               file_candidates_provider: Callable[[], Sequence[NamedEntry]]) -> Selection:
        if not candidates:
            raise EmptyCandidateSetError("No candidates to select from.")

        count = len(candidates)
        last = None
        while True:
            index = draw_index(self.rng, count, last)
            chosen = candidates[index]
            outcome = self._present(chosen, candidates, file_candidates_provider)
            if outcome is not None:
                return outcome
            logging.info(f"SELECTOR: User rejected '{chosen.name}' (index {index}).")
            last = index

    def _present(self, chosen, candidates, file_candidates_provider) -> Optional[Selection]:
        """Prompts until the user decides about `chosen`. None means rejected."""
        while True:
            self.out(f"Play from '{colorize(chosen.name, Colors.BOLD)}'? "
                     f"{colorize('[Y]', Colors.GREEN)}es/{colorize('[N]', Colors.RED)}o: ", end="", flush=True)
            key = keys.classify_key(self.read_key())

            if key is Key.CONFIRM:
                logging.info(f"SELECTOR: User confirmed '{chosen.name}'.")
                return Selection(SelectionStatus.CONFIRMED, chosen)
            elif key is Key.REJECT:
                return None
            elif key is Key.QUERY:
                result = self._query("Type a directory to play from: ", lambda: candidates)
                if result is not None:
                    return Selection(SelectionStatus.QUERIED, result)
            elif key is Key.FILE_QUERY:
                result = self._query("Type a playlist file to play from: ", file_candidates_provider)
                if result is not None:
                    return Selection(SelectionStatus.FILE_QUERIED, result)
            elif key is Key.ABORT:
                logging.info("SELECTOR: User aborted the selection.")
                return Selection(SelectionStatus.ABORTED)
            else:
                logging.debug("SELECTOR: Ignoring unmapped key press.")

    def _query(self, prompt, provider) -> Optional[NamedEntry]:
        user_input = self.read_line(colorize(prompt, Colors.BLUE + Colors.BOLD))
        if user_input is None:
            logging.debug("SELECTOR: No query line received; prompting again.")
            return None
        pool = provider()
        if not pool:
            self.out(colorize("Nothing to search: no matching files were found.", Colors.YELLOW))
            logging.warning(f"SELECTOR: Query '{user_input}' had no candidates to search.")
            return None
        result = resolve_query(pool, user_input)
        self.out()
        return result


def select_interactively(candidates: Sequence[NamedEntry],
                         file_candidates_provider: Callable[[], Sequence[NamedEntry]],
                         rng: Optional[random.Random] = None) -> Selection:
    """Runs one selection session against the real terminal."""
    return InteractiveSelector(rng=rng).select(candidates, file_candidates_provider)
