"""
Terminal table of a finished search decision, game-agnostic.

One row per known child of the decision position: simulations through the
move and the win/loss/draw split, seen by the player choosing.
"""

from __future__ import annotations

import re
from typing import Hashable, List, Optional, TYPE_CHECKING

from player_of_games.core.types import Stats
from player_of_games.memory.aggregate import subtree_stats
from player_of_games.memory.node_store import NodeStore
from player_of_games.selection.decision import child_statistics

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET, BOLD, DIM = "\033[0m", "\033[1m", "\033[2m"
GREEN, YELLOW, RED = "\033[38;5;28m", "\033[38;5;142m", "\033[38;5;124m"

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    """Pad to `width` visible characters; escape codes take no room."""
    gap = max(0, width - visible_len(text))
    left = {"left": 0, "right": gap, "center": gap // 2}[align]
    return " " * left + text + " " * (gap - left)


def win_rate_color(rate: float) -> str:
    return GREEN if rate >= 0.6 else YELLOW if rate >= 0.4 else RED


# ═══════════════════════════════════════════════════════════════════════════════
# Table
# ═══════════════════════════════════════════════════════════════════════════════

WIDTH = 62


def _border(left: str, right: str) -> str:
    return left + "─" * WIDTH + right


def _row(content: str) -> str:
    return "│" + pad(content, WIDTH) + "│"


def wld_bar(stats: Stats, width: int = 10) -> str:
    """Green/red/yellow bar of the win, loss and draw shares."""
    if not stats.visits:
        return DIM + "·" * width + RESET
    w = round(stats.wins / stats.visits * width)
    l = min(width - w, round(stats.losses / stats.visits * width))
    return f"{GREEN}{'█' * w}{RED}{'█' * l}{YELLOW}{'█' * (width - w - l)}{RESET}"


def _percent(part: int, whole: int) -> str:
    return f"{100.0 * part / whole:.1f}" if whole else "-"


def decision_lines(store: NodeStore, position: "GameBase", chosen: Optional[Hashable] = None) -> List[str]:
    """The decision table as a list of (ANSI-colored) lines."""
    below = subtree_stats(store, position).visits
    rows = sorted(child_statistics(store, position), key=lambda r: r[1].visits, reverse=True)

    header = (
        f" {pad('Move', 16)}│{pad('n', 7, 'right')}{pad('W%', 7, 'right')}"
        f"{pad('L%', 7, 'right')}{pad('D%', 7, 'right')} │ W/L/D"
    )
    lines = [
        "",
        f"  {BOLD}SEARCH RESULT{RESET}",
        "",
        _border("┌", "┐"),
        _row(f" {len(store)} nodes known, n={below} below this position"),
        _border("├", "┤"),
        _row(DIM + header + RESET),
        _border("├", "┤"),
    ]

    for move, stats in rows:
        n = stats.visits
        rate = stats.wins / n if n else 0.0
        marker = f" {GREEN}◀{RESET}" if move == chosen else ""
        lines.append(_row(
            f" {pad(str(move), 16)}│"
            f"{pad(str(n), 7, 'right')}"
            f"{pad(win_rate_color(rate) + _percent(stats.wins, n) + RESET, 7, 'right')}"
            f"{pad(_percent(stats.losses, n), 7, 'right')}"
            f"{pad(_percent(stats.draws, n), 7, 'right')} │ "
            f"{wld_bar(stats)}{marker}"
        ))

    lines.append(_border("└", "┘"))
    lines.append(f"  {DIM}n = simulations through the move │ ◀ = selected{RESET}")
    return lines


def render_decision(store: NodeStore, position: "GameBase", chosen: Optional[Hashable] = None) -> str:
    """Print and return the decision table for `position`."""
    node = store.get(position)
    if node is None or not node.children:
        print("No candidates")
        return ""

    output = "\n".join(decision_lines(store, position, chosen))
    print(output)
    return output
