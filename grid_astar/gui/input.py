"""Translate ``pygame`` events into console commands."""

from __future__ import annotations

from typing import Any, Dict

import pygame

from ..utils.cli import commands


# Hot-keys mirror the slash-commands of the console
KEY_COMMANDS = {
    pygame.K_p: "pause",
    pygame.K_SPACE: "resume",
    pygame.K_n: "step",
    pygame.K_r: "restart",
    pygame.K_g: "reset",
    pygame.K_q: "quit",
    pygame.K_ESCAPE: "quit",
}


def handle_events(session: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events, updating ``state`` like console commands do."""

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.VIDEORESIZE and renderer is not None:
            renderer.window.resize(ev.size)
            continue

        if ev.type != pygame.KEYDOWN:
            continue

        if ev.key == pygame.K_SPACE and not state.get("paused", False):
            commands.execute("pause", [], session, state)
            continue
        if ev.key == pygame.K_f and renderer is not None:
            renderer.show_fps = not renderer.show_fps
            continue

        command = KEY_COMMANDS.get(ev.key)
        if command is not None:
            commands.execute(command, [], session, state)
        if not state.get("running", True):
            return


__all__ = ["handle_events", "KEY_COMMANDS"]
