# src/tetris_classic/runtime/loop.py
from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Optional

from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.core.types import Event
from tetris_classic.runtime.interfaces import InputSource, NullRenderSink, RenderSink
from tetris_classic.runtime.producer import InputProducer
from tetris_classic.runtime.timer import AsyncGravityTimer

logger = logging.getLogger(__name__)


async def run_game(
        game: TetrisGame,
        *,
        source: InputSource,
        sink: Optional[RenderSink] = None,
        timer: Optional[AsyncGravityTimer] = None,
) -> int:
    """
    Drive `game` from `source` and the gravity timer until QUIT.

    One event is applied per iteration (input before a tick when both are
    ready), then the sink redraws. A QUIT from the source ends the loop
    before any event still queued ahead of it is applied. The sink hears
    announce_game_over() once, on the transition into GAME_OVER. Returns the
    final score.
    """
    sink = sink or NullRenderSink()
    timer = timer or AsyncGravityTimer()

    inputs: asyncio.Queue[Event] = asyncio.Queue(maxsize=int(game.config.input_queue_size))
    producer = InputProducer(source, inputs)

    game.timer = timer
    game.clear_animation = partial(sink.flash_rows, game)

    producer.start()
    sink.render(game)
    if game.game_over:
        sink.announce_game_over(game)
    elif not game.paused:
        timer.start(game.drop_delay_ms)
    logger.info("[loop] started delay_ms=%s", game.drop_delay_ms)

    next_input = asyncio.create_task(inputs.get(), name="next-input")
    next_tick = asyncio.create_task(timer.ticks.get(), name="next-tick")
    try:
        while True:
            done, _ = await asyncio.wait({next_input, next_tick}, return_when=asyncio.FIRST_COMPLETED)

            if next_input in done:
                event = next_input.result()
                next_input = asyncio.create_task(inputs.get(), name="next-input")
            else:
                tick = next_tick.result()
                next_tick = asyncio.create_task(timer.ticks.get(), name="next-tick")
                if not timer.is_current(tick):
                    continue
                event = Event.MOVE_DOWN

            if producer.quit_requested.is_set():
                logger.debug("[loop] quit requested; skipping pending event=%s", event)
                break
            was_over = game.game_over
            if not game.handle(event):
                break
            sink.render(game)
            if game.game_over and not was_over:
                sink.announce_game_over(game)
    finally:
        timer.stop()
        producer.stop()
        next_input.cancel()
        next_tick.cancel()
        game.clear_animation = None

    logger.info("[loop] quit score=%s lines=%s", game.score, game.lines)
    return int(game.score)


__all__ = ["run_game"]
