"""
Tests for TickScheduler, the frame-driven clock around the engine.
"""

from src.games.snake import GameState, TickScheduler


class TestTickScheduler:
    """Tests for arming, firing, rescheduling and cancelling."""

    def test_idle_until_game_starts(self, make_game):
        game = make_game(started=False)
        scheduler = TickScheduler(game)

        assert scheduler.update(0) is False
        assert scheduler.update(10_000) is False
        assert scheduler.armed is False
        assert game.snake[0].x == 10

    def test_fires_after_interval(self, make_game):
        game = make_game()
        scheduler = TickScheduler(game)

        assert scheduler.update(1000) is False  # arms
        assert scheduler.next_tick_at == 1300
        assert scheduler.update(1299) is False
        assert scheduler.update(1300) is True
        assert scheduler.ticks_fired == 1
        assert game.head.x == 11

    def test_reschedules_after_speed_change(self, make_game):
        game = make_game(targets=[(11, 10), (0, 0)])
        scheduler = TickScheduler(game)
        scheduler.update(0)

        scheduler.update(300)  # eats, interval drops to 290

        assert game.tick_interval_ms == 290
        assert scheduler.next_tick_at == 590
        assert scheduler.update(589) is False
        assert scheduler.update(590) is True

    def test_pause_cancels_and_resume_rearms(self, make_game):
        game = make_game()
        scheduler = TickScheduler(game)
        scheduler.update(0)

        game.pause()
        assert scheduler.update(300) is False
        assert scheduler.armed is False

        game.resume()
        assert scheduler.update(5000) is False  # re-arms from now
        assert scheduler.update(5299) is False
        assert scheduler.update(5300) is True

    def test_game_over_cancels(self, make_game):
        game = make_game()
        scheduler = TickScheduler(game)
        scheduler.update(0)

        now = 0
        while game.state == GameState.PLAYING:
            now += game.tick_interval_ms
            scheduler.update(now)

        assert game.state == GameState.GAME_OVER
        assert scheduler.armed is False
        assert scheduler.ticks_fired == 10
        assert scheduler.update(now + 10_000) is False

    def test_at_most_one_tick_per_update(self, make_game):
        game = make_game()
        scheduler = TickScheduler(game)
        scheduler.update(0)

        assert scheduler.update(5000) is True
        assert scheduler.ticks_fired == 1
        assert scheduler.next_tick_at == 5300

    def test_cancel(self, make_game):
        game = make_game()
        scheduler = TickScheduler(game)
        scheduler.update(0)

        scheduler.cancel()

        assert scheduler.next_tick_at is None
        assert scheduler.update(300) is False  # re-arms instead of firing
        assert scheduler.armed is True
