import pygame
import pytest

from canvas_connect4.interfaces.gui import PygameApp
from canvas_connect4.interfaces.surfaces import PygameSurface
from canvas_connect4.utils import Player


@pytest.fixture
def app(config):
    app = PygameApp(config)
    app.setup()
    yield app
    pygame.quit()


def motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0))


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def test_opaque_and_translucent_circles():
    surface = PygameSurface(pygame.Surface((100, 100)))
    surface.clear()
    surface.fill_circle((25, 25), 10, (255, 0, 0))
    surface.fill_circle((75, 75), 10, (255, 255, 255, 128))

    assert tuple(surface.surface.get_at((25, 25)))[:3] == (255, 0, 0)
    r, g, b = tuple(surface.surface.get_at((75, 75)))[:3]
    assert 120 <= r <= 136 and r == g == b
    assert tuple(surface.surface.get_at((50, 50)))[:3] == (0, 0, 0)


def test_text_is_drawn():
    pygame.font.init()
    surface = PygameSurface(pygame.Surface((300, 100)))
    surface.clear()
    surface.fill_text("Player 1 wins!", (10, 60), (255, 0, 0), 40)
    assert pygame.surfarray.array3d(surface.surface).sum() > 0


def test_click_drops_disc_in_hovered_column(app):
    pos = app.layout.cell_center(0, 2)
    app.handle_event(motion(pos))
    app.handle_event(click(pos))

    assert app.session.board.owner(6, 0) is Player.ONE
    assert app.session.board.active_player is Player.TWO


def test_motion_sets_mirrored_board_column(app):
    app.handle_event(motion(app.layout.cell_center(1, 3)))
    assert app.session.hovered_column == 5
    app.handle_event(motion((5, 5)))
    assert app.session.hovered_column is None


def test_right_click_does_nothing(app):
    pos = app.layout.cell_center(3, 2)
    app.handle_event(motion(pos))
    app.handle_event(click(pos, button=3))
    assert app.session.board.disc_count() == 0


def test_restart_key(app):
    app.session.play_column(2)
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
    assert app.session.board.disc_count() == 0


def test_quit_event_stops_loop(app):
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert not app.running


def test_run_stops_after_max_frames(config):
    config.fps = 0
    app = PygameApp(config)
    app.run(max_frames=3)
    assert app.frames == 3
    assert not app.running
