from types import SimpleNamespace

import pygame
import pytest

from raycaster.controls import Input, poll_input


def key(kind, code):
    return SimpleNamespace(type=kind, key=code)


@pytest.mark.parametrize(
    "code, field",
    [
        (pygame.K_w, "move_forward"),
        (pygame.K_s, "move_backward"),
        (pygame.K_a, "move_left"),
        (pygame.K_d, "move_right"),
        (pygame.K_LEFT, "turn_left"),
        (pygame.K_RIGHT, "turn_right"),
        (pygame.K_l, "e_wall"),
        (pygame.K_k, "n_wall"),
        (pygame.K_j, "s_wall"),
        (pygame.K_h, "w_wall"),
    ],
)
def test_set_key_bindings(code, field):
    state = Input()
    assert state.set_key(code, True) is True
    assert getattr(state, field) is True
    state.set_key(code, False)
    assert getattr(state, field) is False


def test_unbound_key_changes_nothing():
    state = Input()
    assert state.set_key(pygame.K_q, True) is False
    assert state == Input()


def test_keydown_and_keyup_events():
    state = Input()
    assert state.handle_event(key(pygame.KEYDOWN, pygame.K_w)) is True
    assert state.move_forward is True
    assert state.handle_event(key(pygame.KEYUP, pygame.K_w)) is True
    assert state.move_forward is False


def test_quit_event_stops():
    assert Input().handle_event(SimpleNamespace(type=pygame.QUIT)) is False


@pytest.mark.parametrize("kind", [pygame.KEYDOWN, pygame.KEYUP])
def test_escape_stops(kind):
    assert Input().handle_event(key(kind, pygame.K_ESCAPE)) is False


def test_other_events_are_ignored():
    state = Input()
    assert state.handle_event(SimpleNamespace(type=pygame.MOUSEMOTION)) is True
    assert state == Input()


def test_poll_processes_all_events_after_quit():
    state = Input()
    events = [
        key(pygame.KEYDOWN, pygame.K_w),
        SimpleNamespace(type=pygame.QUIT),
        key(pygame.KEYDOWN, pygame.K_a),
    ]
    assert poll_input(state, events) is False
    assert state.move_forward and state.move_left


def test_poll_keeps_running_without_quit():
    state = Input()
    assert poll_input(state, [key(pygame.KEYDOWN, pygame.K_RIGHT)]) is True
    assert state.turn_right is True