import pytest

from paintpad.colorhistory import ColorHistory

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 128, 0)
YELLOW = (255, 255, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def test_new_history_is_empty():
    history = ColorHistory()
    assert len(history) == 0
    assert list(history) == []


def test_default_capacity_matches_five_buttons():
    assert ColorHistory().capacity == 5


def test_add_puts_colour_at_front():
    history = ColorHistory()
    assert history.add(RED) is True
    history.add(BLUE)
    assert history[0] == BLUE
    assert history[1] == RED
    assert list(history) == [BLUE, RED]


def test_repeating_newest_colour_is_ignored():
    history = ColorHistory()
    history.add(RED)
    assert history.add(RED) is False
    assert list(history) == [RED]


def test_older_colour_can_come_back_to_front():
    history = ColorHistory()
    history.add(RED)
    history.add(BLUE)
    assert history.add(RED) is True
    assert list(history) == [RED, BLUE, RED]


def test_oldest_colour_drops_when_full():
    history = ColorHistory(capacity=5)
    for color in (RED, BLUE, GREEN, YELLOW, BLACK, WHITE):
        history.add(color)
    assert len(history) == 5
    assert list(history) == [WHITE, BLACK, YELLOW, GREEN, BLUE]
    assert RED not in list(history)


def test_alpha_component_is_dropped():
    history = ColorHistory()
    history.add((10, 20, 30, 40))
    assert history[0] == (10, 20, 30)


def test_index_past_end_raises():
    history = ColorHistory()
    history.add(RED)
    assert history[0] == RED
    with pytest.raises(IndexError) as excinfo:
        history[1]
    assert excinfo.type is IndexError
    assert len(history) == 1


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        ColorHistory(capacity)