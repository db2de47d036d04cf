import pygame
import pytest

from sdltour.game_object import GameObject
from sdltour.resources import destroy_resources


@pytest.fixture(autouse=True)
def _fresh_manager():
    destroy_resources()
    yield
    destroy_resources()


def _with_box(x, y, rel, size):
    obj = GameObject()
    index = obj.add_collider()
    obj.collider(index).set_rel_position(*rel)
    obj.collider(index).set_dimensions(*size)
    obj.set_position(x, y)
    obj.update(0.0)
    return obj


def test_add_collider_returns_consecutive_indices():
    obj = GameObject()
    assert obj.add_collider() == 0
    assert obj.add_collider() == 1
    assert len(obj.colliders) == 2


@pytest.mark.parametrize("index", [0, -1, 3])
def test_collider_out_of_range_raises(index):
    with pytest.raises(IndexError):
        GameObject().collider(index)


def test_set_position_moves_sprite_and_colliders():
    obj = _with_box(50, 60, (25, 25), (50, 25))
    assert obj.sprite.position == (50, 60)
    assert obj.collider(0).rect.topleft == (50 + 25, 60 + 25)


def test_collider_added_after_positioning_keeps_origin_until_moved():
    obj = GameObject()
    obj.set_position(30, 30)
    index = obj.add_collider()
    obj.collider(index).set_dimensions(5, 5)
    obj.update(0.0)
    assert obj.collider(index).rect.topleft == (0, 0)


def test_is_colliding_checks_every_pair():
    first = _with_box(0, 0, (0, 0), (100, 100))
    second = GameObject()
    for rel in ((500, 500), (25, 25)):
        index = second.add_collider()
        second.collider(index).set_rel_position(*rel)
        second.collider(index).set_dimensions(50, 25)
    second.set_position(0, 0)
    second.update(0.0)
    assert first.is_colliding(second.colliders) is True


def test_is_colliding_false_when_apart():
    first = _with_box(0, 0, (0, 0), (10, 10))
    second = _with_box(200, 200, (0, 0), (10, 10))
    assert first.is_colliding(second.colliders) is False
    assert first.is_colliding([]) is False


def test_set_texture_rect_and_render(tmp_path):
    image = pygame.Surface((1, 1))
    image.fill((0, 255, 0))
    path = tmp_path / "green.bmp"
    pygame.image.save(image, str(path))
    obj = GameObject()
    obj.set_texture_rect(path)
    obj.sprite.set_dimensions(3, 3)
    obj.set_position(1, 1)
    target = pygame.Surface((5, 5))
    target.fill((0, 0, 0))
    obj.render(target)
    assert target.get_at((2, 2)) == pygame.Color(0, 255, 0)
    assert target.get_at((0, 0)) == pygame.Color(0, 0, 0)


def test_render_without_texture_raises():
    with pytest.raises(RuntimeError):
        GameObject().render(pygame.Surface((2, 2)))