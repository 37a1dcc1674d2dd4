import random

import pytest

from flappy_arcade.data_models import Cloud, GameConfig
from flappy_arcade.scenery import CloudManager


@pytest.fixture
def manager(rng):
    return CloudManager(config=GameConfig(), rng=rng)


def test_batch_starts_right_of_screen_in_top_half(manager):
    clouds = manager.spawn_batch(50)
    assert len(clouds) == 50
    for cloud in clouds:
        assert 320 <= cloud.x < 640
        assert 0 <= cloud.y < 240
        assert (cloud.width, cloud.height) == (60, 40)


def test_advance_scrolls_by_cloud_speed(manager):
    clouds = [Cloud(x=100.0, y=10.0)]
    manager.advance(clouds)
    assert clouds[0].x == 99.0
    assert clouds[0].y == 10.0


def test_cloud_recycled_once_trailing_edge_leaves(manager):
    cloud = Cloud(x=-59.0, y=10.0)
    manager.advance([cloud])
    # Trailing edge at 0 is still on screen
    assert cloud.x == -60.0

    manager.advance([cloud])
    assert cloud.x == 320.0
    assert 0 <= cloud.y < 240


def test_clouds_never_linger_off_screen():
    manager = CloudManager(config=GameConfig(), rng=random.Random(99))
    clouds = manager.spawn_batch(3)
    ys = set()
    for _ in range(2000):
        manager.advance(clouds)
        assert len(clouds) == 3
        for cloud in clouds:
            assert cloud.x + cloud.width >= 0
            assert 0 <= cloud.y < 240
            ys.add(cloud.y)
    # Each recycle draws a new height
    assert len(ys) > 3
