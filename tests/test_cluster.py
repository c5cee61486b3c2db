import gc
from dataclasses import dataclass

import pytest

from flattiverse.cluster import Cluster


@dataclass
class _Unit:
    name: str
    radius: float = 1.0


class _Galaxy:
    pass


@pytest.fixture
def cluster():
    galaxy = _Galaxy()
    made = Cluster(galaxy, 0, "Home")
    made.keep_galaxy = galaxy
    return made


def test_new_cluster_is_active_and_empty(cluster):
    assert cluster.id == 0
    assert cluster.name == "Home"
    assert cluster.active is True
    assert cluster.get_units() == []
    assert cluster.galaxy is cluster.keep_galaxy


def test_update_and_deactivate(cluster):
    cluster.update("Away")
    cluster.deactivate()
    assert cluster.name == "Away"
    assert cluster.active is False


def test_add_and_get_unit(cluster):
    sun = _Unit("sun")
    cluster.add_unit(sun)
    assert cluster.get_unit("sun") is sun
    assert cluster.get_unit_opt("sun") is sun
    assert cluster.get_units() == [sun]


def test_add_replaces_unit_with_same_name(cluster):
    first = _Unit("moon", 2.0)
    second = _Unit("moon", 3.0)
    cluster.add_unit(first)
    cluster.add_unit(second)
    assert cluster.get_unit("moon") is second
    assert len(cluster.get_units()) == 1


def test_remove_unit_returns_it_once(cluster):
    rock = _Unit("rock")
    cluster.add_unit(rock)
    assert cluster.remove_unit("rock") is rock
    assert cluster.remove_unit("rock") is None
    assert cluster.get_unit_opt("rock") is None


def test_get_missing_unit_raises(cluster):
    with pytest.raises(KeyError):
        cluster.get_unit("nothing")


def test_galaxy_gone_raises_reference_error():
    galaxy = _Galaxy()
    cluster = Cluster(galaxy, 1, "Far")
    assert cluster.galaxy is galaxy
    del galaxy
    gc.collect()
    with pytest.raises(ReferenceError):
        cluster.galaxy
    assert cluster.name == "Far"