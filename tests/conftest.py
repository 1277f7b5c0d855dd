import itertools

import pytest

from dispatch import AssignmentPolicy, Dispatcher
from drivers.models import Driver
from orders.models import City, Customer, Restaurant
from store import InMemoryEntityStore


class FixedDistanceProvider:
    """Hands out the given distances in order, cycling when exhausted."""
    def __init__(self, distances):
        self._distances = itertools.cycle(distances)

    def __call__(self, *args):
        return next(self._distances)


@pytest.fixture
def store():
    """
    Five cities, fourteen drivers (none in Eilat), eight customers, six restaurants.
    """
    store = InMemoryEntityStore()

    jerusalem = City("Jerusalem")
    tlv = City("Tel-Aviv")
    beer_sheva = City("Beer-Sheva")
    haifa = City("Haifa")
    eilat = City("Eilat")
    store.save_all([jerusalem, tlv, beer_sheva, haifa, eilat])

    store.save_all([
        Driver.new("Mary", tlv),
        Driver.new("Patricia", tlv),
        Driver.new("Jennifer", haifa),
        Driver.new("James", beer_sheva),
        Driver.new("John", beer_sheva),
        Driver.new("Robert", jerusalem),
        Driver.new("David", jerusalem),
        Driver.new("Daniel", tlv),
        Driver.new("Noa", haifa),
        Driver.new("Ofri", haifa),
        Driver.new("Neta", jerusalem),
        Driver.new("Dan", tlv),
        Driver.new("Avigdor", tlv),
        Driver.new("Eliezer", tlv),
    ])

    store.save_all([
        Customer("Beethoven", tlv, "Ludwig van Beethoven"),
        Customer("Mozart", jerusalem, "Wolfgang Amadeus Mozart"),
        Customer("Chopin", haifa, "Frédéric François Chopin"),
        Customer("Jane", haifa, "Doe"),
        Customer("Rachmaninoff", tlv, "Sergei Rachmaninoff"),
        Customer("Bach", tlv, "Sebastian Bach. Johann"),
        Customer("Adele", eilat, "Haktovet"),
        Customer("Katy", tlv, "Hazikukim"),
    ])

    store.save_all([
        Restaurant("meat", jerusalem, "All meat restaurant"),
        Restaurant("vegan", haifa, "Only vegan"),
        Restaurant("cafe", tlv, "Coffee shop"),
        Restaurant("chinese", haifa, "chinese restaurant"),
        Restaurant("mexican", tlv, "mexican restaurant"),
        Restaurant("buffet", eilat, "buffet restaurant"),
    ])

    return store


@pytest.fixture
def fixed_distances():
    return FixedDistanceProvider


@pytest.fixture
def distances():
    return FixedDistanceProvider([5.5, 10.25, 3.75])


@pytest.fixture
def dispatcher(store, distances):
    return Dispatcher(store, distance_provider=distances, policy=AssignmentPolicy())
