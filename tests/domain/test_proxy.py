import pytest

from pattern_gallery.domain.structural.proxy import ProxyImage, RealImage


class CountingFactory:
    """Image factory recording how many real images were built."""

    def __init__(self):
        self.created = 0

    def __call__(self, filename):
        self.created += 1
        return RealImage(filename)


@pytest.fixture
def counting_factory():
    return CountingFactory()


def test_real_image_loads_on_construction():
    image = RealImage("photo.png")

    assert image.load_message == "Loading image from disk: photo.png"
    assert image.display() == "Displaying image: photo.png"


def test_granted_proxy_builds_real_image_once(counting_factory):
    proxy = ProxyImage("photo.png", access_granted=True, image_factory=counting_factory)
    assert not proxy.is_materialized
    assert counting_factory.created == 0

    results = [proxy.display() for _ in range(5)]

    assert counting_factory.created == 1
    assert proxy.is_materialized
    assert results == ["Displaying image: photo.png"] * 5


def test_denied_proxy_never_builds_real_image(counting_factory):
    proxy = ProxyImage("secret.png", access_granted=False, image_factory=counting_factory)

    results = [proxy.display() for _ in range(3)]

    assert counting_factory.created == 0
    assert not proxy.is_materialized
    assert results == ["Access denied to display the image: secret.png"] * 3


def test_access_defaults_to_granted():
    proxy = ProxyImage("default.png")

    assert proxy.display() == "Displaying image: default.png"
    assert proxy.is_materialized


def test_each_proxy_owns_its_real_image(counting_factory):
    first = ProxyImage("a.png", image_factory=counting_factory)
    second = ProxyImage("a.png", image_factory=counting_factory)

    first.display()
    second.display()

    assert counting_factory.created == 2
