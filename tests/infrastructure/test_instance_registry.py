from concurrent.futures import ThreadPoolExecutor


class Counter:
    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


def setup_function():
    Counter.created = 0


def test_get_creates_instance_once(instance_registry):
    first = instance_registry.get(Counter, start=5)
    second = instance_registry.get(Counter, start=99)

    assert first is second
    assert first.value == 5
    assert Counter.created == 1


def test_has_and_registered_classes(instance_registry):
    assert not instance_registry.has(Counter)

    instance_registry.get(Counter)

    assert instance_registry.has(Counter)
    assert instance_registry.registered_classes() == ["Counter"]


def test_clear_forgets_instances(instance_registry):
    first = instance_registry.get(Counter)

    instance_registry.clear()

    assert not instance_registry.has(Counter)
    assert instance_registry.get(Counter) is not first


def test_concurrent_get_creates_single_instance(instance_registry):
    with ThreadPoolExecutor(max_workers=8) as pool:
        instances = list(pool.map(lambda _: instance_registry.get(Counter), range(50)))

    assert all(instance is instances[0] for instance in instances)
    assert Counter.created == 1
