from concurrent.futures import ThreadPoolExecutor

from pattern_gallery.domain.structural.flyweight import ConcreteIcon, IconFactory, IconManager


def test_same_type_returns_identical_instance():
    factory = IconFactory()

    assert factory.get_icon("folder") is factory.get_icon("folder")


def test_different_types_return_distinct_instances():
    factory = IconFactory()

    assert factory.get_icon("folder") is not factory.get_icon("file")


def test_cache_holds_one_entry_per_type():
    factory = IconFactory()

    factory.get_icon("folder")
    factory.get_icon("folder")
    factory.get_icon("file")

    assert factory.icon_count == 2
    assert factory.cached_types == ["folder", "file"]


def test_render_uses_extrinsic_coordinates():
    icon = IconFactory().get_icon("folder")

    assert icon.render(10, 20) == "Rendering icon of type 'folder' at position (10, 20)."
    assert icon.render(30, 40) == "Rendering icon of type 'folder' at position (30, 40)."


def test_render_does_not_store_position():
    icon = ConcreteIcon("file")
    icon.render(1, 2)

    assert vars(icon) == {"_icon_type": "file"}


def test_any_string_is_a_valid_key():
    factory = IconFactory()

    icon = factory.get_icon("")

    assert icon is factory.get_icon("")
    assert icon.render(0, 0) == "Rendering icon of type '' at position (0, 0)."


def test_factories_do_not_share_caches():
    assert IconFactory().get_icon("folder") is not IconFactory().get_icon("folder")


def test_icon_manager_reuses_factory_icons():
    factory = IconFactory()
    manager = IconManager(factory)

    first = manager.display_icon("folder", 10, 20)
    second = manager.display_icon("folder", 30, 40)

    assert first == "Rendering icon of type 'folder' at position (10, 20)."
    assert second == "Rendering icon of type 'folder' at position (30, 40)."
    assert factory.icon_count == 1


def test_concurrent_requests_share_one_instance():
    factory = IconFactory()

    with ThreadPoolExecutor(max_workers=8) as pool:
        icons = list(pool.map(lambda _: factory.get_icon("folder"), range(50)))

    assert all(icon is icons[0] for icon in icons)
    assert factory.icon_count == 1
