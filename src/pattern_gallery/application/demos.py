"""Demo scenarios for every pattern, and the catalog that registers them."""

from typing import List

from pattern_gallery.application.catalog import DemoCatalog, PatternCategory, PatternDemo
from pattern_gallery.domain.behavioral import (
    AuthHandler,
    BubbleSortStrategy,
    CoffeeMaker,
    Document,
    History,
    LoggingHandler,
    OutOfStockState,
    PaymentPendingState,
    PhoneDisplay,
    ProductSelectedState,
    QuickSortStrategy,
    SortContext,
    TeaMaker,
    TVDisplay,
    ValidationHandler,
    VendingMachineContext,
    WeatherStation,
)
from pattern_gallery.domain.creational import (
    AggregatedJobsSearchIndexFactory,
    JobPost,
    JobSearch,
    PlainJobsSearchIndexFactory,
    get_shared_service,
)
from pattern_gallery.domain.structural import (
    AggregatedTask,
    BlueColor,
    Circle,
    Composite,
    Facade,
    IconFactory,
    IconManager,
    Leaf,
    ProxyImage,
    RedColor,
    Square,
    SubsystemA,
    SubsystemB,
    TaskAdapter,
)
from pattern_gallery.infrastructure.patterns.instance_registry import InstanceRegistry

# ============================================================
# CREATIONAL
# ============================================================


def run_singleton(registry: InstanceRegistry) -> List[str]:
    first = get_shared_service(registry)
    second = get_shared_service(registry)
    return [
        first.operation_one(),
        second.operation_two(),
        f"Same instance: {first is second}",
    ]


def run_prototype(registry: InstanceRegistry) -> List[str]:
    post = JobPost(title="Senior PHP Developer")
    copy = post.clone()
    return [
        f"Original: {post.title} [{post.status.value}]",
        f"Clone: {copy.title} [{copy.status.value}]",
    ]


def run_factory_method(registry: InstanceRegistry) -> List[str]:
    return [
        JobSearch(PlainJobsSearchIndexFactory()).search(),
        JobSearch(AggregatedJobsSearchIndexFactory()).search(),
    ]


# ============================================================
# STRUCTURAL
# ============================================================


def run_adapter(registry: InstanceRegistry) -> List[str]:
    task = TaskAdapter(AggregatedTask())
    return [task.execute()]


def run_bridge(registry: InstanceRegistry) -> List[str]:
    return [Circle(RedColor()).draw(), Square(BlueColor()).draw()]


def run_composite(registry: InstanceRegistry) -> List[str]:
    branch = Composite()
    branch.add(Leaf("Leaf 1"))
    branch.add(Leaf("Leaf 2"))

    tree = Composite()
    tree.add(Leaf("Leaf 3"))
    tree.add(branch)
    return [tree.operation()]


def run_facade(registry: InstanceRegistry) -> List[str]:
    facade = Facade(SubsystemA(), SubsystemB())
    return [
        facade.operation_a(),
        facade.operation_b(),
        facade.operation_c(),
        facade.operation_d(),
    ]


def run_flyweight(registry: InstanceRegistry) -> List[str]:
    factory = IconFactory()
    manager = IconManager(factory)
    lines = [
        manager.display_icon("folder", 10, 20),
        manager.display_icon("folder", 30, 40),
        manager.display_icon("file", 50, 60),
    ]
    lines.append(f"Shared icons created: {factory.icon_count}")
    return lines


def run_proxy(registry: InstanceRegistry) -> List[str]:
    granted = ProxyImage("test_image.jpg")
    denied = ProxyImage("secret_image.jpg", access_granted=False)
    return [
        granted.display(),
        granted.display(),
        denied.display(),
    ]


# ============================================================
# BEHAVIORAL
# ============================================================


def run_chain_of_responsibility(registry: InstanceRegistry) -> List[str]:
    chain = AuthHandler()
    chain.set_next(LoggingHandler()).set_next(ValidationHandler())
    return [chain.handle(request) for request in ("auth", "log", "validate", "unknown")]


def run_memento(registry: InstanceRegistry) -> List[str]:
    document = Document()
    history = History()

    document.write("Hello, ")
    history.push(document.save())
    document.write("World!")
    history.push(document.save())
    document.write(" This is a test.")
    lines = [f"Current content: {document.content}"]

    for label in ("After undo", "After second undo"):
        memento = history.pop()
        if memento is not None:
            document.restore(memento)
        lines.append(f"{label}: {document.content}")
    return lines


def run_observer(registry: InstanceRegistry) -> List[str]:
    station = WeatherStation()
    phone = PhoneDisplay()
    tv = TVDisplay()
    station.add_observer(phone)
    station.add_observer(tv)

    station.set_temperature(25.5)
    station.remove_observer(tv)
    station.set_temperature(30.0)
    return phone.messages + tv.messages


def run_state(registry: InstanceRegistry) -> List[str]:
    machine = VendingMachineContext()
    lines = [machine.request()]
    for state in (ProductSelectedState(), PaymentPendingState(), OutOfStockState()):
        machine.set_state(state)
        lines.append(machine.request())
    return lines


def run_strategy(registry: InstanceRegistry) -> List[str]:
    data = [64, 34, 25, 12, 22, 11, 90]
    context = SortContext(BubbleSortStrategy())
    lines = [f"Bubble sort: {context.execute_strategy(data)}"]
    context.set_strategy(QuickSortStrategy())
    lines.append(f"Quick sort: {context.execute_strategy(data)}")
    return lines


def run_template_method(registry: InstanceRegistry) -> List[str]:
    lines: List[str] = []
    for maker in (TeaMaker(), CoffeeMaker()):
        lines.append(maker.announce())
        lines.extend(maker.prepare_beverage())
    return lines


DEFAULT_DEMOS = [
    PatternDemo(
        name="singleton",
        title="Singleton",
        category=PatternCategory.CREATIONAL,
        summary="One shared instance, owned by the application's instance registry.",
        runner=run_singleton,
    ),
    PatternDemo(
        name="prototype",
        title="Prototype",
        category=PatternCategory.CREATIONAL,
        summary="New objects are created by cloning an existing one.",
        runner=run_prototype,
    ),
    PatternDemo(
        name="factory-method",
        title="Factory Method",
        category=PatternCategory.CREATIONAL,
        summary="A factory decides which concrete search index a client gets.",
        runner=run_factory_method,
    ),
    PatternDemo(
        name="adapter",
        title="Adapter",
        category=PatternCategory.STRUCTURAL,
        summary="Wraps an incompatible class behind the interface clients expect.",
        runner=run_adapter,
    ),
    PatternDemo(
        name="bridge",
        title="Bridge",
        category=PatternCategory.STRUCTURAL,
        summary="Shapes and colors vary independently of each other.",
        runner=run_bridge,
    ),
    PatternDemo(
        name="composite",
        title="Composite",
        category=PatternCategory.STRUCTURAL,
        summary="Leaves and containers are treated uniformly as a tree.",
        runner=run_composite,
    ),
    PatternDemo(
        name="facade",
        title="Facade",
        category=PatternCategory.STRUCTURAL,
        summary="A single entry point in front of several subsystems.",
        runner=run_facade,
    ),
    PatternDemo(
        name="flyweight",
        title="Flyweight",
        category=PatternCategory.STRUCTURAL,
        summary="Icons are shared per type; positions are supplied per call.",
        runner=run_flyweight,
    ),
    PatternDemo(
        name="proxy",
        title="Proxy",
        category=PatternCategory.STRUCTURAL,
        summary="A stand-in loads the real image lazily, behind an access check.",
        runner=run_proxy,
    ),
    PatternDemo(
        name="chain-of-responsibility",
        title="Chain of Responsibility",
        category=PatternCategory.BEHAVIORAL,
        summary="A request is passed along handlers until one handles it.",
        runner=run_chain_of_responsibility,
    ),
    PatternDemo(
        name="memento",
        title="Memento",
        category=PatternCategory.BEHAVIORAL,
        summary="Document snapshots allow undo without exposing internals.",
        runner=run_memento,
    ),
    PatternDemo(
        name="observer",
        title="Observer",
        category=PatternCategory.BEHAVIORAL,
        summary="Displays are notified whenever the temperature changes.",
        runner=run_observer,
    ),
    PatternDemo(
        name="state",
        title="State",
        category=PatternCategory.BEHAVIORAL,
        summary="A vending machine's behaviour follows its current state object.",
        runner=run_state,
    ),
    PatternDemo(
        name="strategy",
        title="Strategy",
        category=PatternCategory.BEHAVIORAL,
        summary="Sorting algorithms are swapped at runtime behind one interface.",
        runner=run_strategy,
    ),
    PatternDemo(
        name="template-method",
        title="Template Method",
        category=PatternCategory.BEHAVIORAL,
        summary="A fixed recipe with steps filled in by subclasses.",
        runner=run_template_method,
    ),
]


def build_default_catalog() -> DemoCatalog:
    """Create a catalog with a demo for every pattern in the gallery."""
    catalog = DemoCatalog()
    for demo in DEFAULT_DEMOS:
        catalog.register(demo)
    return catalog
